"""Classic algorithms: sorting, graph cloning, an LRU cache and a median filter."""

__version__ = "0.1.0"