from collections import deque

import pytest

from xiuxian.graph import Node, clone_graph


def _build_sample():
    a, b, c, d, e = (Node(v) for v in range(5))
    a.neighbors += [b, d]
    b.neighbors += [a, c]
    c.neighbors += [b, d, e]
    d.neighbors += [a, c, e]
    e.neighbors += [d, c]
    return a


def _reachable(start):
    seen = {start}
    order = [start]
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in current.neighbors:
            if neighbor not in seen:
                seen.add(neighbor)
                order.append(neighbor)
                queue.append(neighbor)
    return order


def _adjacency(start):
    return {n.val: [m.val for m in n.neighbors] for n in _reachable(start)}


def test_clone_none_returns_none():
    assert clone_graph(None) is None


def test_clone_preserves_structure():
    original = _build_sample()
    copy = clone_graph(original)
    assert _adjacency(copy) == _adjacency(original)
    assert copy.val == original.val


def test_clone_shares_no_nodes_with_original():
    original = _build_sample()
    copy = clone_graph(original)
    original_ids = {id(n) for n in _reachable(original)}
    copy_nodes = _reachable(copy)
    assert len(copy_nodes) == len(original_ids)
    assert all(id(n) not in original_ids for n in copy_nodes)


def test_clone_keeps_one_clone_per_node():
    original = _build_sample()
    copy = clone_graph(original)
    b_clone = copy.neighbors[0]
    assert b_clone.neighbors[0] is copy


def test_clone_single_node_without_neighbors():
    lone = Node(7)
    copy = clone_graph(lone)
    assert copy is not lone
    assert copy.val == 7
    assert copy.neighbors == []


def test_clone_self_loop():
    loop = Node(3)
    loop.neighbors.append(loop)
    copy = clone_graph(loop)
    assert copy.neighbors == [copy]
    assert copy is not loop


def test_mutating_clone_leaves_original_untouched():
    original = _build_sample()
    copy = clone_graph(original)
    copy.neighbors[0].val = 99
    assert original.neighbors[0].val == 1


@pytest.mark.parametrize("length", [1, 2, 50, 3000])
def test_clone_long_chain(length):
    nodes = [Node(i) for i in range(length)]
    for left, right in zip(nodes, nodes[1:]):
        left.neighbors.append(right)
        right.neighbors.append(left)
    copy = clone_graph(nodes[0])
    assert _adjacency(copy) == _adjacency(nodes[0])


def test_node_repr_lists_neighbor_values():
    a = Node(1)
    b = Node(2, [a])
    a.neighbors.append(b)
    assert repr(b) == "Node(val=2, neighbors=[1])"