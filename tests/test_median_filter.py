import statistics

import pytest

from xiuxian.median_filter import (
    create_vector,
    filter_median,
    main,
    median,
    parallel_filter_median,
    pool_filter_median,
)


def test_median_odd_count():
    assert median([3.0, 1.0, 2.0]) == 2.0


def test_median_even_count_averages_middle():
    assert median([4.0, 1.0, 3.0, 2.0]) == 2.5


def test_median_does_not_mutate_input():
    data = [5.0, 1.0, 4.0]
    median(data)
    assert data == [5.0, 1.0, 4.0]


def test_median_empty_raises():
    with pytest.raises(ValueError):
        median([])


def test_create_vector_is_reproducible_and_in_range():
    first = create_vector(500, seed=11)
    second = create_vector(500, seed=11)
    assert first == second
    assert len(first) == 500
    assert all(0.0 <= v < 2.0 for v in first)


def test_create_vector_seed_changes_data():
    assert create_vector(50, seed=1) != create_vector(50, seed=2)


def test_create_vector_negative_length_raises():
    with pytest.raises(ValueError):
        create_vector(-1)


@pytest.mark.parametrize("filter_size", [1, 2, 3, 5, 8])
def test_filter_matches_statistics_median(filter_size):
    data = create_vector(200, seed=3)
    result = filter_median(data, filter_size)
    assert len(result) == len(data) - filter_size + 1
    for index, value in enumerate(result):
        assert value == pytest.approx(
            statistics.median(data[index : index + filter_size])
        )


def test_filter_size_one_is_identity():
    data = create_vector(30, seed=4)
    assert filter_median(data, 1) == data


def test_filter_whole_input_gives_single_value():
    data = [1.0, 9.0, 5.0]
    assert filter_median(data, 3) == [5.0]


@pytest.mark.parametrize("filter_size", [0, -2, 11])
def test_filter_invalid_size_raises(filter_size):
    with pytest.raises(ValueError):
        filter_median([1.0] * 10, filter_size)


@pytest.mark.parametrize("group", [1, 2, 3, 4, 7, 50])
def test_parallel_matches_sequential(group):
    data = create_vector(301, seed=5)
    assert parallel_filter_median(data, 5, group) == filter_median(data, 5)


def test_parallel_more_groups_than_outputs():
    data = [2.0, 1.0, 3.0]
    assert parallel_filter_median(data, 2, 10) == filter_median(data, 2)


def test_parallel_invalid_group_raises():
    with pytest.raises(ValueError):
        parallel_filter_median([1.0, 2.0], 1, 0)


def test_pool_matches_sequential():
    data = create_vector(3000, seed=6)
    assert pool_filter_median(data, 4) == filter_median(data, 4)


def test_pool_invalid_size_raises():
    with pytest.raises(ValueError):
        pool_filter_median([1.0, 2.0], 3)


def test_main_reports_timings(capsys):
    assert main(["200", "5", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == [
        "elapsed time",
        "parallel elapsed time",
        "parallel omp elapsed time",
    ]
    assert all(line.endswith(" ms") for line in lines)