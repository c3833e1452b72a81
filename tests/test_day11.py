import pytest

from adventgrid.day11 import (
    count_stones_linked,
    count_stones_memo,
    count_stones_tally,
    parse_stones,
)


def test_parse_stones():
    assert parse_stones("125 17") == [125, 17]


def test_example_after_25_blinks():
    stones = parse_stones("125 17")
    assert count_stones_linked(stones, 25) == 55312
    assert count_stones_tally(stones, 25) == 55312
    assert count_stones_memo(stones, 25) == 55312


def test_example_after_6_blinks():
    assert count_stones_linked([125, 17], 6) == 22
    assert count_stones_tally([125, 17], 6) == 22
    assert count_stones_memo([125, 17], 6) == 22


def test_single_blink():
    stones = [0, 1, 10, 99, 999]
    assert count_stones_linked(stones, 1) == 7
    assert count_stones_tally(stones, 1) == 7
    assert count_stones_memo(stones, 1) == 7


def test_zero_blinks_keeps_count():
    stones = [3, 40, 500]
    assert count_stones_linked(stones, 0) == 3
    assert count_stones_tally(stones, 0) == 3
    assert count_stones_memo(stones, 0) == 3


@pytest.mark.parametrize("iterations", [1, 5, 12, 20])
def test_methods_agree(iterations):
    stones = [0, 7, 2024, 123456]
    linked = count_stones_linked(stones, iterations)
    assert count_stones_tally(stones, iterations) == linked
    assert count_stones_memo(stones, iterations) == linked


def test_negative_iterations_rejected_linked():
    with pytest.raises(ValueError):
        count_stones_linked([1], -1)


def test_negative_iterations_rejected_tally():
    with pytest.raises(ValueError):
        count_stones_tally([1], -1)


def test_negative_iterations_rejected_memo():
    with pytest.raises(ValueError):
        count_stones_memo([1], -1)