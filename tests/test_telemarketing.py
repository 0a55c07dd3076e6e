import pytest

from olimpiada.telemarketing import distribute_calls


def test_single_seller_takes_every_call():
    calls = [5, 3, 2]
    assert distribute_calls(1, calls) == [len(calls)]


def test_fewer_calls_than_sellers_go_to_lowest_numbers():
    assert distribute_calls(3, [4, 4]) == [1, 1, 0]


def test_no_calls():
    assert distribute_calls(4, []) == [0, 0, 0, 0]


def test_shortest_call_frees_its_seller():
    assert distribute_calls(2, [10, 1, 1]) == [1, 2]


def test_every_call_is_counted():
    calls = [5, 2, 3, 3, 4, 9, 7, 1, 8]
    result = distribute_calls(4, calls)
    assert len(result) == 4
    assert sum(result) == len(calls)


def test_no_sellers_raises():
    with pytest.raises(ValueError):
        distribute_calls(0, [1])