from itertools import permutations

import pytest

from olimpiada.choices import (
    largest,
    medal_order,
    middle_age,
    odd_card,
    odd_one_out,
    pokemon_capture,
    rectangles_collide,
)


@pytest.mark.parametrize("same, other", [(3, 7), (10, 1), (5, 6)])
def test_odd_card_any_position(same, other):
    assert odd_card(same, same, other) == other
    assert odd_card(same, other, same) == other
    assert odd_card(other, same, same) == other


@pytest.mark.parametrize("ages", [(10, 20, 30), (5, 5, 9), (7, 7, 7), (1, 40, 3)])
def test_middle_age_is_median(ages):
    expected = sorted(ages)[1]
    for order in permutations(ages):
        assert middle_age(*order) == expected


@pytest.mark.parametrize("values", [[1, 2, 3], [9, 4, 7], [-5, -2, -9], [4]])
def test_largest(values):
    result = largest(values)
    assert result in values
    assert all(result >= v for v in values)


def test_largest_empty():
    with pytest.raises(ValueError):
        largest([])


@pytest.mark.parametrize("times", list(permutations((11, 25, 40))))
def test_medal_order_sorts_times(times):
    order = medal_order(*times)
    assert sorted(order) == [1, 2, 3]
    assert [times[i - 1] for i in order] == sorted(times)


@pytest.mark.parametrize(
    "a, b, c, winner",
    [
        (1, 0, 0, "A"),
        (0, 1, 0, "B"),
        (0, 0, 1, "C"),
        (1, 1, 1, "*"),
        (0, 0, 0, "*"),
    ],
)
def test_odd_one_out(a, b, c, winner):
    assert odd_one_out(a, b, c) == winner


@pytest.mark.parametrize("costs", [(3, 5, 8), (10, 2, 7), (4, 4, 4)])
def test_pokemon_capture_thresholds(costs):
    total = sum(costs)
    pair = min(x + y for x, y in permutations(costs, 2))
    cheapest = min(costs)
    assert pokemon_capture(total, costs) == 3
    assert pokemon_capture(total - 1, costs) == 2
    assert pokemon_capture(pair, costs) == 2
    assert pokemon_capture(pair - 1, costs) == 1
    assert pokemon_capture(cheapest, costs) == 1
    assert pokemon_capture(cheapest - 1, costs) == 0


def test_pokemon_capture_needs_three_costs():
    with pytest.raises(ValueError):
        pokemon_capture(10, [1, 2])


def test_rectangles_collide():
    assert rectangles_collide((1, 1, 2, 2), (0, 0, 3, 3)) is True
    assert rectangles_collide((0, 0, 3, 3), (1, 1, 2, 2)) is True
    assert rectangles_collide((0, 0, 1, 1), (1, 5, 2, 6)) is True
    assert rectangles_collide((0, 0, 1, 1), (2, 0, 3, 1)) is False
    assert rectangles_collide((5, 0, 6, 1), (0, 0, 4, 1)) is False