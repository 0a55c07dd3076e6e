"""Problems that pick one item among a few: cards, ages, medals and games."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations


def odd_card(a: int, b: int, c: int) -> int:
    """The card that differs when two of the three are equal."""
    if a == b:
        return c
    if a == c:
        return b
    return a


def middle_age(a: int, b: int, c: int) -> int:
    """The median of three ages."""
    return sorted((a, b, c))[1]


def largest(values: Iterable[int]) -> int:
    """The largest of the values."""
    return max(values)


def _slowest(a: int, b: int, c: int) -> int:
    if a > b and a > c:
        return 1
    if b > a and b > c:
        return 2
    return 3


def _middle(a: int, b: int, c: int) -> int:
    if (a > b > c) or (c > b > a):
        return 2
    if (b > a > c) or (c > a > b):
        return 1
    return 3


def _fastest(a: int, b: int, c: int) -> int:
    if (a < b < c) or (a < c and a < b):
        return 1
    if (b < a < c) or (b < c < a):
        return 2
    return 3


def medal_order(t1: int, t2: int, t3: int) -> tuple[int, int, int]:
    """Swimmer numbers for gold, silver and bronze given their times."""
    return _fastest(t1, t2, t3), _middle(t1, t2, t3), _slowest(t1, t2, t3)


def odd_one_out(a: int, b: int, c: int) -> str:
    """Who wins a game of odd one out: "A", "B", "C", or "*" for a draw."""
    if a != b and a != c:
        return "A"
    if b != a and b != c:
        return "B"
    if c != a and c != b:
        return "C"
    return "*"


def pokemon_capture(candies: int, costs: Sequence[int]) -> int:
    """How many of three creatures can be caught with the given candies."""
    if len(costs) != 3:
        raise ValueError("exactly three costs are required")
    if candies >= sum(costs):
        return 3
    if any(candies >= x + y for x, y in combinations(costs, 2)):
        return 2
    if any(candies >= cost for cost in costs):
        return 1
    return 0


def rectangles_collide(
    first: Sequence[int], second: Sequence[int]
) -> bool:
    """Whether two rectangles ``(x1, y1, x2, y2)`` overlap along the horizontal axis."""
    x1, _, x2, _ = first
    u1, _, u2, _ = second
    return (x1 <= u1 <= x2) or (u1 <= x1 <= u2)