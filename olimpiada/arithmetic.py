"""Small arithmetic problems: grades, conversions, divisions and comparisons."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Integer division rounding toward zero, remainder taking the dividend's sign."""
    quotient = abs(a) // abs(b)
    if (a >= 0) != (b >= 0):
        quotient = -quotient
    return quotient, a - b * quotient


def _trunc_div(a: int, b: int) -> int:
    return _trunc_divmod(a, b)[0]


def _ieee_divide(a: float, b: float) -> float:
    """Floating division that yields inf or nan instead of raising on a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _is_odd_integer(value: float) -> bool:
    return float(value).is_integer() and int(value) % 2 == 1


def _as_single(value: float) -> float:
    """Round a value to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def grade_status(a: float, b: float) -> str:
    """Classify a student by the mean of two grades."""
    mean = (a + b) / 2
    if mean >= 7:
        return "Aprovado"
    if mean < 4:
        return "Reprovado"
    return "Recuperacao"


def right_triangle_area(a: int, b: int) -> int:
    """Integer area of a right triangle with legs ``a`` and ``b``."""
    return _trunc_div(a * b, 2)


def robot_basketball_points(distance: int) -> int:
    """Points scored by a throw from ``distance`` centimetres."""
    if distance <= 800:
        return 1
    if distance <= 1400:
        return 2
    return 3


def cable_car_fits(students: int, monitors: int) -> bool:
    """Whether everybody fits in a cable car that carries 50 people."""
    return students + monitors <= 50


def divide(a: float, b: float) -> float:
    """Floating point quotient ``a / b``."""
    return _ieee_divide(a, b)


def treasure_share(amount: int, others: int) -> int:
    """Share kept by the two finders when ``amount`` is split among ``others`` + 2."""
    return 2 * _trunc_div(amount, others + 2)


def to_minutes(hours: int, minutes: int) -> int:
    """Convert hours and minutes to minutes."""
    return 60 * hours + minutes


def weighted_average(a: int, b: int) -> int:
    """Integer average with weights 4 and 6."""
    return _trunc_div(4 * a + 6 * b, 10)


def split_minutes(minutes: int) -> tuple[int, int]:
    """Split a number of minutes into ``(hours, minutes)``."""
    return _trunc_divmod(minutes, 60)


def forgotten_grade(first: int, mean: int) -> int:
    """The second grade that gives ``mean`` together with ``first``."""
    return 2 * mean - first


def operate(operation: str, a: float, b: float) -> float | None:
    """Multiply (``'M'``) or divide (``'D'``); any other operation gives None."""
    if operation == "M":
        return a * b
    if operation == "D":
        return _ieee_divide(a, b)
    return None


def floor_tiles(rows: int, columns: int) -> tuple[int, int]:
    """Counts of the two kinds of tile on a school floor of the given size."""
    first_kind = rows * columns + (rows - 1) * (columns - 1)
    second_kind = 2 * (rows + columns - 2)
    return first_kind, second_kind


def power(base: float, exponent: float) -> float:
    """``base`` raised to ``exponent``, with inf and nan where the result has no finite value."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            return math.inf
        return math.nan


def square_roots(numbers: Iterable[float]) -> list[float]:
    """Square roots of numbers read in single precision; negatives give nan."""
    roots = []
    for number in numbers:
        value = _as_single(number)
        roots.append(math.sqrt(value) if value >= 0 else math.nan)
    return roots


def installments(value: int, parts: int) -> list[int]:
    """Split ``value`` into ``parts`` interest-free instalments, larger ones first."""
    base, rest = _trunc_divmod(value, parts)
    return [base + 1 if index < rest else base for index in range(parts)]


def seesaw(p1: int, c1: int, p2: int, c2: int) -> int:
    """0 if balanced, -1 if the first side goes down, 1 if the second does."""
    left = p1 * c1
    right = p2 * c2
    if left == right:
        return 0
    if left > right:
        return -1
    return 1


def chessboard_colour(rows: int, columns: int) -> int:
    """Colour of the bottom-right square: 1 for white, 0 for black."""
    rows_even = rows % 2 == 0
    columns_even = columns % 2 == 0
    if rows_even and columns_even:
        return 1
    if rows_even != columns_even:
        return 0
    return 1


def pinball(p: int, r: int) -> str | None:
    """Exit taken by the ball given the two switch positions."""
    if p == 1 and r == 1:
        return "A"
    if p == 1 and r == 0:
        return "B"
    if p == 0:
        return "C"
    return None


def fits_limit(limit: int, left: int, operator: str, right: int) -> bool:
    """Whether ``left <operator> right`` stays within ``limit``; unknown operators never fit."""
    if operator == "+":
        return left + right <= limit
    if operator == "*":
        return left * right <= limit
    return False


def balanced_mobile(a: int, b: int, c: int, d: int) -> bool:
    """Whether a hanging mobile with the given weights is balanced."""
    return a == b + c + d and d == b + c and b == c