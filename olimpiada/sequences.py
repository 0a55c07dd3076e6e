"""Problems over sequences: sorting, runs, counting and simple simulations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby

MILLION = 1_000_000
PASSWORD_CODE = 2018
_TAPE_LIMIT = 9


def bubble_sort(values: Iterable[int]) -> list[int]:
    """The values in non-decreasing order, sorted by repeated adjacent swaps."""
    items = list(values)
    swapped = True
    while swapped:
        swapped = False
        for index, (left, right) in enumerate(zip(items, items[1:])):
            if left > right:
                items[index], items[index + 1] = right, left
                swapped = True
    return items


def minesweeper_counts(field: Iterable[int]) -> list[int]:
    """For each cell, the number of mines (cells equal to 1) in it and its neighbours."""
    cells = list(field)
    return [
        sum(1 for cell in cells[max(index - 1, 0):index + 2] if cell == 1)
        for index in range(len(cells))
    ]


def longest_run(numbers: Iterable[int]) -> int:
    """Length of the longest run of equal consecutive numbers."""
    runs = [sum(1 for _ in group) for _, group in groupby(numbers)]
    if not runs:
        raise ValueError("at least one number is required")
    return max(runs)


def digit_counts(numbers: Iterable[str | int]) -> list[int]:
    """How many times each digit 0-9 appears across the numbers' decimal text."""
    counts = [0] * 10
    for number in numbers:
        for char in str(number):
            if "0" <= char <= "9":
                counts[ord(char) - ord("0")] += 1
    return counts


def queue_after_departures(
    queue: Iterable[int], departures: Iterable[int]
) -> list[int]:
    """The queue left after each departing person is removed."""
    remaining = list(queue)
    for person in departures:
        try:
            remaining.remove(person)
        except ValueError:
            raise ValueError(f"{person} is not in the queue") from None
    return remaining


def element_sum(values: Iterable[int]) -> int:
    """Sum of the values."""
    return sum(values)


def days_to_million(deposits: Iterable[int]) -> int:
    """Days until the accumulated deposits reach a million, or the number of days given."""
    days = 0
    for days, total in enumerate(accumulate(deposits), start=1):
        if total >= MILLION:
            break
    return days


def attempts_before_password(passwords: Iterable[int]) -> int:
    """How many wrong attempts come before the code 2018 is entered."""
    for attempts, password in enumerate(passwords):
        if password == PASSWORD_CODE:
            return attempts
    raise ValueError("the code 2018 was never entered")


def toggle_lamps(presses: Iterable[int]) -> tuple[bool, bool]:
    """State of lamps A and B after the switch presses (1 toggles A, 2 toggles both)."""
    lamp_a = lamp_b = False
    for press in presses:
        if press == 1:
            lamp_a = not lamp_a
        elif press == 2:
            lamp_a = not lamp_a
            lamp_b = not lamp_b
    return lamp_a, lamp_b


def correct_answers(key: Sequence[str], answers: Sequence[str]) -> int:
    """Number of answers that match the answer key."""
    if len(key) != len(answers):
        raise ValueError("the key and the answers must have the same length")
    return sum(1 for expected, given in zip(key, answers) if expected == given)


def glasses_dropped(trays: Iterable[tuple[int, int]]) -> int:
    """Glasses broken: each tray with more cans than glasses loses all its glasses."""
    return sum(glasses for cans, glasses in trays if cans > glasses)


def trapped_rain(heights: Sequence[int]) -> int:
    """Count of positions that hold rain water between higher walls."""
    heights = list(heights)
    aux_highest = highest = 0
    pending = total = 0
    for index, height in enumerate(heights):
        aux_highest = min(aux_highest, highest)
        highest = max(highest, height)
        if index == 0:
            aux_highest = highest
            continue
        below_walls = height < highest and height < aux_highest
        in_valley = (
            height < heights[index - 1]
            and index + 1 < len(heights)
            and height < heights[index + 1]
        )
        if below_walls or in_valley:
            pending += 1
        else:
            total += pending
            pending = 0
    return total


def _run_before_zero(cells: Iterable[int]) -> tuple[int, bool]:
    """Number of cells before the first zero, and whether a zero was found."""
    count = 0
    for cell in cells:
        if cell == 0:
            return count, True
        count += 1
    return count, False


def colored_tape(squares: Sequence[int]) -> list[int]:
    """Fill a tape: each non-zero square gets its distance to the nearest zero, capped at 9."""
    tape = list(squares)
    ahead = behind = 0
    zero_ahead = zero_behind = False
    for index in range(len(tape)):
        run, found = _run_before_zero(tape[index:])
        ahead = min(ahead + run, _TAPE_LIMIT)
        zero_ahead = zero_ahead or found
        if index == 0:
            tape[index] = ahead
            ahead = behind = 0
            zero_ahead = False
            continue
        run, found = _run_before_zero(reversed(tape[:index + 1]))
        behind = min(behind + run, _TAPE_LIMIT)
        zero_behind = zero_behind or found
        if ahead > 0 and behind > 0:
            if zero_ahead and zero_behind:
                tape[index] = min(ahead, behind)
                ahead = behind = 0
                zero_ahead = zero_behind = False
            elif zero_behind:
                tape[index] = behind
                ahead = behind = 0
                zero_behind = False
            elif zero_ahead:
                tape[index] = ahead
                ahead = behind = 0
                zero_ahead = False
    return tape