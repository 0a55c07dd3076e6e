"""Assigning queued calls to telemarketing sellers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def distribute_calls(sellers: int, calls: Iterable[int]) -> list[int]:
    """Number of calls each seller takes; entry ``i`` belongs to seller ``i + 1``.

    A call goes to the free seller with the smallest number; when nobody is
    free, the seller holding the shortest call becomes free again.
    """
    if sellers < 1:
        raise ValueError("there must be at least one seller")
    free = list(range(1, sellers + 1))
    heapq.heapify(free)
    busy: list[tuple[int, int]] = []
    taken = [0] * sellers
    for duration in calls:
        seller = heapq.heappop(free)
        heapq.heappush(busy, (duration, seller))
        taken[seller - 1] += 1
        if not free:
            _, released = heapq.heappop(busy)
            heapq.heappush(free, released)
    return taken