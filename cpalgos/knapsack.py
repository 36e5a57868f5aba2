"""Knapsack solvers for small capacity, small total value and few items."""

from __future__ import annotations

import argparse
import math
import sys
from bisect import bisect_right
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


def _check_items(weights: Sequence[int], values: Sequence[int]) -> None:
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")


def knapsack_small_capacity(
    weights: Sequence[int],
    values: Sequence[int],
    capacity: int,
    unbounded: bool = False,
) -> int:
    """Best total value within ``capacity``; O(n * capacity).

    With ``unbounded`` every item may be taken any number of times.
    """
    _check_items(weights, values)
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        if unbounded:
            room = range(weight, capacity + 1)
        else:
            room = range(capacity, weight - 1, -1)
        for j in room:
            best[j] = max(best[j], best[j - weight] + value)
    return best[capacity]


def knapsack_small_value(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> int:
    """Best total value within ``capacity``; O(n * sum(values))."""
    _check_items(weights, values)
    if any(v < 0 for v in values):
        raise ValueError("values must be non-negative")
    total = sum(values)
    lightest: list[float] = [0] + [math.inf] * total
    for weight, value in zip(weights, values):
        for j in range(total, value - 1, -1):
            lightest[j] = min(lightest[j], lightest[j - value] + weight)
    return next((v for v in range(total, -1, -1) if lightest[v] <= capacity), 0)


@dataclass(frozen=True)
class _Subset:
    mask: int
    value: int
    weight: int


def _subsets(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> Iterator[_Subset]:
    for mask in range(1 << len(weights)):
        weight = value = 0
        for i, (w, v) in enumerate(zip(weights, values)):
            if mask >> i & 1:
                weight += w
                value += v
                if weight > capacity:
                    break
        if weight <= capacity:
            yield _Subset(mask, value, weight)


def knapsack_meet_in_middle(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> int:
    """Bit mask of an optimal item choice; O(2^(n/2) * n)."""
    _check_items(weights, values)
    weights = list(weights)
    values = list(values)
    half = len(weights) // 2
    left = list(_subsets(weights[:half], values[:half], capacity))
    right = sorted(
        _subsets(weights[half:], values[half:], capacity),
        key=lambda s: (s.weight, s.value),
    )
    if not right:
        return 0

    right_weights = [s.weight for s in right]
    best_value: list[int] = []
    best_mask: list[int] = []
    for subset in right:
        if not best_value or best_value[-1] < subset.value:
            best_value.append(subset.value)
            best_mask.append(subset.mask)
        else:
            best_value.append(best_value[-1])
            best_mask.append(best_mask[-1])

    result = mask = 0
    for subset in left:
        idx = max(bisect_right(right_weights, capacity - subset.weight) - 1, 0)
        total = best_value[idx] + subset.value
        if result < total:
            result = total
            mask = subset.mask | best_mask[idx] << half
    return mask


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n c`` and ``n`` weight/value pairs; print the chosen items."""
    argparse.ArgumentParser(description="Solve a 0-1 knapsack instance.").parse_args(argv)
    numbers = iter(int(tok) for tok in sys.stdin.read().split())
    n, capacity = next(numbers), next(numbers)
    pairs = [(next(numbers), next(numbers)) for _ in range(n)]
    weights = [w for w, _ in pairs]
    values = [v for _, v in pairs]
    mask = knapsack_meet_in_middle(weights, values, capacity)
    chosen = [i + 1 for i in range(n) if mask >> i & 1]
    print(len(chosen))
    print(" ".join(map(str, chosen)))
    return 0