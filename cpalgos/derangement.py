"""Rearrange a sequence so that no position keeps its value."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from itertools import groupby
from typing import TypeVar

T = TypeVar("T")


def derangement(items: Sequence[T]) -> list[T] | None:
    """A permutation of ``items`` with a different value at every position.

    Returns None when impossible, which is when some value fills more than
    half of the positions (and for an empty sequence).
    """
    items = list(items)
    n = len(items)
    order = sorted(range(n), key=items.__getitem__)
    ordered = [items[i] for i in order]
    most = max((sum(1 for _ in run) for _, run in groupby(ordered)), default=1)
    if most + most > n:
        return None
    result: list[T] = [items[0]] * n
    for k, value in enumerate(ordered):
        result[order[(k + most) % n]] = value
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases of integer sequences; print Yes and a derangement, or No."""
    argparse.ArgumentParser(description="Derange integer sequences.").parse_args(argv)
    numbers = iter(int(tok) for tok in sys.stdin.read().split())
    for _ in range(next(numbers)):
        n = next(numbers)
        result = derangement([next(numbers) for _ in range(n)])
        if result is None:
            print("No")
        else:
            print("Yes")
            print(" ".join(map(str, result)))
    return 0