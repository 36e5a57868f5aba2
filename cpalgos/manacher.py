"""Palindrome radii of a string by Manacher's algorithm."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


class Manacher:
    """Palindromic radii around every position of a string.

    ``even[i]`` is half the length of the longest even palindrome centred just
    before position ``i``; ``odd[i]`` is the longest odd one centred at ``i``,
    half its length rounded down.
    """

    def __init__(self, s: str):
        n = len(s)
        self._n = n
        self.even = [0] * (n + 1)
        self.odd = [0] * n
        for odd, p in ((False, self.even), (True, self.odd)):
            shift = 0 if odd else 1
            l = r = 0
            for i in range(n):
                t = r - i + shift
                if i < r:
                    p[i] = min(t, p[l + t])
                lo, hi = i - p[i], i + p[i] - shift
                while lo >= 1 and hi + 1 < n and s[lo - 1] == s[hi + 1]:
                    p[i] += 1
                    lo -= 1
                    hi += 1
                if hi > r:
                    l, r = lo, hi

    def is_palindrome(self, left: int, right: int) -> bool:
        """Whether s[left..right], both ends inclusive, is a palindrome."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"invalid range [{left}, {right}]")
        length = right - left + 1
        radii = self.odd if length & 1 else self.even
        return radii[(left + right + 1) // 2] * 2 + 1 >= length


def largest_palindromic_square(grid: Sequence[str]) -> int:
    """Side of the largest square whose rows and columns are all palindromes."""
    rows = list(grid)
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("grid must be square")
    by_row = [Manacher(row) for row in rows]
    by_col = [Manacher("".join(row[j] for row in rows)) for j in range(n)]

    def fits(size: int) -> bool:
        return any(
            all(by_row[k].is_palindrome(j, j + size - 1) for k in range(i, i + size))
            and all(by_col[k].is_palindrome(i, i + size - 1) for k in range(j, j + size))
            for i in range(n - size + 1)
            for j in range(n - size + 1)
        )

    best = 0
    for parity in (0, 1):
        first = 1 + (1 % 2 != parity)
        last = n - (n % 2 != parity)
        while first <= last:
            mid = (first + last) // 2
            mid += mid % 2 != parity
            if fits(mid):
                best = max(best, mid)
                first = mid + 2
            else:
                last = mid - 2
    return best


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` and an n by n grid; print the largest palindromic square."""
    argparse.ArgumentParser(description="Largest palindromic square in a grid.").parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    n = int(next(tokens))
    print(largest_palindromic_square([next(tokens) for _ in range(n)]))
    return 0