"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def prefix_function(s: str) -> list[int]:
    """For each prefix, the length of its longest proper border."""
    p = [0] * len(s)
    for i in range(1, len(s)):
        g = p[i - 1]
        while g and s[i] != s[g]:
            g = p[g - 1]
        p[i] = g + (s[i] == s[g])
    return p


def match(text: str, pattern: str) -> list[int]:
    """Start positions of every, possibly overlapping, occurrence of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    found = []
    i = j = 0
    while i < len(text):
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == len(pattern):
            found.append(i - j)
            j = lps[j - 1]
        if i < len(text) and pattern[j] != text[i]:
            if j:
                j = lps[j - 1]
            else:
                i += 1
    return found


def main(argv: Sequence[str] | None = None) -> int:
    """Read pattern/text line pairs and print where each pattern occurs."""
    argparse.ArgumentParser(description="Find all occurrences of patterns.").parse_args(argv)
    lines = iter(sys.stdin.read().splitlines())
    for pattern, text in zip(lines, lines):
        print(" ".join(map(str, match(text, pattern))))
    return 0