"""Linear programming by the simplex method.

Maximises c.x subject to A x <= b and x >= 0.
"""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence

EPS = 1e-8


class LPSolver:
    """A linear program in standard form, solved with a two-phase simplex."""

    def __init__(
        self,
        A: Sequence[Sequence[float]],
        b: Sequence[float],
        c: Sequence[float],
    ):
        if len(A) != len(b) or any(len(row) != len(c) for row in A):
            raise ValueError("A must have len(b) rows of len(c) entries")
        self._A = [[float(v) for v in row] for row in A]
        self._b = [float(v) for v in b]
        self._c = [float(v) for v in c]
        self._m = len(self._b)
        self._n = len(self._c)

    def _reset(self) -> None:
        m, n = self._m, self._n
        self._N = list(range(n)) + [-1]
        self._B = [n + i for i in range(m)]
        self._D = [[0.0] * (n + 2) for _ in range(m + 2)]
        for row, source, bi in zip(self._D, self._A, self._b):
            row[:n] = source
            row[n] = -1.0
            row[n + 1] = bi
        self._D[m][:n] = [-cj for cj in self._c]
        self._D[m + 1][n] = 1.0

    def _pivot(self, r: int, s: int) -> None:
        D = self._D
        a = D[r]
        inv = 1 / a[s]
        for i, row in enumerate(D):
            if i != r and abs(row[s]) > EPS:
                factor = row[s] * inv
                row[:] = [bj - aj * factor for bj, aj in zip(row, a)]
                row[s] = a[s] * factor
        a[:] = [v if j == s else v * inv for j, v in enumerate(a)]
        for i, row in enumerate(D):
            if i != r:
                row[s] *= -inv
        a[s] = inv
        self._B[r], self._N[s] = self._N[s], self._B[r]

    def _entering(self, row: Sequence[float], columns, exclude: int | None) -> int:
        best = -1
        for j in columns:
            if exclude is not None and self._N[j] == exclude:
                continue
            if best == -1 or (row[j], self._N[j]) < (row[best], self._N[best]):
                best = j
        return best

    def _simplex(self, phase: int) -> bool:
        m, n, D, B = self._m, self._n, self._D, self._B
        objective = D[m + phase - 1]
        while True:
            s = self._entering(objective, range(n + 1), -phase)
            if objective[s] >= -EPS:
                return True
            r = -1
            for i in range(m):
                if D[i][s] <= EPS:
                    continue
                if r == -1 or (D[i][n + 1] / D[i][s], B[i]) < (D[r][n + 1] / D[r][s], B[r]):
                    r = i
            if r == -1:
                return False
            self._pivot(r, s)

    def solve(self) -> tuple[float, list[float] | None]:
        """Return (optimum, x).

        The optimum is -inf with x None when infeasible, and inf when
        unbounded (x is then some feasible point).
        """
        self._reset()
        m, n, D = self._m, self._n, self._D
        if m:
            r = min(range(m), key=lambda i: D[i][n + 1])
            if D[r][n + 1] < -EPS:
                self._pivot(r, n)
                if not self._simplex(2) or D[m + 1][n + 1] < -EPS:
                    return -math.inf, None
                for i in range(m):
                    if self._B[i] == -1:
                        self._pivot(i, self._entering(D[i], range(n + 1), None))
        ok = self._simplex(1)
        x = [0.0] * n
        for i in range(m):
            if 0 <= self._B[i] < n:
                x[self._B[i]] = D[i][n + 1]
        return (D[m][n + 1] if ok else math.inf), x


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the two-variable optimisation cases read from standard input."""
    argparse.ArgumentParser(description="Solve small linear programs.").parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    for _ in range(int(next(tokens))):
        a, b, c, d, r = (float(next(tokens)) for _ in range(5))
        sign = 1.0 if d else -1.0
        objective = [a * sign, b * sign]
        rows: list[list[float]] = []
        bounds: list[float] = []
        for _ in range(3):
            x, y = float(next(tokens)), float(next(tokens))
            relation = next(tokens)
            z = float(next(tokens))
            if relation != ">=":
                rows.append([x, y])
                bounds.append(z + (x + y) * r)
            if relation != "<=":
                rows.append([-x, -y])
                bounds.append(-z - (x + y) * r)
        rows += [[1.0, 0.0], [0.0, 1.0]]
        bounds += [r + r, r + r]
        value, _ = LPSolver(rows, bounds, objective).solve()
        answer = value * sign + c - (a + b) * r
        print("No Solution" if math.isinf(answer) else f"{answer:.3f}")
    return 0