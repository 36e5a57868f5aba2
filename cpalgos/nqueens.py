"""All placements of n non-attacking queens on an n by n board."""

from __future__ import annotations


def solve_n_queens(n: int) -> list[list[str]]:
    """Every solution as a list of rows, 'Q' for a queen and '.' for empty.

    Solutions are ordered by the column of the queen in each row, top first.
    """
    if n < 0:
        raise ValueError("board size must be non-negative")
    boards: list[list[str]] = []
    placement: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            boards.append(["." * c + "Q" + "." * (n - c - 1) for c in placement])
            return
        for col in range(n):
            if col in columns or row + col in diagonals or row - col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(row - col)
            placement.append(col)
            place(row + 1)
            placement.pop()
            columns.discard(col)
            diagonals.discard(row + col)
            anti_diagonals.discard(row - col)

    place(0)
    return boards