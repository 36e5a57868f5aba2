import io
import random

import pytest

from cpalgos.derangement import derangement, main


def _check(items, result):
    assert sorted(result) == sorted(items)
    assert all(a != b for a, b in zip(items, result))
    assert len(result) == len(items)


@pytest.mark.parametrize(
    "items",
    [
        [1, 2],
        [1, 2, 3],
        [1, 1, 2, 2],
        [5, 5, 5, 1, 2, 3],
        [3, 1, 3, 2, 3, 1, 2],
        list("abcab"),
    ],
)
def test_valid_derangements(items):
    _check(items, derangement(items))


def test_random_sequences():
    rng = random.Random(42)
    for _ in range(200):
        items = [rng.randint(0, 5) for _ in range(rng.randint(1, 12))]
        result = derangement(items)
        counts = max(items.count(v) for v in items)
        if 2 * counts > len(items):
            assert result is None
        else:
            _check(items, result)


@pytest.mark.parametrize("items", [[], [7], [1, 1, 1, 2], [4, 4, 4, 1, 2]])
def test_impossible(items):
    assert derangement(items) is None


def test_input_not_modified():
    items = [2, 1, 2, 3]
    copy = list(items)
    derangement(items)
    assert items == copy


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n1 2 3\n3\n1 1 1\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Yes"
    _check([1, 2, 3], [int(tok) for tok in lines[1].split()])
    assert lines[2:] == ["No"]