import io
import random

import pytest

from cpalgos.knapsack import (
    knapsack_meet_in_middle,
    knapsack_small_capacity,
    knapsack_small_value,
    main,
)


def _chosen(mask, items):
    return [item for i, item in enumerate(items) if mask >> i & 1]


def _instances():
    rng = random.Random(1234)
    cases = []
    for _ in range(30):
        n = rng.randint(0, 10)
        weights = [rng.randint(1, 15) for _ in range(n)]
        values = [rng.randint(0, 20) for _ in range(n)]
        cases.append((weights, values, rng.randint(0, 40)))
    return cases


@pytest.mark.parametrize("weights,values,capacity", _instances())
def test_solvers_agree(weights, values, capacity):
    best = knapsack_small_capacity(weights, values, capacity)
    assert knapsack_small_value(weights, values, capacity) == best
    mask = knapsack_meet_in_middle(weights, values, capacity)
    assert mask < 1 << len(weights)
    assert sum(_chosen(mask, weights)) <= capacity
    assert sum(_chosen(mask, values)) == best


@pytest.mark.parametrize(
    "weights,values,capacity,expected",
    [
        ([3, 4, 5], [30, 50, 60], 8, 90),
        ([1000000000], [10], 1000000000, 10),
        ([6, 5, 6, 6, 3, 7], [5, 6, 4, 6, 5, 2], 15, 17),
    ],
)
def test_worked_examples(weights, values, capacity, expected):
    assert knapsack_small_value(weights, values, capacity) == expected
    mask = knapsack_meet_in_middle(weights, values, capacity)
    assert sum(_chosen(mask, values)) == expected


@pytest.mark.parametrize("weights,values,capacity", _instances()[:10])
def test_unbounded_at_least_zero_one(weights, values, capacity):
    assert knapsack_small_capacity(
        weights, values, capacity, unbounded=True
    ) >= knapsack_small_capacity(weights, values, capacity)


def test_unbounded_reuses_item():
    value, capacity = 7, 9
    assert knapsack_small_capacity([1], [value], capacity) == value
    assert knapsack_small_capacity([1], [value], capacity, unbounded=True) == capacity * value


def test_item_heavier_than_capacity_is_ignored():
    assert knapsack_small_capacity([10], [100], 5) == 0
    assert knapsack_small_value([10], [100], 5) == 0
    assert knapsack_meet_in_middle([10], [100], 5) == 0


@pytest.mark.parametrize(
    "solver",
    [knapsack_small_capacity, knapsack_small_value, knapsack_meet_in_middle],
)
def test_mismatched_lengths(solver):
    with pytest.raises(ValueError):
        solver([1, 2], [3], 5)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        knapsack_small_capacity([1], [1], -1)


def test_main_prints_optimal_choice(monkeypatch, capsys):
    weights, values, capacity = [3, 4, 5], [30, 50, 60], 8
    text = f"3 {capacity}\n" + "".join(f"{w} {v}\n" for w, v in zip(weights, values))
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    indices = [int(tok) for tok in lines[1].split()]
    assert int(lines[0]) == len(indices)
    assert sum(weights[i - 1] for i in indices) <= capacity
    assert sum(values[i - 1] for i in indices) == knapsack_small_capacity(
        weights, values, capacity
    )