"""Tests for the permutation generator."""

from __future__ import annotations

import math

import pytest

from combinations import combinations
from combinatorics import factorial, nCr
from entry_set import EntrySet, entries_from_pairs, keys
from permutations import permute, permutations


def test_pairs_from_three_entries() -> None:
    source = {"a": 1, "b": 2, "c": 3}
    assert permutations(source, 2) == [
        (("a", 1), ("b", 2)),
        (("b", 2), ("a", 1)),
        (("a", 1), ("c", 3)),
        (("c", 3), ("a", 1)),
        (("b", 2), ("c", 3)),
        (("c", 3), ("b", 2)),
    ]


def test_single_entry() -> None:
    assert permutations({"x": 10}) == [(("x", 10),)]


def test_size_zero_returns_nothing() -> None:
    assert permutations({"a": 1, "b": 2}, 0) == []


def test_rotation_order_for_three() -> None:
    combination = entries_from_pairs([("a", 1), ("b", 2), ("c", 3)])
    ordered = ["".join(keys(p)) for p in permute(combination)]
    assert ordered == ["abc", "acb", "bca", "bac", "cab", "cba"]


def test_permute_base_cases() -> None:
    assert permute(EntrySet()) == [()]
    single = EntrySet([("k", "v")])
    assert permute(single) == [single]


@pytest.mark.parametrize("n,k", [(3, 3), (4, 2), (4, 3), (5, 2), (5, 4)])
def test_counts_and_key_value_pairing(n: int, k: int) -> None:
    source = {f"key{i}": f"value{i}" for i in range(n)}
    order = {key: i for i, key in enumerate(source)}
    result = permutations(source, k)
    expected_combinations = combinations(source, k)

    assert len(result) == nCr(n, k) * factorial(k)
    assert len(set(result)) == len(result)
    for permutation in result:
        for key, value in permutation:
            assert source[key] == value
        restored = tuple(sorted(permutation, key=lambda entry: order[entry[0]]))
        assert restored in expected_combinations


def test_grouped_by_combination() -> None:
    source = list("wxyz")
    per_group = factorial(2)
    result = permutations(source, 2)
    for index, combination in enumerate(combinations(source, 2)):
        group = result[index * per_group:(index + 1) * per_group]
        assert group[0] == combination
        assert all(sorted(p) == sorted(combination) for p in group)


def test_positional_keys_survive_reordering() -> None:
    result = permutations(["p", "q"])
    assert result == [((0, "p"), (1, "q")), ((1, "q"), (0, "p"))]


def test_limit_uses_permutation_total() -> None:
    source = list(range(6))
    # 6 * 5 = 30 rows, only 15 combinations
    with pytest.raises(OverflowError):
        permutations(source, 2, limit=20)
    assert len(permutations(source, 2, limit=30)) == 30


def test_nan_key_terminates_with_every_ordering() -> None:
    source = {math.nan: 1, "b": 2, "c": 3}
    result = permutations(source)
    assert len(result) == factorial(3)
    assert [[value for _, value in p] for p in result] == [
        [1, 2, 3], [1, 3, 2], [2, 3, 1], [2, 1, 3], [3, 1, 2], [3, 2, 1],
    ]


@pytest.mark.parametrize("operation", [combinations, permutations])
def test_duplicate_keys_in_entry_set_fail_fast(operation) -> None:
    with pytest.raises(ValueError, match="duplicate key 'a' at item 1"):
        operation(EntrySet([("a", 1), ("a", 2)]), 2)


@pytest.mark.parametrize("operation", [combinations, permutations])
@pytest.mark.parametrize("items", [[("a", 1), "bc!"], [("a", 1), 7], [("a", 1, 2)]])
def test_malformed_entry_set_fails_fast(operation, items) -> None:
    with pytest.raises(ValueError, match="not a \\(key, value\\) pair"):
        operation(EntrySet(items), 1)
