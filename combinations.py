from numbers import Integral
from typing import Any, Iterator, List, Optional

from combinatorics import (
    Pointers,
    advance_pointers,
    check_result_size,
    count_combinations,
    first_pointers,
    is_last_pointers,
    pointer_table,
    pointers_at,
)
from config import max_results
from entry_set import EntrySet, as_entry_set
from logging_utils import get_logger


def resolve_subset_size(subset_size: Optional[int], set_size: int) -> int:
    if subset_size is None:
        return set_size
    if isinstance(subset_size, bool) or not isinstance(subset_size, Integral):
        raise TypeError(f"subset size must be an int, got {type(subset_size).__name__}")
    if subset_size < 0:
        raise ValueError(f"invalid subset size={subset_size}")
    return int(subset_size)


def select(entry_set: EntrySet, pointers: Pointers) -> EntrySet:
    return EntrySet(entry_set[p] for p in pointers)


def _iter_combinations(entry_set: EntrySet, k: int) -> Iterator[EntrySet]:
    n = len(entry_set)
    if k >= n:
        yield entry_set
        return
    if k == 1:
        for entry in entry_set:
            yield EntrySet((entry,))
        return
    if k == 0:
        return

    pointers = first_pointers(k)
    while True:
        yield select(entry_set, pointers)
        if is_last_pointers(pointers, n):
            break
        pointers = advance_pointers(pointers, n)


def iter_combinations(entries: Any, subset_size: Optional[int] = None) -> Iterator[EntrySet]:
    """
    Lazily walk the same sequence `combinations` returns.
    Arguments are validated before the first item is produced.
    """
    entry_set = as_entry_set(entries)
    k = resolve_subset_size(subset_size, len(entry_set))
    return _iter_combinations(entry_set, k)


def combinations(entries: Any, subset_size: Optional[int] = None, *, limit: Optional[int] = None) -> List[EntrySet]:
    """
    All subsets of `subset_size` entries, keys preserved, in lexicographic
    order of their index vectors.

    A subset size of None or >= len(entries) gives the whole set as the only
    combination; a subset size of 0 gives no combinations at all.
    """
    logger = get_logger("combinations")
    entry_set = as_entry_set(entries)
    n = len(entry_set)
    k = resolve_subset_size(subset_size, n)
    check_result_size(count_combinations(n, k), max_results(limit))

    if 1 < k < n:
        result = [select(entry_set, row) for row in pointer_table(n, k).tolist()]
    else:
        result = list(_iter_combinations(entry_set, k))
    logger.debug(f"combinations n={n} k={k} -> {len(result)}")
    return result


def combination_at(entries: Any, subset_size: int, index: int) -> EntrySet:
    entry_set = as_entry_set(entries)
    n = len(entry_set)
    k = resolve_subset_size(subset_size, n)
    if k >= n or k == 0:
        available = list(_iter_combinations(entry_set, k))
        try:
            return available[index]
        except IndexError:
            raise IndexError(f"invalid index={index}") from None
    return select(entry_set, pointers_at(n, k, index))
