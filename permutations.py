from typing import Any, List, Optional

from combinations import iter_combinations, resolve_subset_size
from combinatorics import check_result_size, count_permutations
from config import max_results
from entry_set import EntrySet, as_entry_set, rotate, shift_first
from logging_utils import get_logger


def permute(combination: EntrySet) -> List[EntrySet]:
    """
    Every ordering of one combination, keys kept with their values.

    The first entry is taken as pivot and prepended to each ordering of the
    rest; the pivot then moves to the back and the next entry takes its
    place. After one turn per entry the original first key is back in front.
    """
    if len(combination) <= 1:
        return [combination]

    result: List[EntrySet] = []
    working = combination
    for _ in range(len(combination)):
        pivot, rest = shift_first(working)
        for sub_permutation in permute(rest):
            result.append(EntrySet((pivot,) + sub_permutation))
        working = rotate(working)
    return result


def permutations(entries: Any, subset_size: Optional[int] = None, *, limit: Optional[int] = None) -> List[EntrySet]:
    """
    All orderings of every combination, grouped by combination in the order
    `combinations` yields them.
    """
    logger = get_logger("permutations")
    entry_set = as_entry_set(entries)
    n = len(entry_set)
    k = resolve_subset_size(subset_size, n)
    check_result_size(count_permutations(n, k), max_results(limit))

    result: List[EntrySet] = []
    combination_cnt = 0
    for combination in iter_combinations(entry_set, k):
        result.extend(permute(combination))
        combination_cnt += 1
    logger.debug(f"permutations n={n} k={k} combinations={combination_cnt} -> {len(result)}")
    return result
