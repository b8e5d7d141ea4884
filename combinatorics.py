from typing import Optional, Tuple

import numpy as np

Pointers = Tuple[int, ...]


def nCr(n: int, r: int) -> int:
    if r < 0 or r > n:
        return 0
    r = min(r, n - r)
    num = 1
    den = 1
    for i in range(1, r + 1):
        num *= n - r + i
        den *= i
    return num // den


def factorial(n: int) -> int:
    if n < 0:
        raise ValueError(f"invalid n={n}")
    res = 1
    for i in range(2, n + 1):
        res *= i
    return res


def count_combinations(n: int, k: int) -> int:
    """
    Number of combinations produced for a set of size n: the whole set for k>=n, none for k=0.
    """
    if k >= n:
        return 1
    if k == 0:
        return 0
    return nCr(n, k)


def count_permutations(n: int, k: int) -> int:
    return count_combinations(n, k) * factorial(min(k, n))


def check_result_size(total: int, limit: Optional[int]) -> None:
    if limit is not None and total > limit:
        raise OverflowError(f"result would hold {total} rows, limit is {limit}")


def first_pointers(k: int) -> Pointers:
    return tuple(range(k))


def is_last_pointers(pointers: Pointers, n: int) -> bool:
    start = n - len(pointers)
    for i, p in enumerate(pointers):
        if p != start + i:
            return False
    return True


def advance_pointers(pointers: Pointers, n: int) -> Optional[Pointers]:
    """
    Lexicographic successor of a pointer vector, or None after the last one.
    Pointer i may not pass n - k + i.
    """
    k = len(pointers)
    for i in reversed(range(k)):
        if pointers[i] < i + n - k:
            head = pointers[i] + 1
            return pointers[:i] + tuple(range(head, head + k - i))
    return None


def pointers_at(n: int, k: int, index: int) -> Pointers:
    """
    Return the index-th pointer vector (0-based) of size k over range(n) in lexicographic order.
    """
    if k < 0 or k > n:
        raise ValueError(f"invalid r={k}")
    total = nCr(n, k)
    if index < 0:
        index += total
    if index < 0 or index >= total:
        raise IndexError(f"invalid index={index}")

    out = []
    remaining = index
    next_val = 0
    for i in range(k, 0, -1):
        for v in range(next_val, n):
            count = nCr(n - v - 1, i - 1)
            if remaining < count:
                out.append(v)
                next_val = v + 1
                break
            remaining -= count
    return tuple(out)


def pointer_table(n: int, k: int) -> np.ndarray:
    """
    Every pointer vector of size k over range(n), one per row, in lexicographic order.
    """
    if k < 0 or k > n:
        raise ValueError(f"invalid r={k}")
    if k == 0:
        return np.zeros((0, 0), dtype=np.int64)
    table = np.empty((nCr(n, k), k), dtype=np.int64)
    pointers: Optional[Pointers] = first_pointers(k)
    row = 0
    while pointers is not None:
        table[row, :] = pointers
        row += 1
        pointers = advance_pointers(pointers, n)
    return table
