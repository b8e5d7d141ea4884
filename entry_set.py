"""
Ordered, unique-keyed (key, value) collections.

Both plain lists (implicit integer keys) and mappings (explicit keys) are
normalised to one immutable shape: an EntrySet, a tuple of (key, value) pairs.
Combinations and permutations are EntrySets too, so they compare by order
and can be fed back in as input.
"""
from collections.abc import Hashable, Iterable, Mapping
from typing import Any, Dict, List, Tuple

Entry = Tuple[Hashable, Any]


class EntrySet(tuple):
    """
    Immutable sequence of (key, value) pairs. Construction rejects malformed
    items and duplicate keys, so every EntrySet is unique-keyed.
    """

    def __new__(cls, items: Iterable = ()):
        return super().__new__(cls, _checked_pairs(items))

    def __repr__(self) -> str:
        return f"EntrySet({tuple.__repr__(self)})"


def _checked_pairs(pairs: Iterable) -> List[Entry]:
    if isinstance(pairs, (str, bytes)) or not isinstance(pairs, Iterable):
        raise TypeError(f"expected an iterable of (key, value) pairs, got {type(pairs).__name__}")
    entries: List[Entry] = []
    seen = set()
    for i, pair in enumerate(pairs):
        try:
            key, value = pair
        except (TypeError, ValueError):
            raise ValueError(f"item {i} is not a (key, value) pair: {pair!r}") from None
        if not isinstance(key, Hashable):
            raise ValueError(f"item {i} has an unhashable key: {key!r}")
        if key in seen:
            raise ValueError(f"duplicate key {key!r} at item {i}")
        seen.add(key)
        entries.append((key, value))
    return entries


def entries_from_pairs(pairs: Iterable) -> EntrySet:
    """
    Build an entry set from explicit (key, value) pairs. Duplicate keys are rejected.
    """
    return EntrySet(pairs)


def as_entry_set(obj: Any) -> EntrySet:
    if isinstance(obj, EntrySet):
        return obj
    if isinstance(obj, Mapping):
        return EntrySet(obj.items())
    if isinstance(obj, (str, bytes)) or not isinstance(obj, Iterable):
        raise TypeError(f"expected a mapping or a sequence of values, got {type(obj).__name__}")
    return EntrySet(enumerate(obj))


def shift_first(entry_set: EntrySet) -> Tuple[Entry, EntrySet]:
    if not entry_set:
        raise ValueError("cannot shift from an empty entry set")
    return entry_set[0], EntrySet(entry_set[1:])


def first_key(entry_set: EntrySet) -> Hashable:
    if not entry_set:
        raise ValueError("empty entry set has no first key")
    return entry_set[0][0]


def rotate(entry_set: EntrySet) -> EntrySet:
    if len(entry_set) <= 1:
        return entry_set
    return EntrySet(entry_set[1:] + entry_set[:1])


def keys(entry_set: EntrySet) -> List[Hashable]:
    return [key for key, _ in entry_set]


def to_dict(entry_set: EntrySet) -> Dict[Hashable, Any]:
    return dict(entry_set)
