"""Compute add and remove events that turn one collection into another."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

_ADD = "add"
_REMOVE = "remove"


@dataclass(frozen=True)
class CollectionEvent:
    """A collection add or remove event at a position."""

    event: str
    idx: int
    value: Any = None


def _equal(x: Any, y: Any) -> bool:
    # JSON true and 1 are different values.
    if isinstance(x, bool) or isinstance(y, bool):
        return type(x) is type(y) and x == y
    return x == y


def collection_diff(a: Sequence[Any], b: Sequence[Any]) -> list[CollectionEvent]:
    """Return the events that, applied in order, change collection a into b.

    All remove events come first, with descending indexes, followed by the
    add events with ascending indexes. The events are based on the longest
    common subsequence of the two collections.
    """
    start = 0
    m = len(a)
    n = len(b)

    # Trim matches at the start and end
    while start < m and start < n and _equal(a[start], b[start]):
        start += 1
    if start == m and start == n:
        return []
    while start < m and start < n and _equal(a[m - 1], b[n - 1]):
        m -= 1
        n -= 1

    aa = list(a[start:m])
    bb = list(b[start:n])
    m = len(aa)
    n = len(bb)

    # table[i][j] is the LCS length of aa[:i] and bb[:j]
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i, x in enumerate(aa):
        row, next_row = table[i], table[i + 1]
        for j, y in enumerate(bb):
            if _equal(x, y):
                next_row[j + 1] = row[j] + 1
            else:
                next_row[j + 1] = max(next_row[j], row[j + 1])

    steps: list[CollectionEvent] = []
    adds: list[tuple[int, int, int]] = []
    idx = m + start
    i, j = m, n
    removed = 0
    while True:
        if i > 0 and j > 0 and _equal(aa[i - 1], bb[j - 1]):
            idx -= 1
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            adds.append((j - 1, idx, removed))
            j -= 1
        elif i > 0 and (j == 0 or table[i][j - 1] < table[i - 1][j]):
            idx -= 1
            steps.append(CollectionEvent(_REMOVE, idx))
            removed += 1
            i -= 1
        else:
            break

    for offset, (bi, add_idx, removed_before) in enumerate(reversed(adds)):
        steps.append(
            CollectionEvent(_ADD, add_idx - removed + removed_before + offset, bb[bi])
        )
    return steps


def apply_events(values: Iterable[Any], events: Iterable[CollectionEvent]) -> list[Any]:
    """Return a new list with the add and remove events applied to values."""
    result = list(values)
    for ev in events:
        if ev.event == _ADD:
            if ev.idx < 0 or ev.idx > len(result):
                raise IndexError(f"add idx {ev.idx} is out of bounds")
            result.insert(ev.idx, ev.value)
        elif ev.event == _REMOVE:
            if ev.idx < 0 or ev.idx >= len(result):
                raise IndexError(f"remove idx {ev.idx} is out of bounds")
            del result[ev.idx]
        else:
            raise ValueError(f"unknown collection event {ev.event!r}")
    return result