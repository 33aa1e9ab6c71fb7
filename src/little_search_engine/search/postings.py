"""Posting lists kept in descending frequency order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from little_search_engine.search.models import Occurrence


class PostingList:
    """Occurrences of one keyword, highest frequency first.

    Frequencies never increase along the list and each document appears at
    most once. New occurrences are appended and then moved into place with
    :meth:`insert_last`.
    """

    __slots__ = ("_occurrences",)

    def __init__(self, occurrences: Iterable[Occurrence] | None = None) -> None:
        self._occurrences: list[Occurrence] = list(occurrences or [])

    def __len__(self) -> int:
        return len(self._occurrences)

    def __iter__(self) -> Iterator[Occurrence]:
        return iter(self._occurrences)

    def __getitem__(self, index: int) -> Occurrence:
        return self._occurrences[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PostingList):
            return NotImplemented
        return self._occurrences == other._occurrences

    def __repr__(self) -> str:
        return f"PostingList([{', '.join(str(occ) for occ in self._occurrences)}])"

    def documents(self) -> list[str]:
        return [occ.document for occ in self._occurrences]

    def frequencies(self) -> list[int]:
        return [occ.frequency for occ in self._occurrences]

    def is_ordered(self) -> bool:
        """True if frequencies are non-increasing along the list."""
        freqs = self.frequencies()
        return all(earlier >= later for earlier, later in zip(freqs, freqs[1:]))

    def add(self, occurrence: Occurrence) -> list[int] | None:
        """Append ``occurrence`` and move it to its ordered position.

        Returns the midpoints visited by the binary search, see :meth:`insert_last`.
        """
        self._occurrences.append(occurrence)
        return self.insert_last()

    def insert_last(self) -> list[int] | None:
        """Move the last occurrence to its place in descending frequency order.

        Every element but the last must already be ordered. The insertion
        point is found with a binary search over indices ``0..n-2``; on an
        exact frequency match the occurrence goes in at the matched index.

        Returns:
            The midpoint indices visited by the search, in order, or None when
            the list holds at most one occurrence and no search is needed.
        """
        if len(self._occurrences) <= 1:
            return None

        target = self._occurrences[-1].frequency
        low, high = 0, len(self._occurrences) - 2
        midpoints: list[int] = []
        insert_at = None
        while low <= high:
            mid = (low + high) // 2
            midpoints.append(mid)
            frequency = self._occurrences[mid].frequency
            if target == frequency:
                insert_at = mid
                break
            if target > frequency:
                high = mid - 1
            else:
                low = mid + 1
        if insert_at is None:
            insert_at = low

        self._occurrences.insert(insert_at, self._occurrences.pop())
        return midpoints
