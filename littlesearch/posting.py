"""
Occurrence and inverted index data structures.

An occurrence records how many times a keyword appears in one document.
The index maps each keyword to its occurrence list, kept in descending
order of frequency at all times.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Occurrence:
    """
    Represents a keyword's occurrence in a document.
    - document: document identifier (the name the document was loaded under)
    - frequency: number of times the keyword occurs in that document
    """

    document: str
    frequency: int

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int] | None:
    """
    Move the last occurrence of the list into its place by descending frequency.

    Elements 0..n-2 must already be in descending order. The slot for element
    n-1 is found by binary search over that prefix; occurrences with equal
    frequency stay ahead of the new one. Returns the midpoints probed by the
    search, or None if the list has fewer than two elements.
    """
    if len(occurrences) < 2:
        return None

    target = occurrences[-1].frequency
    lo, hi = 0, len(occurrences) - 2
    probes: list[int] = []
    while lo <= hi:
        mid = (lo + hi) // 2
        probes.append(mid)
        if occurrences[mid].frequency < target:
            hi = mid - 1
        else:
            lo = mid + 1

    if lo < len(occurrences) - 1:
        occurrences.insert(lo, occurrences.pop())
    return probes


class InvertedIndex:
    """
    Inverted index: map from keyword -> occurrence list (descending frequency).
    Grows as documents are merged in; nothing is ever removed.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}
        # keyword -> documents already in its occurrence list
        self._documents: dict[str, set[str]] = {}

    def add_occurrence(self, keyword: str, occurrence: Occurrence) -> bool:
        """
        Add a document's occurrence for a keyword, keeping the list ordered.
        Returns False (and leaves the list alone) if the keyword already has
        an occurrence for that document.
        """
        if keyword not in self._index:
            self._index[keyword] = [occurrence]
            self._documents[keyword] = {occurrence.document}
            return True
        documents = self._documents[keyword]
        if occurrence.document in documents:
            return False
        documents.add(occurrence.document)
        occurrences = self._index[keyword]
        occurrences.append(occurrence)
        insert_last_occurrence(occurrences)
        return True

    def get_occurrences(self, keyword: str) -> list[Occurrence] | None:
        """Return the occurrence list for a keyword, or None if it was never indexed."""
        return self._index.get(keyword)

    def keywords(self) -> Iterator[str]:
        """Iterate over all keywords in the index."""
        return iter(self._index)

    def total_occurrences(self) -> int:
        return sum(len(occs) for occs in self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._index

    def to_dict(self) -> dict:
        """Serialize to a JSON-serializable dict for saving."""
        return {
            keyword: [
                {"document": o.document, "frequency": o.frequency}
                for o in occurrences
            ]
            for keyword, occurrences in self._index.items()
        }
