"""
Ranked OR-merge of two occurrence lists.

Both inputs are occurrence lists in descending frequency order (as kept by
the index). The result is the union of their documents, highest frequency
first, without duplicates and capped at a fixed number of entries.
"""

from .posting import Occurrence

TOP_K = 5


def _take(
    result: list[str],
    seen: set[str],
    occurrences: list[Occurrence],
    start: int,
    limit: int,
) -> None:
    """Append documents from occurrences[start:] until the cap is reached."""
    for occ in occurrences[start:]:
        if len(result) >= limit:
            break
        if occ.document not in seen:
            seen.add(occ.document)
            result.append(occ.document)


def merge_top_matches(
    first: list[Occurrence] | None,
    second: list[Occurrence] | None,
    limit: int = TOP_K,
) -> list[str] | None:
    """
    Merge two descending occurrence lists into the top `limit` documents.

    Walks both lists with a cursor each, emitting the document with the
    strictly higher frequency. On equal frequencies the first list's document
    goes first, then the second's if there is room, and both cursors advance.
    Once either list runs out, the other is drained in order. A document that
    occurs in both lists is emitted once, at its first position.

    Returns None if neither list yields any document.
    """
    result: list[str] = []
    seen: set[str] = set()

    def emit(document: str) -> None:
        if document not in seen and len(result) < limit:
            seen.add(document)
            result.append(document)

    if first is None or second is None:
        _take(result, seen, first or second or [], 0, limit)
        return result or None

    i = j = 0
    while i < len(first) and j < len(second) and len(result) < limit:
        f1 = first[i].frequency
        f2 = second[j].frequency
        if f1 > f2:
            emit(first[i].document)
            i += 1
        elif f2 > f1:
            emit(second[j].document)
            j += 1
        else:
            emit(first[i].document)
            emit(second[j].document)
            i += 1
            j += 1

    _take(result, seen, first, i, limit)
    _take(result, seen, second, j, limit)
    return result or None
