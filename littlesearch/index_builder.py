"""
Index builder: constructs the keyword index from text and HTML documents.
The engine owns the noise word set and the index; documents are scanned
one at a time into a per-document keyword table, which is then merged
into the index.
"""

import logging
from pathlib import Path
from typing import Iterable

from .posting import InvertedIndex, Occurrence
from .ranking import TOP_K, merge_top_matches
from .tokenizer import (
    get_keyword,
    normalize_noise_words,
    read_document_tokens,
    read_noise_words,
    read_text_file,
    tokenize,
)

logger = logging.getLogger(__name__)


class LittleSearchEngine:
    """
    Keyword index over a small set of documents, answering two-keyword
    OR queries ranked by frequency.
    """

    def __init__(self, *, top_k: int = TOP_K) -> None:
        self.index = InvertedIndex()
        self.noise_words: set[str] = set()
        self.documents: set[str] = set()
        self.top_k = top_k

    def load_noise_words(self, words: Iterable[str]) -> None:
        """Add words to the noise word set (lowercased)."""
        self.noise_words.update(normalize_noise_words(words))

    def get_keyword(self, word: str) -> str | None:
        """Return the keyword for a raw token, or None if it is rejected."""
        return get_keyword(word, self.noise_words)

    def load_keywords(self, doc_id: str, tokens: Iterable[str]) -> dict[str, Occurrence]:
        """
        Scan a document's tokens into a keyword -> occurrence table.
        Each occurrence carries doc_id and the keyword's count in the document.
        """
        keywords: dict[str, Occurrence] = {}
        for token in tokens:
            keyword = self.get_keyword(token)
            if keyword is None:
                continue
            if keyword in keywords:
                keywords[keyword].frequency += 1
            else:
                keywords[keyword] = Occurrence(doc_id, 1)
        return keywords

    def load_document(self, filepath: Path, doc_id: str | None = None) -> dict[str, Occurrence]:
        """Read a document from disk and scan it (doc_id defaults to the path)."""
        if doc_id is None:
            doc_id = str(filepath)
        tokens = read_document_tokens(filepath)
        logger.debug("Loaded %s (%d tokens)", doc_id, len(tokens))
        return self.load_keywords(doc_id, tokens)

    def merge_keywords(self, keywords: dict[str, Occurrence]) -> None:
        """
        Merge one document's keyword table into the index.
        A keyword that already has an occurrence for the same document is skipped.
        """
        for keyword, occurrence in keywords.items():
            if not self.index.add_occurrence(keyword, occurrence):
                logger.debug("Skipped duplicate %s for %r", occurrence, keyword)
            self.documents.add(occurrence.document)

    def make_index(self, docs_file: Path, noise_words_file: Path) -> int:
        """
        Build the index from a file listing document names (whitespace
        separated) and a noise word file. Document names are resolved
        relative to the docs file and used as document identifiers; a name
        that was already indexed is skipped.
        Returns the number of documents indexed by this call.
        """
        docs_file = Path(docs_file)
        self.load_noise_words(read_noise_words(noise_words_file))

        indexed = 0
        for name in tokenize(read_text_file(docs_file)):
            if name in self.documents:
                logger.debug("Skipped %s (already indexed)", name)
                continue
            filepath = Path(name)
            if not filepath.is_absolute():
                filepath = docs_file.parent / filepath
            self.merge_keywords(self.load_document(filepath, doc_id=name))
            # documents with no keywords still count as indexed
            self.documents.add(name)
            indexed += 1

        logger.info(
            "Indexed %d documents, %d unique keywords", indexed, len(self.index)
        )
        return indexed

    def top_matches(self, kw1: str, kw2: str) -> list[str] | None:
        """
        Documents containing kw1 or kw2, highest frequency first, at most
        top_k of them. Ties favor kw1. Returns None if nothing matches.
        """
        first = self.index.get_occurrences(kw1.lower())
        second = self.index.get_occurrences(kw2.lower())
        return merge_top_matches(first, second, limit=self.top_k)
