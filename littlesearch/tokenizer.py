"""
Keyword normalization and document tokenization.
Documents are split on whitespace; each token is turned into a keyword by
stripping wrapping punctuation, then rejected if it still holds punctuation
or is a noise word. HTML documents are reduced to their visible text first.
"""

import warnings
from pathlib import Path
from typing import Collection, Iterable

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import WhitespaceTokenizer

# Stripped from the end / start of a token, one character per pass
TRAILING_PUNCTUATION = (".", ",", "?", ":", ";", "!", ")", "]")
LEADING_PUNCTUATION = ("(", "[")

# Any of these left after stripping means the token is not a keyword
INVALID_CHARACTERS = frozenset(":;.,?!()[]-'")

HTML_SUFFIXES = {".html", ".htm"}
ENCODINGS = ("utf-8", "cp1252")

_TOKENIZER = WhitespaceTokenizer()


def strip_punctuation(word: str) -> str:
    """
    Strip trailing and leading punctuation from a word.
    Each pass removes at most one trailing and one leading character;
    passes repeat until neither applies.
    """
    while word:
        stripped = False
        if word.endswith(TRAILING_PUNCTUATION):
            word = word[:-1]
            stripped = True
        if word.startswith(LEADING_PUNCTUATION):
            word = word[1:]
            stripped = True
        if not stripped:
            break
    return word


def get_keyword(word: str, noise_words: Collection[str] = frozenset()) -> str | None:
    """
    Return the lowercase keyword for a word, or None if it is not one.
    A keyword is a word that, after stripping wrapping punctuation, holds no
    punctuation at all, is not empty and is not a noise word.
    """
    word = strip_punctuation(word.lower())
    if not word:
        return None
    if any(ch in INVALID_CHARACTERS for ch in word):
        return None
    if word in noise_words:
        return None
    return word


def tokenize(text: str) -> list[str]:
    """Split text into whitespace-delimited tokens."""
    if not text:
        return []
    return _TOKENIZER.tokenize(text)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read file content, handling common encodings.
    Falls back to latin-1, which decodes any byte sequence.
    """
    filepath = Path(filepath)
    for encoding in ENCODINGS:
        try:
            return filepath.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return filepath.read_text(encoding="latin-1")


def read_document_tokens(filepath: Path) -> list[str]:
    """
    Read a document from disk and return its tokens.
    HTML documents contribute only their visible text.
    """
    content = read_text_file(filepath)
    if Path(filepath).suffix.lower() in HTML_SUFFIXES:
        content = extract_text_from_html(content)
    return tokenize(content)


def read_noise_words(filepath: Path) -> set[str]:
    """Read a noise word file (whitespace separated) into a lowercase set."""
    return normalize_noise_words(tokenize(read_text_file(filepath)))


def normalize_noise_words(words: Iterable[str]) -> set[str]:
    return {w.lower() for w in words}
