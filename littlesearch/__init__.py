"""Little search engine package."""

from .posting import Occurrence, InvertedIndex, insert_last_occurrence
from .index_builder import LittleSearchEngine
from .ranking import merge_top_matches, TOP_K
from .tokenizer import get_keyword, strip_punctuation, tokenize
