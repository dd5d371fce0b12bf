"""Application services: text normalization and typo correction."""

from app.application.services.search_text import (
    collect_dictionary_words,
    dictionary_words,
    split_query_terms,
)
from app.application.services.typo_corrector import TypoCorrector

__all__ = [
    "TypoCorrector",
    "collect_dictionary_words",
    "dictionary_words",
    "split_query_terms",
]
