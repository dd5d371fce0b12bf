"""Text normalization shared by query matching, typo correction, and the dictionary."""

import re
from collections.abc import Iterable

from app.application.dtos.search import SearchableText

_NON_ALNUM = re.compile(r"[^a-z0-9]")

# Dictionary words must be longer than this after stripping.
MIN_DICTIONARY_WORD_LENGTH = 3


def split_query_terms(text: str) -> list[str]:
    """Split raw query text on runs of whitespace, dropping empty tokens."""
    return text.split()


def dictionary_words(text: str) -> set[str]:
    """Return the dictionary words found in one text value.

    Lowercases, splits on whitespace, strips every non-alphanumeric character
    from each token, and keeps tokens of at least MIN_DICTIONARY_WORD_LENGTH.
    """
    words: set[str] = set()
    for token in text.lower().split():
        word = _NON_ALNUM.sub("", token)
        if len(word) >= MIN_DICTIONARY_WORD_LENGTH:
            words.add(word)
    return words


def searchable_values(item: SearchableText) -> Iterable[str]:
    """Yield every non-empty text value of the six searchable fields (tags one by one)."""
    for value in (item.name, item.description, item.brand, item.model, item.specifications):
        if value:
            yield value
    for tag in item.tags:
        if tag:
            yield tag


def collect_dictionary_words(items: Iterable[SearchableText]) -> set[str]:
    """Union of dictionary words over all searchable fields of all items."""
    words: set[str] = set()
    for item in items:
        for value in searchable_values(item):
            words |= dictionary_words(value)
    return words
