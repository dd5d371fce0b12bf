"""Typo correction for zero-result queries.

Each query token is matched against the search dictionary by Levenshtein
distance (insertions, deletions, substitutions each cost 1). A token is
replaced only by a strictly different word within max_distance edits.
"""

import logging
from collections.abc import Sequence

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 2
DEFAULT_MIN_TOKEN_LENGTH = 3


class TypoCorrector:
    """Suggests a corrected query using the dictionary as ground truth."""

    def __init__(
        self,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH,
    ) -> None:
        self.max_distance = max_distance
        self.min_token_length = min_token_length

    def correct_token(self, token: str, dictionary: Sequence[str]) -> str:
        """Return the nearest dictionary word within max_distance, else token unchanged.

        Ties at the minimum distance resolve to the first word in dictionary order.
        """
        if len(token) < self.min_token_length:
            return token
        match = process.extractOne(
            token,
            dictionary,
            scorer=Levenshtein.distance,
            score_cutoff=self.max_distance,
        )
        if match is None:
            return token
        word, distance, _ = match
        if distance == 0:
            return token
        return word

    def find_correction(self, query: str, dictionary: Sequence[str]) -> str | None:
        """Return the corrected query (space-joined, lowercase) or None.

        None means no token changed, or the dictionary is empty (an empty
        dictionary never turns every token into a typo). Tokens come from
        str.split(), so surrounding whitespace is dropped and inner runs collapse
        to one space in the corrected query.
        """
        if not dictionary:
            logger.warning("Search dictionary is empty. Cannot provide suggestions.")
            return None
        tokens = query.lower().split()
        corrected = [self.correct_token(token, dictionary) for token in tokens]
        if corrected == tokens:
            return None
        return " ".join(corrected)
