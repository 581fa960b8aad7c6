"""RapidFuzz similarity adapter — implements SimilarityScorer."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rapidfuzz import fuzz

from tracker.adapters.matching.normalizer import normalize_address
from tracker.application.ports.similarity_port import SimilarityScorer

logger = logging.getLogger(__name__)

SCORING_METHODS: dict[str, Callable[..., float]] = {
    "token_sort": fuzz.token_sort_ratio,
    "ratio": fuzz.ratio,
    "partial": fuzz.partial_ratio,
}


class RapidFuzzScorer(SimilarityScorer):
    """Score address pairs with a RapidFuzz ratio, scaled to [0.0, 1.0]."""

    def __init__(self, method: str = "token_sort", normalize: bool = True):
        if method not in SCORING_METHODS:
            raise ValueError(
                f"Unknown scoring method '{method}', expected one of {sorted(SCORING_METHODS)}"
            )
        self._method = method
        self._ratio = SCORING_METHODS[method]
        self._normalize = normalize
        logger.debug("RapidFuzzScorer using %s (normalize=%s)", method, normalize)

    @property
    def method(self) -> str:
        return self._method

    def score(self, query: str, candidate: str) -> float:
        if self._normalize:
            query = normalize_address(query)
            candidate = normalize_address(candidate)

        if query == candidate:
            return 1.0
        if not query or not candidate:
            return 0.0
        return self._ratio(query, candidate) / 100.0
