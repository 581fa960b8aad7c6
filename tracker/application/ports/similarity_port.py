"""Port interface for fuzzy string similarity."""

from abc import ABC, abstractmethod


class SimilarityScorer(ABC):
    @abstractmethod
    def score(self, query: str, candidate: str) -> float:
        """Return similarity in [0.0, 1.0]; 1.0 means identical."""
        ...
