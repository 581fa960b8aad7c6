"""MatchResult value object — outcome of a fuzzy address lookup."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    index: int | None
    score: float

    @property
    def found(self) -> bool:
        return self.index is not None


NO_MATCH = MatchResult(index=None, score=0.0)
