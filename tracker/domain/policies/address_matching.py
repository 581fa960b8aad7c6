"""AddressMatchingPolicy — pick the best fuzzy match among candidate addresses."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from tracker.domain.value_objects.match_result import NO_MATCH, MatchResult

ScoreFn = Callable[[str, str], float]


def best_match(
    query: str,
    candidates: Sequence[str],
    score: ScoreFn,
    floor: float = 0.0,
) -> MatchResult:
    """Return the index of the highest-scoring candidate.

    1. Score every candidate independently with *score(query, candidate)*.
    2. Scan in order, replacing the best-so-far only on a strictly greater score.
    3. The running best starts at *floor*, so a candidate scoring exactly the
       floor is never a match and ties keep the first occurrence.

    Args:
        query: the free-text address to look up.
        candidates: ordered candidate addresses (may be empty).
        score: similarity function returning a value in [0.0, 1.0].
        floor: scores at or below this value count as "no similarity".

    Returns:
        MatchResult with the winning index, or NO_MATCH.
    """
    best_index: int | None = None
    best_score = floor

    for index, candidate in enumerate(candidates):
        candidate_score = score(query, candidate)
        if candidate_score > best_score:
            best_score = candidate_score
            best_index = index

    if best_index is None:
        return NO_MATCH
    return MatchResult(index=best_index, score=best_score)
