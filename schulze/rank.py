"""Order candidates into tiers from a strongest-path strength matrix."""

import logging
from collections.abc import Hashable, Iterable, Sequence

from schulze.errors import EmptyCandidateSet, InconsistentStrengths
from schulze.models import CandidateSet, check_square

logger = logging.getLogger(__name__)


def dominates(p: Sequence[Sequence[int]], i: int, j: int) -> bool:
    """Whether candidate i beats candidate j in the Schulze sense."""
    return p[i][j] > p[j][i]


def compare(p: Sequence[Sequence[int]], i: int, j: int) -> int:
    """Three-way comparison of candidates i and j.

    Returns -1 if i goes before j, 1 if j goes before i, and 0 when
    neither dominates (including exact ties p[i][j] == p[j][i]).
    """
    if p[i][j] > p[j][i]:
        return -1
    if p[j][i] > p[i][j]:
        return 1
    return 0


def rank_indices(p: Sequence[Sequence[int]]) -> list[list[int]]:
    """Partition candidate indices into tiers, winners first.

    Each tier holds every remaining candidate that no other remaining
    candidate dominates. When "neither dominates" is transitive this is
    exactly the grouping into equivalence classes; when it isn't (A ties
    B, A ties C, B beats C) candidates are still never placed below
    someone they aren't beaten by within the remaining set.
    """
    n = check_square(p)
    remaining = list(range(n))
    tiers: list[list[int]] = []
    while remaining:
        tier = [
            i for i in remaining
            if not any(compare(p, i, j) > 0 for j in remaining if j != i)
        ]
        if not tier:
            raise InconsistentStrengths(
                "Every remaining candidate is dominated by another; "
                "the strength matrix contains a dominance cycle"
            )
        tiers.append(tier)
        in_tier = set(tier)
        remaining = [i for i in remaining if i not in in_tier]
    return tiers


def rank(
    p: Sequence[Sequence[int]],
    candidates: CandidateSet | Iterable[Hashable],
) -> list[tuple[Hashable, ...]]:
    """Rank candidates from a strength matrix.

    Args:
        p: Strongest-path strengths, p[i][j] for candidate indices i, j
        candidates: CandidateSet, or identifiers in index order

    Returns:
        Tiers of candidate identifiers, winners first. Candidates within a
        tier are tied and listed in nomination order.

    Raises:
        EmptyCandidateSet: if there are no candidates
        InvalidMatrixShape: if p doesn't match the number of candidates
        InconsistentStrengths: if p has a dominance cycle
    """
    candidates = CandidateSet.coerce(candidates)
    if len(candidates) == 0:
        raise EmptyCandidateSet()
    check_square(p, len(candidates))

    tiers = [
        tuple(candidates[i] for i in tier)
        for tier in rank_indices(p)
    ]
    logger.debug("Ranked %d candidates into %d tiers", len(candidates), len(tiers))
    return tiers
