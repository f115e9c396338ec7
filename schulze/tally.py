"""Pairwise tally: how many ballots prefer each candidate over each other."""

import logging
from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from schulze.errors import EmptyCandidateSet, InvalidBallot, UnknownCandidate
from schulze.models import (
    DEFAULT_UNRANKED_POLICY,
    Ballot,
    CandidateSet,
    Matrix,
    UnrankedPolicy,
    zero_matrix,
)

logger = logging.getLogger(__name__)


def _label(ballot: Ballot) -> str:
    return f"Ballot {ballot.name!r}" if ballot.name is not None else "Ballot"


def _rank_groups(ballot: Ballot, candidates: CandidateSet) -> list[list[int]]:
    """Group the explicitly ranked candidates of a ballot by rank.

    Returns lists of candidate indices, most preferred group first.
    """
    ranked = []
    for candidate, rank in ballot.ranks.items():
        try:
            index = candidates.index(candidate)
        except UnknownCandidate:
            raise UnknownCandidate(candidate, ballot.name) from None
        if rank is None:
            continue
        # NaN compares false with everything, including itself
        if rank != rank:
            raise InvalidBallot(_label(ballot) + f" gives {candidate!r} an unorderable rank {rank!r}")
        ranked.append((rank, index))

    try:
        ranked.sort(key=lambda entry: entry[0])
    except TypeError as e:
        raise InvalidBallot(_label(ballot) + f" has incomparable ranks: {e}") from e

    groups: list[list[int]] = []
    i = 0
    while i < len(ranked):
        group = [ranked[i][1]]
        j = i + 1
        while j < len(ranked) and ranked[j][0] == ranked[i][0]:
            group.append(ranked[j][1])
            j += 1
        groups.append(group)
        i = j
    return groups


def build_tally(
    candidates: CandidateSet | Iterable[Hashable],
    ballots: Iterable[Ballot | Mapping[Hashable, Any]],
    unranked_policy: UnrankedPolicy | str = DEFAULT_UNRANKED_POLICY,
) -> Matrix:
    """Build the pairwise preference matrix.

    d[i][j] is the (weighted) number of ballots on which candidate i is
    ranked strictly better than candidate j. Equal ranks count for
    neither side. Unranked candidates are handled by unranked_policy.

    Args:
        candidates: CandidateSet, or identifiers in index order
        ballots: Ballots, or plain {candidate: rank} mappings
        unranked_policy: UnrankedPolicy member or its string value

    Returns:
        The n x n tally matrix, with zeros on the diagonal.

    Raises:
        EmptyCandidateSet: if there are no candidates
        UnknownCandidate: if any ballot refers to a candidate not in the set
        InvalidBallot: if a ballot's ranks can't be compared with each other
    """
    candidates = CandidateSet.coerce(candidates)
    policy = UnrankedPolicy.coerce(unranked_policy)
    n = len(candidates)
    if n == 0:
        raise EmptyCandidateSet()

    d = zero_matrix(n)
    num_ballots = 0

    for raw in ballots:
        ballot = Ballot.coerce(raw)
        groups = _rank_groups(ballot, candidates)

        if policy is UnrankedPolicy.TIED_LAST:
            seen = {i for group in groups for i in group}
            unranked = [i for i in candidates.indices if i not in seen]
            if unranked:
                groups.append(unranked)

        # Every candidate in a group beats every candidate in the later groups
        below: list[int] = []
        for group in reversed(groups):
            for i in group:
                row = d[i]
                for j in below:
                    row[j] += ballot.weight
            below.extend(group)

        num_ballots += 1

    logger.debug(
        "Tallied %d ballots over %d candidates (unranked policy: %s)",
        num_ballots, n, policy.value,
    )
    return d
