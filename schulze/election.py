"""Orchestrator: tally ballots, compute strongest paths and rank candidates."""

import logging
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from schulze.errors import DuplicateCandidate
from schulze.models import (
    DEFAULT_UNRANKED_POLICY,
    Ballot,
    CandidateSet,
    Matrix,
    Placement,
    UnrankedPolicy,
    check_hashable,
    matrix_to_dict,
)
from schulze.paths import strongest_paths
from schulze.rank import rank
from schulze.tally import build_tally

logger = logging.getLogger(__name__)


@dataclass
class SchulzeResult:
    """Result of a Schulze computation.

    Schulze results are conventionally published together with the
    pairwise and strength matrices, so both are kept here.

    Attributes:
        candidates: The candidate set the matrices are indexed by
        tally: Pairwise preferences, tally[i][j] = ballots preferring i over j
        strengths: Strongest-path strengths between candidates
        tiers: Candidate identifiers grouped into tiers, winners first
        unranked_policy: Policy used when tallying
    """
    candidates: CandidateSet
    tally: Matrix
    strengths: Matrix
    tiers: list[tuple[Hashable, ...]]
    unranked_policy: UnrankedPolicy = DEFAULT_UNRANKED_POLICY

    @property
    def winners(self) -> tuple[Hashable, ...]:
        return self.tiers[0]

    @property
    def ranked_candidates(self) -> list[Hashable]:
        """All candidates from 1st to last place, ties in nomination order."""
        return [c for tier in self.tiers for c in tier]

    def placements(self) -> list[Placement]:
        return Placement.build_ranking(self.tiers)

    def get_place(self, candidate: Hashable) -> int | None:
        """Get the 1-indexed placement for a candidate, or None if not found."""
        for p in self.placements():
            if p.name == candidate:
                return p.rank
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary.

        Candidate identifiers are used as dictionary keys, so they should be
        strings for the result to survive a JSON round trip.
        """
        return {
            "candidates": list(self.candidates),
            "unranked_policy": self.unranked_policy.value,
            "tiers": [list(tier) for tier in self.tiers],
            "final_ranking": [p.to_dict() for p in self.placements()],
            "pairwise_preferences": matrix_to_dict(self.tally, self.candidates),
            "path_strengths": matrix_to_dict(self.strengths, self.candidates),
        }


def compute_ranking(
    candidates: CandidateSet | Iterable[Hashable],
    ballots: Iterable[Ballot | Mapping[Hashable, Any]],
    unranked_policy: UnrankedPolicy | str = DEFAULT_UNRANKED_POLICY,
) -> SchulzeResult:
    """Run the Schulze method over a set of ballots.

    The computation is a pure function of its arguments: nothing is
    cached between calls and the inputs are never modified.

    Args:
        candidates: CandidateSet, or identifiers in index order
        ballots: Ballots, or plain {candidate: rank} mappings
        unranked_policy: How candidates missing from a ballot are treated

    Returns:
        SchulzeResult with the tiers and both intermediate matrices

    Raises:
        EmptyCandidateSet: If there are no candidates
        UnknownCandidate: If a ballot ranks a candidate not in the set
        InvalidBallot: If a ballot's ranks can't be compared
    """
    candidates = CandidateSet.coerce(candidates)
    policy = UnrankedPolicy.coerce(unranked_policy)

    d = build_tally(candidates, ballots, policy)
    p = strongest_paths(d)
    tiers = rank(p, candidates)

    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "Schulze ranking of %d candidates: %s",
            len(candidates),
            " > ".join("=".join(str(c) for c in tier) for tier in tiers),
        )
    return SchulzeResult(
        candidates=candidates,
        tally=d,
        strengths=p,
        tiers=tiers,
        unranked_policy=policy,
    )


@dataclass
class Election:
    """Collects candidates and ballots, then computes the result.

    Example:
        >>> election = Election().nominate("Lea").nominate("Nora").nominate("Zahra")
        >>> election = election.vote(["Nora", "Zahra", "Lea"], weight=3)
        >>> election.result().winners
        ('Nora',)
    """
    candidates: list[Hashable] = field(default_factory=list)
    ballots: list[Ballot] = field(default_factory=list)
    unranked_policy: UnrankedPolicy = DEFAULT_UNRANKED_POLICY

    def __post_init__(self):
        self.unranked_policy = UnrankedPolicy.coerce(self.unranked_policy)

    def nominate(self, candidate: Hashable) -> Self:
        check_hashable(candidate)
        if candidate in self.candidates:
            raise DuplicateCandidate(candidate)
        self.candidates.append(candidate)
        return self

    def add_ballot(self, ballot: Ballot | Mapping[Hashable, Any]) -> Self:
        self.ballots.append(Ballot.coerce(ballot))
        return self

    def vote(
        self,
        order: Iterable[Hashable | Iterable[Hashable]],
        weight: int = 1,
        name: str | None = None,
    ) -> Self:
        """Add a ballot listing candidates most preferred first.

        See Ballot.from_order() for the format of order.
        """
        return self.add_ballot(Ballot.from_order(order, weight=weight, name=name))

    def result(self) -> SchulzeResult:
        return compute_ranking(self.candidates, self.ballots, self.unranked_policy)
