"""Core data models for candidates, ballots and rankings."""

from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Self

from schulze.errors import (
    DuplicateCandidate,
    InvalidBallot,
    InvalidCandidate,
    InvalidMatrixShape,
    UnknownCandidate,
)

# d[i][j] or p[i][j], indexed by candidate index
Matrix = list[list[int]]


class UnrankedPolicy(str, Enum):
    """How candidates missing from a ballot are treated.

    TIED_LAST: all missing candidates are tied with each other and ranked
        below every candidate the ballot does rank.
    EXCLUDED: missing candidates contribute nothing on that ballot; every
        pair involving one of them is skipped.
    """
    TIED_LAST = "tied_last"
    EXCLUDED = "excluded"

    @classmethod
    def coerce(cls, value: "UnrankedPolicy | str") -> "UnrankedPolicy":
        """Accept either a member or its string value."""
        return value if isinstance(value, cls) else cls(value)


DEFAULT_UNRANKED_POLICY = UnrankedPolicy.TIED_LAST


def check_hashable(candidate: object) -> None:
    """Raise InvalidCandidate if candidate can't be used as an identifier."""
    try:
        hash(candidate)
    except TypeError:
        raise InvalidCandidate(candidate) from None


@dataclass(frozen=True)
class CandidateSet:
    """Bijection between candidate identifiers and dense indices 0..n-1.

    Identifiers can be any hashable value (usually names). Indices follow
    nomination order.

    Example:
        >>> candidates = CandidateSet(["Alice", "Bob", "Carol"])
        >>> candidates.index("Bob")
        1
        >>> candidates[2]
        'Carol'
    """
    candidates: tuple[Hashable, ...]
    _index: Mapping[Hashable, int] = field(init=False, repr=False, compare=False)

    def __init__(self, candidates: Iterable[Hashable] = ()):
        ordered = tuple(candidates)
        index: dict[Hashable, int] = {}
        for i, candidate in enumerate(ordered):
            check_hashable(candidate)
            if candidate in index:
                raise DuplicateCandidate(candidate)
            index[candidate] = i
        object.__setattr__(self, "candidates", ordered)
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def of_size(cls, n: int) -> Self:
        """Candidate set whose identifiers are the indices 0..n-1."""
        return cls(range(n))

    @classmethod
    def coerce(cls, candidates: "CandidateSet | Iterable[Hashable]") -> Self:
        if isinstance(candidates, cls):
            return candidates
        return cls(candidates)

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.candidates)

    def __contains__(self, candidate: object) -> bool:
        try:
            return candidate in self._index
        except TypeError:
            return False

    def __getitem__(self, index: int) -> Hashable:
        return self.candidates[index]

    def index(self, candidate: Hashable) -> int:
        """Get the index of a candidate, or raise UnknownCandidate."""
        try:
            return self._index[candidate]
        except (KeyError, TypeError):
            raise UnknownCandidate(candidate) from None

    @property
    def indices(self) -> range:
        return range(len(self.candidates))


@dataclass(frozen=True)
class Ballot:
    """One voter's ranking, lower rank = more preferred.

    Attributes:
        ranks: Mapping of candidate identifier -> rank. Equal ranks are ties.
            Candidates that are missing, or whose rank is None, are unranked
            and handled according to the UnrankedPolicy.
        weight: Number of identical ballots this one stands for
        name: Optional voter name, for diagnostics only

    Example:
        >>> ballot = Ballot({"A": 1, "B": 2, "C": 2}, name="Ivy")
    """
    ranks: Mapping[Hashable, Any]
    weight: int = 1
    name: str | None = None

    def __post_init__(self):
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise InvalidBallot(f"Ballot weight must be an integer, got {self.weight!r}")
        if self.weight < 1:
            raise InvalidBallot(f"Ballot weight must be positive, got {self.weight}")
        # Private copy so the caller's mapping can't change the ballot later
        object.__setattr__(self, "ranks", MappingProxyType(dict(self.ranks)))

    @classmethod
    def from_order(
        cls,
        order: Iterable[Hashable | Iterable[Hashable]],
        weight: int = 1,
        name: str | None = None,
    ) -> Self:
        """Build a ballot from candidates listed most preferred first.

        Each element is either a single candidate or a list/tuple/set of
        candidates tied at that position.

        Example:
            >>> Ballot.from_order(["A", ["B", "C"], "D"]).ranks
            mappingproxy({'A': 1, 'B': 2, 'C': 2, 'D': 3})
        """
        ranks: dict[Hashable, int] = {}
        for position, entry in enumerate(order, start=1):
            group = entry if isinstance(entry, (list, tuple, set, frozenset)) else [entry]
            for candidate in group:
                if candidate in ranks:
                    raise InvalidBallot(
                        f"Candidate {candidate!r} is listed more than once"
                    )
                ranks[candidate] = position
        return cls(ranks, weight=weight, name=name)

    @classmethod
    def coerce(cls, ballot: "Ballot | Mapping[Hashable, Any]") -> Self:
        if isinstance(ballot, cls):
            return ballot
        return cls(ballot)


@dataclass
class Placement:
    """A candidate's placement in a ranking result.

    Attributes:
        name: Candidate identifier
        rank: 1-indexed placement (tied candidates share the same rank)
        tied: Whether this candidate is tied with others at this rank
    """
    name: Hashable
    rank: int
    tied: bool

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "rank": self.rank, "tied": self.tied}

    @classmethod
    def build_ranking(cls, tiers: Sequence[Sequence[Hashable]]) -> list[Self]:
        """Build a list of Placements from ordered tiers.

        Args:
            tiers: Candidates grouped into tiers from 1st to last place.
                Candidates in the same tier are tied.

        Returns:
            List of Placement objects with correct ranks and tied flags.
        """
        placements = []
        rank = 1
        for tier in tiers:
            tied = len(tier) > 1
            for name in tier:
                placements.append(cls(name=name, rank=rank, tied=tied))
            rank += len(tier)

        return placements


def zero_matrix(n: int) -> Matrix:
    return [[0] * n for _ in range(n)]


def check_square(matrix: Sequence[Sequence[int]], n: int | None = None) -> int:
    """Check that a matrix is square (and n x n, if n is given).

    Returns the matrix size.
    """
    size = len(matrix)
    if n is not None and size != n:
        raise InvalidMatrixShape(f"Expected {n} rows, got {size}")
    for i, row in enumerate(matrix):
        if len(row) != size:
            raise InvalidMatrixShape(
                f"Row {i} has {len(row)} entries, expected {size}"
            )
    return size


def matrix_to_dict(
    matrix: Matrix, candidates: CandidateSet
) -> dict[Hashable, dict[Hashable, int]]:
    """Readable form of a matrix, keyed by candidate identifier."""
    return {
        candidates[i]: {
            candidates[j]: matrix[i][j]
            for j in candidates.indices
        }
        for i in candidates.indices
    }
