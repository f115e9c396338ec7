"""Schulze method ranking engine."""

from .election import Election, SchulzeResult, compute_ranking
from .errors import (
    DuplicateCandidate,
    EmptyCandidateSet,
    InconsistentStrengths,
    InvalidBallot,
    InvalidCandidate,
    InvalidMatrixShape,
    SchulzeError,
    UnknownCandidate,
)
from .models import Ballot, CandidateSet, Placement, UnrankedPolicy
from .paths import edge_weights, iter_paths, relax_paths, strongest_paths
from .rank import compare, dominates, rank
from .tally import build_tally

__all__ = [
    "Ballot",
    "CandidateSet",
    "DuplicateCandidate",
    "Election",
    "EmptyCandidateSet",
    "InconsistentStrengths",
    "InvalidBallot",
    "InvalidCandidate",
    "InvalidMatrixShape",
    "Placement",
    "SchulzeError",
    "SchulzeResult",
    "UnknownCandidate",
    "UnrankedPolicy",
    "build_tally",
    "compare",
    "compute_ranking",
    "dominates",
    "edge_weights",
    "iter_paths",
    "rank",
    "relax_paths",
    "strongest_paths",
]
