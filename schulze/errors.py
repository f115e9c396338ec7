"""Errors raised by the Schulze ranking engine."""


class SchulzeError(Exception):
    """Base class for all errors raised by the engine."""
    pass


class EmptyCandidateSet(SchulzeError, ValueError):
    """Raised when an election is computed with no candidates."""

    def __init__(self, message: str = "The candidate set must not be empty."):
        super().__init__(message)


class UnknownCandidate(SchulzeError, LookupError):
    """Raised when a ballot refers to a candidate that was never nominated.

    The whole computation is rejected rather than silently dropping the
    offending ballot.
    """

    def __init__(self, candidate, ballot_name: str | None = None):
        self.candidate = candidate
        self.ballot_name = ballot_name
        message = f"Unknown candidate {candidate!r}"
        if ballot_name is not None:
            message += f" on ballot {ballot_name!r}"
        super().__init__(message)


class InvalidCandidate(SchulzeError, TypeError):
    """Raised when a candidate identifier can't be used as one (unhashable)."""

    def __init__(self, candidate):
        self.candidate = candidate
        super().__init__(f"Candidate {candidate!r} is not hashable")


class DuplicateCandidate(SchulzeError, ValueError):
    """Raised when the same candidate is nominated twice."""

    def __init__(self, candidate):
        self.candidate = candidate
        super().__init__(f"Can't add second candidate {candidate!r}")


class InvalidBallot(SchulzeError, ValueError):
    """Raised when a ballot has an unusable weight or incomparable ranks."""
    pass


class InvalidMatrixShape(SchulzeError, ValueError):
    """Raised when a matrix is not square or doesn't match the candidate set.

    This indicates a programming error: tally matrices are normally built
    by build_tally() and always have the right shape.
    """
    pass


class InconsistentStrengths(SchulzeError, ValueError):
    """Raised when a strength matrix has a dominance cycle.

    Strongest-path matrices never do; this only happens for hand-built
    matrices passed straight to rank().
    """
    pass
