"""Strongest path strengths between every pair of candidates."""

import logging
from collections.abc import Iterator, Sequence

from schulze.models import Matrix, check_square

logger = logging.getLogger(__name__)


def edge_weights(d: Sequence[Sequence[int]]) -> Matrix:
    """Keep only pairwise majorities as graph edges.

    w[i][j] = d[i][j] if d[i][j] > d[j][i], else 0 (no edge).
    """
    n = check_square(d)
    w = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if i != j and d[i][j] > d[j][i]:
                w[i][j] = d[i][j]
    return w


def _relax(p: Matrix) -> None:
    """Widest-path relaxation over p, in place.

    k must stay the outer loop: paths through k are only complete once
    every path through an earlier intermediate has been accounted for.
    """
    n = len(p)
    for k in range(n):
        row_k = p[k]
        for i in range(n):
            if i == k:
                continue
            row_i = p[i]
            # Strength of any path through k is capped by i→k
            via = row_i[k]
            if via == 0:
                continue
            for j in range(n):
                if j == i or j == k:
                    continue
                strength_via_k = min(via, row_k[j])
                if strength_via_k > row_i[j]:
                    row_i[j] = strength_via_k


def strongest_paths(d: Sequence[Sequence[int]]) -> Matrix:
    """Compute the strongest-path strength matrix from a tally.

    p[i][j] is the largest, over all directed paths from i to j in the
    majority graph, of the weakest edge on that path (0 if no path).
    O(n³) time, O(n²) space.

    Raises:
        InvalidMatrixShape: if d is not square
    """
    p = edge_weights(d)
    _relax(p)
    logger.debug("Computed strongest paths for %d candidates", len(p))
    return p


def relax_paths(p: Sequence[Sequence[int]]) -> Matrix:
    """Run one more relaxation pass over a copy of p.

    A strength matrix from strongest_paths() is a fixed point, so this
    returns an equal matrix for it.
    """
    check_square(p)
    relaxed = [list(row) for row in p]
    _relax(relaxed)
    return relaxed


def iter_paths(matrix: Sequence[Sequence[int]]) -> Iterator[tuple[int, int, int]]:
    """Yield (from, to, value) for every off-diagonal cell, row by row.

    Example:
        >>> list(iter_paths([[0, 2], [1, 0]]))
        [(0, 1, 2), (1, 0, 1)]
    """
    n = check_square(matrix)
    for i in range(n):
        for j in range(n):
            if i != j:
                yield i, j, matrix[i][j]
