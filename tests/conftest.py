"""Shared test helpers."""

from schulze.models import Ballot


def make_ballots(table: list[tuple[int, str]]) -> list[Ballot]:
    """Build ballots from a compact (count, order) table.

    Args:
        table: [(count, "ACBED"), ...] where each order string lists
            single-letter candidates from most to least preferred

    Returns:
        One weighted Ballot per row.
    """
    return [Ballot.from_order(order, weight=count) for count, order in table]


def expand_ballots(table: list[tuple[int, str]]) -> list[Ballot]:
    """Like make_ballots(), but one unweighted Ballot per voter."""
    return [
        Ballot.from_order(order)
        for count, order in table
        for _ in range(count)
    ]


def letters(n: int) -> list[str]:
    return [chr(ord("A") + i) for i in range(n)]


def matrix_from_cells(names: list[str], cells: list[tuple[str, str, int]]) -> list[list[int]]:
    """Build a matrix from (from, to, value) triples; missing cells are 0."""
    index = {name: i for i, name in enumerate(names)}
    matrix = [[0] * len(names) for _ in names]
    for source, target, value in cells:
        matrix[index[source]][index[target]] = value
    return matrix
