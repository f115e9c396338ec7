"""Shared fixtures for engine tests.

Each fixture returns a (candidates, ballots) pair.
"""

import pytest
from tests.conftest import letters, make_ballots


@pytest.fixture
def wikipedia_example():
    """Worked example from the Wikipedia article on the Schulze method.

    45 voters, 5 candidates. Result: E > A > C > B > D.
    """
    return letters(5), make_ballots([
        (5, "ACBED"),
        (5, "ADECB"),
        (8, "BEDAC"),
        (3, "CABED"),
        (7, "CAEBD"),
        (2, "CBADE"),
        (7, "DCEBA"),
        (8, "EBADC"),
    ])


@pytest.fixture
def electorama_example2():
    """Electorama wiki example 2: 30 voters, 4 candidates. D > A > C > B."""
    return letters(4), make_ballots([
        (5, "ACBD"),
        (2, "ACDB"),
        (3, "ADCB"),
        (4, "BACD"),
        (3, "CBDA"),
        (3, "CDBA"),
        (1, "DACB"),
        (5, "DBAC"),
        (4, "DCBA"),
    ])


@pytest.fixture
def electorama_example3():
    """Electorama wiki example 3: 30 voters, 5 candidates. B > A > D > E > C."""
    return letters(5), make_ballots([
        (3, "ABDEC"),
        (5, "ADEBC"),
        (1, "ADECB"),
        (2, "BADEC"),
        (2, "BDECA"),
        (4, "CABDE"),
        (6, "CBADE"),
        (2, "DBECA"),
        (5, "DECAB"),
    ])


@pytest.fixture
def electorama_example4():
    """Electorama wiki example 4: 9 voters, 4 candidates.

    B beats C and D beats A; every other pair is tied on strength, so
    "tied" is not transitive here (A ties B and C, yet B beats C).
    """
    return letters(4), make_ballots([
        (3, "ABCD"),
        (2, "DABC"),
        (2, "DBCA"),
        (2, "CBDA"),
    ])


@pytest.fixture
def clear_winner():
    """Clear winner, 3 voters, 4 candidates.

         V1  V2  V3
    A     1   1   2
    B     2   3   1
    C     3   2   3
    D     4   4   4

    A, B, C, D with no cycles.
    """
    return letters(4), make_ballots([
        (1, "ABCD"),
        (1, "ACBD"),
        (1, "BACD"),
    ])


@pytest.fixture
def perfect_cycle():
    """Perfect cycle, 3 voters: A>B, B>C and C>A all 2-1.

    All path strengths become 2, so everyone is tied.
    """
    return letters(3), make_ballots([
        (1, "ABC"),
        (1, "BCA"),
        (1, "CAB"),
    ])


@pytest.fixture
def indirect_paths():
    """9 voters, cycle A>B(5-4), B>C(6-3), C>A(6-3).

    Indirect paths give B→A, A→C and C→B strength. Result: B > C > A.
    """
    return letters(3), make_ballots([
        (2, "ABC"),
        (1, "BAC"),
        (3, "BCA"),
        (3, "CAB"),
    ])
