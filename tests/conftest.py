"""
Shared fixtures for the test suite.

Centralizes reusable score material so individual test files
don't need to rebuild the same trees.
"""

from fractions import Fraction

import pytest

from core.score import Channel, Note, NoteClass, Pause, Sequential, parallel, sequence
from core.score.songs import row_row_row_your_boat

# ---------------------------------------------------------------------------
# Score fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def two_quarters() -> Sequential:
    """C4 then D4, both quarter notes."""
    return sequence(Note(NoteClass.C, 4), Note(NoteClass.D, 4))


@pytest.fixture()
def nested_score():
    """A Parallel holding a Sequential, a Pause and a bare Note."""
    return parallel(
        sequence(
            Note(NoteClass.E, 4, length=Fraction(1, 8)),
            Pause(Fraction(1, 8)),
            sequence(Note(NoteClass.G, 4), Note(NoteClass.A, 4, instrument=Channel.FLUTE)),
        ),
        Pause(1),
        Note(NoteClass.C, 5, length=0.5),
    )


@pytest.fixture()
def melody() -> Sequential:
    """The Row Row Row Your Boat melody."""
    return row_row_row_your_boat()
