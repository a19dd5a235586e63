"""
core/score/songs.py — "Row, Row, Row Your Boat" and its three-voice canon.

The melody is four whole notes long:

    C4 C4 C4. D4 | E4 E4. D4 E4. F4 | G4 (half)
    C5×3 G4×3 E4×3 C4×3 (eighth-note triplets)
    G4. F4 E4. D4 | C4 (half)

Lengths use Fraction so every tick count is an exact integer.
"""

from __future__ import annotations

from collections.abc import Callable
from fractions import Fraction

from core.config import DEFAULT_CONFIG, ScoreConfig
from core.score.canon import build_canon
from core.score.elements import Note, Parallel, Sequential, sequence
from core.score.vocabulary import Channel, NoteClass

NoteHelper = Callable[[float | Fraction], Note]

QUARTER = Fraction(1, 4)
HALF = Fraction(1, 2)
DOTTED_EIGHTH = Fraction(3, 16)
SIXTEENTH = Fraction(1, 16)
TRIPLET_EIGHTH = Fraction(1, 12)

# Voices after the leader, in entry order
CANON_FOLLOWERS: tuple[Channel, ...] = (Channel.ORGAN, Channel.VIOLIN)
CANON_OFFSET = Fraction(1)


def note_helper(name: NoteClass, octave: int) -> NoteHelper:
    """Return a constructor for ``name``/``octave`` notes taking only a length."""

    def make(length: float | Fraction) -> Note:
        return Note(name, octave, length=length)

    return make


c4 = note_helper(NoteClass.C, 4)
d4 = note_helper(NoteClass.D, 4)
e4 = note_helper(NoteClass.E, 4)
f4 = note_helper(NoteClass.F, 4)
g4 = note_helper(NoteClass.G, 4)
c5 = note_helper(NoteClass.C, 5)


def triplet(make: NoteHelper) -> Sequential:
    """Three eighth-note triplets of the same pitch."""
    return sequence(make(TRIPLET_EIGHTH), make(TRIPLET_EIGHTH), make(TRIPLET_EIGHTH))


def row_row_row_your_boat() -> Sequential:
    """Build the 19-element melody on the default (Piano) channel."""
    return sequence(
        c4(QUARTER), c4(QUARTER), c4(DOTTED_EIGHTH), d4(SIXTEENTH), e4(QUARTER),
        e4(DOTTED_EIGHTH), d4(SIXTEENTH), e4(DOTTED_EIGHTH), f4(SIXTEENTH), g4(HALF),
        triplet(c5), triplet(g4), triplet(e4), triplet(c4),
        g4(DOTTED_EIGHTH), f4(SIXTEENTH), e4(DOTTED_EIGHTH), d4(SIXTEENTH), c4(HALF),
    )  # fmt: skip


def row_row_row_canon(melody: Sequential | None = None) -> Parallel:
    """Three-voice round: piano leads, organ and violin follow a whole note apart.

    A fresh melody is built when none is given. The leader is used as-is; the
    followers are clones, so the leader keeps its Piano channel.
    """
    if melody is None:
        melody = row_row_row_your_boat()
    return build_canon(melody, CANON_FOLLOWERS, offset=CANON_OFFSET)


def to_bars(ticks: float, config: ScoreConfig = DEFAULT_CONFIG) -> float:
    """Convert ticks to whole-note "bars" (ticks / ticks_per_whole_note)."""
    return ticks / config.ticks_per_whole_note
