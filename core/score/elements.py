"""
core/score/elements.py — The score tree: notes, pauses and their groupings.

A score is a tree built from exactly four element kinds:

    Note        leaf — pitch class, octave, instrument, fractional length
    Pause       leaf — fractional length only
    Sequential  composite — children played one after another
    Parallel    composite — children played at the same time

Lengths are fractions of a whole note (0.25 = quarter, 1/12 = triplet eighth).
Durations are reported in ticks: length × config.ticks_per_whole_note.

Design:
    - The element set is closed, so the three tree operations (duration,
      set_channel, clone) are plain recursive functions matching on the four
      variants. The methods on each class delegate to them.
    - Leaves are mutable only through set_channel; everything else is fixed
      once the tree is assembled.
    - Composites own their children. Use clone() before reusing material in a
      second place if the copies will be retargeted independently.
    - Lengths may be float or fractions.Fraction; Fraction keeps tick sums
      exact, which matters for triplets.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from fractions import Fraction

from core.config import DEFAULT_CONFIG, ScoreConfig
from core.score.vocabulary import Channel, NoteClass

# Scientific pitch notation: letter, optional accidental, octave
_PITCH_RE = re.compile(r"^\s*([A-Ga-g][#bB]?)(\d+)\s*$")

_QUARTER = 0.25

# ---------------------------------------------------------------------------
# MidiNote
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MidiNote:
    """A note resolved to a pitch number and a tick duration."""

    pitch: int  # 12 * octave + semitone
    duration: float  # ticks


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


@dataclass
class Note:
    """A pitched note on an instrument channel.

    Attributes:
        name:       Pitch class, e.g. NoteClass.C
        octave:     Non-negative octave number
        length:     Fraction of a whole note (default 0.25, a quarter note)
        instrument: Channel the note plays on (default Piano)

    Examples:
        Note(NoteClass.C, 4)
        Note(NoteClass.G, 4, length=Fraction(1, 12))
        Note.parse("F#3", length=0.5, instrument=Channel.FLUTE)
    """

    name: NoteClass
    octave: int
    length: float | Fraction = _QUARTER
    instrument: Channel = Channel.PIANO

    def __post_init__(self) -> None:
        if self.octave < 0:
            raise ValueError(f"Note.octave must be >= 0, got {self.octave}")
        if not self.length >= 0:
            raise ValueError(f"Note.length must be >= 0, got {self.length}")

    @classmethod
    def parse(
        cls,
        text: str,
        *,
        length: float | Fraction = _QUARTER,
        instrument: Channel = Channel.PIANO,
    ) -> Note:
        """Build a note from scientific pitch notation such as 'C4' or 'Bb3'.

        Raises:
            ValueError: if the text is not a pitch class followed by an octave.
        """
        match = _PITCH_RE.match(text)
        if match is None:
            raise ValueError(f"Cannot parse note {text!r}, expected e.g. 'C#4'")
        name = NoteClass.from_name(match.group(1))
        return cls(name, int(match.group(2)), length=length, instrument=instrument)

    @property
    def pitch(self) -> int:
        """Pitch number: 12 per octave plus the semitone offset."""
        return 12 * self.octave + self.name.semitone

    def to_midi(self, config: ScoreConfig = DEFAULT_CONFIG) -> MidiNote:
        """Resolve this note to a MidiNote (pitch number + ticks)."""
        return MidiNote(pitch=self.pitch, duration=duration(self, config))

    def duration(self, config: ScoreConfig = DEFAULT_CONFIG) -> float:
        return duration(self, config)

    def set_channel(self, channel: Channel) -> None:
        set_channel(self, channel)

    def clone(self) -> Note:
        return clone(self)


@dataclass
class Pause:
    """A rest. Carries a length and nothing else; channels do not apply."""

    length: float | Fraction

    def __post_init__(self) -> None:
        if not self.length >= 0:
            raise ValueError(f"Pause.length must be >= 0, got {self.length}")

    def duration(self, config: ScoreConfig = DEFAULT_CONFIG) -> float:
        return duration(self, config)

    def set_channel(self, channel: Channel) -> None:
        set_channel(self, channel)

    def clone(self) -> Pause:
        return clone(self)


# ---------------------------------------------------------------------------
# Composites
# ---------------------------------------------------------------------------


@dataclass
class Sequential:
    """Children played one after another; duration is their sum."""

    elements: list[Element] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.elements)

    def duration(self, config: ScoreConfig = DEFAULT_CONFIG) -> float:
        return duration(self, config)

    def set_channel(self, channel: Channel) -> None:
        set_channel(self, channel)

    def clone(self) -> Sequential:
        return clone(self)


@dataclass
class Parallel:
    """Children played simultaneously; duration is the longest child.

    An empty Parallel has duration -inf (the identity of max). This is kept
    as-is rather than clamped to zero.
    """

    elements: list[Element] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.elements)

    def duration(self, config: ScoreConfig = DEFAULT_CONFIG) -> float:
        return duration(self, config)

    def set_channel(self, channel: Channel) -> None:
        set_channel(self, channel)

    def clone(self) -> Parallel:
        return clone(self)


Element = Note | Pause | Sequential | Parallel


def sequence(*elements: Element) -> Sequential:
    """Build a Sequential from positional elements, e.g. sequence(a, b, c)."""
    return Sequential(list(elements))


def parallel(*elements: Element) -> Parallel:
    """Build a Parallel from positional elements, e.g. parallel(a, b, c)."""
    return Parallel(list(elements))


# ---------------------------------------------------------------------------
# Tree operations
# ---------------------------------------------------------------------------


def _not_an_element(obj: object) -> TypeError:
    return TypeError(f"Expected a score element, got {type(obj).__name__}")


def duration(element: Element, config: ScoreConfig = DEFAULT_CONFIG) -> float:
    """Return the element's length in ticks.

    Leaves:     length × config.ticks_per_whole_note
    Sequential: sum of children (0.0 when empty)
    Parallel:   max of children (-inf when empty)

    Raises:
        TypeError: if ``element`` is not one of the four element kinds.
    """
    match element:
        case Note(length=length) | Pause(length=length):
            return float(length * config.ticks_per_whole_note)
        case Sequential(elements=children):
            return sum((duration(child, config) for child in children), 0.0)
        case Parallel(elements=children):
            return max((duration(child, config) for child in children), default=float("-inf"))
    raise _not_an_element(element)


def set_channel(element: Element, channel: Channel) -> None:
    """Retarget every note under ``element`` to ``channel``, in place.

    Pauses are left untouched. Applying the same channel twice is a no-op.

    Raises:
        TypeError: if ``element`` is not one of the four element kinds.
    """
    match element:
        case Note():
            element.instrument = channel
        case Pause():
            pass
        case Sequential(elements=children) | Parallel(elements=children):
            for child in children:
                set_channel(child, channel)
        case _:
            raise _not_an_element(element)


def clone(element: Element) -> Element:
    """Return a deep copy of ``element`` sharing no nodes with the original.

    Raises:
        TypeError: if ``element`` is not one of the four element kinds.
    """
    match element:
        case Note() | Pause():
            return dataclasses.replace(element)
        case Sequential(elements=children):
            return Sequential([clone(child) for child in children])
        case Parallel(elements=children):
            return Parallel([clone(child) for child in children])
    raise _not_an_element(element)


def iter_notes(element: Element) -> Iterator[Note]:
    """Yield every Note under ``element`` in depth-first order."""
    match element:
        case Note():
            yield element
        case Sequential(elements=children) | Parallel(elements=children):
            for child in children:
                yield from iter_notes(child)
