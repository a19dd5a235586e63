"""
core/score/vocabulary.py — Pitch-class and channel enumerations.

Both sets are closed: every member is listed here and nothing else is valid,
so no runtime validation is needed once a member exists.

Exports:
    NoteClass   12 chromatic pitch classes, display name + semitone offset
    Channel     8 instrument channels, 1-based channel number
"""

from __future__ import annotations

from enum import Enum

# Input normalisation: flat → sharp
FLAT_TO_SHARP: dict[str, str] = {
    "DB": "C#",
    "EB": "D#",
    "GB": "F#",
    "AB": "G#",
    "BB": "A#",
}


class NoteClass(str, Enum):
    """A chromatic pitch class, valued by its sharp display name."""

    C = "C"
    CS = "C#"
    D = "D"
    DS = "D#"
    E = "E"
    F = "F"
    FS = "F#"
    G = "G"
    GS = "G#"
    A = "A"
    AS = "A#"
    B = "B"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Display name, e.g. 'C#'."""
        return self.value

    @property
    def semitone(self) -> int:
        """Semitone offset from C (0–11)."""
        return _SEMITONES[self]

    @classmethod
    def from_name(cls, name: str) -> NoteClass:
        """Parse a pitch-class name such as 'C#', 'db' or 'A'.

        Sharp spellings map directly; flat spellings are normalised to their
        sharp enharmonic. Matching is case-insensitive.

        Raises:
            ValueError: if the name is not a known pitch class.
        """
        key = name.strip().upper()
        key = FLAT_TO_SHARP.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown pitch class {name!r}") from None


_SEMITONES: dict[NoteClass, int] = {nc: i for i, nc in enumerate(NoteClass)}


class Channel(str, Enum):
    """Instrument channels available to notes.

    Only the instruments the canon arrangement uses are listed; this is not
    the General MIDI program table.
    """

    PIANO = "piano"
    ORGAN = "organ"
    GUITAR = "guitar"
    VIOLIN = "violin"
    FLUTE = "flute"
    TRUMPET = "trumpet"
    HELICOPTER = "helicopter"
    TELEPHONE = "telephone"

    def __str__(self) -> str:
        return self.value

    @property
    def number(self) -> int:
        """1-based channel number (Piano = 1 … Telephone = 8)."""
        return _CHANNEL_NUMBERS[self]


_CHANNEL_NUMBERS: dict[Channel, int] = {ch: i + 1 for i, ch in enumerate(Channel)}
