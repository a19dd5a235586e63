"""
Configuration dataclasses for the score model.

These immutable config objects decouple the tick resolution from the element
functions, making it easy to measure the same score at different resolutions.
"""

from dataclasses import dataclass

# Ticks in a whole note. Every fractional note-length is multiplied by this.
MIDI_TEMPO: int = 3840


@dataclass(frozen=True)
class ScoreConfig:
    """
    Configuration for duration computations.

    Immutable configuration object that can be reused across multiple
    duration() calls. Defines how fractional note-lengths map to ticks.

    Attributes:
        ticks_per_whole_note: Number of ticks spanned by a whole note.
            Defaults to 3840 (960 ticks per quarter note).

    Example:
        >>> config = ScoreConfig(ticks_per_whole_note=1920)
        >>> duration(Note(NoteClass.C, 4), config)
        480.0
    """

    ticks_per_whole_note: int = MIDI_TEMPO

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.ticks_per_whole_note <= 0:
            raise ValueError(
                f"ticks_per_whole_note must be positive, got {self.ticks_per_whole_note}"
            )

    @property
    def ticks_per_quarter_note(self) -> float:
        """Resolution expressed the way MIDI files state it (PPQ)."""
        return self.ticks_per_whole_note / 4


# Pre-defined configurations for common use cases

DEFAULT_CONFIG = ScoreConfig()
"""Default configuration: 3840 ticks per whole note."""

PPQ_480_CONFIG = ScoreConfig(ticks_per_whole_note=1920)
"""480 ticks per quarter note, the resolution most sequencers export."""
