"""
core/score/ — Composite score model.

Exports:
    Vocabulary: NoteClass, Channel
    Elements:   Note, Pause, Sequential, Parallel, Element, MidiNote,
                sequence, parallel
    Operations: duration, set_channel, clone, iter_notes
    Canon:      build_canon, follower_voice
    Render:     render, format_length
"""

from core.score.canon import build_canon, follower_voice
from core.score.elements import (
    Element,
    MidiNote,
    Note,
    Parallel,
    Pause,
    Sequential,
    clone,
    duration,
    iter_notes,
    parallel,
    sequence,
    set_channel,
)
from core.score.rendering import format_length, render
from core.score.vocabulary import Channel, NoteClass

__all__ = [
    # Vocabulary
    "NoteClass",
    "Channel",
    # Elements
    "Note",
    "Pause",
    "Sequential",
    "Parallel",
    "Element",
    "MidiNote",
    "sequence",
    "parallel",
    # Operations
    "duration",
    "set_channel",
    "clone",
    "iter_notes",
    # Canon
    "build_canon",
    "follower_voice",
    # Render
    "render",
    "format_length",
]
