"""
core/score/canon.py — Round/canon assembly from a single melody.

A canon plays the same melody in several voices, each entering later than the
previous one. The leader is the melody itself; every follower is an
independent clone retargeted to its own channel and preceded by a pause.

    leader:      melody
    follower 1:  Pause(1 × offset) → clone(melody) on channel 1
    follower 2:  Pause(2 × offset) → clone(melody) on channel 2
    ...

All voices are combined in a Parallel, so the canon lasts as long as its
latest-entering voice.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from fractions import Fraction

from core.score.elements import Element, Parallel, Pause, clone, sequence, set_channel
from core.score.vocabulary import Channel

logger = logging.getLogger(__name__)


def follower_voice(
    melody: Element,
    channel: Channel,
    delay: float | Fraction,
) -> Element:
    """Return a delayed, retargeted copy of ``melody``.

    The original melody is not modified.

    Raises:
        ValueError: if ``delay`` is negative.
    """
    voice = clone(melody)
    set_channel(voice, channel)
    return sequence(Pause(delay), voice)


def build_canon(
    melody: Element,
    follower_channels: Sequence[Channel],
    *,
    offset: float | Fraction = 1,
) -> Parallel:
    """Combine ``melody`` with one delayed follower per channel.

    Args:
        melody:            Leader voice, used as-is (not cloned).
        follower_channels: Channel for each follower, in entry order.
        offset:            Entry distance between consecutive voices, as a
                           fractional note-length (1 = one whole note).

    Returns:
        Parallel of the leader followed by the followers.

    Raises:
        ValueError: if ``offset`` is negative.
    """
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")

    voices: list[Element] = [melody]
    for index, channel in enumerate(follower_channels, start=1):
        delay = index * offset
        logger.debug("canon voice %d: %s entering after %s", index, channel, delay)
        voices.append(follower_voice(melody, channel, delay))

    return Parallel(voices)
