"""
core/score/rendering.py — Indented text view of a score tree.

Meant for debugging and logging, e.g. ``logger.debug("%s", render(canon))``:

    Parallel [23040 ticks]
      Sequential [15360 ticks]
        Note C4 piano 1/4 [960 ticks]
        ...
"""

from __future__ import annotations

from fractions import Fraction

from core.config import DEFAULT_CONFIG, ScoreConfig
from core.score.elements import Element, Note, Parallel, Pause, Sequential, duration

_INDENT = "  "
_MAX_DENOMINATOR = 3840


def format_length(length: float | Fraction) -> str:
    """Render a fractional note-length as 'n/d' (or a whole number)."""
    return str(Fraction(length).limit_denominator(_MAX_DENOMINATOR))


def _label(element: Element) -> str:
    match element:
        case Note():
            return (
                f"Note {element.name}{element.octave} {element.instrument} "
                f"{format_length(element.length)}"
            )
        case Pause():
            return f"Pause {format_length(element.length)}"
        case Sequential():
            return "Sequential"
        case Parallel():
            return "Parallel"
    raise TypeError(f"Expected a score element, got {type(element).__name__}")


def _walk(element: Element, depth: int, config: ScoreConfig, out: list[str]) -> None:
    ticks = duration(element, config)
    out.append(f"{_INDENT * depth}{_label(element)} [{ticks:g} ticks]")
    if isinstance(element, (Sequential, Parallel)):
        for child in element.elements:
            _walk(child, depth + 1, config, out)


def render(element: Element, config: ScoreConfig = DEFAULT_CONFIG) -> str:
    """Return a multi-line description of ``element`` and all its children."""
    lines: list[str] = []
    _walk(element, 0, config, lines)
    return "\n".join(lines)
