"""
row_your_boat.py — Print the length of "Row, Row, Row Your Boat" and its canon.

Builds the melody, arranges it as a three-voice round (piano, organ entering
one whole note later, violin two whole notes later) and prints both lengths in
whole-note "bars".

Usage:
    python scripts/row_your_boat.py

    # Show the full score tree on stderr:
    LOG_LEVEL=DEBUG python scripts/row_your_boat.py

Output:
    Length of music: 4 bars
    Length of canon: 6 bars

Environment variables read:
    LOG_LEVEL — logging level for stderr diagnostics (default: WARNING)
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import DEFAULT_CONFIG  # noqa: E402
from core.score.rendering import render  # noqa: E402
from core.score.songs import row_row_row_canon, row_row_row_your_boat, to_bars  # noqa: E402

logger = logging.getLogger(__name__)


def _init_logging() -> None:
    name = os.getenv("LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for names it does not know
    known = isinstance(level, int)
    logging.basicConfig(
        level=level if known else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    if not known:
        logger.warning("Unknown LOG_LEVEL %r, falling back to WARNING", name)


def main() -> int:
    _init_logging()

    melody = row_row_row_your_boat()
    logger.info("Melody built: %d elements", len(melody))
    print(f"Length of music: {to_bars(melody.duration(), DEFAULT_CONFIG):g} bars")

    canon = row_row_row_canon(melody)
    logger.debug("Full canon:\n%s", render(canon))
    print(f"Length of canon: {to_bars(canon.duration(), DEFAULT_CONFIG):g} bars")
    return 0


if __name__ == "__main__":
    sys.exit(main())
