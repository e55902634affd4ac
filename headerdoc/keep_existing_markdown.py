"""Recover the hand-written part of a previously generated page."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"


def strip_front_matter(lines: list[str]) -> list[str]:
    """Remove a leading ``---`` delimited front matter block, if present."""
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return lines
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_DELIMITER:
            return lines[i + 1 :]
    return lines


def keep_existing_markdown(page: Path, marker: str) -> tuple[list[str], bool]:
    """Return the lines of ``page`` to keep and whether the marker was found.

    Everything after the front matter is kept, up to and including the marker line.
    Without a marker the whole body is kept so no hand-written text is lost.
    """
    if not page.exists():
        logger.info("No existing page at %s, it will be created as new", page)
        return [], False
    try:
        text = page.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read existing page %s: %s", page, e)
        return [], False

    kept: list[str] = []
    for line in strip_front_matter(text.splitlines()):
        kept.append(line)
        if line.strip() == marker:
            return kept, True

    while kept and not kept[-1].strip():
        kept.pop()
    return kept, False
