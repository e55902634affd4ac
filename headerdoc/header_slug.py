"""Anchors for the declaration sections of a page."""

import re

WORD_RE = re.compile(r"[a-z0-9_]+")


def header_slug(name: str) -> str:
    """Anchor of the ``## `Name` `` section rendered for ``name``."""
    # Engine::UObject -> engine-uobject
    words = WORD_RE.findall(name.strip("` ").lower())
    return "-".join(words) or "section"
