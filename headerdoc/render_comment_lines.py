"""Render a comment run as Markdown text with hard line breaks."""

from collections.abc import Iterable

from headerdoc.clean_comment import clean_comment


def render_comment_lines(comments: Iterable[str], prefix: str = "") -> list[str]:
    """Clean each comment line and join them with Markdown ``\\`` breaks.

    Delimiter-only lines such as ``/**`` are dropped.
    """
    texts = [t for t in (clean_comment(c) for c in comments) if t]
    out = []
    for i, text in enumerate(texts):
        suffix = "" if i == len(texts) - 1 else " \\"
        out.append(f"{prefix}{text}{suffix}")
    return out
