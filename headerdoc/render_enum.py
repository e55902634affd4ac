"""Rendering of enum sections."""

from headerdoc.clean_comment import clean_comment
from headerdoc.md_codeblock import md_codeblock
from headerdoc.models import Declaration
from headerdoc.render_comment_lines import render_comment_lines


def render_enum(decl: Declaration) -> list[str]:
    """Render an enum with its description and every enumerator in order."""
    parts = [f"## `{decl.name}`", ""]

    description = render_comment_lines(decl.comments)
    if description:
        parts += [*description, ""]

    if decl.properties:
        code: list[str] = []
        for value in decl.properties:
            code.extend(
                f"// {clean_comment(c)}" for c in value.comments if clean_comment(c)
            )
            code.append(value.declaration)
        parts += ["### Values", "", *md_codeblock(code), ""]
    return parts
