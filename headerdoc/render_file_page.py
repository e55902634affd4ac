"""Render a whole MDX reference page for one header."""

from typing import Any

from headerdoc.is_documented import is_documented
from headerdoc.models import DeclarationKind, FileInfo
from headerdoc.render_declaration import render_declaration
from headerdoc.render_enum import render_enum
from headerdoc.render_file_info import render_file_info


def render_file_page(
    info: FileInfo,
    config: dict[str, Any],
    kept_lines: list[str] | None = None,
    *,
    has_marker: bool = False,
) -> str:
    """Render ``info`` below the kept hand-written prefix of the previous page.

    Enums are always listed; structs and classes only when something in them is
    documented. Declarations keep source order within each group.
    """
    output_cfg = config.get("output", {})
    marker = output_cfg.get("marker", "## File Info")
    access_levels = output_cfg.get("access_levels", ["public", "protected", "private"])

    parts = [
        "---",
        f"title: {info.name}",
        f"description: Reference page for {info.name}",
        "---",
    ]
    parts.extend(kept_lines or [])
    if not has_marker:
        parts += ["", marker]
    parts.append("")

    enums = [d for d in info.declarations if d.kind is DeclarationKind.ENUM]
    structs = [
        d
        for d in info.declarations
        if d.kind is DeclarationKind.STRUCT and is_documented(d, access_levels)
    ]
    classes = [
        d
        for d in info.declarations
        if d.kind is DeclarationKind.CLASS and is_documented(d, access_levels)
    ]

    parts.extend(render_file_info(info.name, enums, structs, classes))
    sections = [render_enum(e) for e in enums]
    sections += [render_declaration(d, access_levels) for d in structs + classes]
    for section in sections:
        while section and not section[-1]:
            section.pop()
        parts += ["", *section]

    return "\n".join(parts).rstrip() + "\n"
