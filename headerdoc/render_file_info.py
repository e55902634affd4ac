"""Rendering of the per-file summary with links to each declaration."""

from headerdoc.header_slug import header_slug
from headerdoc.models import Declaration


def _render_link_list(title: str, decls: list[Declaration]) -> list[str]:
    if not decls:
        return []
    links = " | ".join(f"[`{d.name}`](#{header_slug(d.name)})" for d in decls)
    return [f"- __{title}:__", f"[ {links} ]"]


def render_file_info(
    file_name: str,
    enums: list[Declaration],
    structs: list[Declaration],
    classes: list[Declaration],
) -> list[str]:
    """Render the file name and the enum, struct and class link lists."""
    parts = [f"__FileName:__ `{file_name}`", ""]
    parts.extend(_render_link_list("Enum List", enums))
    parts.extend(_render_link_list("Struct List", structs))
    parts.extend(_render_link_list("Class List", classes))
    return parts
