"""Rendering of class and struct sections."""

from headerdoc.clean_comment import clean_comment
from headerdoc.is_documented import documented_members
from headerdoc.md_codeblock import md_codeblock
from headerdoc.models import Declaration, FunctionInfo, PropertyInfo
from headerdoc.render_comment_lines import render_comment_lines


def _render_parents(decl: Declaration) -> list[str]:
    if not decl.parents:
        return []
    names = ", ".join(f"`{p}`" for p in decl.parents)
    return ["__Parent Classes:__", f"[ {names} ]", ""]


def _render_properties(props: list[PropertyInfo]) -> list[str]:
    """Render documented properties as one commented cpp block."""
    if not props:
        return []
    code: list[str] = []
    for prop in props:
        code.extend(f"// {clean_comment(c)}" for c in prop.comments if clean_comment(c))
        if prop.macro:
            code.append(prop.macro)
        code.append(prop.declaration)
        code.append("")
    return ["### Properties", "", *md_codeblock(code), ""]


def _render_function(fn: FunctionInfo) -> list[str]:
    code = [fn.macro, fn.declaration] if fn.macro else [fn.declaration]
    return [
        f"#### `{fn.name}`",
        *render_comment_lines(fn.comments, prefix="> "),
        *md_codeblock(code),
        "",
    ]


def _render_functions(functions: list[FunctionInfo]) -> list[str]:
    if not functions:
        return []
    parts = ["### Functions", ""]
    for fn in functions:
        parts.extend(_render_function(fn))
    return parts


def render_declaration(decl: Declaration, access_levels: list[str]) -> list[str]:
    """Render a class or struct: header, parents, description, members."""
    parts = [f"## `{decl.name}`", ""]
    parts.extend(_render_parents(decl))

    description = render_comment_lines(decl.comments)
    if description:
        parts += [*description, ""]

    parts.extend(_render_properties(documented_members(decl.properties, access_levels)))
    parts.extend(_render_functions(documented_members(decl.functions, access_levels)))
    return parts
