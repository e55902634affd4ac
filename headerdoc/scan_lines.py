"""Single-pass assembly of a header's declarations from its lines.

The scanner never backtracks. Each line is classified using only the previous
line's kind, then applied to an explicit ScanContext that owns the scope stack,
the pending comment run and the pending reflection macros.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from headerdoc.access_level import AccessLevel, parse_access_level
from headerdoc.classify_line import classify_line
from headerdoc.extract_enum_name import extract_enum_name
from headerdoc.extract_function_name import extract_function_name
from headerdoc.extract_type_info import extract_type_info
from headerdoc.line_kind import LineKind
from headerdoc.line_predicates import is_macro_header
from headerdoc.load_config import load_config
from headerdoc.models import (
    Declaration,
    DeclarationKind,
    FileInfo,
    FunctionInfo,
    PropertyInfo,
)
from headerdoc.scan_context import ScanContext

HEADER_KINDS = {
    LineKind.CLASS_HEADER: DeclarationKind.CLASS,
    LineKind.STRUCT_HEADER: DeclarationKind.STRUCT,
    LineKind.ENUM_HEADER: DeclarationKind.ENUM,
}


def scan_lines(
    lines: Iterable[str],
    path: str | Path,
    config: dict[str, Any] | None = None,
) -> FileInfo:
    """Build the FileInfo for the header at ``path`` from its raw lines."""
    config = config or load_config()
    parser_cfg = config.get("parser", {})
    ignore_prefixes = tuple(parser_cfg.get("ignore_prefixes", []))
    type_prefixes: dict[str, list[str]] = parser_cfg.get("type_prefixes", {})

    ctx = ScanContext(
        nested_conditionals=bool(parser_cfg.get("nested_conditionals", False))
    )
    for raw in lines:
        line = raw.strip()
        if ignore_prefixes and line.startswith(ignore_prefixes):
            continue

        kind = classify_line(line, ctx.previous_kind, inside_enum=ctx.inside_enum)

        if ctx.skipping:
            if kind is LineKind.OPEN_SKIP:
                ctx.open_skip()
            elif kind is LineKind.CLOSE_SKIP:
                ctx.close_skip()
                ctx.previous_kind = kind
            continue

        _apply_line(ctx, kind, line, type_prefixes)
        ctx.previous_kind = kind

    p = Path(path)
    return FileInfo(path=p, name=p.name, declarations=tuple(ctx.declarations))


def _apply_line(
    ctx: ScanContext,
    kind: LineKind,
    line: str,
    type_prefixes: dict[str, list[str]],
) -> None:
    """Apply one classified line to the scan state."""
    if kind is LineKind.EMPTY:
        ctx.comments = []
    elif kind is LineKind.COMMENT:
        ctx.comments.append(line)
    elif kind is LineKind.OPEN_SKIP:
        # Comments right above `#if` describe the skipped region.
        ctx.comments = []
        ctx.open_skip()
    elif kind in HEADER_KINDS:
        _open_declaration(ctx, HEADER_KINDS[kind], line, type_prefixes)
    elif kind is LineKind.ENUM_MEMBER:
        _record_enumerator(ctx, line)
    elif kind is LineKind.PROPERTY_MACRO:
        ctx.property_macro = line
    elif kind is LineKind.FUNCTION_MACRO:
        ctx.function_macro = line
    elif kind is LineKind.PROPERTY:
        _record_property(ctx, line)
    elif kind is LineKind.FUNCTION:
        _record_function(ctx, line)
    elif kind is LineKind.ACCESS_MODIFIER:
        level = parse_access_level(line)
        if level is not None:
            ctx.access = level
    elif kind is LineKind.CLOSE_SCOPE:
        ctx.pop()
    # COMMENT_END, OPEN_SCOPE and a stray CLOSE_SKIP leave the state untouched.


def _open_declaration(
    ctx: ScanContext,
    kind: DeclarationKind,
    line: str,
    type_prefixes: dict[str, list[str]],
) -> None:
    if is_macro_header(line):
        # UCLASS(...) and co. only announce the header on the next line. For
        # UENUM(...) the enum flag is set once that header is pushed.
        return

    if kind is DeclarationKind.ENUM:
        declaration = Declaration(
            kind=kind,
            name=extract_enum_name(line, type_prefixes.get("enum")),
            comments=ctx.take_comments(),
        )
    else:
        name, parents = extract_type_info(line, type_prefixes.get(kind.value))
        declaration = Declaration(
            kind=kind,
            name=name,
            parents=tuple(parents),
            comments=ctx.take_comments(),
        )
    ctx.push(declaration)


def _record_property(ctx: ScanContext, line: str) -> None:
    owner = ctx.current()
    macro, ctx.property_macro = ctx.property_macro, ""
    comments = ctx.take_comments()
    if owner is None:
        return
    ctx.add_property(
        PropertyInfo(
            macro=macro,
            declaration=line,
            comments=comments,
            access=ctx.access,
        )
    )


def _record_function(ctx: ScanContext, line: str) -> None:
    owner = ctx.current()
    macro, ctx.function_macro = ctx.function_macro, ""
    comments = ctx.take_comments()
    if owner is None:
        return
    ctx.add_function(
        FunctionInfo(
            name=extract_function_name(line),
            macro=macro,
            declaration=line,
            comments=comments,
            access=ctx.access,
        )
    )


def _record_enumerator(ctx: ScanContext, line: str) -> None:
    owner = ctx.current()
    ctx.property_macro = ""
    comments = ctx.take_comments()
    if owner is None:
        return
    ctx.add_property(
        PropertyInfo(
            macro="",
            declaration=line,
            comments=comments,
            access=AccessLevel.PUBLIC,
        )
    )
