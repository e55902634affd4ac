"""Map one trimmed header line to the kind of thing it declares."""

from headerdoc import line_predicates as lp
from headerdoc.line_kind import LineKind


def classify_line(
    line: str,
    previous_kind: LineKind = LineKind.EMPTY,
    *,
    inside_enum: bool = False,
) -> LineKind:
    """Classify ``line`` using the previous line's kind as the only lookback.

    Rules are evaluated in priority order and the first match wins. Reflection
    macros are tested before the bare form of each declaration.
    """
    if lp.is_blank_or_copyright(line) or lp.is_forward_declaration(line):
        return LineKind.EMPTY

    if lp.is_close_skip(line):
        return LineKind.CLOSE_SKIP
    if lp.is_open_skip(line):
        return LineKind.OPEN_SKIP

    if lp.is_open_scope(line):
        return LineKind.OPEN_SCOPE
    if lp.is_close_scope(line):
        return LineKind.CLOSE_SCOPE

    if previous_kind is LineKind.COMMENT:
        if lp.is_comment_close(line):
            return LineKind.COMMENT_END
        if lp.is_comment_continuation(line):
            return LineKind.COMMENT
    if lp.is_comment_start(line):
        return LineKind.COMMENT

    if lp.is_class_macro(line) or lp.is_class(line):
        return LineKind.CLASS_HEADER
    if lp.is_struct_macro(line) or lp.is_struct(line):
        return LineKind.STRUCT_HEADER
    if lp.is_enum_macro(line) or lp.is_enum(line):
        return LineKind.ENUM_HEADER

    if inside_enum:
        return LineKind.ENUM_MEMBER

    if lp.is_property_macro(line):
        return LineKind.PROPERTY_MACRO
    if previous_kind is LineKind.PROPERTY_MACRO or lp.is_property(line):
        return LineKind.PROPERTY

    if lp.is_function_macro(line):
        return LineKind.FUNCTION_MACRO
    if previous_kind is LineKind.FUNCTION_MACRO or lp.is_function(line):
        return LineKind.FUNCTION

    if lp.is_access_modifier(line):
        return LineKind.ACCESS_MODIFIER

    return LineKind.EMPTY
