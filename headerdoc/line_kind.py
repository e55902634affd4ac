"""Semantic kinds assigned to header lines by the classifier."""

from enum import Enum


class LineKind(Enum):
    """What a single trimmed header line means to the scanner."""

    EMPTY = "empty"
    COMMENT = "comment"
    COMMENT_END = "comment_end"  # `*/` closing a block comment run
    OPEN_SKIP = "open_skip"
    CLOSE_SKIP = "close_skip"
    CLASS_HEADER = "class_header"
    STRUCT_HEADER = "struct_header"
    ENUM_HEADER = "enum_header"
    ENUM_MEMBER = "enum_member"
    PROPERTY_MACRO = "property_macro"
    PROPERTY = "property"
    FUNCTION_MACRO = "function_macro"
    FUNCTION = "function"
    ACCESS_MODIFIER = "access_modifier"
    OPEN_SCOPE = "open_scope"
    CLOSE_SCOPE = "close_scope"
