"""Textual tests used by the line classifier.

Each predicate looks at a single trimmed line. None of them tokenize beyond
``str.split`` and none of them keep state.
"""

COPYRIGHT_MARKER = "Copyright"

CLASS_MACROS = ("UCLASS", "UINTERFACE")
STRUCT_MACRO = "USTRUCT"
ENUM_MACRO = "UENUM"
PROPERTY_MACRO = "UPROPERTY"
FUNCTION_MACRO = "UFUNCTION"

ACCESS_SPECIFIERS = ("public:", "protected:", "private:")

TYPE_KEYWORDS = ("class", "struct", "enum")


def _starts_with_keyword(line: str, keyword: str) -> bool:
    # `classify` must not count as `class`
    return line == keyword or line.startswith(keyword + " ")


def is_blank_or_copyright(line: str) -> bool:
    """Blank lines and copyright banners carry no documentation."""
    return not line or COPYRIGHT_MARKER in line


def is_forward_declaration(line: str) -> bool:
    """``class UFoo;``, ``friend class SFoo;`` and the like: no body follows."""
    if not line.endswith(";"):
        return False
    line = line.removeprefix("friend ").lstrip()
    return any(_starts_with_keyword(line, k) for k in TYPE_KEYWORDS)


def is_open_skip(line: str) -> bool:
    """``#if``, ``#ifdef`` and ``#ifndef`` open a conditional region."""
    return line.startswith("#if")


def is_close_skip(line: str) -> bool:
    """``#endif`` closes a conditional region."""
    return line.startswith("#endif")


def is_open_scope(line: str) -> bool:
    """A lone ``{`` opens the scope of the last header."""
    return line == "{"


def is_close_scope(line: str) -> bool:
    """A lone ``};`` closes the innermost scope."""
    return line == "};"


def is_comment_start(line: str) -> bool:
    """A fresh line or block comment."""
    return line.startswith(("//", "/*"))


def is_comment_continuation(line: str) -> bool:
    """A `` * text`` line inside a block comment."""
    return line.startswith("*") and not is_comment_close(line)


def is_comment_close(line: str) -> bool:
    """The ``*/`` line ending a block comment."""
    return line.startswith("*/")


def is_class_macro(line: str) -> bool:
    """``UCLASS(...)`` or ``UINTERFACE(...)``."""
    return line.startswith(CLASS_MACROS)


def is_class(line: str) -> bool:
    """A ``class`` header that is not a forward declaration."""
    return _starts_with_keyword(line, "class") and not line.endswith(";")


def is_struct_macro(line: str) -> bool:
    """``USTRUCT(...)``."""
    return line.startswith(STRUCT_MACRO)


def is_struct(line: str) -> bool:
    """A ``struct`` header that is not a forward declaration."""
    return _starts_with_keyword(line, "struct") and not line.endswith(";")


def is_enum_macro(line: str) -> bool:
    """``UENUM(...)``."""
    return line.startswith(ENUM_MACRO)


def is_enum(line: str) -> bool:
    """An ``enum`` header that is not a forward declaration."""
    return _starts_with_keyword(line, "enum") and not line.endswith(";")


def is_property_macro(line: str) -> bool:
    """``UPROPERTY(...)``."""
    return line.startswith(PROPERTY_MACRO)


def is_property(line: str) -> bool:
    """A statement with no parentheses, e.g. ``float Health = 100.f;``."""
    return "(" not in line and ")" not in line and line.endswith(";")


def is_function_macro(line: str) -> bool:
    """``UFUNCTION(...)``."""
    return line.startswith(FUNCTION_MACRO)


def is_function(line: str) -> bool:
    """A call signature that is either terminated or has an inline body.

    ``bool IsEnabled() const;`` and ``bool IsEnabled() const { return b; }`` both
    count, while ``GENERATED_BODY()`` does not.
    """
    open_idx = line.find("(")
    if open_idx == -1 or ")" not in line[open_idx:]:
        return False
    if line.endswith(";"):
        return True
    return "{" in line[open_idx:] and line.endswith("}")


def is_access_modifier(line: str) -> bool:
    """``public:``, ``protected:`` or ``private:``."""
    return line.startswith(ACCESS_SPECIFIERS)


def is_macro_header(line: str) -> bool:
    """Reflection macro preceding a class, struct or enum header."""
    return is_class_macro(line) or is_struct_macro(line) or is_enum_macro(line)
