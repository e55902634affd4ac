"""Extract the name of an enum header line."""

from headerdoc.type_naming import (
    DEFAULT_TYPE_PREFIXES,
    clean_type_token,
    matches_naming_convention,
    split_on_base_delimiter,
)


def extract_enum_name(line: str, prefixes: list[str] | None = None) -> str:
    """Return the first conventional name in ``enum class EColor : uint8``.

    Only tokens before the underlying-type delimiter are considered.
    """
    if prefixes is None:
        prefixes = DEFAULT_TYPE_PREFIXES["enum"]
    for word in line.split():
        for i, piece in enumerate(split_on_base_delimiter(word)):
            if i:
                return ""
            if piece in {"enum", "class", "struct"}:
                continue
            token = clean_type_token(piece)
            if token and matches_naming_convention(token, prefixes):
                return token
    return ""
