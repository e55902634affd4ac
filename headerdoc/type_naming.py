"""Naming conventions used to recognise type names in declaration headers."""

import re

# Unreal prefixes: UObject, AActor, IInterface, FStruct, SWidget, TTemplate, EEnum
DEFAULT_TYPE_PREFIXES: dict[str, list[str]] = {
    "class": ["U", "A", "I", "F", "S", "T"],
    "struct": ["F", "T"],
    "enum": ["E"],
}

QUALIFIED_IDENTIFIER_RE = re.compile(r"^[A-Za-z_]\w*(?:::[A-Za-z_]\w*)*$")


def clean_type_token(token: str) -> str:
    """Drop list punctuation and template arguments: ``TArray<FFoo>,`` -> ``TArray``."""
    token = token.rstrip(",{;")
    return token.split("<", 1)[0]


def matches_naming_convention(token: str, prefixes: list[str] | None) -> bool:
    """Check whether ``token`` is an identifier following one of ``prefixes``.

    Qualified names are judged by their last segment. An empty prefix list accepts
    any identifier.
    """
    if not QUALIFIED_IDENTIFIER_RE.match(token):
        return False
    if not prefixes:
        return True
    short = token.rsplit("::", 1)[-1]
    return any(short.startswith(p) and len(short) > len(p) for p in prefixes)

# A lone `:` separates a type from its base list; `::` qualifies a name.
BASE_DELIMITER_RE = re.compile(r"(?<!:):(?!:)")


def split_on_base_delimiter(word: str) -> list[str]:
    """``UFoo:public`` -> ``["UFoo", "public"]``; ``Engine::UObject`` is kept whole."""
    return BASE_DELIMITER_RE.split(word)
