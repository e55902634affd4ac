"""Extract the name and parents of a class or struct header line."""

from headerdoc.type_naming import (
    DEFAULT_TYPE_PREFIXES,
    clean_type_token,
    matches_naming_convention,
    split_on_base_delimiter,
)

SKIPPED_TOKENS = {
    "class",
    "struct",
    "public",
    "protected",
    "private",
    "virtual",
    "final",
}


def extract_type_info(
    line: str,
    prefixes: list[str] | None = None,
) -> tuple[str, list[str]]:
    """Split a header such as ``class MOD_API UFoo : public UBar, public IBaz``.

    Returns ``(name, parents)``. Tokens following the ``:`` delimiter are parents,
    kept in source order (duplicates included). Export tokens (``*_API``) and
    access keywords are ignored. The name is empty when no token matches the naming
    convention.
    """
    if prefixes is None:
        prefixes = DEFAULT_TYPE_PREFIXES["class"] + DEFAULT_TYPE_PREFIXES["struct"]

    name = ""
    parents: list[str] = []
    in_parents = False
    for word in line.split():
        for i, part in enumerate(split_on_base_delimiter(word)):
            if i:
                in_parents = True
            if not part or part in SKIPPED_TOKENS or part.endswith("_API"):
                continue

            token = clean_type_token(part)
            if token and matches_naming_convention(token, prefixes):
                if in_parents:
                    parents.append(token)
                else:
                    name = token
    return name, parents
