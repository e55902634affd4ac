"""Access levels of class and struct members."""

from enum import Enum


class AccessLevel(Enum):
    """C++ member access specifier."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


def parse_access_level(line: str) -> AccessLevel | None:
    """Return the access level named by a ``public:``-style line, if any."""
    token = line.split(":", 1)[0].strip()
    try:
        return AccessLevel(token)
    except ValueError:
        return None
