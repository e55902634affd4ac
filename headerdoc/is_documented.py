"""Predicates deciding which declarations and members end up in the page."""

from collections.abc import Iterable
from typing import TypeVar

from headerdoc.models import Declaration, FunctionInfo, PropertyInfo

Member = TypeVar("Member", PropertyInfo, FunctionInfo)


def documented_members(
    members: Iterable[Member],
    access_levels: Iterable[str],
) -> list[Member]:
    """Members that carry comments and whose access level is rendered."""
    allowed = set(access_levels)
    return [m for m in members if m.comments and m.access.value in allowed]


def is_documented(decl: Declaration, access_levels: Iterable[str]) -> bool:
    """Check if a class or struct has anything worth a section."""
    levels = list(access_levels)
    return bool(
        decl.comments
        or documented_members(decl.properties, levels)
        or documented_members(decl.functions, levels)
    )
