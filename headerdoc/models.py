"""Data models for the declarations extracted from a header file."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from headerdoc.access_level import AccessLevel


class DeclarationKind(Enum):
    """Which C++ construct opened a declaration scope."""

    CLASS = "class"
    STRUCT = "struct"
    ENUM = "enum"


@dataclass(frozen=True)
class PropertyInfo:
    """A data member, or an enumerator when owned by an enum."""

    macro: str
    declaration: str
    comments: tuple[str, ...]
    access: AccessLevel


@dataclass(frozen=True)
class FunctionInfo:
    """A member function declaration."""

    name: str
    macro: str
    declaration: str
    comments: tuple[str, ...]
    access: AccessLevel


@dataclass(frozen=True)
class Declaration:
    """A class, struct or enum together with its members in source order.

    Name and parents are fixed when the header line is read. Members are added
    by replacing the declaration while it is on top of the scope stack.
    """

    kind: DeclarationKind
    name: str
    parents: tuple[str, ...] = ()
    comments: tuple[str, ...] = ()
    properties: tuple[PropertyInfo, ...] = ()
    functions: tuple[FunctionInfo, ...] = ()

    @property
    def is_enum(self) -> bool:
        """True for enum declarations, whose properties are enumerators."""
        return self.kind is DeclarationKind.ENUM


@dataclass(frozen=True)
class FileInfo:
    """Everything extracted from one header file."""

    path: Path
    name: str
    declarations: tuple[Declaration, ...] = ()
