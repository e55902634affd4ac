"""Mutable state threaded through a single header scan."""

from dataclasses import dataclass, field, replace

from headerdoc.access_level import AccessLevel
from headerdoc.line_kind import LineKind
from headerdoc.models import Declaration, FunctionInfo, PropertyInfo


@dataclass(frozen=True)
class ScopeFrame:
    """An open declaration plus the access level to restore when it closes."""

    index: int  # into ScanContext.declarations
    saved_access: AccessLevel


@dataclass
class ScanContext:
    """State owned by one scan; never shared between files."""

    nested_conditionals: bool = False
    previous_kind: LineKind = LineKind.EMPTY
    access: AccessLevel = AccessLevel.PRIVATE
    comments: list[str] = field(default_factory=list)
    property_macro: str = ""
    function_macro: str = ""
    inside_enum: bool = False
    skip_depth: int = 0
    declarations: list[Declaration] = field(default_factory=list)
    scopes: list[ScopeFrame] = field(default_factory=list)

    @property
    def skipping(self) -> bool:
        """True while inside a conditional-compilation region."""
        return self.skip_depth > 0

    def current(self) -> Declaration | None:
        """Return the declaration on top of the scope stack, if any."""
        if not self.scopes:
            return None
        return self.declarations[self.scopes[-1].index]

    def add_property(self, prop: PropertyInfo) -> None:
        """Append ``prop`` to the innermost open declaration."""
        index = self.scopes[-1].index
        decl = self.declarations[index]
        self.declarations[index] = replace(decl, properties=(*decl.properties, prop))

    def add_function(self, fn: FunctionInfo) -> None:
        """Append ``fn`` to the innermost open declaration."""
        index = self.scopes[-1].index
        decl = self.declarations[index]
        self.declarations[index] = replace(decl, functions=(*decl.functions, fn))

    def take_comments(self) -> tuple[str, ...]:
        """Hand over the pending comment run and start a new one."""
        comments = tuple(self.comments)
        self.comments = []
        return comments

    def open_skip(self) -> None:
        """Enter a conditional region; nests only in nested mode."""
        if self.nested_conditionals:
            self.skip_depth += 1
        else:
            self.skip_depth = 1

    def close_skip(self) -> None:
        """Leave a conditional region."""
        if self.nested_conditionals:
            self.skip_depth = max(self.skip_depth - 1, 0)
        else:
            self.skip_depth = 0

    def push(self, declaration: Declaration) -> None:
        """Append ``declaration`` and make it the innermost open scope."""
        self.declarations.append(declaration)
        self.scopes.append(ScopeFrame(len(self.declarations) - 1, self.access))
        self.access = AccessLevel.PRIVATE
        if declaration.is_enum:
            self.inside_enum = True

    def pop(self) -> Declaration | None:
        """Close the innermost scope. Closing with nothing open is a no-op."""
        if not self.scopes:
            self.inside_enum = False
            return None
        frame = self.scopes.pop()
        self.access = frame.saved_access
        self.property_macro = ""
        self.function_macro = ""
        closed = self.declarations[frame.index]
        if closed.is_enum:
            self.inside_enum = False
        return closed
