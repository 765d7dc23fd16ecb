"""Runtime scope chain for Egg.

A Scope stores the bindings created in one call frame (or at the program
root) and links to the scope it was created in via `outer`. Reads and `set`
walk outward through the chain; `define` only ever touches the innermost
frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from egg import EggValue
from egg.errors import EggReadOnlyError, EggUnboundSymbol


class Scope:
    """Hierarchical mapping from binding names to Egg values."""

    __slots__ = ("vars", "outer", "frozen")

    def __init__(self, outer: Optional[Scope] = None):
        self.vars: dict[str, EggValue] = {}
        self.outer: Scope | None = outer
        self.frozen: bool = False

    def freeze(self) -> Scope:
        """Make this frame read-only. Returns self so it can be chained."""
        self.frozen = True
        return self

    def define(self, name: str, value: EggValue) -> None:
        """Create or overwrite `name` in this frame only."""
        if self.frozen:
            raise EggReadOnlyError(f"Cannot define {name} in a read-only scope")
        self.vars[name] = value

    def find(self, name: str) -> Optional[Scope]:
        """Find the nearest scope in the chain that owns `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.outer
        return None

    def set(self, name: str, value: EggValue) -> None:
        """Update the binding for `name` in the nearest scope that owns it.

        Raises EggUnboundSymbol if no scope in the chain binds `name`.
        """
        scope = self.find(name)
        if scope is None:
            raise EggUnboundSymbol(f"Binding not found: {name}")
        if scope.frozen:
            raise EggReadOnlyError(f"Cannot set {name} in a read-only scope")
        scope.vars[name] = value

    def lookup(self, name: str) -> EggValue:
        """Look up the value bound to `name`, own bindings first then outward.

        Raises EggUnboundSymbol if not found.
        """
        scope = self.find(name)
        if scope is None:
            raise EggUnboundSymbol(f"Undefined binding: {name}")
        return scope.vars[name]

    def update(self, mapping: dict[str, EggValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; frozen frames are elided."""
        chain = []
        scope: Optional[Scope] = self
        while scope is not None:
            if scope.frozen:
                chain.append(f"<read-only: {len(scope.vars)} bindings>")
            else:
                with StringIO() as buffer:
                    scope._write_vars(buffer)
                    chain.append(buffer.getvalue())
            scope = scope.outer
        return "<Scope chain: " + " -> ".join(chain) + ">"
