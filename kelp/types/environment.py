"""Lexical scopes for Kelp.

A Scope stores bindings of names to evaluated values and supports nested
scopes via a `parent` link. Each scope owns its own table; the parent is fixed
at construction and is only ever read through, so a chain can never loop back
into one of its descendants.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from kelp.types.values import Value


class Scope:
    """Hierarchical mapping from names to Kelp values."""

    __slots__ = ("bindings", "parent")

    def __init__(self, parent: Optional[Scope] = None):
        self.bindings: dict[str, Value] = {}
        self.parent: Scope | None = parent

    def get(self, name: str) -> Optional[Value]:
        """Look up `name`, innermost scope first.

        Returns None when the name is unbound anywhere in the chain; callers
        treat absence as a normal outcome.
        """
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.bindings:
                return scope.bindings[name]
            scope = scope.parent
        return None

    def set(self, name: str, value: Value) -> None:
        """Bind `name` in this scope only. Rebinding is allowed."""
        self.bindings[name] = value

    def child(self) -> Scope:
        return Scope(parent=self)

    def is_bound(self, name: str) -> bool:
        return self.get(name) is not None

    def __contains__(self, name: str) -> bool:
        return self.is_bound(name)

    def depth(self) -> int:
        n = 0
        scope = self.parent
        while scope is not None:
            n += 1
            scope = scope.parent
        return n

    def _write_bindings(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.bindings.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_bindings(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging."""
        chain = []
        scope: Optional[Scope] = self
        while scope is not None:
            with StringIO() as buffer:
                scope._write_bindings(buffer)
                chain.append(buffer.getvalue())
            scope = scope.parent
        return "<Scope chain: " + " -> ".join(chain) + ">"
