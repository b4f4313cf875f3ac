"""Lexical scopes for cata.

A Scope stores bindings of Symbols to evaluated values and links to the
enclosing scope via `outer`. The global scope sits at the root of every chain;
each LET pushes one child scope for the duration of its body.
"""

from __future__ import annotations

from typing import Optional

from cata import Value
from cata.types.errors import InvalidSymbol, UnboundSymbol
from cata.types.symbol import Symbol


class FrozenScopeError(RuntimeError):
    """Raised when a binding is added to a scope after it was frozen."""


class Scope:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer", "frozen")

    def __init__(self, outer: Optional[Scope] = None):
        self.vars: dict[Symbol, Value] = {}
        self.outer: Scope | None = outer
        self.frozen = False

    def define(self, name: Symbol, value: Value) -> None:
        """Bind `name` to `value` in this frame.

        Raises InvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise InvalidSymbol(f"Cannot define {name!r} as a symbol")
        if self.frozen:
            raise FrozenScopeError(f"Cannot define {name} in a frozen scope")
        self.vars[name] = value

    def update(self, mapping: dict[Symbol, Value]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def freeze(self) -> Scope:
        self.frozen = True
        return self

    def child(self, bindings: Optional[dict[Symbol, Value]] = None) -> Scope:
        scope = Scope(self)
        if bindings:
            scope.update(bindings)
        return scope

    def find(self, symbol: Symbol) -> Optional[Scope]:
        """Find the nearest scope in the chain that contains `symbol`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if symbol in scope.vars:
                return scope
            scope = scope.outer
        return None

    def lookup(self, name: Symbol) -> Value:
        """Look up the value bound to `name`, innermost scope first.

        Raises UnboundSymbol if not found.
        """
        scope = self.find(name)
        if scope is None:
            raise UnboundSymbol(f"'{name}' does not exist")
        return scope.vars[name]
