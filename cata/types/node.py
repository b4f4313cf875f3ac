"""Syntax tree for cata source.

The reader produces four node kinds:

    - (a b c)  -> ListNode((SymbolNode, SymbolNode, SymbolNode))
    - foo      -> SymbolNode("FOO")   names are upper-cased (ASCII only)
    - "a\\nb"   -> StringNode("a\nb")  escapes already decoded
    - 42       -> IntegerNode(42)     digits only, wrapped to INT_BITS

Nodes are frozen; the evaluator only ever reads them. Each node remembers
where it started in the source, but positions are ignored by equality so
that a printed and re-read tree compares equal to the original.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import Optional, Union

from cata.config import INT_BITS
from cata.types.position import Position
from cata.types.symbol import Symbol, upcase


_INT_RANGE = 1 << INT_BITS
_INT_MAX = (1 << (INT_BITS - 1)) - 1


def wrap_int(value: int) -> int:
    """Wrap `value` into the signed two's complement range of INT_BITS."""
    value &= _INT_RANGE - 1
    return value - _INT_RANGE if value > _INT_MAX else value


@dataclass(frozen=True, slots=True)
class ListNode:
    items: tuple[Node, ...] = ()
    position: Optional[Position] = field(default=None, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __str__(self) -> str:
        return format_node(self)


@dataclass(frozen=True, slots=True)
class SymbolNode:
    name: str
    position: Optional[Position] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "name", upcase(self.name))

    @property
    def symbol(self) -> Symbol:
        return Symbol(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class StringNode:
    text: str
    position: Optional[Position] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return format_node(self)


@dataclass(frozen=True, slots=True)
class IntegerNode:
    value: int
    position: Optional[Position] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return str(self.value)


Node = Union[ListNode, SymbolNode, StringNode, IntegerNode]


def quote_string(text: str) -> str:
    """Re-quote decoded string text so that the reader gives it back unchanged."""
    return '"' + text.replace('"', '\\"').replace("\n", "\\n") + '"'


def _write_node(node: Node, buffer: StringIO) -> None:
    match node:
        case ListNode(items=items):
            buffer.write("(")
            for i, item in enumerate(items):
                if i:
                    buffer.write(" ")
                _write_node(item, buffer)
            buffer.write(")")
        case SymbolNode(name=name):
            buffer.write(name)
        case StringNode(text=text):
            buffer.write(quote_string(text))
        case IntegerNode(value=value):
            buffer.write(str(value))
        case _:
            raise TypeError(f"Not a node: {node!r}")


def format_node(node: Node) -> str:
    """Render `node` back to source text."""
    with StringIO() as buffer:
        _write_node(node, buffer)
        return buffer.getvalue()
