"""
  cata Reader

- Single pass, recursive descent, one character of lookahead
- Emits typed nodes from cata.types.node:

    - lists    -> ListNode
    - strings  -> StringNode   (only \\n and \\" escapes are recognised)
    - integers -> IntegerNode  (ASCII digits only; -1 is a symbol)
    - anything else -> SymbolNode, upper-cased
"""

from __future__ import annotations

from typing import Optional

from cata.config import get_max_depth
from cata.types.errors import (
    CataSyntaxError,
    InvalidEscapeSequence,
    MissingCloseParen,
    NewlineInString,
    RecursionLimitExceeded,
    UnterminatedString,
)
from cata.types.node import IntegerNode, ListNode, Node, StringNode, SymbolNode, wrap_int
from cata.types.position import Position
from cata.types.symbol import upcase


WHITESPACE = frozenset(" \t\r\n")
DELIMITERS = WHITESPACE | {"(", ")"}
ESCAPES: dict[str, str] = {
    "n": "\n",
    '"': '"',
}


def is_integer_text(text: str) -> bool:
    """True if `text` is a non-empty run of ASCII digits (str.isdigit also accepts other scripts)."""
    return bool(text) and all("0" <= c <= "9" for c in text)


def to_int(text: str) -> int:
    """Decimal value of an ASCII digit run, wrapped at every step like a native int."""
    acc = 0
    for c in text:
        acc = wrap_int(acc * 10 + (ord(c) - ord("0")))
    return acc


class Reader:
    """Cursor over source text that reads one form at a time."""

    def __init__(self, source: str, max_depth: Optional[int] = None):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.depth = 0
        self.max_depth = max_depth if max_depth is not None else get_max_depth()

    # --- cursor ---

    def peek(self) -> Optional[str]:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def advance(self) -> Optional[str]:
        c = self.peek()
        if c is None:
            return None
        self.pos += 1
        if c == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return c

    def position(self) -> Position:
        return Position(self.pos, self.line, self.column)

    def skip_whitespace(self) -> None:
        while self.peek() in WHITESPACE:
            self.advance()

    def at_end(self) -> bool:
        self.skip_whitespace()
        return self.peek() is None

    # --- grammar ---

    def parse_list(self) -> list[Node]:
        """Read forms until ')' or end of input. The ')' itself is not consumed."""
        items: list[Node] = []
        self.skip_whitespace()
        while self.peek() not in (")", None):
            items.append(self.parse_one())
            self.skip_whitespace()
        return items

    def parse_one(self) -> Node:
        """Read exactly one form starting at the cursor."""
        self.skip_whitespace()
        c = self.peek()
        if c is None:
            raise CataSyntaxError("expected a form, got end of input", self.position())
        if c == "(":
            return self._read_list()
        if c == ")":
            raise CataSyntaxError("unexpected ')'", self.position())
        if c == '"':
            return self._read_string()
        return self._read_atom()

    def _read_list(self) -> ListNode:
        start = self.position()
        if self.depth >= self.max_depth:
            raise RecursionLimitExceeded(
                f"lists nested deeper than {self.max_depth} levels", start
            )
        self.advance()  # consume (
        self.depth += 1
        try:
            items = self.parse_list()
        finally:
            self.depth -= 1
        if self.peek() != ")":
            raise MissingCloseParen("missing closing parenthesis", start)
        self.advance()
        return ListNode(tuple(items), start)

    def _read_string(self) -> StringNode:
        start = self.position()
        self.advance()  # consume "
        chars: list[str] = []
        bad_escape: Optional[tuple[str, Position]] = None
        while True:
            here = self.position()
            c = self.advance()
            if c is None:
                raise UnterminatedString("unterminated string literal", start)
            if c == "\n":
                raise NewlineInString("string literal cannot contain newline", here)
            if c == '"':
                break
            if c != "\\":
                chars.append(c)
                continue
            escaped = self.advance()
            if escaped is None:
                raise UnterminatedString("unterminated string literal", start)
            if escaped == "\n":
                raise NewlineInString("string literal cannot contain newline", here)
            if escaped in ESCAPES:
                chars.append(ESCAPES[escaped])
            elif bad_escape is None:
                # reported only once the literal is known to be terminated
                bad_escape = (escaped, here)
        if bad_escape is not None:
            escaped, where = bad_escape
            raise InvalidEscapeSequence(f"invalid escape sequence '\\{escaped}'", where)
        return StringNode("".join(chars), start)

    def _read_atom(self) -> Node:
        start = self.position()
        begin = self.pos
        while self.peek() is not None and self.peek() not in DELIMITERS:
            self.advance()
        text = upcase(self.source[begin:self.pos])
        if is_integer_text(text):
            return IntegerNode(to_int(text), start)
        return SymbolNode(text, start)


def parse(source: str, max_depth: Optional[int] = None) -> list[Node]:
    """Read top-level forms in `source` up to its end or an unmatched ')'."""
    return Reader(source, max_depth).parse_list()


def parse_one(source: str, max_depth: Optional[int] = None) -> Node:
    """Read the single form in `source`; surrounding whitespace is allowed."""
    reader = Reader(source, max_depth)
    node = reader.parse_one()
    if not reader.at_end():
        raise CataSyntaxError(
            f"unexpected input after form: {reader.peek()!r}", reader.position()
        )
    return node
