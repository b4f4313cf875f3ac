from __future__ import annotations


_UPCASE = {c: c - 32 for c in range(ord("a"), ord("z") + 1)}


def upcase(text: str) -> str:
    """Upper-case ASCII a-z only; every other character is kept as is."""
    return text.translate(_UPCASE)


class Symbol(str):
    """A scope key: the normalized name of a cata symbol.

    Compares and hashes as its upper-cased text, so `Symbol("x") == "X"`.
    """

    __slots__ = ()

    def __new__(cls, name: str) -> Symbol:
        return super().__new__(cls, upcase(name))
