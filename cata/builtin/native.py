"""Native functions for the cata runtime.

This module defines the fixed set of built-in operations exposed to cata code
and the `register` helper that binds them into the global scope. Every native
validates its argument count and argument types before doing any work.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from cata import Value
from cata.reader.parser import to_int
from cata.runtime_context import RuntimeContext
from cata.types.errors import ArityMismatch, InvalidInput, ProgramExit, TypeMismatch
from cata.types.node import wrap_int
from cata.types.scope import Scope
from cata.types.symbol import Symbol


NativeFn = Callable[[RuntimeContext, list[Value]], Value]


@dataclass(frozen=True)
class NativeFunction:
    """A built-in operation, callable from cata code by name."""

    name: str
    arity: int
    fn: NativeFn

    def __call__(self, ctx: RuntimeContext, args: list[Value]) -> Value:
        if len(args) != self.arity:
            raise ArityMismatch(
                f"{self.name} needs exactly {self.arity} argument"
                f"{'' if self.arity == 1 else 's'}, but got {len(args)}"
            )
        return self.fn(ctx, args)

    def __repr__(self) -> str:
        return f"<native {self.name}/{self.arity}>"


def type_name(value: Value) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, str):
        return "string"
    if isinstance(value, NativeFunction):
        return "native function"
    return type(value).__name__


def expect_int(name: str, value: Value, index: int) -> int:
    # bool is an int subclass but never a cata value
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeMismatch(
            f"argument {index + 1} of {name} must be an integer, got {type_name(value)}"
        )
    return value


def expect_string(name: str, value: Value, index: int) -> str:
    if not isinstance(value, str):
        raise TypeMismatch(
            f"argument {index + 1} of {name} must be a string, got {type_name(value)}"
        )
    return value


# -------------------------------
# I/O
# -------------------------------
def print_string(ctx: RuntimeContext, args: list[Value]) -> int:
    """Write a string and a newline to standard output; returns 0."""
    ctx.write_line(expect_string("PRINT-STRING", args[0], 0))
    return 0


def print_int(ctx: RuntimeContext, args: list[Value]) -> int:
    """Write an integer in decimal and a newline to standard output; returns 0."""
    ctx.write_line(str(expect_int("PRINT-INT", args[0], 0)))
    return 0


def read_int(ctx: RuntimeContext, args: list[Value]) -> int:
    """Read one decimal integer from standard input."""
    token = ctx.read_token()
    if token is None:
        raise InvalidInput("READ-INT reached end of input")
    if not ctx.is_int_token(token):
        raise InvalidInput(f"READ-INT expected an integer, got {token!r}")
    digits = token.lstrip("+-")
    value = to_int(digits)
    return wrap_int(-value) if token.startswith("-") else value


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def add(ctx: RuntimeContext, args: list[Value]) -> int:
    a = expect_int("+", args[0], 0)
    b = expect_int("+", args[1], 1)
    return wrap_int(a + b)


def equals(ctx: RuntimeContext, args: list[Value]) -> int:
    a = expect_int("=", args[0], 0)
    b = expect_int("=", args[1], 1)
    return 1 if a == b else 0


# -------------------------------
# Process control
# -------------------------------
def exit_program(ctx: RuntimeContext, args: list[Value]) -> Value:
    ctx.output.flush()
    raise ProgramExit(0)


NATIVES: tuple[NativeFunction, ...] = (
    NativeFunction("PRINT-STRING", 1, print_string),
    NativeFunction("PRINT-INT", 1, print_int),
    NativeFunction("READ-INT", 0, read_int),
    NativeFunction("+", 2, add),
    NativeFunction("=", 2, equals),
    NativeFunction("EXIT", 0, exit_program),
)


def register(scope: Scope) -> Scope:
    """Bind every native function into `scope` under its name."""
    scope.update({Symbol(native.name): native for native in NATIVES})
    return scope


def global_scope() -> Scope:
    """A new, frozen global scope holding only the native functions."""
    return register(Scope()).freeze()
