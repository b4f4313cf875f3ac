"""Core evaluator for the cata interpreter.

Walks a node against a scope: atoms evaluate to themselves, symbols are looked
up through the scope chain, and lists are either special forms or calls to a
native function named by their head symbol.
"""

from __future__ import annotations

from typing import Optional

from cata import Value
from cata.builtin.native import NativeFunction
from cata.evaluation.special_forms import SPECIAL_FORMS
from cata.runtime_context import RuntimeContext
from cata.types.errors import (
    CataEvalError,
    EmptyForm,
    InvalidOperator,
    NotCallable,
    RecursionLimitExceeded,
)
from cata.types.node import IntegerNode, ListNode, Node, StringNode, SymbolNode
from cata.types.scope import Scope


def evaluate(node: Node, scope: Scope, ctx: Optional[RuntimeContext] = None) -> Value:
    """Evaluate `node` in `scope` and return its value.

    Raises RecursionLimitExceeded when lists nest deeper than `ctx.max_depth`,
    the same count the reader applies.
    """
    if ctx is None:
        ctx = RuntimeContext()
    if not isinstance(node, ListNode):
        return evaluate0(node, scope, ctx)
    if ctx.depth >= ctx.max_depth:
        raise RecursionLimitExceeded(
            f"evaluation nested deeper than {ctx.max_depth} levels", node.position
        )
    ctx.depth += 1
    try:
        return evaluate0(node, scope, ctx)
    finally:
        ctx.depth -= 1


def evaluate0(node: Node, scope: Scope, ctx: RuntimeContext) -> Value:
    match node:
        case IntegerNode(value=value):
            return value
        case StringNode(text=text):
            return text
        case SymbolNode():
            try:
                return scope.lookup(node.symbol)
            except CataEvalError as e:
                _locate(e, node)
                raise
        case ListNode():
            return evaluate_form(node, scope, ctx)
    raise TypeError(f"Cannot evaluate {node!r}")


def evaluate_form(form: ListNode, scope: Scope, ctx: RuntimeContext) -> Value:
    if not form.items:
        raise EmptyForm("an empty list cannot be evaluated", form.position)

    head, *tail_args = form.items
    if not isinstance(head, SymbolNode):
        raise InvalidOperator(
            f"first element of list must be symbol, got {head}", head.position
        )

    # --- Special forms handling ---
    op = head.symbol
    if op in SPECIAL_FORMS:
        return SPECIAL_FORMS[op](tuple(tail_args), scope, ctx, evaluate, form)

    # --- Native function application ---
    args = [evaluate(arg, scope, ctx) for arg in tail_args]
    fn = evaluate0(head, scope, ctx)
    if not isinstance(fn, NativeFunction):
        raise NotCallable(f"'{head.name}' is not a function", head.position)
    try:
        return fn(ctx, args)
    except CataEvalError as e:
        _locate(e, form)
        raise


def _locate(error: CataEvalError, node: Node) -> None:
    """Attach the node's position to an error raised without one."""
    if error.position is None:
        error.position = node.position
