from cata import EvaluatorFn, Value
from cata.runtime_context import RuntimeContext
from cata.types.errors import ArityMismatch, InvalidSymbol, TypeMismatch
from cata.types.node import ListNode, Node, SymbolNode
from cata.types.scope import Scope
from cata.types.symbol import Symbol


def let_form(
    tail: tuple[Node, ...],
    scope: Scope,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    form: ListNode,
) -> Value:
    """(let (name expr ...) body ...)

    Every expr is evaluated in the enclosing scope before any name is bound,
    so bindings cannot see each other. An unpaired trailing name is ignored.
    """
    if len(tail) < 2:
        raise ArityMismatch(
            f"let needs a binding list and at least 1 body expression, "
            f"but got {len(tail)} argument{'' if len(tail) == 1 else 's'}",
            form.position,
        )
    bindings_node, body = tail[0], tail[1:]
    if not isinstance(bindings_node, ListNode):
        raise TypeMismatch("second element of let must be a list", bindings_node.position)

    items = bindings_node.items
    bindings: dict[Symbol, Value] = {}
    for name_node, expr in zip(items[0::2], items[1::2]):
        if not isinstance(name_node, SymbolNode):
            raise InvalidSymbol(
                f"expected symbol in let, got {name_node}", name_node.position
            )
        # first binding of a repeated name wins
        bindings.setdefault(name_node.symbol, evaluate_fn(expr, scope, ctx))

    inner = scope.child(bindings)
    result: Value = None
    for expr in body:
        result = evaluate_fn(expr, inner, ctx)
    return result
