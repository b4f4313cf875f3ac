from cata import EvaluatorFn, Value
from cata.runtime_context import RuntimeContext
from cata.types.errors import ArityMismatch, TypeMismatch
from cata.types.node import ListNode, Node
from cata.types.scope import Scope


def if_form(
    tail: tuple[Node, ...],
    scope: Scope,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    form: ListNode,
) -> Value:
    if len(tail) != 3:
        raise ArityMismatch(
            f"if needs exactly 3 arguments, but got {len(tail)}", form.position
        )

    cond = evaluate_fn(tail[0], scope, ctx)
    # Only integers are conditions; nonzero is true
    if not isinstance(cond, int) or isinstance(cond, bool):
        raise TypeMismatch(
            f"if condition must be an integer, got {cond!r}", tail[0].position
        )

    if cond != 0:
        return evaluate_fn(tail[1], scope, ctx)
    return evaluate_fn(tail[2], scope, ctx)
