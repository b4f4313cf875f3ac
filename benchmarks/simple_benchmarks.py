from timeit import timeit

from cata.builtin.native import global_scope
from cata.evaluation.evaluator import evaluate
from cata.reader.parser import parse, parse_one
from cata.runtime_context import RuntimeContext
from cata.types.scope import Scope
from cata.types.symbol import Symbol


def time_reader(code: str, rounds: int) -> float:
    """Time reading `code` from text to nodes."""
    parse(code)
    return timeit(lambda: parse(code), number=rounds)


def time_evaluator(code: str, rounds: int) -> float:
    """Time evaluation only: parses once and repeatedly evaluates the same node."""
    scope = global_scope()
    ctx = RuntimeContext()
    node = parse_one(code)
    # Warmup
    evaluate(node, scope, ctx)
    return timeit(lambda: evaluate(node, scope, ctx), number=rounds)


# Scope lookup through a long chain of LET frames

def bench_lookup_chain(n_scopes: int = 1000, n_lookups: int = 10000) -> float:
    root = Scope()
    key = Symbol("answer")
    root.define(key, 42)
    scope = root
    for _ in range(n_scopes):
        scope = Scope(outer=scope)
    for _ in range(1000):
        scope.lookup(key)
    return timeit(lambda: scope.lookup(key), number=n_lookups)


ADD_CODE = "(+ 1 2)"

NESTED_ADD_CODE = "(+ 1 " * 60 + "1" + ")" * 60

LET_CHAIN_CODE = r"""
(let (a 1 b 2 c 3)
  (let (d (+ a b) e (+ b c))
    (let (f (+ d e))
      (if (= f 8) (+ f a) 0))))
"""

STRINGS_CODE = '(let (s "a string with \\"quotes\\" and a\\nnewline") (if 1 s s))'


def _print_pair(name: str, code: str, rounds: int) -> None:
    tread = time_reader(code, rounds)
    teval = time_evaluator(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  reader: {tread:.6f}s  |  evaluator: {teval:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: scope lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_pair("single call", ADD_CODE, rounds=20000)
    _print_pair("nested calls (depth 60)", NESTED_ADD_CODE, rounds=1000)
    _print_pair("let chain", LET_CHAIN_CODE, rounds=5000)
    _print_pair("string literals", STRINGS_CODE, rounds=5000)
