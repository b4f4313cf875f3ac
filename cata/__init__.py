# Core type aliases for cata's data model.
# Code is represented by the typed Node classes in cata.types.node; runtime
# values are plain Python ints and strs plus NativeFunction instances.
#
# Naming guidance:
# - Node:  Use in reader/printer code to denote syntactic forms.
# - Value: Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias: int | str | NativeFunction
Value = Any

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., Value]

__version__ = "0.1.0"
