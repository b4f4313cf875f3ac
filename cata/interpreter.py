from __future__ import annotations

import logging
from typing import Optional, TextIO

from cata import Value
from cata.builtin.native import global_scope
from cata.evaluation.evaluator import evaluate
from cata.reader.parser import Reader
from cata.runtime_context import RuntimeContext
from cata.types.node import Node
from cata.types.scope import Scope

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates cata source against one global scope.

    The global scope is built once per interpreter and frozen; every top-level
    form is evaluated directly in it. Errors propagate to the caller as
    CataError subclasses, and EXIT as ProgramExit.
    """

    def __init__(
        self,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        max_depth: Optional[int] = None,
    ):
        self.scope: Scope = global_scope()
        self.ctx = RuntimeContext(stdin=stdin, stdout=stdout)
        if max_depth is not None:
            self.ctx.max_depth = max_depth

    def read(self, source: str) -> list[Node]:
        """Read top-level forms up to the end of `source` or an unmatched ')'.

        Text after an unmatched ')' is never read, so it is never evaluated.
        """
        reader = Reader(source, self.ctx.max_depth)
        forms = reader.parse_list()
        if not reader.at_end():
            logger.warning("ignoring input after unmatched ')' at %s", reader.position())
        return forms

    def run(self, source: str) -> None:
        """Evaluate every top-level form in `source` for its side effects.

        Everything is read before anything is evaluated, so a syntax error
        in the text that is read means no form runs.
        """
        for form in self.read(source):
            logger.debug("evaluating %s", form)
            self.ctx.depth = 0
            evaluate(form, self.scope, self.ctx)

    def eval(self, source: str) -> Value:
        """Evaluate `source` and return the value of its last top-level form."""
        result: Value = None
        for form in self.read(source):
            self.ctx.depth = 0
            result = evaluate(form, self.scope, self.ctx)
        return result


def run(source: str) -> None:
    """Run `source` in a fresh interpreter using the process's stdin/stdout."""
    Interpreter().run(source)
