from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from cata.config import get_max_depth


_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


@dataclass
class RuntimeContext:
    """Per-interpreter state threaded through evaluation.

    Holds the streams the native functions talk to and the evaluation depth
    counter. Streams default to the process's stdin/stdout at call time so
    pytest's capsys and monkeypatched stdin are honoured.
    """

    stdin: Optional[TextIO] = None
    stdout: Optional[TextIO] = None
    max_depth: int = field(default_factory=get_max_depth)
    depth: int = 0
    _pending: list[str] = field(default_factory=list, repr=False)

    @property
    def input(self) -> TextIO:
        return self.stdin if self.stdin is not None else sys.stdin

    @property
    def output(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout

    def write_line(self, text: str) -> None:
        out = self.output
        out.write(text)
        out.write("\n")
        out.flush()

    def read_token(self) -> Optional[str]:
        """Next whitespace-delimited token from stdin, or None at end of input.

        Blocks until a line is available. Tokens left over on a line are kept
        for the next read.
        """
        while not self._pending:
            line = self.input.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.pop(0)

    @staticmethod
    def is_int_token(token: str) -> bool:
        return _INT_TOKEN.fullmatch(token) is not None
