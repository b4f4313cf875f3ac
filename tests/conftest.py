import io

import pytest

from cata.builtin.native import global_scope
from cata.interpreter import Interpreter
from cata.runtime_context import RuntimeContext


# Every test gets its own output buffer so native PRINT-* calls can be
# inspected without touching the real stdout.


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def ctx(out):
    return RuntimeContext(stdout=out)


@pytest.fixture
def scope():
    return global_scope()


@pytest.fixture
def interp(out):
    return Interpreter(stdout=out)
