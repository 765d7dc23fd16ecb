import io

import pytest

from egg.builtin.env_builtin import make_top_scope
from egg.interpreter import Interpreter
from egg.types import Scope


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def top_scope(out):
    return make_top_scope(out)


@pytest.fixture
def scope(top_scope):
    """A writable program scope over the built-ins."""
    return Scope(outer=top_scope)


@pytest.fixture
def interp(out):
    return Interpreter(out=out)
