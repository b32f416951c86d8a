import pytest

from conslisp.interpreter import Interpreter
from conslisp.types.context import Context


# Settings are read from CONSLISP_* environment variables at call time.
# Tests that need a non-default setting use monkeypatch.setenv themselves.


@pytest.fixture
def ctx():
    """Fresh root context."""
    return Context()


@pytest.fixture
def interp():
    return Interpreter()
