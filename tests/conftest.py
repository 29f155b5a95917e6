import pytest

from minilisp.interpreter import Interpreter
from minilisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh, empty root environment."""
    return Environment()


@pytest.fixture
def interp(monkeypatch):
    """Session with lenient lexing regardless of the caller's shell."""
    monkeypatch.delenv("MINILISP_STRICT_LEX", raising=False)
    return Interpreter()
