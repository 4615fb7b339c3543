import pytest

from littlelisp.config import Settings
from littlelisp.interpreter import Interpreter
from littlelisp.reader.printer import render


# Interpreters in tests get explicit Settings so LITTLELISP_* variables in the
# developer's shell cannot change results.
@pytest.fixture
def itp():
    return Interpreter(Settings())


@pytest.fixture
def rt(itp):
    return itp.runtime


@pytest.fixture
def run(itp):
    """Evaluate source in the fixture interpreter and return the rendered result."""
    def _run(source: str) -> str:
        return render(itp.eval(source))
    return _run
