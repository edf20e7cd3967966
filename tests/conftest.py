import io
import os

import pytest
from rich.console import Console

# GUI tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def console() -> Console:
    """Console that captures output as plain text."""
    return Console(file=io.StringIO(), width=120, highlight=False, color_system=None)


@pytest.fixture
def feed_input(monkeypatch):
    """Queue the lines `input()` will return; running out raises EOFError."""

    def _feed(*lines):
        pending = list(lines)

        def _fake_input(*_args):
            if not pending:
                raise EOFError("no more scripted input")
            return pending.pop(0)

        monkeypatch.setattr("builtins.input", _fake_input)
        return pending

    return _feed
