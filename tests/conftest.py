import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from wayfarer.interface.console import RecordingConsole  # noqa: E402
from wayfarer.interface.pacing import Pacer  # noqa: E402


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def no_pause():
    return Pacer.instant()


@pytest.fixture
def scripted():
    """Build a read_line callable that replays the given answers, then hits end of input."""

    def make(*answers):
        remaining = list(answers)

        def read_line():
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        read_line.remaining = remaining
        return read_line

    return make
