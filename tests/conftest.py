"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add lib to path
sys.path.insert(0, str(Path(__file__).parent.parent / "lib"))

import _dockhover


class Fake_Documentation:
    """Documentation source that answers with the name it was asked for."""

    def __init__(self):
        self.asked = []

    def get_markdown(self, name):
        self.asked.append(name)
        if name in _dockhover.KEYWORDS or name == _dockhover.DIRECTIVE_ESCAPE:
            return "docs for %s" % name
        return None


@pytest.fixture
def documentation():
    """Fake documentation provider."""
    return Fake_Documentation()


@pytest.fixture
def docs_for():
    """Expected hover contents for a keyword or directive name."""
    return lambda name: "docs for %s" % name
