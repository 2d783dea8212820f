import pytest

from catalog.library import Library
from utils.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Each test starts in plain output mode, whatever the CLI set before
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")

@pytest.fixture
def lib():
    # A fresh registry per test; nothing is shared between tests
    lib = Library()
    yield lib
    lib.close()
