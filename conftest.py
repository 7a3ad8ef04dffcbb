import pytest
from rich.console import Console

from library_catalog import main
from library_catalog.config import settings
from library_catalog.library import Library
from library_catalog.utils import ui_helpers


@pytest.fixture
def lib():
    # A fresh, empty catalog per test
    return Library()


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    # Unique data file per test, picked up by the CLI through settings
    path = tmp_path / "library_data.json"
    monkeypatch.setattr(settings, "data_file", str(path))
    return path


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    """Colourless, wide consoles so assertions can match whole lines."""
    monkeypatch.setenv(ui_helpers.OUTPUT_MODE_ENV, "plain")
    monkeypatch.setattr(main, "console", Console(no_color=True, width=200))
    monkeypatch.setattr(ui_helpers, "_console", Console(no_color=True, width=200))
