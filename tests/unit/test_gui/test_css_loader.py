"""Tests for CSS loader."""

from pathlib import Path

import pytest


def _require_gtk4():
    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Gtk", "4.0")
        gi.require_version("Adw", "1")
    except ValueError:
        pytest.skip("GTK 4 and libadwaita are not available")


def test_css_loader_with_missing_file():
    _require_gtk4()
    from repocleaner.gui.application.css_loader import CssLoader

    assert CssLoader().load(Path("/nonexistent/file.css")) is False


def test_css_loader_with_empty_path():
    _require_gtk4()
    from repocleaner.gui.application.css_loader import CssLoader

    assert CssLoader().load("") is False
