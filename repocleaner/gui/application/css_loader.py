"""CSS loading service."""

import logging
from pathlib import Path

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
from gi.repository import Gdk, GLib, Gtk

logger = logging.getLogger("RepoCleaner.CssLoader")


class CssLoader:
    def load(self, css_path: Path) -> bool:
        if not css_path or not Path(css_path).exists():
            logger.warning(f"No stylesheet at {css_path}")
            return False

        try:
            provider = Gtk.CssProvider()
            provider.load_from_path(str(css_path))
        except GLib.Error as e:
            logger.error(f"Could not load custom CSS: {e}")
            return False

        Gtk.StyleContext.add_provider_for_display(
            Gdk.Display.get_default(),
            provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION,
        )
        logger.info(f"Loaded custom CSS from {css_path}")
        return True
