"""Main Repo Cleaner application."""

import logging
from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio, Gtk

from repocleaner.core.async_runner import AsyncRunner
from repocleaner.core.di_container import AppContainer
from repocleaner.gui.application.css_loader import CssLoader
from repocleaner.gui.windows.main_window import MainWindow

logger = logging.getLogger("RepoCleaner.App")

APPLICATION_ID = "io.github.repocleaner.RepoCleaner"

COLOR_SCHEMES = {
    "dark": Adw.ColorScheme.FORCE_DARK,
    "light": Adw.ColorScheme.FORCE_LIGHT,
    "system": Adw.ColorScheme.DEFAULT,
}


class RepoCleanerApp(Adw.Application):
    """Main application"""

    def __init__(self, container: Optional[AppContainer] = None):
        super().__init__(
            application_id=APPLICATION_ID,
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
        )
        self.container = container or AppContainer.create()
        self.runner = AsyncRunner()
        self.main_window: Optional[MainWindow] = None

    def do_startup(self):
        Adw.Application.do_startup(self)
        Gtk.Window.set_default_icon_name("user-trash-symbolic")

        self.apply_theme(self.container.settings.theme)
        CssLoader().load(self.container.paths.css_path)
        self.runner.start()

        quit_action = Gio.SimpleAction.new("quit", None)
        quit_action.connect("activate", lambda *_: self.quit())
        self.add_action(quit_action)
        self.set_accels_for_action("app.quit", ["<Control>q"])

    def do_activate(self):
        if self.main_window is None:
            self.main_window = MainWindow(self, self.container, self.runner)
        self.main_window.present()

    def do_shutdown(self):
        logger.info("Shutting down")
        if self.main_window is not None:
            self.main_window.close_session()
        if self.runner.running:
            self.runner.submit(self.container.aclose()).result(timeout=5)
        self.runner.stop()
        Adw.Application.do_shutdown(self)

    def apply_theme(self, theme: str) -> None:
        Adw.StyleManager.get_default().set_color_scheme(COLOR_SCHEMES[theme])

    def toggle_theme(self) -> None:
        style_manager = Adw.StyleManager.get_default()
        if style_manager.get_dark():
            style_manager.set_color_scheme(Adw.ColorScheme.FORCE_LIGHT)
        else:
            style_manager.set_color_scheme(Adw.ColorScheme.FORCE_DARK)
