"""MainWindow - switches between credential setup and the dashboard."""

import logging
from typing import Callable, Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, GLib, Gtk

from repocleaner.core.async_runner import AsyncRunner
from repocleaner.core.di_container import AppContainer
from repocleaner.domain.credentials import Credentials
from repocleaner.gui.components.notification_bar import NotificationBar
from repocleaner.gui.pages.dashboard_page import DashboardPage
from repocleaner.gui.pages.setup_page import SetupPage
from repocleaner.gui.session_bridge import SessionBridge

logger = logging.getLogger("RepoCleaner.MainWindow")


class MainWindow(Adw.ApplicationWindow):
    """Main application window"""

    def __init__(self, app, container: AppContainer, runner: AsyncRunner):
        super().__init__(application=app, title="Repo Cleaner")
        self.app = app
        self.container = container
        self.runner = runner
        self.bridge: Optional[SessionBridge] = None

        window = container.settings.window
        self.set_default_size(window.default_width, window.default_height)

        self.notification_bar = NotificationBar(
            auto_hide_seconds=container.settings.display.notification_seconds
        )
        self._unsubscribe_notifications: Callable[[], None] = container.notifications.subscribe(
            lambda notification: GLib.idle_add(self.notification_bar.show, notification)
        )

        self.stack = Gtk.Stack()
        self.stack.set_transition_type(Gtk.StackTransitionType.CROSSFADE)
        self.stack.set_vexpand(True)

        overlay = Gtk.Overlay()
        overlay.set_child(self.stack)
        overlay.add_overlay(self.notification_bar.get_widget())
        self.set_content(overlay)

        self.connect("close-request", self._on_close_request)

        credentials = container.credential_store.load()
        if credentials is None:
            self._show_setup()
        else:
            logger.info(f"Found stored credentials for {credentials.username}")
            self._show_dashboard(credentials)

    def _replace_page(self, name: str, widget: Gtk.Widget) -> None:
        previous = self.stack.get_child_by_name(name)
        if previous is not None:
            self.stack.remove(previous)
        self.stack.add_named(widget, name)
        self.stack.set_visible_child_name(name)

    def _show_setup(self) -> None:
        page = SetupPage(
            credential_store=self.container.credential_store,
            notifier=self.container.notifications,
            on_setup_complete=self._show_dashboard,
        )
        self._replace_page("setup", page.build())

    def _show_dashboard(self, credentials: Credentials) -> None:
        self.close_session()

        session = self.container.create_session(credentials)
        dashboard = DashboardPage(
            on_logout=self._on_logout,
            on_toggle_theme=self.app.toggle_theme,
        )
        self._replace_page("dashboard", dashboard.build())

        self.bridge = SessionBridge(
            session,
            self.runner,
            on_snapshot=dashboard.render,
            on_deletion_state=dashboard.render_deletion_state,
        )
        dashboard.attach(self.bridge)
        self.bridge.sync()

    def _on_logout(self) -> None:
        logger.info("Logging out")
        self.close_session()
        self.container.credential_store.clear()
        self._show_setup()

    def close_session(self) -> None:
        if self.bridge is not None:
            self.bridge.close()
            self.bridge = None

    def _on_close_request(self, *_args) -> bool:
        self.close_session()
        self._unsubscribe_notifications()
        return False
