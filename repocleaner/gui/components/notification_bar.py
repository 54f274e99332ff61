"""Notification strip with auto-hide."""

import logging
from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Pango", "1.0")
from gi.repository import GLib, Gtk, Pango

from repocleaner.managers.notification_manager import Notification

logger = logging.getLogger("RepoCleaner.NotificationBar")


class NotificationBar:
    """Shows one notification at a time and hides it after a delay."""

    def __init__(self, auto_hide_seconds: int = 5):
        self.auto_hide_seconds = auto_hide_seconds
        self._hide_timeout_id: Optional[int] = None
        self.notification_box = self._create_notification_ui()

    def _create_notification_ui(self) -> Gtk.Box:
        notification_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=2)
        notification_box.set_hexpand(True)
        notification_box.set_valign(Gtk.Align.END)
        notification_box.add_css_class("notification-area")
        notification_box.set_visible(False)

        self.title_label = Gtk.Label(label="")
        self.title_label.set_halign(Gtk.Align.CENTER)
        self.title_label.add_css_class("heading")
        notification_box.append(self.title_label)

        self.description_label = Gtk.Label(label="")
        self.description_label.set_halign(Gtk.Align.CENTER)
        self.description_label.set_ellipsize(Pango.EllipsizeMode.END)
        notification_box.append(self.description_label)

        return notification_box

    def show(self, notification: Notification) -> bool:
        """Display ``notification``. Returns False so it can be an idle callback."""
        if self._hide_timeout_id is not None:
            GLib.source_remove(self._hide_timeout_id)
            self._hide_timeout_id = None

        self.title_label.set_label(notification.title)
        self.description_label.set_label(notification.description)
        self.description_label.set_visible(bool(notification.description))
        if notification.is_error:
            self.notification_box.add_css_class("error")
        else:
            self.notification_box.remove_css_class("error")
        self.notification_box.set_visible(True)

        self._hide_timeout_id = GLib.timeout_add_seconds(
            self.auto_hide_seconds, self._hide
        )
        return False

    def _hide(self) -> int:
        self.notification_box.set_visible(False)
        self.title_label.set_label("")
        self.description_label.set_label("")
        self._hide_timeout_id = None
        return GLib.SOURCE_REMOVE

    def hide(self) -> None:
        if self._hide_timeout_id is not None:
            GLib.source_remove(self._hide_timeout_id)
            self._hide_timeout_id = None
        self._hide()

    def get_widget(self) -> Gtk.Box:
        return self.notification_box
