"""Delete confirmation dialog."""

import logging
from typing import Callable, Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, GLib, Gtk

from repocleaner.domain.repository import Repository

logger = logging.getLogger("RepoCleaner.DeleteDialog")


class DeleteDialog:
    """Asks for confirmation before a repository is deleted for good.

    Once the deletion can no longer be dismissed, the confirmation is
    replaced by a progress alert that stays up until ``close()`` is called.
    """

    def __init__(
        self,
        repository: Repository,
        on_confirm: Callable[[], None],
        on_cancel: Callable[[], None],
    ):
        self.repository = repository
        self.on_confirm = on_confirm
        self.on_cancel = on_cancel
        self.dialog: Optional[Adw.AlertDialog] = None
        self.progress_dialog: Optional[Adw.AlertDialog] = None
        self._parent: Optional[Gtk.Widget] = None

    def present(self, parent: Gtk.Widget) -> None:
        self._parent = parent
        name = GLib.markup_escape_text(self.repository.display_name)
        dialog = Adw.AlertDialog.new(
            "Delete Repository",
            f"Are you sure you want to delete <b>{name}</b>? "
            "This action cannot be undone.",
        )
        dialog.set_body_use_markup(True)

        dialog.add_response("cancel", "Cancel")
        dialog.add_response("delete", "Delete")
        dialog.set_response_appearance("delete", Adw.ResponseAppearance.DESTRUCTIVE)
        dialog.set_default_response("cancel")
        dialog.set_close_response("cancel")

        dialog.connect("response", self._on_response)
        self.dialog = dialog
        dialog.present(parent)

    def update(self, can_confirm: bool, can_dismiss: bool) -> None:
        """Follow the deletion flow's confirm and dismiss permissions."""
        if self.dialog is not None:
            self.dialog.set_response_enabled("delete", can_confirm)
            self.dialog.set_response_enabled("cancel", can_dismiss)
            self.dialog.set_can_close(can_dismiss)

        if not can_dismiss and self.progress_dialog is None:
            if self.dialog is not None:
                self.dialog.force_close()
                self.dialog = None
            self._present_progress()

    def close(self) -> None:
        for dialog in (self.dialog, self.progress_dialog):
            if dialog is not None:
                dialog.force_close()
        self.dialog = None
        self.progress_dialog = None

    def _present_progress(self) -> None:
        name = GLib.markup_escape_text(self.repository.display_name)
        dialog = Adw.AlertDialog.new("Deleting Repository", f"<b>{name}</b>")
        dialog.set_body_use_markup(True)

        status = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=12)
        status.set_halign(Gtk.Align.CENTER)
        spinner = Gtk.Spinner()
        spinner.set_size_request(24, 24)
        spinner.start()
        status.append(spinner)
        status.append(Gtk.Label(label="Deleting..."))
        dialog.set_extra_child(status)

        dialog.add_response("cancel", "Cancel")
        dialog.set_response_enabled("cancel", False)
        dialog.set_close_response("cancel")
        dialog.set_can_close(False)

        self.progress_dialog = dialog
        logger.debug(f"Showing progress for {self.repository.full_name}")
        dialog.present(self._parent)

    def _on_response(self, _dialog, response: str) -> None:
        self.dialog = None
        if response == "delete":
            self.on_confirm()
        else:
            self.on_cancel()
