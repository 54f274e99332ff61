"""Credential setup page."""

import logging
from typing import Callable

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gtk

from pydantic import ValidationError

from repocleaner.core.protocols import CredentialStorePort, NotifierPort
from repocleaner.domain.credentials import (
    TOKEN_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    Credentials,
    field_errors,
)

logger = logging.getLogger("RepoCleaner.SetupPage")

TOKEN_HELP_URL = "https://github.com/settings/tokens/new?scopes=repo,delete_repo"


class SetupPage:
    def __init__(
        self,
        credential_store: CredentialStorePort,
        notifier: NotifierPort,
        on_setup_complete: Callable[[Credentials], None],
    ):
        self.credential_store = credential_store
        self.notifier = notifier
        self.on_setup_complete = on_setup_complete

    def build(self) -> Gtk.Widget:
        page = Adw.StatusPage()
        page.set_icon_name("system-users-symbolic")
        page.set_title("Repo Cleaner")
        page.set_description("Enter your GitHub credentials to get started")

        clamp = Adw.Clamp()
        clamp.set_maximum_size(420)

        form = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)

        group = Adw.PreferencesGroup()

        self.username_row = Adw.EntryRow()
        self.username_row.set_title("GitHub Username")
        self.username_row.set_max_length(USERNAME_MAX_LENGTH)
        self.username_row.connect("entry-activated", self._on_submit)
        group.add(self.username_row)

        self.token_row = Adw.PasswordEntryRow()
        self.token_row.set_title("Personal Access Token")
        self.token_row.set_max_length(TOKEN_MAX_LENGTH)
        self.token_row.connect("entry-activated", self._on_submit)
        group.add(self.token_row)

        form.append(group)

        self.username_error = self._error_label()
        form.append(self.username_error)
        self.token_error = self._error_label()
        form.append(self.token_error)

        help_box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=4)
        help_box.set_halign(Gtk.Align.CENTER)
        help_label = Gtk.Label(label="Need a token?")
        help_label.add_css_class("dim-label")
        help_box.append(help_label)
        help_box.append(Gtk.LinkButton.new_with_label(TOKEN_HELP_URL, "Create one here"))
        form.append(help_box)

        submit = Gtk.Button(label="Continue")
        submit.add_css_class("suggested-action")
        submit.add_css_class("pill")
        submit.set_halign(Gtk.Align.CENTER)
        submit.connect("clicked", self._on_submit)
        form.append(submit)

        clamp.set_child(form)
        page.set_child(clamp)
        return page

    @staticmethod
    def _error_label() -> Gtk.Label:
        label = Gtk.Label(label="")
        label.set_halign(Gtk.Align.START)
        label.set_wrap(True)
        label.add_css_class("error")
        label.set_visible(False)
        return label

    def _show_errors(self, errors: dict) -> None:
        for field, label, row in (
            ("username", self.username_error, self.username_row),
            ("token", self.token_error, self.token_row),
        ):
            message = errors.get(field)
            label.set_label(message or "")
            label.set_visible(bool(message))
            if message:
                row.add_css_class("error")
            else:
                row.remove_css_class("error")

    def _on_submit(self, *_args) -> None:
        self._show_errors({})
        try:
            credentials = Credentials(
                username=self.username_row.get_text(),
                token=self.token_row.get_text(),
            )
        except ValidationError as e:
            self._show_errors(field_errors(e))
            self.notifier.error("Validation Error", "Please check your inputs and try again")
            return

        try:
            self.credential_store.save(credentials)
        except OSError as e:
            logger.error(f"Could not store credentials: {e}")
            self.notifier.error("Could not save credentials", str(e))
            return

        self.notifier.success(
            "Credentials saved", "Your GitHub credentials have been stored securely"
        )
        self.on_setup_complete(credentials)
