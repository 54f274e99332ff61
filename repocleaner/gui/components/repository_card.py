"""Repository card component."""

from typing import Callable

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Pango", "1.0")
from gi.repository import GLib, Gtk, Pango

from repocleaner.domain.repository import Repository
from repocleaner.gui.highlighting import highlight_text
from repocleaner.utils.formatting import format_count, format_timestamp


class RepositoryCard:
    def __init__(
        self,
        repository: Repository,
        on_delete: Callable[[Repository], None],
        search_query: str = "",
    ):
        self.repository = repository
        self.on_delete = on_delete
        self.search_query = search_query
        self.delete_button = None

    def build(self) -> Gtk.Widget:
        card = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        card.add_css_class("card")
        card.add_css_class("repository-card")
        card.set_size_request(260, -1)

        card.append(self._build_header())
        card.append(self._build_description())
        card.append(self._build_stats())
        return card

    def _build_header(self) -> Gtk.Widget:
        header = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)

        title_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        title_box.set_hexpand(True)

        name = highlight_text(self.repository.display_name, self.search_query)
        url = GLib.markup_escape_text(self.repository.canonical_url)
        title = Gtk.Label()
        title.set_markup(f'<a href="{url}"><b>{name}</b></a>')
        title.set_tooltip_text(self.repository.canonical_url)
        title.set_halign(Gtk.Align.START)
        title.set_ellipsize(Pango.EllipsizeMode.END)
        title_box.append(title)

        badges = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=4)
        visibility = Gtk.Label(label=self.repository.visibility.capitalize())
        visibility.add_css_class("badge")
        visibility.add_css_class(f"badge-{self.repository.visibility}")
        badges.append(visibility)
        if self.repository.is_derived:
            fork_badge = Gtk.Label(label="Fork")
            fork_badge.add_css_class("badge")
            fork_badge.add_css_class("badge-fork")
            badges.append(fork_badge)
        title_box.append(badges)

        header.append(title_box)

        button = Gtk.Button()
        button.set_icon_name("user-trash-symbolic")
        button.set_valign(Gtk.Align.START)
        button.add_css_class("flat")
        button.add_css_class("destructive-action")
        button.set_tooltip_text(f"Delete {self.repository.display_name}")
        button.connect("clicked", lambda *_: self.on_delete(self.repository))
        header.append(button)
        self.delete_button = button

        return header

    def _build_description(self) -> Gtk.Widget:
        description = self.repository.description or "No description provided"
        label = Gtk.Label()
        label.set_markup(highlight_text(description, self.search_query))
        label.set_halign(Gtk.Align.START)
        label.set_xalign(0)
        label.set_wrap(True)
        label.set_lines(2)
        label.set_ellipsize(Pango.EllipsizeMode.END)
        label.add_css_class("dim-label")
        return label

    def _build_stats(self) -> Gtk.Widget:
        stats = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=12)
        stats.add_css_class("caption")

        if self.repository.primary_language:
            language = Gtk.Label()
            language.set_markup(
                highlight_text(self.repository.primary_language, self.search_query)
            )
            stats.append(language)

        stats.append(
            self._stat("starred-symbolic", format_count(self.repository.popularity_score))
        )
        stats.append(
            self._stat("emblem-shared-symbolic", format_count(self.repository.derivation_count))
        )

        updated = Gtk.Label(
            label=f"Updated {format_timestamp(self.repository.last_modified_at)}"
        )
        updated.set_hexpand(True)
        updated.set_halign(Gtk.Align.END)
        updated.add_css_class("dim-label")
        stats.append(updated)
        return stats

    @staticmethod
    def _stat(icon_name: str, text: str) -> Gtk.Widget:
        box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=4)
        icon = Gtk.Image.new_from_icon_name(icon_name)
        icon.set_pixel_size(14)
        box.append(icon)
        box.append(Gtk.Label(label=text))
        return box

    def set_delete_enabled(self, enabled: bool) -> None:
        if self.delete_button is not None:
            self.delete_button.set_sensitive(enabled)
