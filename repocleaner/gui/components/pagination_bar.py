"""Page navigation with numbered links."""

from typing import Callable, Sequence

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from repocleaner.domain.pagination import ELLIPSIS, PageLink


class PaginationBar:
    def __init__(self, on_page: Callable[[int], None]):
        self.on_page = on_page
        self.container = None
        self._pages_box = None
        self._current = 1
        self._total = 1

    def build(self) -> Gtk.Widget:
        self.container = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=4)
        self.container.set_halign(Gtk.Align.CENTER)
        self.container.set_margin_top(8)
        self.container.set_margin_bottom(8)

        self.previous_button = Gtk.Button(label="Previous")
        self.previous_button.add_css_class("flat")
        self.previous_button.connect(
            "clicked", lambda *_: self.on_page(max(1, self._current - 1))
        )
        self.container.append(self.previous_button)

        self._pages_box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=2)
        self.container.append(self._pages_box)

        self.next_button = Gtk.Button(label="Next")
        self.next_button.add_css_class("flat")
        self.next_button.connect(
            "clicked", lambda *_: self.on_page(min(self._total, self._current + 1))
        )
        self.container.append(self.next_button)

        return self.container

    def update(self, current: int, total: int, links: Sequence[PageLink]) -> None:
        self._current = current
        self._total = total
        self.container.set_visible(total > 1)
        self.previous_button.set_sensitive(current > 1)
        self.next_button.set_sensitive(current < total)

        while True:
            child = self._pages_box.get_first_child()
            if child is None:
                break
            self._pages_box.remove(child)

        for link in links:
            if link == ELLIPSIS:
                self._pages_box.append(Gtk.Label(label="..."))
                continue
            button = Gtk.Button(label=str(link))
            button.add_css_class("flat" if link != current else "suggested-action")
            button.connect("clicked", lambda _btn, page=link: self.on_page(page))
            self._pages_box.append(button)
