"""Search entry, filter and sort selectors."""

from typing import Callable, List, Sequence, Tuple

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from repocleaner.domain.view_state import ALL, ViewState

VISIBILITY_OPTIONS: List[Tuple[str, str]] = [
    ("all", "All Repos"),
    ("public", "Public"),
    ("private", "Private"),
]
DERIVATION_OPTIONS: List[Tuple[str, str]] = [
    ("all", "All Types"),
    ("original", "Source"),
    ("derived", "Forks"),
]
SORT_KEY_OPTIONS: List[Tuple[str, str]] = [
    ("name", "Alphabetical"),
    ("last_modified_at", "Last Updated"),
    ("popularity_score", "Most Stars"),
    ("derivation_count", "Most Forks"),
]
SORT_DIRECTION_OPTIONS: List[Tuple[str, str]] = [
    ("ascending", "Ascending"),
    ("descending", "Descending"),
]


class FilterBar:
    """Widgets that edit the view state.

    ``update()`` pushes a ViewState into the widgets without calling back,
    so snapshots coming from the store never echo back into it.
    """

    def __init__(
        self,
        on_search: Callable[[str], None],
        on_visibility: Callable[[str], None],
        on_derivation: Callable[[str], None],
        on_language: Callable[[str], None],
        on_sort_key: Callable[[str], None],
        on_sort_direction: Callable[[str], None],
        on_reset: Callable[[], None],
    ):
        self.on_search = on_search
        self.on_visibility = on_visibility
        self.on_derivation = on_derivation
        self.on_language = on_language
        self.on_sort_key = on_sort_key
        self.on_sort_direction = on_sort_direction
        self.on_reset = on_reset

        self._updating = False
        self._languages: List[str] = []

    def build(self) -> Gtk.Widget:
        container = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)

        self.search_entry = Gtk.SearchEntry()
        self.search_entry.set_placeholder_text("Search repositories...")
        self.search_entry.set_size_request(360, -1)
        self.search_entry.set_halign(Gtk.Align.START)
        self.search_entry.connect("search-changed", self._on_search_changed)
        container.append(self.search_entry)

        row = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)

        row.append(self._caption("Filters:"))
        self.visibility_dropdown = self._dropdown(VISIBILITY_OPTIONS, self.on_visibility)
        row.append(self.visibility_dropdown)
        self.derivation_dropdown = self._dropdown(DERIVATION_OPTIONS, self.on_derivation)
        row.append(self.derivation_dropdown)

        self.language_model = Gtk.StringList.new(["All Languages"])
        self.language_dropdown = Gtk.DropDown.new(self.language_model, None)
        self.language_dropdown.connect("notify::selected", self._on_language_selected)
        row.append(self.language_dropdown)

        row.append(Gtk.Separator(orientation=Gtk.Orientation.VERTICAL))

        row.append(self._caption("Sort:"))
        self.sort_key_dropdown = self._dropdown(SORT_KEY_OPTIONS, self.on_sort_key)
        row.append(self.sort_key_dropdown)
        self.sort_direction_dropdown = self._dropdown(
            SORT_DIRECTION_OPTIONS, self.on_sort_direction
        )
        row.append(self.sort_direction_dropdown)

        self.reset_button = Gtk.Button(label="Reset")
        self.reset_button.add_css_class("flat")
        self.reset_button.set_visible(False)
        self.reset_button.connect("clicked", lambda *_: self.on_reset())
        row.append(self.reset_button)

        container.append(row)
        return container

    def clear_search(self) -> None:
        self.search_entry.set_text("")

    def update(self, view_state: ViewState, languages: Sequence[str]) -> None:
        """Sync the selectors. The search entry is owned by the user and left alone."""
        self._updating = True
        try:
            self._select(self.visibility_dropdown, VISIBILITY_OPTIONS, view_state.visibility_filter)
            self._select(self.derivation_dropdown, DERIVATION_OPTIONS, view_state.derivation_filter)
            self._select(self.sort_key_dropdown, SORT_KEY_OPTIONS, view_state.sort_key)
            self._select(
                self.sort_direction_dropdown, SORT_DIRECTION_OPTIONS, view_state.sort_direction
            )
            self._update_languages(list(languages), view_state.language_filter)
            self.reset_button.set_visible(not view_state.is_default_arrangement)
        finally:
            self._updating = False

    def _update_languages(self, languages: List[str], selected: str) -> None:
        # A selected language that disappeared from the collection stays listed
        if selected != ALL and selected not in languages:
            languages = sorted(languages + [selected])
        if languages != self._languages:
            self._languages = languages
            self.language_model.splice(
                0, self.language_model.get_n_items(), ["All Languages"] + languages
            )
        index = 0 if selected == ALL else self._languages.index(selected) + 1
        if self.language_dropdown.get_selected() != index:
            self.language_dropdown.set_selected(index)

    def _dropdown(
        self, options: List[Tuple[str, str]], callback: Callable[[str], None]
    ) -> Gtk.DropDown:
        dropdown = Gtk.DropDown.new_from_strings([label for _, label in options])

        def on_selected(widget, _param):
            if self._updating:
                return
            index = widget.get_selected()
            if 0 <= index < len(options):
                callback(options[index][0])

        dropdown.connect("notify::selected", on_selected)
        return dropdown

    @staticmethod
    def _select(dropdown: Gtk.DropDown, options: List[Tuple[str, str]], value: str) -> None:
        for index, (option, _) in enumerate(options):
            if option == value:
                if dropdown.get_selected() != index:
                    dropdown.set_selected(index)
                return

    @staticmethod
    def _caption(text: str) -> Gtk.Label:
        label = Gtk.Label(label=text)
        label.add_css_class("dim-label")
        return label

    def _on_search_changed(self, entry: Gtk.SearchEntry) -> None:
        if not self._updating:
            self.on_search(entry.get_text())

    def _on_language_selected(self, dropdown: Gtk.DropDown, _param) -> None:
        if self._updating:
            return
        index = dropdown.get_selected()
        if index == 0 or index == Gtk.INVALID_LIST_POSITION:
            self.on_language(ALL)
        elif index - 1 < len(self._languages):
            self.on_language(self._languages[index - 1])
