"""Dashboard page: profile header, filters, repository grid and paging."""

import logging
from typing import Callable, List, Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gtk

from repocleaner.gui.components.filter_bar import FilterBar
from repocleaner.gui.components.pagination_bar import PaginationBar
from repocleaner.gui.components.repository_card import RepositoryCard
from repocleaner.gui.dialogs.delete_dialog import DeleteDialog
from repocleaner.gui.session_bridge import SessionBridge
from repocleaner.managers import (
    AwaitingConfirmation,
    DeletionState,
    Idle,
    InFlight,
    Settled,
    ViewSnapshot,
)
from repocleaner.utils.formatting import format_result_count

logger = logging.getLogger("RepoCleaner.DashboardPage")


class DashboardPage:
    """Renders ViewSnapshots and forwards user actions to the SessionBridge.

    ``bridge`` is attached after construction because the bridge's callbacks
    are this page's render methods.
    """

    def __init__(self, on_logout: Callable[[], None], on_toggle_theme: Callable[[], None]):
        self.on_logout = on_logout
        self.on_toggle_theme = on_toggle_theme
        self.bridge: Optional[SessionBridge] = None
        self._cards: List[RepositoryCard] = []
        self._deletion_state: DeletionState = Idle()
        self._delete_dialog: Optional[DeleteDialog] = None
        self._snapshot: Optional[ViewSnapshot] = None
        self._cards_key = None

    def attach(self, bridge: SessionBridge) -> None:
        self.bridge = bridge

    def build(self) -> Gtk.Widget:
        toolbar_view = Adw.ToolbarView()
        toolbar_view.add_top_bar(self._build_header())

        self.content_stack = Gtk.Stack()
        self.content_stack.set_transition_type(Gtk.StackTransitionType.CROSSFADE)

        spinner = Gtk.Spinner()
        spinner.set_size_request(32, 32)
        spinner.set_halign(Gtk.Align.CENTER)
        spinner.set_valign(Gtk.Align.CENTER)
        spinner.start()
        self.content_stack.add_named(spinner, "loading")

        empty = Adw.StatusPage()
        empty.set_icon_name("folder-symbolic")
        empty.set_title("No repositories found")
        empty.set_description("You don't have any repositories yet")
        self.content_stack.add_named(empty, "empty")

        self.content_stack.add_named(self._build_collection_view(), "collection")
        toolbar_view.set_content(self.content_stack)
        return toolbar_view

    def _build_header(self) -> Gtk.Widget:
        header = Adw.HeaderBar()
        header.set_title_widget(Adw.WindowTitle.new("Repo Cleaner", ""))

        profile_box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        self.avatar = Adw.Avatar.new(24, None, True)
        profile_box.append(self.avatar)
        self.profile_label = Gtk.Label(label="")
        self.profile_label.add_css_class("heading")
        profile_box.append(self.profile_label)
        profile_box.set_visible(False)
        self.profile_box = profile_box
        header.pack_start(profile_box)

        logout = Gtk.Button()
        logout.set_icon_name("system-log-out-symbolic")
        logout.set_tooltip_text("Logout")
        logout.connect("clicked", lambda *_: self.on_logout())
        header.pack_end(logout)

        theme = Gtk.Button()
        theme.set_icon_name("weather-clear-night-symbolic")
        theme.set_tooltip_text("Toggle theme")
        theme.connect("clicked", lambda *_: self.on_toggle_theme())
        header.pack_end(theme)

        refresh = Gtk.Button()
        refresh.set_icon_name("view-refresh-symbolic")
        refresh.set_tooltip_text("Reload repositories")
        refresh.connect("clicked", lambda *_: self.bridge and self.bridge.sync())
        header.pack_end(refresh)

        return header

    def _build_collection_view(self) -> Gtk.Widget:
        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=16)
        box.set_margin_top(24)
        box.set_margin_bottom(12)
        box.set_margin_start(24)
        box.set_margin_end(24)

        title_row = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=12)
        title = Gtk.Label(label="Your Repositories")
        title.add_css_class("title-1")
        title_row.append(title)
        self.count_label = Gtk.Label(label="0")
        self.count_label.add_css_class("count-badge")
        self.count_label.set_valign(Gtk.Align.CENTER)
        title_row.append(self.count_label)
        box.append(title_row)

        self.filter_bar = FilterBar(
            on_search=lambda text: self.bridge.set_search_text(text),
            on_visibility=lambda value: self.bridge.set_visibility_filter(value),
            on_derivation=lambda value: self.bridge.set_derivation_filter(value),
            on_language=lambda value: self.bridge.set_language_filter(value),
            on_sort_key=lambda value: self.bridge.set_sort_key(value),
            on_sort_direction=lambda value: self.bridge.set_sort_direction(value),
            on_reset=lambda: self.bridge.reset_filters(),
        )
        box.append(self.filter_bar.build())

        self.results_stack = Gtk.Stack()
        self.results_stack.set_vexpand(True)

        scrolled = Gtk.ScrolledWindow()
        scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        scrolled.set_vexpand(True)
        self.grid = Gtk.FlowBox()
        self.grid.set_selection_mode(Gtk.SelectionMode.NONE)
        self.grid.set_homogeneous(True)
        self.grid.set_column_spacing(12)
        self.grid.set_row_spacing(12)
        self.grid.set_max_children_per_line(4)
        self.grid.set_valign(Gtk.Align.START)
        scrolled.set_child(self.grid)
        self.scrolled = scrolled
        self.results_stack.add_named(scrolled, "results")

        no_results = Adw.StatusPage()
        no_results.set_icon_name("system-search-symbolic")
        no_results.set_title("No results found")
        no_results.set_description("Try adjusting your search or filters")
        clear = Gtk.Button(label="Clear all filters")
        clear.add_css_class("pill")
        clear.set_halign(Gtk.Align.CENTER)
        clear.connect("clicked", self._on_clear_filters)
        no_results.set_child(clear)
        self.results_stack.add_named(no_results, "no-results")

        box.append(self.results_stack)

        self.pagination_bar = PaginationBar(on_page=lambda page: self.bridge.set_current_page(page))
        box.append(self.pagination_bar.build())

        return box

    def _on_clear_filters(self, _button) -> None:
        self.filter_bar.clear_search()
        self.bridge.clear_filters()

    # ---- rendering ------------------------------------------------------

    def render(self, snapshot: ViewSnapshot) -> bool:
        """Draw ``snapshot``. Returns False so it can be an idle callback."""
        previous = self._snapshot
        self._snapshot = snapshot

        self._render_profile(snapshot)

        if snapshot.loading:
            self.content_stack.set_visible_child_name("loading")
            return False
        if snapshot.is_empty_collection:
            self.content_stack.set_visible_child_name("empty")
            return False
        self.content_stack.set_visible_child_name("collection")

        view_state = snapshot.view_state
        self.count_label.set_label(
            format_result_count(
                snapshot.total_count,
                snapshot.mirror_size,
                bool(view_state.search_text.strip()),
            )
        )
        self.filter_bar.update(view_state, snapshot.languages)

        if snapshot.total_count == 0:
            self.results_stack.set_visible_child_name("no-results")
        else:
            self.results_stack.set_visible_child_name("results")
            cards_key = (snapshot.page_items, view_state.search_text)
            if cards_key != self._cards_key:
                self._cards_key = cards_key
                self._render_cards(snapshot)
            if previous is not None and previous.current_page != snapshot.current_page:
                self.scrolled.get_vadjustment().set_value(0)

        self.pagination_bar.update(
            snapshot.current_page, snapshot.total_pages, snapshot.page_numbers
        )
        return False

    def _render_profile(self, snapshot: ViewSnapshot) -> None:
        profile = snapshot.profile
        if profile is None:
            self.profile_box.set_visible(False)
            return
        self.avatar.set_text(profile.display_name)
        self.profile_label.set_label(profile.display_name)
        self.profile_box.set_visible(True)

    def _render_cards(self, snapshot: ViewSnapshot) -> None:
        while True:
            child = self.grid.get_first_child()
            if child is None:
                break
            self.grid.remove(child)

        deleting_allowed = isinstance(self._deletion_state, Idle)
        self._cards = []
        for repository in snapshot.page_items:
            card = RepositoryCard(
                repository,
                on_delete=lambda repo: self.bridge.request_deletion(repo),
                search_query=snapshot.view_state.search_text,
            )
            self.grid.append(card.build())
            card.set_delete_enabled(deleting_allowed)
            self._cards.append(card)

    def render_deletion_state(
        self, state: DeletionState, can_confirm: bool, can_dismiss: bool
    ) -> bool:
        self._deletion_state = state
        for card in self._cards:
            card.set_delete_enabled(isinstance(state, Idle))

        if isinstance(state, AwaitingConfirmation) and self._delete_dialog is None:
            self._delete_dialog = DeleteDialog(
                state.repository,
                on_confirm=lambda: self.bridge.confirm_deletion(),
                on_cancel=lambda: self.bridge.cancel_deletion(),
            )
            self._delete_dialog.present(self.grid)
        elif isinstance(state, InFlight):
            logger.debug(f"Waiting for deletion of {state.repository.full_name}")

        if self._delete_dialog is not None:
            if isinstance(state, (Idle, Settled)):
                self._delete_dialog.close()
                self._delete_dialog = None
            else:
                self._delete_dialog.update(can_confirm, can_dismiss)
        return False
