"""Hands GTK actions to the session loop and snapshots back to GTK."""

import logging
from typing import Callable, List

import gi

gi.require_version("GLib", "2.0")
from gi.repository import GLib

from repocleaner.core.async_runner import AsyncRunner
from repocleaner.core.errors import IllegalTransitionError
from repocleaner.domain.repository import Repository
from repocleaner.managers import (
    DeletionState,
    RepositorySession,
    ViewSnapshot,
)

logger = logging.getLogger("RepoCleaner.SessionBridge")


class SessionBridge:
    """Thread boundary between the GTK main loop and the session's event loop.

    Session state is only touched on the runner's loop. Listener callbacks
    are re-dispatched to the GTK main loop with GLib.idle_add.
    """

    def __init__(
        self,
        session: RepositorySession,
        runner: AsyncRunner,
        on_snapshot: Callable[[ViewSnapshot], None],
        on_deletion_state: Callable[[DeletionState, bool, bool], None],
    ):
        self.session = session
        self.runner = runner
        self._unsubscribers: List[Callable[[], None]] = []
        self._closed = False

        def publish_deletion_state(state: DeletionState):
            deletions = session.deletions
            GLib.idle_add(
                on_deletion_state, state, deletions.can_confirm, deletions.can_dismiss
            )

        def attach():
            self._unsubscribers = [
                session.store.subscribe(lambda s: GLib.idle_add(on_snapshot, s)),
                session.deletions.subscribe(publish_deletion_state),
            ]
            GLib.idle_add(on_snapshot, session.store.snapshot())

        self.runner.call(attach)

    # ---- remote operations ----------------------------------------------

    def sync(self) -> None:
        self.runner.submit(self.session.sync())

    def request_deletion(self, repository: Repository) -> None:
        self._call(self.session.request_deletion, repository)

    def cancel_deletion(self) -> None:
        self._call(self.session.cancel_deletion)

    def confirm_deletion(self) -> None:
        async def confirm():
            try:
                await self.session.confirm_deletion()
            except IllegalTransitionError as e:
                logger.warning(f"Ignoring confirmation: {e}")

        self.runner.submit(confirm())

    # ---- view state -----------------------------------------------------

    def set_search_text(self, text: str) -> None:
        self.runner.call(self.session.store.set_search_text, text)

    def set_visibility_filter(self, value: str) -> None:
        self.runner.call(self.session.store.set_visibility_filter, value)

    def set_derivation_filter(self, value: str) -> None:
        self.runner.call(self.session.store.set_derivation_filter, value)

    def set_language_filter(self, value: str) -> None:
        self.runner.call(self.session.store.set_language_filter, value)

    def set_sort_key(self, value: str) -> None:
        self.runner.call(self.session.store.set_sort_key, value)

    def set_sort_direction(self, value: str) -> None:
        self.runner.call(self.session.store.set_sort_direction, value)

    def set_current_page(self, page: int) -> None:
        self.runner.call(self.session.store.set_current_page, page)

    def reset_filters(self) -> None:
        self.runner.call(self.session.store.reset_filters)

    def clear_filters(self) -> None:
        self.runner.call(self.session.store.clear_filters)

    # ---- teardown -------------------------------------------------------

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        def detach():
            for unsubscribe in self._unsubscribers:
                unsubscribe()
            self._unsubscribers = []
            self.session.close()

        if self.runner.running:
            self.runner.call(detach)

    def _call(self, func: Callable, *args) -> None:
        def guarded():
            try:
                func(*args)
            except IllegalTransitionError as e:
                logger.warning(f"Ignoring deletion action: {e}")

        self.runner.call(guarded)
