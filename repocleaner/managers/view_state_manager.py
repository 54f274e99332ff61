"""View state store: the collection mirror, the view state and what they derive."""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from repocleaner.domain.pagination import (
    PageLink,
    clamp_page,
    page_numbers,
    page_slice,
    total_pages,
)
from repocleaner.domain.query import DerivedResult, available_languages, derive
from repocleaner.domain.repository import Repository, UserProfile
from repocleaner.domain.view_state import ALL, ViewState

logger = logging.getLogger("RepoCleaner.ViewStateStore")


@dataclass(frozen=True)
class ViewSnapshot:
    """Everything the presentation needs to draw one frame."""

    page_items: Tuple[Repository, ...]
    total_count: int
    mirror_size: int
    total_pages: int
    current_page: int
    loading: bool
    profile: Optional[UserProfile]
    view_state: ViewState
    languages: Tuple[str, ...]
    page_numbers: Tuple[PageLink, ...]

    @property
    def is_empty_collection(self) -> bool:
        return self.mirror_size == 0


class ViewStateStore:
    """Single owner of the mirror and the view state.

    Every mutation re-derives the visible page and publishes a ViewSnapshot
    to the subscribers. Filtering and sorting are only recomputed when the
    mirror or a filter/sort criterion changed; paging reuses the last result.
    """

    def __init__(self, page_size: int = 12):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self._mirror: Tuple[Repository, ...] = ()
        self._view_state = ViewState()
        self._loading = False
        self._profile: Optional[UserProfile] = None
        self._derived: DerivedResult = derive(self._mirror, self._view_state)
        self._derived_for: tuple = (self._mirror, self._view_state.criteria)
        self._listeners: List[Callable[[ViewSnapshot], None]] = []

    # ---- reading -------------------------------------------------------

    @property
    def mirror(self) -> Tuple[Repository, ...]:
        return self._mirror

    @property
    def view_state(self) -> ViewState:
        return self._view_state

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def profile(self) -> Optional[UserProfile]:
        return self._profile

    @property
    def derived(self) -> DerivedResult:
        return self._derived

    @property
    def total_pages(self) -> int:
        return total_pages(self._derived.total_count, self.page_size)

    def snapshot(self) -> ViewSnapshot:
        pages = self.total_pages
        current = self._view_state.current_page
        return ViewSnapshot(
            page_items=page_slice(self._derived.items, current, self.page_size),
            total_count=self._derived.total_count,
            mirror_size=len(self._mirror),
            total_pages=pages,
            current_page=current,
            loading=self._loading,
            profile=self._profile,
            view_state=self._view_state,
            languages=tuple(available_languages(self._mirror)),
            page_numbers=tuple(page_numbers(current, pages)),
        )

    def subscribe(self, listener: Callable[[ViewSnapshot], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- view state mutations -----------------------------------------

    def set_search_text(self, text: str) -> None:
        self._apply(self._view_state.evolve(search_text=text))

    def set_visibility_filter(self, value: str) -> None:
        self._apply(self._view_state.evolve(visibility_filter=value))

    def set_derivation_filter(self, value: str) -> None:
        self._apply(self._view_state.evolve(derivation_filter=value))

    def set_language_filter(self, value: str) -> None:
        self._apply(self._view_state.evolve(language_filter=value))

    def set_sort_key(self, value: str) -> None:
        self._apply(self._view_state.evolve(sort_key=value))

    def set_sort_direction(self, value: str) -> None:
        self._apply(self._view_state.evolve(sort_direction=value))

    def set_current_page(self, page: int) -> None:
        page = clamp_page(page, self.total_pages)
        self._apply(self._view_state.evolve(current_page=page))

    def reset_filters(self) -> None:
        """Filters and sort back to their defaults; the search text stays."""
        self._apply(
            self._view_state.evolve(
                visibility_filter=ALL,
                derivation_filter=ALL,
                language_filter=ALL,
                sort_key="name",
                sort_direction="ascending",
            )
        )

    def clear_filters(self) -> None:
        """Drop the search text and every filter; the sort stays."""
        self._apply(
            self._view_state.evolve(
                search_text="",
                visibility_filter=ALL,
                derivation_filter=ALL,
                language_filter=ALL,
            )
        )

    # ---- collection mutations -----------------------------------------

    def replace_mirror(self, repositories: Sequence[Repository]) -> None:
        self._mirror = tuple(repositories)
        logger.debug(f"Mirror replaced: {len(self._mirror)} repositories")
        self._apply(self._view_state)

    def remove_repository(self, repository_id: int) -> bool:
        """Remove the repository with ``repository_id``; False if absent."""
        remaining = tuple(repo for repo in self._mirror if repo.id != repository_id)
        if len(remaining) == len(self._mirror):
            logger.warning(f"Repository {repository_id} is not in the mirror")
            return False
        self._mirror = remaining
        self._apply(self._view_state)
        return True

    def set_loading(self, loading: bool) -> None:
        if loading == self._loading:
            return
        self._loading = loading
        self._publish()

    def set_profile(self, profile: Optional[UserProfile]) -> None:
        self._profile = profile
        self._publish()

    # ---- internals -----------------------------------------------------

    def _apply(self, view_state: ViewState) -> None:
        derived_mirror, derived_criteria = self._derived_for
        if derived_mirror is not self._mirror or derived_criteria != view_state.criteria:
            self._derived = derive(self._mirror, view_state)
            self._derived_for = (self._mirror, view_state.criteria)

        pages = total_pages(self._derived.total_count, self.page_size)
        if view_state.current_page > pages:
            view_state = view_state.evolve(current_page=pages)

        self._view_state = view_state
        self._publish()

    def _publish(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
