"""User-controlled parameters that drive the visible projection."""

from dataclasses import dataclass, replace
from typing import Literal, Tuple

VisibilityFilter = Literal["all", "public", "private"]
DerivationFilter = Literal["all", "original", "derived"]
SortKey = Literal["name", "last_modified_at", "popularity_score", "derivation_count"]
SortDirection = Literal["ascending", "descending"]

ALL = "all"

VISIBILITY_FILTERS: Tuple[str, ...] = ("all", "public", "private")
DERIVATION_FILTERS: Tuple[str, ...] = ("all", "original", "derived")
SORT_KEYS: Tuple[str, ...] = (
    "name",
    "last_modified_at",
    "popularity_score",
    "derivation_count",
)
SORT_DIRECTIONS: Tuple[str, ...] = ("ascending", "descending")


@dataclass(frozen=True)
class ViewState:
    search_text: str = ""
    visibility_filter: VisibilityFilter = "all"
    derivation_filter: DerivationFilter = "all"
    language_filter: str = ALL
    sort_key: SortKey = "name"
    sort_direction: SortDirection = "ascending"
    current_page: int = 1

    def __post_init__(self):
        _check_choice("visibility_filter", self.visibility_filter, VISIBILITY_FILTERS)
        _check_choice("derivation_filter", self.derivation_filter, DERIVATION_FILTERS)
        _check_choice("sort_key", self.sort_key, SORT_KEYS)
        _check_choice("sort_direction", self.sort_direction, SORT_DIRECTIONS)
        if not self.language_filter:
            raise ValueError("language_filter cannot be empty, use 'all'")
        if self.current_page < 1:
            raise ValueError(f"current_page must be >= 1, got {self.current_page}")

    @property
    def criteria(self) -> tuple:
        """Everything except the page index."""
        return (
            self.search_text,
            self.visibility_filter,
            self.derivation_filter,
            self.language_filter,
            self.sort_key,
            self.sort_direction,
        )

    @property
    def is_default_arrangement(self) -> bool:
        """True when the filters and the sort are at their defaults."""
        return (
            self.visibility_filter == ALL
            and self.derivation_filter == ALL
            and self.language_filter == ALL
            and self.sort_key == "name"
            and self.sort_direction == "ascending"
        )

    def evolve(self, **changes) -> "ViewState":
        """Return a copy with ``changes`` applied.

        The page index goes back to 1 when any filter or sort criterion
        actually changes value.
        """
        updated = replace(self, **changes)
        if "current_page" not in changes and updated.criteria != self.criteria:
            updated = replace(updated, current_page=1)
        return updated


def _check_choice(name: str, value: str, choices: Tuple[str, ...]) -> None:
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}; got {value!r}")
