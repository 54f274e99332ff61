"""Filter and sort the repository collection for display.

``derive`` is a pure function of the collection and the view state: it
never mutates its inputs, and equal inputs always give equal results.
"""

import unicodedata
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from repocleaner.domain.repository import Repository
from repocleaner.domain.view_state import ALL, ViewState

FILTER_STAGES = ("search", "visibility", "derivation", "language")


@dataclass(frozen=True)
class DerivedResult:
    items: Tuple[Repository, ...]
    excluded: Dict[str, int] = field(default_factory=dict)

    @property
    def total_count(self) -> int:
        return len(self.items)

    @property
    def excluded_count(self) -> int:
        return sum(self.excluded.values())


def derive(mirror: Sequence[Repository], view_state: ViewState) -> DerivedResult:
    """Apply the text, visibility, derivation and language filters, then sort.

    The page index of ``view_state`` is not used here; slicing is done with
    ``repocleaner.domain.pagination.page_slice``.
    """
    items: List[Repository] = list(mirror)
    excluded: Dict[str, int] = {}

    predicates: List[Callable[[Repository], bool]] = [
        _search_predicate(view_state.search_text),
        _visibility_predicate(view_state.visibility_filter),
        _derivation_predicate(view_state.derivation_filter),
        _language_predicate(view_state.language_filter),
    ]
    for stage, predicate in zip(FILTER_STAGES, predicates):
        kept = [repo for repo in items if predicate(repo)]
        excluded[stage] = len(items) - len(kept)
        items = kept

    ordered = sorted(
        items,
        key=_SORT_KEYS[view_state.sort_key],
        reverse=view_state.sort_direction == "descending",
    )
    return DerivedResult(items=tuple(ordered), excluded=excluded)


def available_languages(mirror: Iterable[Repository]) -> List[str]:
    """Distinct primary languages in the collection, sorted."""
    return sorted({repo.primary_language for repo in mirror if repo.primary_language})


def name_sort_key(name: str) -> Tuple[str, str]:
    """Collation key for names: accents and case are ignored first.

    The secondary part puts lowercase before uppercase when two names only
    differ in case, as locale collation does.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name.swapcase()


def _search_predicate(search_text: str) -> Callable[[Repository], bool]:
    query = search_text.strip().casefold()
    if not query:
        return lambda repo: True

    def matches(repo: Repository) -> bool:
        for value in (repo.display_name, repo.description, repo.primary_language):
            if value and query in value.casefold():
                return True
        return False

    return matches


def _visibility_predicate(visibility_filter: str) -> Callable[[Repository], bool]:
    if visibility_filter == ALL:
        return lambda repo: True
    return lambda repo: repo.visibility == visibility_filter


def _derivation_predicate(derivation_filter: str) -> Callable[[Repository], bool]:
    if derivation_filter == "original":
        return lambda repo: not repo.is_derived
    if derivation_filter == "derived":
        return lambda repo: repo.is_derived
    return lambda repo: True


def _language_predicate(language_filter: str) -> Callable[[Repository], bool]:
    if language_filter == ALL:
        return lambda repo: True
    return lambda repo: repo.primary_language == language_filter


_SORT_KEYS: Dict[str, Callable[[Repository], object]] = {
    "name": lambda repo: name_sort_key(repo.display_name),
    "last_modified_at": lambda repo: repo.last_modified_at.timestamp(),
    "popularity_score": lambda repo: repo.popularity_score,
    "derivation_count": lambda repo: repo.derivation_count,
}
