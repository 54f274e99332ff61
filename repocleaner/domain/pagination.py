"""Page arithmetic for the repository grid."""

import math
from typing import List, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

ELLIPSIS = "ellipsis"
PageLink = Union[int, str]


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for ``count`` items; never less than 1."""
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    return max(1, math.ceil(count / page_size))


def page_slice(items: Sequence[T], page: int, page_size: int) -> Tuple[T, ...]:
    """Items shown on the 1-based ``page``. No clamping happens here."""
    start = (page - 1) * page_size
    if start < 0:
        return ()
    return tuple(items[start:start + page_size])


def clamp_page(page: int, pages: int) -> int:
    return min(max(page, 1), max(pages, 1))


def page_numbers(current: int, pages: int, window: int = 5) -> List[PageLink]:
    """Page links to render, with ELLIPSIS markers for skipped ranges.

    Up to ``window`` pages are listed in full. Beyond that the first and
    last page are always present, plus the neighborhood of ``current``.
    """
    if pages <= window:
        return list(range(1, pages + 1))

    if current <= 3:
        return [1, 2, 3, 4, ELLIPSIS, pages]
    if current >= pages - 2:
        return [1, ELLIPSIS] + list(range(pages - 3, pages + 1))
    return [1, ELLIPSIS, current - 1, current, current + 1, ELLIPSIS, pages]
