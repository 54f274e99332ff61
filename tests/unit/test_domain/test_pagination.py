"""Tests for page arithmetic."""

import pytest


def test_total_pages():
    from repocleaner.domain.pagination import total_pages

    assert total_pages(0, 12) == 1
    assert total_pages(12, 12) == 1
    assert total_pages(13, 12) == 2
    assert total_pages(25, 12) == 3


def test_total_pages_rejects_bad_page_size():
    from repocleaner.domain.pagination import total_pages

    with pytest.raises(ValueError):
        total_pages(10, 0)


def test_page_slice_last_page_partial():
    from repocleaner.domain.pagination import page_slice

    items = list(range(25))

    assert page_slice(items, 1, 12) == tuple(range(12))
    assert page_slice(items, 3, 12) == (24,)
    assert page_slice(items, 4, 12) == ()


def test_clamp_page():
    from repocleaner.domain.pagination import clamp_page

    assert clamp_page(5, 3) == 3
    assert clamp_page(0, 3) == 1
    assert clamp_page(2, 0) == 1
    assert clamp_page(2, 3) == 2


def test_page_numbers_short_range():
    from repocleaner.domain.pagination import page_numbers

    assert page_numbers(1, 1) == [1]
    assert page_numbers(2, 5) == [1, 2, 3, 4, 5]


def test_page_numbers_near_start():
    from repocleaner.domain.pagination import ELLIPSIS, page_numbers

    assert page_numbers(2, 10) == [1, 2, 3, 4, ELLIPSIS, 10]


def test_page_numbers_near_end():
    from repocleaner.domain.pagination import ELLIPSIS, page_numbers

    assert page_numbers(9, 10) == [1, ELLIPSIS, 7, 8, 9, 10]


def test_page_numbers_middle():
    from repocleaner.domain.pagination import ELLIPSIS, page_numbers

    assert page_numbers(5, 10) == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]
