#!/usr/bin/env python3
"""
Tests for the pagination engine and the paging request/response types.
Covers page-count rounding, slicing bounds, defaults and option validation.
"""

import pytest

from models import InvalidArgumentError, Page, PageOptions
from services.pagination import (
    build_page, build_page_options, calculate_total_pages, paginate, slice_bounds,
)


def test_total_pages_rounds_up():
    """A partial last page still counts as a page; no elements means no pages"""
    for page_size in range(1, 12):
        for total in range(0, 60):
            total_pages = calculate_total_pages(total, page_size)
            assert total_pages == (total + page_size - 1) // page_size
            assert (total_pages == 0) == (total == 0)
            assert total_pages * page_size >= total
            assert (total_pages - 1) * page_size < total or total == 0


@pytest.mark.parametrize("page_size", [0, -1, -10])
def test_total_pages_rejects_non_positive_page_size(page_size):
    with pytest.raises(InvalidArgumentError):
        calculate_total_pages(10, page_size)


def test_total_pages_rejects_negative_total():
    with pytest.raises(InvalidArgumentError):
        calculate_total_pages(-1, 10)


def test_item_count_matches_remaining_elements():
    """Every page holds min(pageSize, remaining) items, and nothing past the end"""
    for total in (0, 1, 9, 10, 11, 23, 40):
        items = list(range(total))
        for page_size in (1, 3, 10, 25):
            for page_number in range(1, 8):
                page = paginate(items, PageOptions(page_number=page_number, page_size=page_size))
                expected = min(page_size, max(0, total - (page_number - 1) * page_size))
                assert len(page.items) == expected
                assert page.total_elements == total


def test_pages_cover_every_item_once():
    items = [f"item-{i}" for i in range(23)]
    collected = []
    for page_number in range(1, calculate_total_pages(len(items), 10) + 1):
        collected.extend(paginate(items, PageOptions(page_number=page_number, page_size=10)).items)
    assert collected == items


def test_twenty_three_items_third_page():
    page = paginate(list(range(23)), PageOptions(page_number=3, page_size=10))
    assert page.items == [20, 21, 22]
    assert page.total_pages == 3
    assert page.total_elements == 23
    assert page.page_number == 3
    assert page.page_size == 10


def test_page_past_the_end_is_empty():
    """Requesting beyond the last page with a non-dividing size is not an error"""
    page = paginate(list(range(7)), PageOptions(page_number=5, page_size=3))
    assert page.items == []
    assert page.total_pages == 3
    assert page.total_elements == 7


def test_slice_bounds_are_clamped():
    assert slice_bounds(23, PageOptions(page_number=3, page_size=10)) == (20, 23)
    assert slice_bounds(23, PageOptions(page_number=9, page_size=10)) == (23, 23)
    assert slice_bounds(0, PageOptions()) == (0, 0)


def test_build_page_from_storage_window():
    """A LIMIT/OFFSET window wraps into the same page paginate would produce"""
    items = list(range(23))
    options = PageOptions(page_number=3, page_size=10)
    window = items[options.offset:options.offset + options.page_size]
    assert build_page(window, len(items), options) == paginate(items, options)


def test_page_options_defaults():
    options = PageOptions()
    assert options.page_number == 1
    assert options.page_size == 10
    assert options.sort_by == "id"
    assert options.sort_direction == "asc"
    assert options.offset == 0
    assert options.limit == 10
    assert not options.descending


def test_page_options_normalizes_direction():
    options = PageOptions(sort_by=" name ", sort_direction="DESC")
    assert options.sort_by == "name"
    assert options.sort_direction == "desc"
    assert options.descending


@pytest.mark.parametrize("kwargs", [
    {"page_number": 0},
    {"page_number": -3},
    {"page_size": 0},
    {"page_size": -1},
    {"sort_by": "  "},
    {"sort_direction": "sideways"},
])
def test_page_options_rejects_invalid_values(kwargs):
    with pytest.raises(InvalidArgumentError):
        PageOptions(**kwargs)


def test_build_page_options_applies_defaults():
    options = build_page_options(sort_by="name", default_page_size=25)
    assert options == PageOptions(page_number=1, page_size=25, sort_by="name", sort_direction="asc")


def test_build_page_options_enforces_max_page_size():
    assert build_page_options(page_size=100, max_page_size=100).page_size == 100
    with pytest.raises(InvalidArgumentError):
        build_page_options(page_size=101, max_page_size=100)


def test_page_to_dict_uses_wire_names():
    page = Page(page_number=2, page_size=2, total_pages=3, total_elements=5, items=[3, 4])
    assert page.map(lambda item: {"value": item}).to_dict() == {
        "pageNumber": 2,
        "pageSize": 2,
        "totalPages": 3,
        "totalElements": 5,
        "items": [{"value": 3}, {"value": 4}],
    }


def test_page_map_keeps_metadata():
    page = Page(page_number=1, page_size=10, total_pages=1, total_elements=2, items=[1, 2])
    mapped = page.map(str)
    assert mapped.items == ["1", "2"]
    assert mapped.total_elements == 2
    assert mapped.total_pages == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
