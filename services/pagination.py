"""
Pagination engine shared by every repository.

Turns either a full ordered result set, or a window already fetched with
LIMIT/OFFSET plus the total count, into a Page. Both paths agree on which
items land on which page.
"""

from typing import Optional, Sequence, Tuple, TypeVar

from models import Page, PageOptions, InvalidArgumentError
from models.page_models import DEFAULT_PAGE_SIZE
from utils import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def calculate_total_pages(total_elements: int, page_size: int) -> int:
    """Number of pages needed for total_elements; a partial last page still counts."""
    if page_size < 1:
        raise InvalidArgumentError(f"pageSize must be a positive integer, got {page_size!r}")
    if total_elements < 0:
        raise InvalidArgumentError(f"totalElements cannot be negative, got {total_elements!r}")
    return -(-total_elements // page_size)


def slice_bounds(total_elements: int, options: PageOptions) -> Tuple[int, int]:
    """
    Start and end index of the requested page, clamped to [0, total_elements].
    A page past the end yields an empty range instead of an error.
    """
    start = min(options.offset, total_elements)
    end = min(options.limit, total_elements)
    return start, end


def paginate(items: Sequence[T], options: PageOptions) -> Page[T]:
    """Slice a full, already filtered and ordered result set into a page"""
    total_elements = len(items)
    start, end = slice_bounds(total_elements, options)
    return Page(
        page_number=options.page_number,
        page_size=options.page_size,
        total_pages=calculate_total_pages(total_elements, options.page_size),
        total_elements=total_elements,
        items=list(items[start:end]),
    )


def build_page(window: Sequence[T], total_elements: int, options: PageOptions) -> Page[T]:
    """Wrap a window fetched with LIMIT/OFFSET at the storage layer into a page"""
    start, end = slice_bounds(total_elements, options)
    return Page(
        page_number=options.page_number,
        page_size=options.page_size,
        total_pages=calculate_total_pages(total_elements, options.page_size),
        total_elements=total_elements,
        items=list(window[:end - start]),
    )


def build_page_options(page: Optional[int] = None, page_size: Optional[int] = None,
                       sort_by: Optional[str] = None, sort_direction: Optional[str] = None,
                       default_page_size: int = DEFAULT_PAGE_SIZE,
                       max_page_size: Optional[int] = None) -> PageOptions:
    """
    Build PageOptions from raw request values.

    Absent values take their defaults. A page size above max_page_size is
    rejected rather than silently clamped.
    """
    options = PageOptions.from_query(
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_direction=sort_direction,
        default_page_size=default_page_size,
    )
    if max_page_size is not None and options.page_size > max_page_size:
        logger.warning(f"Rejected pageSize {options.page_size} (max {max_page_size})")
        raise InvalidArgumentError(f"pageSize must not exceed {max_page_size}")
    return options
