"""
Query specification and result envelope for paged searches.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
DEFAULT_SORT_BY = "id"
DEFAULT_SORT_DIRECTION = "asc"
SORT_DIRECTIONS = ("asc", "desc")


@dataclass(frozen=True)
class PageOptions:
    """
    Immutable paging request: 1-based page number, page size, sort field and
    sort direction.

    ``sort_by`` is only checked for presence here; it is resolved against the
    entity's allow-list by the repository before any query is built.
    ``sort_direction`` is normalized to lower case.
    """

    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: str = DEFAULT_SORT_BY
    sort_direction: str = DEFAULT_SORT_DIRECTION

    def __post_init__(self) -> None:
        if not isinstance(self.page_number, int) or self.page_number < 1:
            raise InvalidArgumentError(f"page must be a positive integer, got {self.page_number!r}")
        if not isinstance(self.page_size, int) or self.page_size < 1:
            raise InvalidArgumentError(f"pageSize must be a positive integer, got {self.page_size!r}")

        sort_by = (self.sort_by or "").strip()
        if not sort_by:
            raise InvalidArgumentError("sortBy must not be empty")
        object.__setattr__(self, "sort_by", sort_by)

        direction = (self.sort_direction or "").strip().lower()
        if direction not in SORT_DIRECTIONS:
            raise InvalidArgumentError(f"sortDirection must be 'asc' or 'desc', got {self.sort_direction!r}")
        object.__setattr__(self, "sort_direction", direction)

    @classmethod
    def from_query(cls, page: Optional[int] = None, page_size: Optional[int] = None,
                   sort_by: Optional[str] = None, sort_direction: Optional[str] = None,
                   default_page_size: int = DEFAULT_PAGE_SIZE) -> 'PageOptions':
        """Build options from raw query inputs, applying defaults for absent values"""
        return cls(
            page_number=DEFAULT_PAGE_NUMBER if page is None else page,
            page_size=default_page_size if page_size is None else page_size,
            sort_by=DEFAULT_SORT_BY if sort_by is None else sort_by,
            sort_direction=DEFAULT_SORT_DIRECTION if sort_direction is None else sort_direction,
        )

    @property
    def offset(self) -> int:
        """Zero-based index of the first item on this page."""
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Exclusive end index of this page in the full result set."""
        return self.offset + self.page_size

    @property
    def descending(self) -> bool:
        return self.sort_direction == "desc"


@dataclass
class Page(Generic[T]):
    """Paged result envelope: page metadata plus the slice of items."""

    page_number: int
    page_size: int
    total_pages: int
    total_elements: int
    items: List[T] = field(default_factory=list)

    def map(self, func: Callable[[T], Any]) -> 'Page':
        """Return a page with the same metadata and transformed items"""
        return Page(
            page_number=self.page_number,
            page_size=self.page_size,
            total_pages=self.total_pages,
            total_elements=self.total_elements,
            items=[func(item) for item in self.items],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pageNumber': self.page_number,
            'pageSize': self.page_size,
            'totalPages': self.total_pages,
            'totalElements': self.total_elements,
            'items': list(self.items),
        }
