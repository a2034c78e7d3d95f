"""Group long ordered sequences into fixed-size pages."""

from __future__ import annotations

from typing import Callable, List, TypeVar

from ..config import PAGE_SIZE
from ..models import Flat, Page, PaginatedNode, Paged

T = TypeVar("T")


def paginate(count: int, produce: Callable[[int], T]) -> PaginatedNode[T]:
    """Build the ``count`` items produced by ``produce`` as a paginated node.

    Items are grouped into contiguous pages of at most ``PAGE_SIZE``. A result
    that fits in one page is returned flat so that no redundant grouping level
    appears in the tree.
    """

    pages: List[Page[T]] = []
    for start_index in range(0, max(count, 0), PAGE_SIZE):
        end_index = min(start_index + PAGE_SIZE, count) - 1
        items = tuple(produce(index) for index in range(start_index, end_index + 1))
        pages.append(Page(start_index=start_index, end_index=end_index, items=items))

    if not pages:
        return Flat(items=())
    if len(pages) == 1:
        return Flat(items=pages[0].items)
    return Paged(pages=tuple(pages))
