from typing import List, Sequence, TypeVar

T = TypeVar("T")

PAGE_SIZE = 10


def total_pages(n_items: int, page_size: int = PAGE_SIZE) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return -(-max(0, n_items) // page_size)


def clamp_page(page: int, n_pages: int) -> int:
    """Keep a requested page inside [1, n_pages]; 1 when there is nothing to show."""
    if n_pages < 1:
        return 1
    return max(1, min(page, n_pages))


def page_slice(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> List[T]:
    start = (page - 1) * page_size
    if start < 0:
        return []
    return list(items[start : start + page_size])
