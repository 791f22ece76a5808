import math
from typing import Callable, List, Sequence, TypeVar

T = TypeVar('T')


def filter_by_label(items: Sequence[T], query: str, label: Callable[[T], str] = lambda item: item.label) -> List[T]:
    """Case-insensitive substring match on each item's label."""
    needle = (query or "").lower()
    return [item for item in items if needle in label(item).lower()]


def page_count(total: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError("page_size must be positive")
    return math.ceil(total / page_size)


def paginate(items: Sequence[T], page: int, page_size: int) -> List[T]:
    """Return page `page` (1-based) of `items`."""
    if page_size < 1:
        raise ValueError("page_size must be positive")
    if page < 1:
        raise ValueError("page must be >= 1")
    start = (page - 1) * page_size
    return list(items[start:start + page_size])
