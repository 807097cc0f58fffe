from typing import List, Sequence, TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


def paginate(items: Sequence[T], page_size: int) -> List[List[T]]:
    """
    Split items into consecutive pages.

    Args:
        items: Items to split
        page_size: Maximum number of items per page, the last page may be shorter

    Returns:
        List of pages, empty if there are no items
    """
    if page_size < 1:
        raise InvalidArgumentError(f"Page size must be positive, got {page_size}")
    return [list(items[i:i + page_size]) for i in range(0, len(items), page_size)]
