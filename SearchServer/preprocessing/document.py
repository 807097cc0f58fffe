from enum import Enum
from typing import NamedTuple, Sequence


class DocumentStatus(Enum):
    ACTUAL = "ACTUAL"
    IRRELEVANT = "IRRELEVANT"
    BANNED = "BANNED"
    REMOVED = "REMOVED"


class Document(NamedTuple):
    """A ranked search result."""
    id: int
    relevance: float
    rating: int

    def __str__(self):
        return f"{{ document_id = {self.id}, relevance = {self.relevance:.6f}, rating = {self.rating} }}"


class DocumentData(NamedTuple):
    """Metadata stored for every indexed document."""
    rating: int
    status: DocumentStatus


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Compute the average rating of a document.

    Args:
        ratings: Ratings given to the document

    Returns:
        Floor of the arithmetic mean, or 0 if there are no ratings
    """
    if not ratings:
        return 0
    return sum(ratings) // len(ratings)
