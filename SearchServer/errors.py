"""
Exceptions raised by the search server core.
"""


class SearchServerError(Exception):
    """Base class for all search server errors."""


class InvalidArgumentError(SearchServerError, ValueError):
    """Bad document id, invalid word or malformed query."""


class DocumentNotFoundError(SearchServerError, KeyError):
    """Lookup of a document that is not in the index."""

    def __str__(self):
        return Exception.__str__(self)


class TermNotFoundError(SearchServerError, KeyError):
    """Lookup of a word that is not in the index."""

    def __str__(self):
        return Exception.__str__(self)
