"""
SearchServer - in-memory TF-IDF full-text search over a mutable document set.
"""
from .errors import SearchServerError, InvalidArgumentError, DocumentNotFoundError, TermNotFoundError
from .preprocessing.document import Document, DocumentStatus
from .tfidf_search.search_server import SearchServer, MAX_RESULT_DOCUMENT_COUNT, EPSILON
from .request_queue import RequestQueue
from .remove_duplicates import find_duplicates, remove_duplicates

__all__ = [
    "SearchServer",
    "RequestQueue",
    "Document",
    "DocumentStatus",
    "find_duplicates",
    "remove_duplicates",
    "SearchServerError",
    "InvalidArgumentError",
    "DocumentNotFoundError",
    "TermNotFoundError",
    "MAX_RESULT_DOCUMENT_COUNT",
    "EPSILON",
]
