"""
Detection and removal of documents with the same set of words.

Word frequencies and word order are ignored: "a b a" duplicates "b a".
Of every group of duplicates the document with the smallest ID is kept.
"""
import logging
from typing import FrozenSet, List, Set

from .tfidf_search.search_server import SearchServer

logger = logging.getLogger(__name__)


def document_signature(search_server: SearchServer, document_id: int) -> FrozenSet[str]:
    """Set of distinct words of a document, compared structurally."""
    return frozenset(search_server.get_word_frequencies(document_id))


def find_duplicates(search_server: SearchServer) -> List[int]:
    """
    Find documents whose word set was already seen in a document with a smaller ID.

    Args:
        search_server: Server to scan

    Returns:
        Duplicate document IDs in ascending order
    """
    duplicates = []
    seen_signatures: Set[FrozenSet[str]] = set()

    for document_id in search_server:
        signature = document_signature(search_server, document_id)
        if signature in seen_signatures:
            logger.info("Found duplicate document id %d", document_id)
            duplicates.append(document_id)
        else:
            seen_signatures.add(signature)

    return duplicates


def remove_duplicates(search_server: SearchServer) -> List[int]:
    """
    Remove duplicate documents after scanning the whole server.

    Returns:
        IDs of removed documents
    """
    duplicates = find_duplicates(search_server)
    for document_id in duplicates:
        search_server.remove_document(document_id)
    return duplicates
