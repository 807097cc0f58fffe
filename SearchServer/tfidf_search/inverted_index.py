import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, List, Mapping

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_EMPTY = MappingProxyType({})


class InvertedIndex:
    """
    Inverted index mapping words to document occurrences.

    Keeps two views of the same relation, {word: {doc_id: freq}} for query
    evaluation and {doc_id: {word: freq}} for removal and frequency lookups.
    Both are private and only changed together by add_document and
    remove_document, so they can never disagree. Readers get read-only views.
    """

    def __init__(self):
        self._word_to_document_freqs: Dict[str, Dict[int, float]] = defaultdict(dict)
        self._document_to_word_freqs: Dict[int, Dict[str, float]] = {}

    def add_document(self, doc_id: int, words: List[str]):
        """
        Add a document to the inverted index.

        Every occurrence of a word adds 1 / len(words) to its term frequency,
        so the frequencies of one document sum to 1.

        Args:
            doc_id: Document ID, must not be indexed yet
            words: Document words with stop words already removed
        """
        if doc_id in self._document_to_word_freqs:
            raise InvalidArgumentError(f"Document {doc_id} is already indexed")
        if not words:
            return

        inv_word_count = 1.0 / len(words)
        word_freqs: Dict[str, float] = {}
        for word in words:
            word_freqs[word] = word_freqs.get(word, 0.0) + inv_word_count

        for word, freq in word_freqs.items():
            self._word_to_document_freqs[word][doc_id] = freq
        self._document_to_word_freqs[doc_id] = word_freqs
        logger.debug("Indexed document %d with %d distinct words", doc_id, len(word_freqs))

    def remove_document(self, doc_id: int):
        """
        Remove every trace of a document. Unknown IDs are ignored.

        Word buckets left without documents are pruned, so a word is in the
        index only while at least one document contains it.
        """
        word_freqs = self._document_to_word_freqs.pop(doc_id, None)
        if word_freqs is None:
            return

        for word in word_freqs:
            documents = self._word_to_document_freqs.get(word)
            if documents is None:
                continue
            documents.pop(doc_id, None)
            if not documents:
                del self._word_to_document_freqs[word]
        logger.debug("Removed document %d from the index", doc_id)

    def __contains__(self, word: str) -> bool:
        return word in self._word_to_document_freqs

    def get_document_frequency(self, word: str) -> int:
        """
        Get the number of documents containing the given word.

        Args:
            word: The word to check

        Returns:
            Number of documents containing the word
        """
        return len(self._word_to_document_freqs.get(word, _EMPTY))

    def get_documents(self, word: str) -> Mapping[int, float]:
        """Read-only {doc_id: freq} for a word; empty if the word is not indexed."""
        documents = self._word_to_document_freqs.get(word)
        return MappingProxyType(documents) if documents is not None else _EMPTY

    def get_word_frequencies(self, doc_id: int) -> Mapping[str, float]:
        """Read-only {word: freq} for a document; empty if the document has no words."""
        word_freqs = self._document_to_word_freqs.get(doc_id)
        return MappingProxyType(word_freqs) if word_freqs is not None else _EMPTY

    def contains(self, word: str, doc_id: int) -> bool:
        """Check whether the document contains the word."""
        return doc_id in self._word_to_document_freqs.get(word, _EMPTY)

    @property
    def word_count(self) -> int:
        return len(self._word_to_document_freqs)
