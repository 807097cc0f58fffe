import bisect
import logging
import math
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Tuple, Union

from .inverted_index import InvertedIndex
from .query import Query, parse_query
from ..errors import InvalidArgumentError, DocumentNotFoundError, TermNotFoundError
from ..preprocessing.document import Document, DocumentData, DocumentStatus, compute_average_rating
from ..preprocessing.preprocess import StopWordsPreprocessor
from ..preprocessing.tokenizer import split_into_words, is_valid_word

logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5
EPSILON = 1e-6

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
StatusOrPredicate = Union[DocumentStatus, DocumentPredicate]


def _compare_documents(lhs: Document, rhs: Document) -> int:
    # Relevances closer than EPSILON are a tie, broken by rating
    if abs(lhs.relevance - rhs.relevance) < EPSILON:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def _as_predicate(status_or_predicate: StatusOrPredicate) -> DocumentPredicate:
    if isinstance(status_or_predicate, DocumentStatus):
        wanted = status_or_predicate
        return lambda document_id, status, rating: status == wanted
    if callable(status_or_predicate):
        return status_or_predicate
    raise InvalidArgumentError(f"Expected DocumentStatus or predicate, got {status_or_predicate!r}")


class SearchServer:
    """
    TF-IDF search server over an in-memory set of documents.

    Documents are added and removed one at a time; queries are free text
    where words prefixed with '-' exclude every document containing them.
    """

    def __init__(self, stop_words: Union[str, Iterable[str]] = ""):
        """
        Initialize the search server.

        Args:
            stop_words: Space separated stop words or a collection of them

        Raises:
            InvalidArgumentError: If a stop word contains control characters
        """
        self.stop_words = StopWordsPreprocessor(stop_words)
        self._index = InvertedIndex()
        self._documents: Dict[int, DocumentData] = {}
        self._document_ids: List[int] = []

    def add_document(self, document_id: int, document: str,
                     status: DocumentStatus = DocumentStatus.ACTUAL,
                     ratings: Iterable[int] = ()):
        """
        Add a document to the server.

        Nothing is changed unless the whole document is accepted.

        Args:
            document_id: Non-negative ID not used by another document
            document: Document text
            status: Document status
            ratings: Ratings given to the document

        Raises:
            InvalidArgumentError: If the ID is negative or taken, the status
                is not a DocumentStatus, or a word has forbidden symbols
        """
        if document_id < 0 or document_id in self._documents:
            raise InvalidArgumentError(f"Document ID {document_id} less than zero or already exists")
        if not isinstance(status, DocumentStatus):
            raise InvalidArgumentError(f"Unknown document status {status!r}")

        words = self.stop_words.preprocess(split_into_words(document))
        for word in words:
            if not is_valid_word(word):
                raise InvalidArgumentError(f"Word {word!r} has forbidden symbols in document {document_id}")
        rating = compute_average_rating(list(ratings))

        self._index.add_document(document_id, words)
        self._documents[document_id] = DocumentData(rating, status)
        bisect.insort(self._document_ids, document_id)
        logger.debug("Added document %d (%s, %d words)", document_id, status.name, len(words))

    def remove_document(self, document_id: int):
        """Remove a document. Unknown IDs are ignored."""
        if document_id not in self._documents:
            return

        self._index.remove_document(document_id)
        del self._documents[document_id]
        del self._document_ids[bisect.bisect_left(self._document_ids, document_id)]
        logger.debug("Removed document %d", document_id)

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """
        Get term frequencies of a document.

        Returns:
            Read-only {word: frequency}, empty for unknown documents
        """
        return self._index.get_word_frequencies(document_id)

    def get_document_count(self) -> int:
        return len(self._documents)

    def __len__(self):
        return len(self._documents)

    def __iter__(self) -> Iterator[int]:
        return iter(self._document_ids)

    def __contains__(self, document_id: int) -> bool:
        return document_id in self._documents

    def get_document_status(self, document_id: int) -> DocumentStatus:
        try:
            return self._documents[document_id].status
        except KeyError:
            raise DocumentNotFoundError(f"Document {document_id} not found") from None

    def parse_query(self, raw_query: str) -> Query:
        return parse_query(raw_query, self.stop_words)

    def compute_inverse_document_freq(self, word: str) -> float:
        """
        Calculate the inverse document frequency for a word.
        IDF(t) = ln(N / DF(t))

        Raises:
            TermNotFoundError: If no document contains the word
        """
        if word not in self._index:
            raise TermNotFoundError(f"Word {word!r} is not indexed")
        return math.log(self.get_document_count() / self._index.get_document_frequency(word))

    def find_top_documents(self, raw_query: str,
                           status_or_predicate: StatusOrPredicate = DocumentStatus.ACTUAL) -> List[Document]:
        """
        Search for the most relevant documents.

        Args:
            raw_query: Query text, '-word' excludes documents containing word
            status_or_predicate: Status documents must have, or a predicate
                called as predicate(document_id, status, rating)

        Returns:
            Up to MAX_RESULT_DOCUMENT_COUNT documents, most relevant first,
            equally relevant ones ordered by rating
        """
        predicate = _as_predicate(status_or_predicate)
        query = self.parse_query(raw_query)

        matched_documents = self._find_all_documents(query, predicate)
        matched_documents.sort(key=cmp_to_key(_compare_documents))
        return matched_documents[:MAX_RESULT_DOCUMENT_COUNT]

    def _find_all_documents(self, query: Query, predicate: DocumentPredicate) -> List[Document]:
        document_to_relevance: Dict[int, float] = {}
        for word in sorted(query.plus_words):
            if word not in self._index:
                continue

            inverse_document_freq = self.compute_inverse_document_freq(word)
            for document_id, term_freq in self._index.get_documents(word).items():
                rating, status = self._documents[document_id]
                if predicate(document_id, status, rating):
                    document_to_relevance[document_id] = (
                        document_to_relevance.get(document_id, 0.0) + term_freq * inverse_document_freq
                    )

        for word in query.minus_words:
            for document_id in self._index.get_documents(word):
                document_to_relevance.pop(document_id, None)

        return [
            Document(document_id, relevance, self._documents[document_id].rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        Find which query words a document contains.

        Args:
            raw_query: Query text
            document_id: Document to check

        Returns:
            (matched plus words in sorted order, document status); the word
            list is empty if the document contains any minus word

        Raises:
            DocumentNotFoundError: If the document does not exist
        """
        status = self.get_document_status(document_id)
        query = self.parse_query(raw_query)

        if any(self._index.contains(word, document_id) for word in query.minus_words):
            return [], status

        matched_words = [word for word in sorted(query.plus_words)
                         if self._index.contains(word, document_id)]
        return matched_words, status
