from collections import deque
from typing import Deque, List

from .preprocessing.document import Document, DocumentStatus
from .tfidf_search.search_server import SearchServer, StatusOrPredicate

MIN_IN_DAY = 1440


class RequestQueue:
    """
    Runs searches on a SearchServer and keeps statistics for the last
    MIN_IN_DAY of them.
    """

    def __init__(self, search_server: SearchServer):
        self.search_server = search_server
        self._requests: Deque[int] = deque()
        self._no_result_count = 0

    def add_find_request(self, raw_query: str,
                         status_or_predicate: StatusOrPredicate = DocumentStatus.ACTUAL) -> List[Document]:
        """
        Search and record how many documents were found.

        Args:
            raw_query: Query text
            status_or_predicate: Passed through to SearchServer.find_top_documents

        Returns:
            The search results, unchanged
        """
        results = self.search_server.find_top_documents(raw_query, status_or_predicate)
        self._queue_result(len(results))
        return results

    def get_no_result_requests(self) -> int:
        """Number of recorded requests that found nothing."""
        return self._no_result_count

    def __len__(self):
        return len(self._requests)

    def _queue_result(self, match_count: int):
        self._requests.append(match_count)
        if match_count == 0:
            self._no_result_count += 1

        if len(self._requests) > MIN_IN_DAY:
            if self._requests.popleft() == 0:
                self._no_result_count -= 1
