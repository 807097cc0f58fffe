from SearchServer import SearchServer, RequestQueue, DocumentStatus
from SearchServer.request_queue import MIN_IN_DAY


def _build_server() -> SearchServer:
    server = SearchServer("and in at")
    server.add_document(1, "curly cat curly tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "curly dog and fancy collar", DocumentStatus.ACTUAL, [1, 2, 3])
    server.add_document(3, "big cat fancy collar ", DocumentStatus.ACTUAL, [1, 2, 8])
    server.add_document(4, "big dog sparrow Eugene", DocumentStatus.ACTUAL, [1, 3, 2])
    server.add_document(5, "big dog sparrow Vasiliy", DocumentStatus.ACTUAL, [1, 1, 1])
    return server


def test_counts_requests_without_results_in_last_day():
    queue = RequestQueue(_build_server())

    for _ in range(MIN_IN_DAY - 1):
        queue.add_find_request("empty request")
    # still within the window
    queue.add_find_request("curly dog")
    # first empty request is evicted
    queue.add_find_request("big collar")
    # second empty request is evicted
    queue.add_find_request("sparrow")

    assert queue.get_no_result_requests() == MIN_IN_DAY - 3
    assert len(queue) == MIN_IN_DAY


def test_window_keeps_last_records_only():
    queue = RequestQueue(_build_server())

    for i in range(MIN_IN_DAY + 1):
        queue.add_find_request(f"missing{i}")

    assert len(queue) == MIN_IN_DAY
    assert queue.get_no_result_requests() == MIN_IN_DAY


def test_empty_results_rotate_out_of_window():
    queue = RequestQueue(_build_server())

    queue.add_find_request("nothing")
    for _ in range(MIN_IN_DAY):
        queue.add_find_request("curly")

    assert queue.get_no_result_requests() == 0


def test_results_are_returned_unchanged():
    server = _build_server()
    queue = RequestQueue(server)

    assert queue.add_find_request("curly dog") == server.find_top_documents("curly dog")
    assert queue.add_find_request("big", DocumentStatus.BANNED) == []
    assert queue.get_no_result_requests() == 1


def test_predicate_is_passed_through():
    server = _build_server()
    queue = RequestQueue(server)

    results = queue.add_find_request("big dog", lambda document_id, status, rating: rating > 1)

    assert [doc.id for doc in results] == [4, 3, 2]
    assert queue.get_no_result_requests() == 0
