import logging

from SearchServer import SearchServer, DocumentStatus, find_duplicates, remove_duplicates


def _build_server() -> SearchServer:
    server = SearchServer("and with")
    server.add_document(1, "funny pet and nasty rat", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "funny pet with curly hair", DocumentStatus.ACTUAL, [1, 2])
    # same words as 2
    server.add_document(3, "funny pet with curly hair", DocumentStatus.ACTUAL, [1, 2])
    # differs from 2 by a stop word only
    server.add_document(4, "funny pet and curly hair", DocumentStatus.ACTUAL, [1, 2])
    # same set of words as 1
    server.add_document(5, "funny funny pet and nasty nasty rat", DocumentStatus.ACTUAL, [1, 2])
    server.add_document(6, "funny pet and not very nasty rat", DocumentStatus.ACTUAL, [1, 2])
    # same set of words as 6 in another order
    server.add_document(7, "very nasty rat and not very funny pet", DocumentStatus.ACTUAL, [1, 2])
    server.add_document(8, "pet with rat and rat and rat", DocumentStatus.ACTUAL, [1, 2])
    server.add_document(9, "nasty rat with curly hair", DocumentStatus.ACTUAL, [1, 2])
    return server


def test_find_duplicates():
    server = _build_server()

    assert find_duplicates(server) == [3, 4, 5, 7]
    assert server.get_document_count() == 9


def test_remove_duplicates_keeps_first_occurrence():
    server = _build_server()

    removed = remove_duplicates(server)

    assert removed == [3, 4, 5, 7]
    assert list(server) == [1, 2, 6, 8, 9]
    assert find_duplicates(server) == []


def test_word_order_does_not_matter():
    server = SearchServer()
    server.add_document(0, "a b", DocumentStatus.ACTUAL, [1])
    server.add_document(1, "b a", DocumentStatus.ACTUAL, [1])

    remove_duplicates(server)

    assert list(server) == [0]


def test_word_sets_with_same_letters_are_not_duplicates():
    server = SearchServer()
    server.add_document(0, "ab c", DocumentStatus.ACTUAL, [1])
    server.add_document(1, "a bc", DocumentStatus.ACTUAL, [1])

    assert find_duplicates(server) == []


def test_duplicates_are_logged(caplog):
    server = _build_server()

    with caplog.at_level(logging.INFO, logger="SearchServer.remove_duplicates"):
        remove_duplicates(server)

    assert "Found duplicate document id 3" in caplog.text
    assert "Found duplicate document id 7" in caplog.text
