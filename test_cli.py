import json

import pytest

from SearchServer.main import main


def _write_documents(tmp_path, documents):
    path = tmp_path / "documents.json"
    path.write_text(json.dumps(documents), encoding="utf-8")
    return str(path)


DOCUMENTS = [
    {"id": 0, "text": "white cat and nice collar", "ratings": [8, -3]},
    {"id": 1, "text": "fluffy cat fluffy tail", "ratings": [7, 2, 7]},
    {"id": 2, "text": "tail cat fluffy", "status": "BANNED", "ratings": [1]},
]


def test_runs_queries(tmp_path, capsys):
    path = _write_documents(tmp_path, DOCUMENTS)

    main(["--documents", path, "--stop-words", "and in on",
          "--query", "fluffy cat", "--query", "zebra", "--match", "1"])

    out = capsys.readouterr().out
    assert "Successfully loaded 3 documents" in out
    assert "Page 1" in out
    assert "No results found." in out
    assert "fluffy" in out
    assert "Requests without results: 1" in out


def test_removes_duplicates_and_shows_frequencies(tmp_path, capsys):
    path = _write_documents(tmp_path, DOCUMENTS)

    main(["--documents", path, "--remove-duplicates", "--frequencies", "1"])

    out = capsys.readouterr().out
    assert "Removed 1 duplicate document(s)" in out
    assert "0.500000" in out


def test_reports_invalid_document(tmp_path, capsys):
    path = _write_documents(tmp_path, [{"id": -1, "text": "cat"}])

    with pytest.raises(SystemExit) as exc_info:
        main(["--documents", path])

    assert exc_info.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_reports_malformed_query(tmp_path, capsys):
    path = _write_documents(tmp_path, DOCUMENTS)

    with pytest.raises(SystemExit):
        main(["--documents", path, "--query", "cat --dog"])

    assert "Error:" in capsys.readouterr().err


def test_reports_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main(["--documents", str(tmp_path / "missing.json")])

    assert "Error:" in capsys.readouterr().err


@pytest.mark.parametrize("document", [
    {"id": 0, "text": None},
    {"id": 0, "text": "cat", "status": 1},
    {"id": 0, "text": "cat", "ratings": 5},
    {"id": 0, "text": "cat", "ratings": [1, "2"]},
    {"id": "zero", "text": "cat"},
])
def test_reports_malformed_document_fields(tmp_path, capsys, document):
    path = _write_documents(tmp_path, [document])

    with pytest.raises(SystemExit) as exc_info:
        main(["--documents", path])

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert "Error:" in captured.err
    assert "Error:" not in captured.out


def test_rejects_zero_page_size(tmp_path, capsys):
    path = _write_documents(tmp_path, DOCUMENTS)

    with pytest.raises(SystemExit) as exc_info:
        main(["--documents", path, "--page-size", "0", "--query", "cat"])

    assert exc_info.value.code == 1
    assert "Page size must be positive" in capsys.readouterr().err
