from typing import NamedTuple, Set

from ..errors import InvalidArgumentError
from ..preprocessing.preprocess import StopWordsPreprocessor
from ..preprocessing.tokenizer import split_into_words, is_valid_word

MINUS = "-"


class QueryWord(NamedTuple):
    data: str
    is_minus: bool
    is_stop: bool


class Query:
    """Parsed query: words a document should contain and words it must not."""

    def __init__(self, plus_words: Set[str] = None, minus_words: Set[str] = None):
        self.plus_words = plus_words if plus_words is not None else set()
        self.minus_words = minus_words if minus_words is not None else set()

    def __repr__(self):
        return f"Query(plus={sorted(self.plus_words)}, minus={sorted(self.minus_words)})"

    def __eq__(self, other):
        if not isinstance(other, Query):
            return NotImplemented
        return self.plus_words == other.plus_words and self.minus_words == other.minus_words


def parse_query_word(text: str, stop_words: StopWordsPreprocessor) -> QueryWord:
    """
    Classify a single query word.

    Args:
        text: Non-empty word from the query
        stop_words: Stop words of the server

    Returns:
        QueryWord with the minus marker stripped

    Raises:
        InvalidArgumentError: If a minus word is empty or starts with another
            minus, or the word contains control characters
    """
    is_minus = False
    if text.startswith(MINUS):
        is_minus = True
        text = text[1:]
        if not text or text.startswith(MINUS):
            raise InvalidArgumentError(f"Minus word {MINUS + text!r} is empty or has extra minus sign")

    if not is_valid_word(text):
        raise InvalidArgumentError(f"Query word {text!r} has forbidden symbols")

    return QueryWord(text, is_minus, stop_words.is_stop_word(text))


def parse_query(text: str, stop_words: StopWordsPreprocessor) -> Query:
    """
    Parse raw query text into plus and minus words.

    Stop words are dropped whether they are plus or minus words, and
    repeated words collapse into one.

    Args:
        text: Raw query text
        stop_words: Stop words of the server

    Returns:
        Parsed Query
    """
    query = Query()
    for word in split_into_words(text):
        query_word = parse_query_word(word, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            query.minus_words.add(query_word.data)
        else:
            query.plus_words.add(query_word.data)
    return query
