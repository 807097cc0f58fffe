from typing import Iterable, List, Union

from .tokenizer import split_into_words, is_valid_word, make_unique_non_empty_strings
from ..errors import InvalidArgumentError


class StopWordsPreprocessor:
    """Preprocessor for removing stop words."""

    def __init__(self, stop_words: Union[str, Iterable[str]] = ""):
        """
        Initialize preprocessor for removing stop words.

        Args:
            stop_words: Space separated stop words, or any collection of
                stop words (empty strings are ignored)

        Raises:
            InvalidArgumentError: If a stop word contains control characters
        """
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)

        unique_stop_words = make_unique_non_empty_strings(stop_words)
        for word in unique_stop_words:
            if not is_valid_word(word):
                raise InvalidArgumentError(f"Stop word {word!r} has forbidden symbols")

        self.stop_words = frozenset(unique_stop_words)

    def __contains__(self, word: str) -> bool:
        return word in self.stop_words

    def __len__(self):
        return len(self.stop_words)

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def preprocess(self, words: Iterable[str]) -> List[str]:
        """
        Drop stop words from a sequence of words.

        Args:
            words: Words to filter

        Returns:
            Words that are not stop words, order preserved
        """
        return [word for word in words if word not in self.stop_words]
