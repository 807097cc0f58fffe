from typing import Iterable, List, Set


def split_into_words(text: str) -> List[str]:
    """
    Split text into words on single space characters.

    Runs of spaces never produce empty words, so "a  b " gives ["a", "b"].
    Other whitespace (tabs, newlines) stays inside the word and is caught
    later by is_valid_word.

    Args:
        text: Raw text

    Returns:
        List of words in their original order
    """
    return [word for word in text.split(" ") if word]


def is_valid_word(word: str) -> bool:
    """A word is valid if it contains no control characters (code point < 32)."""
    return not any(ord(c) < ord(" ") for c in word)


def make_unique_non_empty_strings(strings: Iterable[str]) -> Set[str]:
    return {s for s in strings if s}
