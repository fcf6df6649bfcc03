"""Text normalization: lowercasing and stop-word removal."""

from typing import List

from .stopwords import StopWordSet


def tokenize(text: str) -> List[str]:
    """Split text on runs of whitespace."""
    return text.split()


def normalize_text(text: str, stop_words: StopWordSet) -> str:
    """
    Lowercase text and drop stop words.

    Args:
        text: Raw document text
        stop_words: Tokens to remove

    Returns:
        Surviving tokens joined by single spaces, or "" if none survive
    """
    return " ".join(
        word for word in tokenize(text.lower())
        if word not in stop_words
    )
