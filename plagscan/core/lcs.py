"""Word-level longest common subsequence with table backtracking."""

from typing import List

import numpy as np

from .normalizer import tokenize


def _lcs_table(words1: List[str], words2: List[str]) -> np.ndarray:
    """Fill the LCS length table; row 0 and column 0 stay zero."""
    n1 = len(words1)
    n2 = len(words2)
    dp = np.zeros((n1 + 1, n2 + 1), dtype=np.int64)

    for i in range(1, n1 + 1):
        for j in range(1, n2 + 1):
            if words1[i - 1] == words2[j - 1]:
                dp[i, j] = dp[i - 1, j - 1] + 1
            else:
                dp[i, j] = max(dp[i - 1, j], dp[i, j - 1])

    return dp


def _backtrack(words1: List[str], words2: List[str], dp: np.ndarray) -> List[str]:
    """
    Walk the table from the bottom-right corner back to an edge.

    Matched words are collected last-first. On a tie between the up and
    left neighbours the walk moves up.
    """
    matched = []
    i = len(words1)
    j = len(words2)

    while i > 0 and j > 0:
        if words1[i - 1] == words2[j - 1] and dp[i, j] == dp[i - 1, j - 1] + 1:
            matched.append(words1[i - 1])
            i -= 1
            j -= 1
        elif dp[i, j] == dp[i - 1, j]:
            i -= 1
        else:
            j -= 1

    return matched


def longest_common_subsequence(text1: str, text2: str) -> List[str]:
    """
    Find the longest common subsequence of words between two strings.

    Args:
        text1: First normalized string
        text2: Second normalized string

    Returns:
        Matched words in reverse reading order (last match first).
        Reverse the list to read it left to right.
    """
    words1 = tokenize(text1)
    words2 = tokenize(text2)
    if not words1 or not words2:
        return []

    dp = _lcs_table(words1, words2)
    return _backtrack(words1, words2, dp)


def lcs_length(text1: str, text2: str) -> int:
    """Length of the longest common word subsequence."""
    words1 = tokenize(text1)
    words2 = tokenize(text2)
    if not words1 or not words2:
        return 0
    return int(_lcs_table(words1, words2)[-1, -1])
