"""Character-level Levenshtein distance and the similarity ratio built on it."""

import numpy as np


def edit_distance(text1: str, text2: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions turning text1 into text2.

    Args:
        text1: First normalized string
        text2: Second normalized string

    Returns:
        Non-negative edit distance
    """
    len1 = len(text1)
    len2 = len(text2)

    # dp[i, j]: distance between text1[:i] and text2[:j]
    dp = np.zeros((len1 + 1, len2 + 1), dtype=np.int64)
    dp[0, :] = np.arange(len2 + 1)
    dp[:, 0] = np.arange(len1 + 1)

    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            if text1[i - 1] == text2[j - 1]:
                dp[i, j] = dp[i - 1, j - 1]
            else:
                dp[i, j] = 1 + min(dp[i - 1, j], dp[i, j - 1], dp[i - 1, j - 1])

    return int(dp[len1, len2])


def similarity(text1: str, text2: str) -> float:
    """
    Similarity ratio in [0, 1]: 1 - edit_distance / length of the longer string.

    Two empty strings are identical and score 1.0.
    """
    max_len = max(len(text1), len(text2))
    if max_len == 0:
        return 1.0
    return 1.0 - edit_distance(text1, text2) / max_len
