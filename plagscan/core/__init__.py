"""Core modules for plagiarism detection."""

from .config import Config
from .stopwords import StopWordSet, BUILTIN_STOP_WORDS
from .normalizer import normalize_text, tokenize
from .edit_distance import edit_distance, similarity
from .lcs import longest_common_subsequence, lcs_length
from .types import Document, MatchResult, PlagiarismReport
from .detector import PlagiarismDetector
from .report import ReportGenerator

__all__ = [
    "Config",
    "StopWordSet",
    "BUILTIN_STOP_WORDS",
    "normalize_text",
    "tokenize",
    "edit_distance",
    "similarity",
    "longest_common_subsequence",
    "lcs_length",
    "Document",
    "MatchResult",
    "PlagiarismReport",
    "PlagiarismDetector",
    "ReportGenerator",
]
