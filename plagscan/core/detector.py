"""Core plagiarism detection logic."""

import chardet
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import Config
from .types import Document, MatchResult, PlagiarismReport
from .stopwords import StopWordSet
from .edit_distance import similarity
from .lcs import longest_common_subsequence
from .log import base_logger

logger = base_logger.getChild('detector')


class PlagiarismDetector:
    """Pairwise plagiarism detection engine."""

    def __init__(self, config: Optional[Config] = None, stop_words: Optional[StopWordSet] = None):
        """
        Initialize the plagiarism detector.

        Args:
            config: Configuration object (uses defaults if not provided)
            stop_words: Stop-word set (loaded from config if not provided)
        """
        self.config = config or Config()
        self.stop_words = stop_words if stop_words is not None else self.config.load_stop_words()

    def read_file(self, file_path: str) -> str:
        """
        Read a file with automatic encoding detection.

        Args:
            file_path: Path to the file

        Returns:
            File contents as string
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, 'rb') as f:
            raw_data = f.read()
            result = chardet.detect(raw_data)
            encoding = result['encoding'] or 'utf-8'
            confidence = result['confidence'] or 0

        logger.debug(f"Detected encoding for {file_path}: {encoding} (confidence: {confidence:.2f})")

        for enc in [encoding, 'utf-8', 'utf-16', 'cp1252']:
            try:
                text = raw_data.decode(enc)
                logger.debug(f"Read {file_path} with encoding: {enc}")
                return text
            except (UnicodeDecodeError, LookupError):
                continue

        raise ValueError(f"Could not decode file {file_path} with any known encoding")

    def make_document(self, doc_id: str, text: str) -> Document:
        return Document.from_text(doc_id, text, self.stop_words)

    def load_documents(self, file_paths: Iterable[str]) -> Tuple[List[Document], List[str]]:
        """
        Read and normalize files, skipping any that cannot be read.

        Args:
            file_paths: Paths of the documents to load

        Returns:
            Tuple of (loaded documents in input order, skipped paths)
        """
        documents = []
        skipped = []

        for file_path in file_paths:
            try:
                text = self.read_file(file_path)
            except (OSError, ValueError) as e:
                logger.warning(f"Skipping {file_path}: {e}")
                skipped.append(file_path)
                continue
            documents.append(self.make_document(file_path, text))

        return documents, skipped

    def is_plagiarism(self, similarity_score: float, match_length: int) -> bool:
        """Both the similarity and the matched sequence length must reach their thresholds."""
        return (similarity_score >= self.config.similarity_threshold and
                match_length >= self.config.min_sequence_length)

    def compare_pair(self, doc1: Document, doc2: Document) -> MatchResult:
        """
        Compare two normalized documents.

        Args:
            doc1: First document
            doc2: Second document

        Returns:
            MatchResult for the pair
        """
        score = similarity(doc1.normalized, doc2.normalized)
        matched_words = longest_common_subsequence(doc1.normalized, doc2.normalized)

        result = MatchResult(
            source_id=doc1.doc_id,
            target_id=doc2.doc_id,
            similarity=score,
            matched_words=matched_words,
            is_plagiarism=self.is_plagiarism(score, len(matched_words))
        )

        logger.debug(
            f"{doc1.doc_id} vs {doc2.doc_id}: similarity={score:.4f}, "
            f"match_length={result.match_length}, plagiarism={result.is_plagiarism}"
        )
        return result

    def compare_documents(self, documents: Sequence[Document]) -> List[MatchResult]:
        """
        Compare every unordered pair of documents.

        Pairs are enumerated as (i, j) with i < j in input order.
        """
        results = []
        for i in range(len(documents) - 1):
            for j in range(i + 1, len(documents)):
                results.append(self.compare_pair(documents[i], documents[j]))
        return results

    def compare_texts(self, texts: Iterable[Tuple[str, str]]) -> List[MatchResult]:
        """
        Normalize and compare raw texts.

        Args:
            texts: (document_id, raw_text) pairs

        Returns:
            List of MatchResult in (i, j) order
        """
        documents = [self.make_document(doc_id, text) for doc_id, text in texts]
        return self.compare_documents(documents)

    def compare_files(self, file_paths: Iterable[str]) -> PlagiarismReport:
        """
        Load files and compare every pair among those that could be read.

        Args:
            file_paths: Paths of the documents to compare

        Returns:
            PlagiarismReport with detection results
        """
        documents, skipped = self.load_documents(file_paths)
        logger.info(f"Comparing {len(documents)} documents ({len(skipped)} skipped)")

        results = self.compare_documents(documents)

        report = PlagiarismReport(
            documents=[d.doc_id for d in documents],
            skipped=skipped,
            results=results,
            similarity_threshold=self.config.similarity_threshold,
            min_sequence_length=self.config.min_sequence_length,
            metadata={
                "stop_words": len(self.stop_words),
                "stop_words_file": self.config.stop_words_file,
            }
        )

        logger.info(f"Detection complete: {len(report.flagged)} of {report.total_comparisons} pairs flagged")
        return report
