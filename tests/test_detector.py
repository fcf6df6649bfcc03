"""Tests for the detector and comparison policy."""

import pytest
from pydantic import ValidationError
from plagscan.core.config import Config
from plagscan.core.detector import PlagiarismDetector
from plagscan.core.stopwords import StopWordSet
from plagscan.core.types import Document


FOX_1 = "the quick brown fox jumps over the lazy dog"
FOX_2 = "a quick brown fox jumps over a lazy dog"
UNRELATED_1 = "completely unrelated content here"
UNRELATED_2 = "totally different text sample"


@pytest.fixture
def detector():
    return PlagiarismDetector(Config(stop_words_file=None), StopWordSet.builtin())


class TestPolicy:
    """Test cases for the plagiarism decision."""

    def test_both_thresholds_met(self, detector):
        assert detector.is_plagiarism(0.5, 5)

    def test_similarity_below_threshold(self, detector):
        assert not detector.is_plagiarism(0.49, 10)

    def test_sequence_too_short(self, detector):
        assert not detector.is_plagiarism(1.0, 4)

    def test_custom_thresholds(self):
        detector = PlagiarismDetector(
            Config(similarity_threshold=0.9, min_sequence_length=2, stop_words_file=None)
        )
        assert detector.is_plagiarism(0.95, 2)
        assert not detector.is_plagiarism(0.85, 2)


class TestComparePair:
    """End-to-end comparisons of document pairs."""

    def test_stop_word_variants_are_plagiarism(self, detector):
        results = detector.compare_texts([("doc1", FOX_1), ("doc2", FOX_2)])

        assert len(results) == 1
        result = results[0]
        assert result.source_id == "doc1"
        assert result.target_id == "doc2"
        assert result.similarity == 1.0
        assert result.similarity_percentage == 100.0
        assert result.match_length == 7
        assert result.matched_sequence == "quick brown fox jumps over lazy dog"
        assert result.matched_words[0] == "dog"
        assert result.is_plagiarism

    def test_unrelated_texts(self, detector):
        result = detector.compare_texts([("doc1", UNRELATED_1), ("doc2", UNRELATED_2)])[0]

        assert result.match_length == 0
        assert not result.is_plagiarism

    def test_only_stop_words(self, detector):
        result = detector.compare_texts([("empty", "the a an of"), ("doc", FOX_1)])[0]

        assert result.similarity == 0.0
        assert result.matched_words == []
        assert result.matched_sequence == ""
        assert not result.is_plagiarism

    def test_two_stop_word_documents(self, detector):
        result = detector.compare_texts([("e1", "the a"), ("e2", "an of for")])[0]

        assert result.similarity == 1.0
        assert result.matched_words == []
        assert not result.is_plagiarism


class TestCompareDocuments:
    """Pair enumeration and file handling."""

    def test_pair_order(self, detector):
        texts = [("d0", FOX_1), ("d1", FOX_2), ("d2", UNRELATED_1)]
        results = detector.compare_texts(texts)

        assert [(r.source_id, r.target_id) for r in results] == [
            ("d0", "d1"), ("d0", "d2"), ("d1", "d2")
        ]

    @pytest.mark.parametrize("n,expected", [(0, 0), (1, 0), (2, 1), (4, 6)])
    def test_pair_count(self, detector, n, expected):
        documents = [Document.from_text(str(i), FOX_1, detector.stop_words) for i in range(n)]
        assert len(detector.compare_documents(documents)) == expected

    def test_document_is_immutable(self, detector):
        document = detector.make_document("d", FOX_1)
        assert document.normalized == "quick brown fox jumps over lazy dog"
        with pytest.raises(ValidationError):
            document.normalized = "changed"

    def test_compare_files_skips_missing(self, detector, tmp_path):
        file1 = tmp_path / "one.txt"
        file2 = tmp_path / "two.txt"
        file1.write_text(FOX_1 + "\n", encoding="utf-8")
        file2.write_text(FOX_2 + "\n", encoding="utf-8")
        missing = tmp_path / "missing.txt"

        report = detector.compare_files([str(file1), str(missing), str(file2)])

        assert report.documents == [str(file1), str(file2)]
        assert report.skipped == [str(missing)]
        assert report.total_comparisons == 1
        assert len(report.flagged) == 1
        assert report.similarity_threshold == 0.5
        assert report.min_sequence_length == 5

    def test_read_file_detects_encoding(self, detector, tmp_path):
        path = tmp_path / "accents.txt"
        path.write_bytes("café résumé naïve".encode("utf-8"))
        assert detector.read_file(str(path)) == "café résumé naïve"

    def test_read_missing_file(self, detector, tmp_path):
        with pytest.raises(FileNotFoundError):
            detector.read_file(str(tmp_path / "nope.txt"))

    def test_stop_words_file_from_config(self, tmp_path):
        path = tmp_path / "stop.txt"
        path.write_text("quick", encoding="utf-8")
        detector = PlagiarismDetector(Config(stop_words_file=str(path)))

        assert detector.make_document("d", FOX_1).normalized == "brown fox jumps over lazy dog"

    def test_missing_stop_words_file_uses_builtins(self, tmp_path):
        detector = PlagiarismDetector(Config(stop_words_file=str(tmp_path / "none.txt")))
        assert detector.stop_words == StopWordSet.builtin()
