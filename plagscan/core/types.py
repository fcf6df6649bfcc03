"""Shared data types and models for the plagiarism detection system."""

from typing import List, Dict, Any
from pydantic import BaseModel, Field, ConfigDict, computed_field

from .normalizer import normalize_text, tokenize
from .stopwords import StopWordSet


class Document(BaseModel):
    """A loaded document and its normalized form."""

    doc_id: str = Field(description="Identifier of the document (path or index)")
    text: str = Field(description="Raw document text")
    normalized: str = Field(description="Lowercased text with stop words removed")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_text(cls, doc_id: str, text: str, stop_words: StopWordSet) -> "Document":
        """Normalize raw text into a Document."""
        return cls(doc_id=doc_id, text=text, normalized=normalize_text(text, stop_words))

    @property
    def words(self) -> List[str]:
        return tokenize(self.normalized)


class MatchResult(BaseModel):
    """Comparison outcome for one pair of documents."""

    source_id: str = Field(description="Identifier of the first document")
    target_id: str = Field(description="Identifier of the second document")
    similarity: float = Field(ge=0.0, le=1.0, description="Edit-distance similarity (0-1)")
    matched_words: List[str] = Field(
        default_factory=list,
        description="Longest common word subsequence, last match first"
    )
    is_plagiarism: bool = Field(description="Whether the pair passed both thresholds")

    @computed_field
    @property
    def similarity_percentage(self) -> float:
        return round(self.similarity * 100, 2)

    @computed_field
    @property
    def match_length(self) -> int:
        return len(self.matched_words)

    @computed_field
    @property
    def matched_sequence(self) -> str:
        """Matched words in reading order, joined by spaces."""
        return " ".join(reversed(self.matched_words))


class PlagiarismReport(BaseModel):
    """Results of comparing every pair in a set of documents."""

    documents: List[str] = Field(default_factory=list, description="Compared document ids, in input order")
    skipped: List[str] = Field(default_factory=list, description="Inputs that could not be read")
    results: List[MatchResult] = Field(default_factory=list, description="Pair results in (i, j) order")
    similarity_threshold: float = Field(description="Similarity threshold used for detection")
    min_sequence_length: int = Field(description="Minimum matched sequence length used for detection")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional metadata")

    @computed_field
    @property
    def total_comparisons(self) -> int:
        return len(self.results)

    @property
    def flagged(self) -> List[MatchResult]:
        return [r for r in self.results if r.is_plagiarism]
