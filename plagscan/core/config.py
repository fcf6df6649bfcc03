"""Configuration module for plagscan."""

import os
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from dotenv import load_dotenv

from .stopwords import StopWordSet

# Load environment variables from .env file
load_dotenv()


class Config(BaseModel):
    """Configuration for the plagiarism detection system."""

    # Detection settings
    similarity_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Minimum edit-distance similarity for a pair to be flagged"
    )
    min_sequence_length: int = Field(
        default=5,
        ge=1,
        description="Minimum number of words in the common subsequence"
    )

    # Stop words
    stop_words_file: Optional[str] = Field(
        default_factory=lambda: os.getenv("PLAGSCAN_STOP_WORDS_FILE") or None,
        description="Optional whitespace-separated list of extra stop words"
    )

    def load_stop_words(self) -> StopWordSet:
        """Build the stop-word set: built-ins plus the configured file, if any."""
        if not self.stop_words_file:
            return StopWordSet.builtin()
        return StopWordSet.from_file(self.stop_words_file)

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid"
    )
