"""Report generation module for plagiarism detection results."""

import json
from typing import List

from .types import PlagiarismReport, MatchResult


class ReportGenerator:
    """Generates text and JSON renderings of plagiarism detection results."""

    def generate_json(self, report: PlagiarismReport, indent: int = 2) -> str:
        """
        Generate JSON format report.

        Args:
            report: PlagiarismReport object
            indent: JSON indentation level

        Returns:
            JSON string
        """
        data = report.model_dump()
        data["flagged"] = len(report.flagged)
        return json.dumps(data, ensure_ascii=False, indent=indent)

    def format_result(self, result: MatchResult) -> List[str]:
        """Lines describing one pair."""
        if not result.is_plagiarism:
            return ["No Plagiarism Detected."]
        return [
            f"Potential plagiarism detected between {result.source_id} and {result.target_id}",
            f"Similarity: {result.similarity_percentage:.2f}%",
            "Similar sequence(s):",
            f"- {result.matched_sequence}",
        ]

    def generate_text(self, report: PlagiarismReport) -> str:
        """
        Generate plain text format report.

        Args:
            report: PlagiarismReport object

        Returns:
            Plain text report
        """
        lines = []
        for result in report.results:
            lines.extend(self.format_result(result))
        return "\n".join(lines)

    def render(self, report: PlagiarismReport, format: str = "text") -> str:
        """
        Render report in the given format.

        Args:
            report: PlagiarismReport object
            format: Output format (json, text)
        """
        if format == "json":
            return self.generate_json(report)
        elif format == "text":
            return self.generate_text(report)
        raise ValueError(f"Unsupported format: {format}")
