"""Rich-based display module for plagiarism detection results."""

from typing import List
from rich.console import Console
from rich.text import Text
from rich.style import Style
from rich.table import Table

from ..core.types import MatchResult, PlagiarismReport


def create_console() -> Console:
    """Create a rich Console instance."""
    return Console()


def highlight_matched_words(text: str, matched_words: List[str]) -> Text:
    """
    Highlight the words of a matched subsequence in a normalized text.

    Words are consumed in reading order, so only the occurrences that form
    the subsequence are highlighted.

    Args:
        text: Normalized text
        matched_words: Matched words in reading order

    Returns:
        Rich Text object with highlights
    """
    rich_text = Text()
    pending = list(matched_words)

    for i, word in enumerate(text.split()):
        if i > 0:
            rich_text.append(" ")
        if pending and word == pending[0]:
            rich_text.append(word, style="bold yellow")
            pending.pop(0)
        else:
            rich_text.append(word)

    return rich_text


def get_similarity_style(similarity: float, threshold: float) -> Style:
    """
    Get color style based on similarity score.

    Args:
        similarity: Similarity score (0-1)
        threshold: Detection threshold (0-1)

    Returns:
        Rich Style object
    """
    if similarity >= 0.9:
        return Style(color="red", bold=True)
    elif similarity >= threshold:
        return Style(color="yellow", bold=True)
    else:
        return Style(color="cyan", bold=True)


def display_result(console: Console, result: MatchResult, threshold: float):
    """
    Display a single pair result with rich formatting.

    Args:
        console: Rich Console instance
        result: MatchResult to display
        threshold: Similarity threshold used for detection
    """
    header = Text()
    header.append(result.source_id, style="bold cyan")
    header.append(" vs ")
    header.append(result.target_id, style="bold cyan")
    header.append(" - ")
    header.append(f"{result.similarity_percentage:.2f}%", style=get_similarity_style(result.similarity, threshold))
    header.append(" similar")
    console.print(header)

    if result.is_plagiarism:
        console.print("Potential plagiarism detected", style="bold red")
        console.print(f"Similar sequence ({result.match_length} words): ", style="dim", end="")
        console.print(result.matched_sequence, style="yellow")
    else:
        console.print("No plagiarism detected.", style="green")

    console.print()


def display_summary(console: Console, report: PlagiarismReport):
    """
    Display summary statistics.

    Args:
        console: Rich Console instance
        report: PlagiarismReport object
    """
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("key", style="dim")
    table.add_column("value")
    table.add_row("Documents", str(len(report.documents)))
    if report.skipped:
        table.add_row("Skipped", ", ".join(report.skipped))
    table.add_row("Comparisons", str(report.total_comparisons))

    flagged = len(report.flagged)
    table.add_row("Flagged", Text(str(flagged), style="bold red" if flagged else "bold green"))
    table.add_row(
        "Thresholds",
        f"similarity >= {report.similarity_threshold:.0%}, sequence >= {report.min_sequence_length} words"
    )

    console.print("Analysis complete!", style="bold green")
    console.print(table)
    console.print()


def display_report(report: PlagiarismReport, console: Console = None):
    """
    Display plagiarism report with rich formatting.

    Args:
        report: PlagiarismReport object
        console: Console to print to (a new one if not provided)
    """
    console = console or create_console()

    for result in report.results:
        display_result(console, result, report.similarity_threshold)

    display_summary(console, report)
