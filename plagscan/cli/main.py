"""Command-line interface for plagscan."""

import sys
import logging
from pathlib import Path
import click
from pydantic import ValidationError

from ..core import (
    Config,
    PlagiarismDetector,
    ReportGenerator,
    normalize_text,
)
from .display import create_console, display_report, display_result, highlight_matched_words


# Configure logging
def setup_logging(verbose: bool):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_config(threshold, min_length, stop_words) -> Config:
    """Create a Config from CLI options, leaving unset options at their defaults."""
    overrides = {}
    if threshold is not None:
        overrides['similarity_threshold'] = threshold
    if min_length is not None:
        overrides['min_sequence_length'] = min_length
    if stop_words is not None:
        overrides['stop_words_file'] = str(stop_words)

    try:
        return Config(**overrides)
    except ValidationError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version="0.1.0", prog_name="plagscan")
def cli():
    """Plagiarism detection by edit-distance similarity and longest common word subsequence."""
    pass


@cli.command()
@click.argument('files', nargs=-1, type=click.Path(path_type=Path))
@click.option('--threshold', '-t', type=float, help='Similarity threshold (0-1), default 0.5')
@click.option('--min-length', '-m', type=int, help='Minimum matched sequence length in words, default 5')
@click.option('--stop-words', '-s', type=click.Path(path_type=Path), envvar='PLAGSCAN_STOP_WORDS_FILE',
              help='File of extra stop words (can be set via PLAGSCAN_STOP_WORDS_FILE env var)')
@click.option('--format', '-f', type=click.Choice(['rich', 'text', 'json']), default='rich', help='Output format')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def compare(files, threshold, min_length, stop_words, format, verbose):
    """
    Compare every pair of FILES for plagiarism.

    FILES: Paths of two or more documents
    """
    if len(files) < 2:
        click.echo("Usage: plagscan compare <file1> <file2> ...")
        return

    setup_logging(verbose)
    config = build_config(threshold, min_length, stop_words)
    detector = PlagiarismDetector(config)

    report = detector.compare_files([str(f) for f in files])
    for path in report.skipped:
        click.echo(f"File not found: {path}", err=True)

    if format == 'rich':
        display_report(report)
    else:
        click.echo(ReportGenerator().render(report, format))


@cli.command()
@click.argument('file_path', type=click.Path(exists=True, path_type=Path))
@click.option('--stop-words', '-s', type=click.Path(path_type=Path), envvar='PLAGSCAN_STOP_WORDS_FILE',
              help='File of extra stop words')
def normalize(file_path: Path, stop_words: Path):
    """
    Show normalization statistics for a file without running detection.

    FILE_PATH: Path to the file to analyze
    """
    config = build_config(None, None, stop_words)
    detector = PlagiarismDetector(config)

    try:
        text = detector.read_file(str(file_path))
    except (OSError, ValueError) as e:
        click.echo(f"Error reading file: {str(e)}", err=True)
        sys.exit(1)

    document = detector.make_document(str(file_path), text)
    raw_words = len(text.split())
    kept_words = len(document.words)

    click.echo(f"File: {file_path}")
    click.echo(f"   Length: {len(text):,} characters, {raw_words:,} words")
    click.echo(f"   Stop words in set: {len(detector.stop_words)}")
    click.echo(f"   Words removed: {raw_words - kept_words:,}")
    click.echo(f"   Normalized length: {len(document.normalized):,} characters, {kept_words:,} words")

    preview = document.normalized[:200]
    if len(document.normalized) > 200:
        preview += "..."
    click.echo(f"\nNormalized text:\n   {preview}")


@cli.command()
@click.argument('text1')
@click.argument('text2')
@click.option('--threshold', '-t', type=float, help='Similarity threshold (0-1)')
@click.option('--min-length', '-m', type=int, help='Minimum matched sequence length in words')
def quick_compare(text1: str, text2: str, threshold: float, min_length: int):
    """
    Quick comparison of two text strings.

    TEXT1: First text string
    TEXT2: Second text string
    """
    config = build_config(threshold, min_length, None)
    detector = PlagiarismDetector(config)

    result = detector.compare_texts([("text1", text1), ("text2", text2)])[0]

    console = create_console()
    words_in_order = list(reversed(result.matched_words))
    console.print(highlight_matched_words(normalize_text(text1, detector.stop_words), words_in_order))
    console.print(highlight_matched_words(normalize_text(text2, detector.stop_words), words_in_order))
    console.print()
    display_result(console, result, config.similarity_threshold)


if __name__ == "__main__":
    cli()
