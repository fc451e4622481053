import logging
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.panel import Panel

# Package loggers configured by setup_logging
PACKAGE_LOGGERS = ("network_parser", "scoring", "service")


def setup_logging(
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    logger_names: Sequence[str] = PACKAGE_LOGGERS,
) -> None:
    """
    Setup basic logging configuration for the grader packages.

    Args:
        level: The logging level to use. Defaults to "INFO".
        log_format: Custom log format string. If None, uses default format.
        date_format: Custom date format string. If None, uses default format.
        logger_names: Package loggers to attach the handler to.
    """
    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if date_format is None:
        date_format = "%Y-%m-%d %H:%M:%S"

    # Create a StreamHandler that writes to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=log_format, datefmt=date_format))

    for name in logger_names:
        logger = logging.getLogger(name)
        logger.setLevel(level.upper())
        # Replace handlers from an earlier call instead of stacking them
        for existing in list(logger.handlers):
            if not isinstance(existing, logging.NullHandler):
                logger.removeHandler(existing)
        logger.addHandler(handler)

        # Prevent the logger from propagating messages to the root logger
        logger.propagate = False


def print_analysis_result(result, console: Optional[Console] = None, title: str = "Network Analysis") -> None:
    """
    Render an AnalysisResult as a sub-score table followed by the feedback.

    Args:
        result: AnalysisResult returned by NetworkTopologyScorer.evaluate
        console: Console to print to. A new stdout console if None.
        title: Panel title
    """
    console = console or Console()
    table = Table(show_header=True, header_style="bold white", expand=False)

    table.add_column("Group",  style="bright_yellow")
    table.add_column("Points", style="bold cyan", justify="right")

    for name, points in result.breakdown.get_component_dict().items():
        table.add_row(name.capitalize(), str(points))
    table.add_section()
    table.add_row(Text("Total", style="bold"), Text(f"{result.score}/{result.max_score}", style="bold"))

    status_style = "bold green" if result.passed else "bold red"
    feedback = Text()
    for i, line in enumerate(result.feedback):
        if i:
            feedback.append("\n")
        feedback.append(f"- {line}")

    console.print(Panel(table, expand=False, title=title, border_style="bold white"))
    console.print(Text(result.message, style=status_style))
    if result.feedback:
        console.print(Panel(feedback, expand=False, title="Feedback", border_style="white"))
