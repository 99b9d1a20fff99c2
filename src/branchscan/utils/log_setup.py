"""
Logging setup for BranchScan.

Console logging goes through rich; an optional file handler records
everything at DEBUG level.

"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

console = Console()


def setup_logging(
	is_verbose: bool = False,
	log_to_console: bool = True,
	log_file_path: Path | str | None = None,
) -> None:
	"""
	Set up logging configuration.

	Args:
	    is_verbose: Enable verbose logging
	    log_to_console: Whether to log to the console
	    log_file_path: Optional path to a file for logging. If None, no file logging.

	"""
	log_level = logging.DEBUG if is_verbose else logging.WARNING

	root_logger = logging.getLogger()
	root_logger.setLevel(log_level)

	# Clear existing handlers to avoid duplicate logs if called multiple times
	for handler in root_logger.handlers[:]:
		root_logger.removeHandler(handler)

	if log_to_console:
		console_handler = RichHandler(
			level=log_level,
			console=Console(stderr=True),
			rich_tracebacks=True,
			show_time=True,
			show_path=is_verbose,
		)
		root_logger.addHandler(console_handler)

	if log_file_path:
		file_handler_path = Path(log_file_path)
		try:
			file_handler_path.parent.mkdir(parents=True, exist_ok=True)
			file_handler = logging.FileHandler(file_handler_path, mode="a", encoding="utf-8")
		except OSError:
			root_logger.exception("Failed to set up file logging to %s", file_handler_path)
			return
		file_handler.setLevel(logging.DEBUG)
		file_handler.setFormatter(
			logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s")
		)
		root_logger.setLevel(logging.DEBUG)
		root_logger.addHandler(file_handler)
		root_logger.debug("Logging to file: %s", file_handler_path)


def display_error_summary(error_message: str) -> None:
	"""
	Display an error summary with a divider and a title.

	Args:
	        error_message: The error message to display

	"""
	title = Text("Error Summary", style="bold red")

	console.print()
	console.print(Rule(title, style="red"))
	console.print(Text(f"\n{error_message}\n"))
	console.print(Rule(style="red"))
	console.print()


def display_warning_summary(warning_message: str) -> None:
	"""
	Display a warning summary with a divider and a title.

	Args:
	        warning_message: The warning message to display

	"""
	title = Text("Warning Summary", style="bold yellow")

	console.print()
	console.print(Rule(title, style="yellow"))
	console.print(Text(f"\n{warning_message}\n"))
	console.print(Rule(style="yellow"))
	console.print()
