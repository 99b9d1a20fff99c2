"""Utility functions for CLI operations in BranchScan."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, NoReturn

import typer
from rich.table import Table
from rich.text import Text

from branchscan.utils.log_setup import console, display_error_summary, display_warning_summary

if TYPE_CHECKING:
	from collections.abc import Iterable

	from branchscan.parser import BranchRecord

logger = logging.getLogger(__name__)


def show_error(message: str, exception: Exception | None = None) -> None:
	"""
	Display an error summary with standardized formatting.

	Args:
	        message: The error message to display
	        exception: Optional exception that caused the error

	"""
	error_text = message
	if exception:
		error_text += f"\n\nDetails: {exception!s}"
		logger.debug("Error occurred", exc_info=exception)

	display_error_summary(error_text)


def show_warning(message: str) -> None:
	"""
	Display a warning summary with standardized formatting.

	Args:
	        message: The warning message to display

	"""
	display_warning_summary(message)


def exit_with_error(message: str, exit_code: int = 1, exception: Exception | None = None) -> NoReturn:
	"""
	Display an error message and exit.

	Args:
	        message: Error message to display
	        exit_code: Exit code to use
	        exception: Optional exception that caused the error

	"""
	show_error(message, exception)
	raise typer.Exit(exit_code) from exception


def print_json(payload: object) -> None:
	"""Write ``payload`` to stdout as JSON, keeping non-ASCII text as is."""
	typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def print_records_table(records: Iterable[BranchRecord], title: str = "Branches") -> None:
	"""
	Render branch records as a rich table.

	Args:
	        records: Records to render
	        title: Table title

	"""
	table = Table(title=title)
	table.add_column("Branch", style="cyan", no_wrap=True)
	table.add_column("Status")
	table.add_column("Comment")

	for record in records:
		status_style = "red" if record.is_deleted else "green"
		table.add_row(
			Text(record.branch_name),
			Text(record.branch_type.value, style=status_style),
			Text(record.comment),
		)

	console.print(table)
