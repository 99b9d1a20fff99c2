"""Implementation of the parse command for a single branch line."""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from branchscan.parser import ParseError
from branchscan.scanner import parse_line
from branchscan.utils.cli_utils import exit_with_error, print_json

logger = logging.getLogger(__name__)

DEMO_LINE = "   PERSON1/FeatureD eeee4444 [gone] Random weird comments"

LineArg = Annotated[
	str,
	typer.Argument(help="Branch line to parse", show_default=False),
]

PrefixOpt = Annotated[
	str | None,
	typer.Option("--prefix", "-p", help="Literal prefix to strip before parsing, e.g. '[info]'"),
]

JsonFlag = Annotated[
	bool,
	typer.Option("--json", help="Print the record as JSON"),
]


def register_command(app: typer.Typer) -> None:
	"""Register the parse command with the CLI app."""

	@app.command(name="parse")
	def parse_command(
		line: LineArg = DEMO_LINE,
		prefix: PrefixOpt = None,
		as_json: JsonFlag = False,
	) -> None:
		"""Parse one line of 'git branch -v' output and print the record."""
		logger.debug("Parsing line %r", line)
		try:
			record = parse_line(line, line_prefix=prefix)
		except ParseError as e:
			exit_with_error(f"Malformed branch line: {line!r}", exception=e)

		if as_json:
			print_json(record.to_dict())
			return

		typer.echo(f"branch_name: {record.branch_name}")
		typer.echo(f"branch_type: {record.branch_type.value}")
		typer.echo(f"comment: {record.comment}")
