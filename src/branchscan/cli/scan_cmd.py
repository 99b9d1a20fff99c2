"""Implementation of the scan command for whole branch listings."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from branchscan.parser import ParseError
from branchscan.scanner import scan_lines
from branchscan.utils.cli_utils import exit_with_error, print_json, print_records_table, show_warning
from branchscan.utils.config_loader import ConfigError, ConfigLoader
from branchscan.utils.git_utils import GitError, list_branch_lines

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"

SourceArg = Annotated[
	str | None,
	typer.Argument(help="File with branch lines, '-' for stdin. Defaults to running 'git branch -v'."),
]

RepoOpt = Annotated[
	Path | None,
	typer.Option("--repo", "-r", help="Repository to list branches from", file_okay=False),
]

GoneFlag = Annotated[
	bool,
	typer.Option("--gone", "-g", help="Only show branches whose upstream is gone"),
]

JsonFlag = Annotated[
	bool,
	typer.Option("--json", help="Print the report as JSON"),
]

StrictFlag = Annotated[
	bool,
	typer.Option("--strict", help="Fail on the first malformed line"),
]

PrefixOpt = Annotated[
	str | None,
	typer.Option("--prefix", "-p", help="Literal prefix to strip from each line, e.g. '[info]'"),
]

ConfigOpt = Annotated[
	Path | None,
	typer.Option("--config", "-c", help="Path to config file"),
]


def _read_lines(source: str | None, repo: Path | None, branch_args: list[str]) -> list[str]:
	"""
	Read the branch listing from a file, stdin or git.

	Raises:
	        GitError: If git cannot list branches
	        OSError: If the file cannot be read

	"""
	if source is None:
		return list_branch_lines(repo, branch_args)
	if source == STDIN_SOURCE:
		return sys.stdin.read().splitlines()
	return Path(source).read_text(encoding="utf-8").splitlines()


def register_command(app: typer.Typer) -> None:
	"""Register the scan command with the CLI app."""

	@app.command(name="scan")
	def scan_command(
		source: SourceArg = None,
		repo: RepoOpt = None,
		gone: GoneFlag = False,
		as_json: JsonFlag = False,
		strict: StrictFlag = False,
		prefix: PrefixOpt = None,
		config_file: ConfigOpt = None,
	) -> None:
		"""Parse every line of a branch listing and report the branches."""
		_scan_command_impl(
			source=source,
			repo=repo,
			gone=gone,
			as_json=as_json,
			strict=strict,
			prefix=prefix,
			config_file=config_file,
		)


def _scan_command_impl(
	source: str | None,
	repo: Path | None,
	gone: bool,
	as_json: bool,
	strict: bool,
	prefix: str | None,
	config_file: Path | None,
) -> None:
	"""Implementation of the scan command."""
	try:
		config = ConfigLoader(str(config_file) if config_file else None)
	except ConfigError as e:
		exit_with_error("Invalid configuration", exception=e)

	line_prefix = prefix or config.get("scan.line_prefix")
	strict = strict or config.get("scan.strict", False)
	gone_only = gone or config.get("scan.gone_only", False)
	as_json = as_json or config.get("output.format") == "json"

	try:
		lines = _read_lines(source, repo, config.get("git.branch_args", []))
	except GitError as e:
		exit_with_error("Could not list branches", exception=e)
	except OSError as e:
		exit_with_error(f"Could not read {source}", exception=e)

	try:
		report = scan_lines(lines, line_prefix=line_prefix, strict=strict)
	except ParseError as e:
		exit_with_error("Malformed branch line", exception=e)

	if as_json:
		print_json(report.to_dict(gone_only=gone_only))
		return

	records = report.deleted if gone_only else report.records
	print_records_table(records, title="Gone branches" if gone_only else "Branches")

	if report.malformed:
		skipped = "\n".join(f"line {line.line_number}: {line.text}" for line in report.malformed)
		show_warning(f"Skipped {len(report.malformed)} malformed line(s):\n{skipped}")
