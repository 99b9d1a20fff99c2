"""Command-line interface package for BranchScan."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from branchscan import __version__
from branchscan.utils.log_setup import setup_logging

from .parse_cmd import register_command as register_parse_command
from .scan_cmd import register_command as register_scan_command

logger = logging.getLogger(__name__)

# Try to load from .env.local first, then fall back to .env
for env_file in (Path(".env.local"), Path(".env")):
	if env_file.exists():
		load_dotenv(dotenv_path=env_file)
		logger.debug("Loaded environment variables from %s", env_file)
		break

app = typer.Typer(
	help=f"BranchScan - Parse git branch listings\n\nVersion: {__version__}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"BranchScan version: {__version__}")
		raise typer.Exit


@app.callback()
def global_options(
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	log_file: Annotated[
		Path | None,
		typer.Option("--log-file", help="Also write debug logs to this file."),
	] = None,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	setup_logging(is_verbose=is_verbose, log_file_path=log_file)


register_parse_command(app)
register_scan_command(app)


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
