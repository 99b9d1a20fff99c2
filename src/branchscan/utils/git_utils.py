"""Git utilities for BranchScan."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from pathlib import Path

logger = logging.getLogger(__name__)

BRANCH_LIST_COMMAND = ["git", "branch", "-v", "--no-color"]


class GitError(Exception):
	"""Custom exception for Git-related errors."""


def run_git_command(command: list[str], cwd: Path | None = None) -> str:
	"""
	Run a Git command and return its output.

	Args:
	        command: Git command to run
	        cwd: Working directory (optional)

	Returns:
	        Command output as string

	Raises:
	        GitError: If the command fails

	"""
	try:
		result = subprocess.run(  # noqa: S603
			command,
			cwd=cwd,
			capture_output=True,
			text=True,
			encoding="utf-8",
			check=True,
		)
	except subprocess.CalledProcessError as e:
		error_msg = f"Git command failed: {' '.join(command)}\nError: {e.stderr}"
		logger.exception(error_msg)
		raise GitError(error_msg) from e
	except FileNotFoundError as e:
		error_msg = "Git executable not found"
		raise GitError(error_msg) from e
	else:
		return result.stdout


def list_branch_lines(cwd: Path | None = None, extra_args: list[str] | None = None) -> list[str]:
	"""
	List local branches one line per branch, as printed by ``git branch -v``.

	Args:
	        cwd: Repository directory (optional)
	        extra_args: Additional arguments for ``git branch``

	Returns:
	        The output lines, without trailing newlines

	Raises:
	        GitError: If git fails or ``cwd`` is not a repository

	"""
	command = [*BRANCH_LIST_COMMAND, *(extra_args or [])]
	try:
		output = run_git_command(command, cwd)
	except GitError as e:
		msg = "Failed to list branches"
		raise GitError(msg) from e
	lines = output.splitlines()
	logger.debug("git branch listed %d lines", len(lines))
	return lines
