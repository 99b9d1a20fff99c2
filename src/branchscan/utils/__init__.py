"""Utility module for BranchScan package."""

from .cli_utils import console, exit_with_error, show_error, show_warning
from .git_utils import GitError, list_branch_lines, run_git_command

__all__ = [
	"GitError",
	"console",
	"exit_with_error",
	"list_branch_lines",
	"run_git_command",
	"show_error",
	"show_warning",
]
