"""Default configuration settings for the branchscan tool."""

DEFAULT_CONFIG = {
	# Line scanning configuration
	"scan": {
		# Literal prefix to strip from each line before parsing, e.g. "[info]"
		"line_prefix": None,
		# Abort on the first malformed line instead of reporting it
		"strict": False,
		# Only report branches whose upstream is gone
		"gone_only": False,
	},
	# Output configuration
	"output": {
		# Output format: 'table' or 'json'
		"format": "table",
	},
	# Git configuration
	"git": {
		# Extra arguments passed to 'git branch -v --no-color'
		"branch_args": [],
	},
}

OUTPUT_FORMATS = ("table", "json")
