"""Branch line parsing for BranchScan."""

from .branch_line import (
	parse_branch_line,
	take_alphabetic,
	take_annotation,
	take_branch_line,
	take_branch_line_spans,
	take_branch_name,
	take_hex,
	take_tag,
	take_whitespace,
	take_whitespace_or_star,
)
from .combinators import ParseError
from .schemas import BranchLineSpans, BranchRecord, BranchStatus, HexValue

__all__ = [
	"BranchLineSpans",
	"BranchRecord",
	"BranchStatus",
	"HexValue",
	"ParseError",
	"parse_branch_line",
	"take_alphabetic",
	"take_annotation",
	"take_branch_line",
	"take_branch_line_spans",
	"take_branch_name",
	"take_hex",
	"take_tag",
	"take_whitespace",
	"take_whitespace_or_star",
]
