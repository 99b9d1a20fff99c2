"""Parse whole branch listings, one line at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from branchscan.parser import BranchRecord, ParseError, parse_branch_line
from branchscan.parser.combinators import opt, tag

if TYPE_CHECKING:
	from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass
class MalformedLine:
	"""A line that could not be parsed."""

	line_number: int
	text: str
	error: ParseError

	def to_dict(self) -> dict[str, Any]:
		"""Convert to a dictionary."""
		return {"line_number": self.line_number, "text": self.text, "error": str(self.error)}


@dataclass
class ScanReport:
	"""Records and failures collected from a listing."""

	records: list[BranchRecord] = field(default_factory=list)
	malformed: list[MalformedLine] = field(default_factory=list)

	@property
	def deleted(self) -> list[BranchRecord]:
		"""Records whose upstream is gone."""
		return [record for record in self.records if record.is_deleted]

	def to_dict(self, *, gone_only: bool = False) -> dict[str, Any]:
		"""Convert to a dictionary."""
		records = self.deleted if gone_only else self.records
		return {
			"branches": [record.to_dict() for record in records],
			"malformed": [line.to_dict() for line in self.malformed],
		}


def _strip_prefix(line: str, line_prefix: str | None) -> str:
	"""Remove ``line_prefix`` from the start of ``line`` when present."""
	if not line_prefix:
		return line
	rest, _ = opt(tag(line_prefix))(line)
	return rest


def parse_line(line: str, line_prefix: str | None = None) -> BranchRecord:
	"""
	Parse one line, first stripping ``line_prefix`` when the line starts with it.

	Args:
	        line: The line to parse
	        line_prefix: Optional literal prefix such as ``[info]``

	Returns:
	        BranchRecord: The parsed record

	Raises:
	        ParseError: If the line is malformed

	"""
	return parse_branch_line(_strip_prefix(line, line_prefix))


def scan_lines(lines: Iterable[str], *, line_prefix: str | None = None, strict: bool = False) -> ScanReport:
	"""
	Parse every non-blank line of a branch listing.

	Args:
	        lines: Lines of output; trailing newlines are ignored
	        line_prefix: Optional literal prefix stripped from each line
	        strict: Raise on the first malformed line instead of collecting it

	Returns:
	        ScanReport: Parsed records and malformed lines

	Raises:
	        ParseError: In strict mode, for the first malformed line

	"""
	report = ScanReport()
	for line_number, raw_line in enumerate(lines, start=1):
		line = raw_line.rstrip("\r\n")
		body = _strip_prefix(line, line_prefix)
		if not body.strip():
			continue
		try:
			record = parse_branch_line(body)
		except ParseError as e:
			if strict:
				raise
			logger.warning("Skipping malformed line %d: %r (%s)", line_number, line, e)
			report.malformed.append(MalformedLine(line_number=line_number, text=line, error=e))
		else:
			report.records.append(record)

	logger.debug("Scanned %d branches, %d malformed", len(report.records), len(report.malformed))
	return report
