"""
Recognizers for a single line of ``git branch -v`` style output.

Lines look like::

    "   FeatureA         dddeeee Random weird comments"
    "   FeatureD         ffff1111 [ahead 1] Random weird comments"
    " * master           0000bbbb [behind 2] Random weird comments"
    "   PERSON1/FeatureD eeee4444 [gone] Random weird comments"

"""

from __future__ import annotations

import logging

from .classifiers import (
	any_of,
	is_allowed_punctuation,
	is_alphabetic,
	is_decimal_digit,
	is_hex_digit,
	is_marker,
	is_whitespace,
)
from .combinators import consumed, delimited, map_parser, opt, tag, take_while
from .schemas import BranchLineSpans, BranchRecord, HexValue

logger = logging.getLogger(__name__)

take_whitespace = take_while(is_whitespace)
take_alphabetic = take_while(is_alphabetic)
take_whitespace_or_star = take_while(any_of(is_whitespace, is_marker))
take_branch_name = take_while(any_of(is_alphabetic, is_allowed_punctuation, is_decimal_digit))
take_hex = map_parser(take_while(is_hex_digit), HexValue)
take_annotation = delimited(
	tag("["),
	take_while(any_of(is_alphabetic, is_allowed_punctuation, is_decimal_digit, is_whitespace)),
	tag("]"),
)

_take_optional_annotation = opt(consumed(take_annotation))
_take_optional_whitespace = opt(take_whitespace)


def take_tag(prefix: str, text: str) -> tuple[str, str]:
	"""
	Consume a literal prefix from ``text``.

	Raises:
	        ParseError: If ``text`` does not start with ``prefix``

	"""
	return tag(prefix)(text)


def take_branch_line_spans(text: str) -> tuple[str, BranchLineSpans]:
	"""
	Split a branch line into all of its consumed spans.

	Args:
	        text: One line of branch listing output, without the newline

	Returns:
	        The unconsumed remainder and the spans of the line

	Raises:
	        ParseError: If an annotation is opened but never closed

	"""
	rest, marker = take_whitespace_or_star(text)
	rest, branch_name = take_branch_name(rest)
	rest, separator = take_whitespace(rest)
	rest, revision = take_hex(rest)
	rest, gap = take_whitespace(rest)
	rest, annotation = _take_optional_annotation(rest)
	rest, trailing = _take_optional_whitespace(rest)

	bracketed, annotation_text = annotation if annotation is not None else ("", None)

	spans = BranchLineSpans(
		marker=marker,
		branch_name=branch_name,
		separator=separator,
		revision=revision,
		gap=gap,
		annotation=bracketed,
		annotation_text=annotation_text,
		trailing=trailing or "",
		comment=rest,
	)
	return rest, spans


def take_branch_line(text: str) -> tuple[str, BranchRecord]:
	"""
	Parse a branch line into a record.

	The remainder returned is the same text as the record's comment.

	Raises:
	        ParseError: If an annotation is opened but never closed

	"""
	rest, spans = take_branch_line_spans(text)
	return rest, spans.to_record()


def parse_branch_line(line: str) -> BranchRecord:
	"""
	Parse one line of branch listing output.

	Args:
	        line: The line to parse

	Returns:
	        BranchRecord: The parsed record

	Raises:
	        ParseError: If the line is malformed

	"""
	_, record = take_branch_line(line)
	logger.debug("Parsed %r as %s", line, record)
	return record
