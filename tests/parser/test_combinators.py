"""Tests for the parser combinators."""

from __future__ import annotations

import pytest

from branchscan.parser.classifiers import is_decimal_digit
from branchscan.parser.combinators import (
	ParseError,
	consumed,
	delimited,
	map_parser,
	opt,
	tag,
	take_while,
)


@pytest.mark.unit
class TestTag:
	"""Tests for literal matching."""

	def test_matches_prefix(self) -> None:
		"""Test that a matching literal is consumed."""
		assert tag("[info]")("[info]abc") == ("abc", "[info]")

	def test_failure_does_not_consume(self) -> None:
		"""Test that a mismatch raises with the untouched input."""
		with pytest.raises(ParseError) as excinfo:
			tag("[")("abc")

		assert excinfo.value.expected == "["
		assert excinfo.value.remaining == "abc"
		assert not excinfo.value.committed

	def test_empty_input(self) -> None:
		"""Test that a literal cannot match empty input."""
		with pytest.raises(ParseError):
			tag("]")("")


@pytest.mark.unit
class TestTakeWhile:
	"""Tests for greedy runs."""

	def test_consumes_longest_prefix(self) -> None:
		"""Test that the run stops at the first non-matching character."""
		assert take_while(is_decimal_digit)("123abc456") == ("abc456", "123")

	def test_empty_match_never_fails(self) -> None:
		"""Test that no matching characters yields an empty run."""
		assert take_while(is_decimal_digit)("abc") == ("abc", "")

	def test_consumes_everything(self) -> None:
		"""Test a run over the whole input."""
		assert take_while(is_decimal_digit)("42") == ("", "42")

	def test_multibyte_characters_are_kept_whole(self) -> None:
		"""Test that emoji are never split by a run."""
		rest, run = take_while(lambda c: c != " ")("😃😃 blah")
		assert run == "😃😃"
		assert rest == " blah"


@pytest.mark.unit
class TestDelimited:
	"""Tests for delimited spans."""

	parser = staticmethod(delimited(tag("["), take_while(str.isalpha), tag("]")))

	def test_returns_inner_value(self) -> None:
		"""Test that only the inner content is returned."""
		assert self.parser("[gone] rest") == (" rest", "gone")

	def test_empty_inner(self) -> None:
		"""Test that an empty inner run still succeeds."""
		assert self.parser("[]x") == ("x", "")

	def test_missing_opening_is_not_committed(self) -> None:
		"""Test that a missing opening literal is an ordinary failure."""
		with pytest.raises(ParseError) as excinfo:
			self.parser("gone]")

		assert excinfo.value.expected == "["
		assert not excinfo.value.committed

	def test_missing_closing_is_committed(self) -> None:
		"""Test that a missing closing literal fails after the opening matched."""
		with pytest.raises(ParseError) as excinfo:
			self.parser("[gone rest")

		assert excinfo.value.expected == "]"
		assert excinfo.value.remaining == " rest"
		assert excinfo.value.committed


@pytest.mark.unit
class TestOpt:
	"""Tests for optional parsers."""

	def test_success_passes_through(self) -> None:
		"""Test that a successful inner parser is unchanged."""
		assert opt(tag("*"))("* x") == (" x", "*")

	def test_failure_yields_none_without_consuming(self) -> None:
		"""Test that an uncommitted failure leaves the input untouched."""
		assert opt(tag("*"))("x") == ("x", None)

	def test_committed_failure_propagates(self) -> None:
		"""Test that a failure after an opening delimiter is not swallowed."""
		parser = opt(delimited(tag("["), take_while(str.isalpha), tag("]")))

		with pytest.raises(ParseError) as excinfo:
			parser("[gone")

		assert excinfo.value.committed


@pytest.mark.unit
def test_map_parser() -> None:
	"""Test that map_parser transforms the value but not the remainder."""
	parser = map_parser(take_while(is_decimal_digit), int)
	assert parser("42 apples") == (" apples", 42)


@pytest.mark.unit
def test_consumed_returns_matched_text() -> None:
	"""Test that consumed reports the exact text the parser used."""
	parser = consumed(delimited(tag("["), take_while(str.isalpha), tag("]")))
	assert parser("[ahead] x") == (" x", ("[ahead]", "ahead"))
