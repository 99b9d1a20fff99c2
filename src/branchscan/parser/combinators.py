"""
Small parser combinators over plain strings.

A parser is any callable taking the remaining input and returning a
``(remainder, value)`` pair. Failure is signalled by raising ``ParseError``;
a failed parser never consumes input.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")

Parser = Callable[[str], tuple[str, T]]


class ParseError(Exception):
	"""Raised when a required literal is missing from the input."""

	def __init__(self, expected: str, remaining: str, *, committed: bool = False) -> None:
		"""
		Initialize the error.

		Args:
		        expected: The literal the parser required
		        remaining: The input left at the point of failure
		        committed: True once an enclosing parser has consumed input,
		                so optional parsers must not recover from it

		"""
		self.expected = expected
		self.remaining = remaining
		self.committed = committed
		super().__init__(f"Expected {expected!r} at {remaining[:20]!r}")


def tag(literal: str) -> Parser[str]:
	"""
	Match an exact literal prefix.

	Args:
	        literal: The text the input must start with

	Returns:
	        Parser yielding the matched literal

	"""

	def parse(text: str) -> tuple[str, str]:
		if not text.startswith(literal):
			raise ParseError(literal, text)
		return text[len(literal) :], literal

	return parse


def take_while(predicate: Callable[[str], bool]) -> Parser[str]:
	"""
	Consume the longest prefix whose characters all satisfy ``predicate``.

	Never fails; an empty match leaves the input untouched.

	Args:
	        predicate: Character predicate

	Returns:
	        Parser yielding the matched run

	"""

	def parse(text: str) -> tuple[str, str]:
		end = 0
		for char in text:
			if not predicate(char):
				break
			end += 1
		return text[end:], text[:end]

	return parse


def delimited(opening: Parser[object], inner: Parser[T], closing: Parser[object]) -> Parser[T]:
	"""
	Match ``opening``, ``inner`` and ``closing`` in order, keeping the inner value.

	A missing opening is an ordinary failure. Once the opening has matched, a
	missing closing raises a committed ``ParseError``.

	Args:
	        opening: Parser for the opening delimiter
	        inner: Parser for the enclosed content
	        closing: Parser for the closing delimiter

	Returns:
	        Parser yielding the inner value

	"""

	def parse(text: str) -> tuple[str, T]:
		rest, _ = opening(text)
		try:
			rest, value = inner(rest)
			rest, _ = closing(rest)
		except ParseError as e:
			raise ParseError(e.expected, e.remaining, committed=True) from e
		return rest, value

	return parse


def opt(parser: Parser[T]) -> Parser[T | None]:
	"""
	Try ``parser`` and yield None instead of failing.

	Committed failures are re-raised.

	Args:
	        parser: Parser to attempt

	Returns:
	        Parser yielding the inner value or None

	"""

	def parse(text: str) -> tuple[str, T | None]:
		try:
			return parser(text)
		except ParseError as e:
			if e.committed:
				raise
			return text, None

	return parse


def map_parser(parser: Parser[T], func: Callable[[T], U]) -> Parser[U]:
	"""Apply ``func`` to the value produced by ``parser``."""

	def parse(text: str) -> tuple[str, U]:
		rest, value = parser(text)
		return rest, func(value)

	return parse


def consumed(parser: Parser[T]) -> Parser[tuple[str, T]]:
	"""Yield the exact text ``parser`` consumed alongside its value."""

	def parse(text: str) -> tuple[str, tuple[str, T]]:
		rest, value = parser(text)
		return rest, (text[: len(text) - len(rest)], value)

	return parse
