"""Single-character predicates used by the branch line recognizers."""

from __future__ import annotations

import string
import unicodedata
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from collections.abc import Callable

ALLOWED_PUNCTUATION = frozenset("-_/")
CURRENT_BRANCH_MARKER = "*"

_HEX_DIGITS = frozenset(string.hexdigits)
_DECIMAL_DIGITS = frozenset(string.digits)
_COMBINING_MARKS = frozenset(("Mn", "Mc"))

# Information separators that str.isspace accepts but are not White_Space
_NON_WHITESPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_alphabetic(char: str) -> bool:
	"""Return True for a Unicode letter or a combining mark such as a vowel sign."""
	return char.isalpha() or unicodedata.category(char) in _COMBINING_MARKS


def is_whitespace(char: str) -> bool:
	"""Return True for a Unicode White_Space character."""
	return char.isspace() and char not in _NON_WHITESPACE_SEPARATORS


def is_hex_digit(char: str) -> bool:
	"""Return True for a base 16 digit, in either case."""
	return char in _HEX_DIGITS


def is_decimal_digit(char: str) -> bool:
	"""Return True for an ASCII decimal digit."""
	return char in _DECIMAL_DIGITS


def is_allowed_punctuation(char: str) -> bool:
	"""Return True for the punctuation allowed inside branch names."""
	return char in ALLOWED_PUNCTUATION


def is_marker(char: str) -> bool:
	"""Return True for the current branch marker."""
	return char == CURRENT_BRANCH_MARKER


def any_of(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
	"""
	Combine predicates into one that accepts a character if any of them does.

	Args:
	    *predicates: Character predicates to combine

	Returns:
	    A single character predicate

	"""

	def predicate(char: str) -> bool:
		return any(check(char) for check in predicates)

	return predicate
