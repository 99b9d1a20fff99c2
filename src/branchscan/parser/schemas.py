"""Schema definitions for parsed branch lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

GONE_ANNOTATION = "gone"


@dataclass(frozen=True)
class HexValue:
	"""The hexadecimal revision text matched on a branch line."""

	value: str

	def __str__(self) -> str:
		"""Return the raw hex text."""
		return self.value


class BranchStatus(str, Enum):
	"""Upstream status of a branch."""

	ACTIVE = "active"
	DELETED = "deleted"  # Upstream reported as gone

	@classmethod
	def from_annotation(cls, annotation: str | None) -> BranchStatus:
		"""
		Derive the status from the bracketed annotation text.

		Only an annotation of exactly ``gone`` marks the branch as deleted.

		Args:
		        annotation: Inner annotation text, or None when absent

		Returns:
		        BranchStatus: The derived status

		"""
		if annotation == GONE_ANNOTATION:
			return cls.DELETED
		return cls.ACTIVE


@dataclass(frozen=True)
class BranchRecord:
	"""A single parsed branch line."""

	branch_name: str
	branch_type: BranchStatus
	comment: str

	@property
	def is_deleted(self) -> bool:
		"""Whether the upstream of this branch is gone."""
		return self.branch_type is BranchStatus.DELETED

	def to_dict(self) -> dict[str, Any]:
		"""Convert to a dictionary."""
		return {
			"branch_name": self.branch_name,
			"branch_type": self.branch_type.value,
			"comment": self.comment,
		}


@dataclass(frozen=True)
class BranchLineSpans:
	"""Every span consumed from one branch line, in input order."""

	marker: str
	branch_name: str
	separator: str
	revision: HexValue
	gap: str
	annotation: str  # Including brackets, empty when absent
	annotation_text: str | None
	trailing: str
	comment: str

	def text(self) -> str:
		"""Reassemble the original line from its spans."""
		return "".join(
			(
				self.marker,
				self.branch_name,
				self.separator,
				self.revision.value,
				self.gap,
				self.annotation,
				self.trailing,
				self.comment,
			)
		)

	def to_record(self) -> BranchRecord:
		"""Build the branch record for this line."""
		return BranchRecord(
			branch_name=self.branch_name,
			branch_type=BranchStatus.from_annotation(self.annotation_text),
			comment=self.comment,
		)
