"""
Status lattice and build result classification.

QualityGateStatus is the totally ordered set of severities used to
aggregate quality gate outcomes. Result is the coarse classification a
build or stage ends up with. Every status maps to exactly one result.
"""

from __future__ import annotations

from enum import Enum


class Result(str, Enum):
    """Coarse result classification of a build or stage."""

    SUCCESS = "SUCCESS"
    UNSTABLE = "UNSTABLE"
    FAILURE = "FAILURE"
    NOT_BUILT = "NOT_BUILT"
    ABORTED = "ABORTED"

    @property
    def ordinal(self) -> int:
        """Severity rank, 0 is the best result."""
        return _RESULT_ORDINALS[self]

    def is_worse_than(self, other: Result) -> bool:
        return self.ordinal > other.ordinal

    def is_better_than(self, other: Result) -> bool:
        return self.ordinal < other.ordinal

    def combine(self, other: Result) -> Result:
        """Return the worse of the two results."""
        return other if other.is_worse_than(self) else self


_RESULT_ORDINALS: dict[Result, int] = {
    Result.SUCCESS: 0,
    Result.UNSTABLE: 1,
    Result.FAILURE: 2,
    Result.NOT_BUILT: 3,
    Result.ABORTED: 4,
}


class QualityGateStatus(str, Enum):
    """
    Severity of a quality gate outcome.

    Ordered from best to worst:
        PASSED < INACTIVE < NOTE < WARNING < ERROR < FAILED

    INACTIVE means that no quality gate has been evaluated. It is better
    than any missed gate but worse than an explicit pass.
    """

    PASSED = "PASSED"
    INACTIVE = "INACTIVE"
    NOTE = "NOTE"
    WARNING = "WARNING"
    ERROR = "ERROR"
    FAILED = "FAILED"

    @property
    def rank(self) -> int:
        """Position in the lattice, 0 is the best status."""
        return _STATUS_TABLE[self][0]

    @property
    def description(self) -> str:
        """Human-readable description used in evaluation messages."""
        return _STATUS_TABLE[self][1]

    @property
    def result(self) -> Result:
        """Build result classification for this status."""
        return _STATUS_TABLE[self][2]

    def is_worse_than(self, other: QualityGateStatus) -> bool:
        """Return True if this status ranks strictly below ``other``."""
        return self.rank > other.rank

    def is_successful(self) -> bool:
        """Return True for PASSED and INACTIVE."""
        return self in (QualityGateStatus.PASSED, QualityGateStatus.INACTIVE)

    def to_result(self) -> Result:
        return self.result

    @classmethod
    def worst(cls, first: QualityGateStatus, second: QualityGateStatus) -> QualityGateStatus:
        """Return the worse of two statuses, ``first`` on ties."""
        return second if second.is_worse_than(first) else first


# status -> (rank, description, result)
_STATUS_TABLE: dict[QualityGateStatus, tuple[int, str, Result]] = {
    QualityGateStatus.PASSED: (0, "Success", Result.SUCCESS),
    QualityGateStatus.INACTIVE: (1, "Inactive", Result.NOT_BUILT),
    QualityGateStatus.NOTE: (2, "Note", Result.UNSTABLE),
    QualityGateStatus.WARNING: (3, "Unstable", Result.UNSTABLE),
    QualityGateStatus.ERROR: (4, "Error", Result.FAILURE),
    QualityGateStatus.FAILED: (5, "Failed", Result.FAILURE),
}
