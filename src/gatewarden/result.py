"""
Aggregated result of a quality gate evaluation.

QualityGateResult collects one QualityGateResultItem per evaluated gate
and tracks the overall status, which only ever moves toward worse
statuses as items are added.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from gatewarden.gate import QualityGate
from gatewarden.status import QualityGateStatus

MESSAGE_FORMAT = "[{name}]: «{description}» - (Actual value: {actual}, Quality gate: {threshold})"


def format_threshold(threshold: float) -> str:
    """
    Format a threshold with exactly two decimals, rounding half up.

    Rounding works on the shortest decimal representation of the float, so
    0.125 becomes "0.13" and 2.675 becomes "2.68".
    """
    if math.isnan(threshold):
        return "NaN"
    if math.isinf(threshold):
        return "Infinity" if threshold > 0 else "-Infinity"
    with localcontext() as context:
        context.prec = 400
        return str(Decimal(repr(threshold)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class QualityGateResultItem:
    """Outcome of a single quality gate."""

    quality_gate: QualityGate
    status: QualityGateStatus
    actual_value: str

    def to_api(self) -> dict[str, Any]:
        """Convert to the remote API representation."""
        return {
            "quality_gate": self.quality_gate.name,
            "threshold": self.quality_gate.threshold,
            "result": self.status.result.value,
            "value": self.actual_value,
        }


class QualityGateResult:
    """
    Aggregates the outcomes of all evaluated quality gates.

    The overall status is INACTIVE until the first item is added. After
    that it is the worst status of all added items. Items can not be
    removed, so the overall status never improves.

    Instances are not thread-safe: a result is populated by exactly one
    evaluation pass.
    """

    def __init__(self, overall_status: QualityGateStatus = QualityGateStatus.INACTIVE) -> None:
        self._overall_status = overall_status
        self._items: list[QualityGateResultItem] = []

    def add(self, quality_gate: QualityGate, status: QualityGateStatus, actual_value: str) -> None:
        """
        Add the outcome of another quality gate.

        Args:
            quality_gate: The quality gate that has been evaluated
            status: The status of the quality gate
            actual_value: The value that has been compared with the threshold

        Raises:
            TypeError: If status is not a QualityGateStatus
        """
        if not isinstance(status, QualityGateStatus):
            raise TypeError(f"Expected a QualityGateStatus, got {type(status).__name__}: {status!r}")

        first = not self._items
        self._items.append(QualityGateResultItem(quality_gate, status, str(actual_value)))

        if first and self._overall_status is QualityGateStatus.INACTIVE:
            self._overall_status = status
        else:
            self._overall_status = QualityGateStatus.worst(self._overall_status, status)

    @property
    def overall_status(self) -> QualityGateStatus:
        return self._overall_status

    @property
    def result_items(self) -> tuple[QualityGateResultItem, ...]:
        return tuple(self._items)

    def is_successful(self) -> bool:
        return self._overall_status.is_successful()

    def is_inactive(self) -> bool:
        return self._overall_status is QualityGateStatus.INACTIVE

    def get_messages(self) -> list[str]:
        """Return one formatted message per item, in evaluation order."""
        return [self._create_message(item) for item in self._items]

    @staticmethod
    def _create_message(item: QualityGateResultItem) -> str:
        return MESSAGE_FORMAT.format(
            name=item.quality_gate.name,
            description=item.status.description,
            actual=item.actual_value,
            threshold=format_threshold(item.quality_gate.threshold),
        )

    def to_api(self) -> dict[str, Any]:
        """Convert to the remote API representation."""
        return {
            "overall_result": self._overall_status.value,
            "result_items": [item.to_api() for item in self._items],
        }

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return self._overall_status.value

    def __repr__(self) -> str:
        return f"QualityGateResult(overall_status={self._overall_status.value}, items={len(self._items)})"
