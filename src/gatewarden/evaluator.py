"""
Quality gate evaluator.

The evaluator walks the configured gates in insertion order, asks a value
source for each gate's outcome, folds the outcomes into a
QualityGateResult, narrates the evaluation into a FilteredLog and
publishes a missed evaluation to a notifier.

The comparison direction is not built into the evaluator. It comes from
the value source, for example :func:`at_least` for coverage-like metrics
and :func:`at_most` for defect counts.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, NamedTuple, TypeVar

import structlog

from gatewarden.gate import QualityGate
from gatewarden.handlers.base import QualityGateNotifier
from gatewarden.handlers.run import NullResultHandler
from gatewarden.log import FilteredLog
from gatewarden.result import QualityGateResult
from gatewarden.status import QualityGateStatus

logger = structlog.get_logger(__name__)

G = TypeVar("G", bound=QualityGate)

NO_DATA = "n/a"

NO_GATES_MESSAGE = "No quality gates have been set - skipping"
START_MESSAGE = "Evaluating quality gates"
PASSED_MESSAGE = "-> All quality gates have been passed"
MISSED_MESSAGE = "-> Some quality gates have been missed: overall result is %s"


class GateOutcome(NamedTuple):
    """Status and displayable actual value of one evaluated gate."""

    status: QualityGateStatus
    actual_value: str


ValueSource = Callable[[G], GateOutcome]
MetricLookup = Callable[[G], "float | None"]


def _threshold_check(
    lookup: MetricLookup,
    formatter: Callable[[float], str],
    missed: Callable[[float, float], bool],
) -> ValueSource:
    def evaluate_gate(gate: QualityGate) -> GateOutcome:
        value = lookup(gate)
        if value is None:
            return GateOutcome(QualityGateStatus.INACTIVE, NO_DATA)
        if missed(value, gate.threshold):
            return GateOutcome(gate.status, formatter(value))
        return GateOutcome(QualityGateStatus.PASSED, formatter(value))

    return evaluate_gate


def at_least(lookup: MetricLookup, formatter: Callable[[float], str] = str) -> ValueSource:
    """
    Value source for metrics that must reach the threshold.

    The gate is missed when the measured value is below the threshold. A
    lookup that returns None yields an INACTIVE outcome with "n/a".
    """
    return _threshold_check(lookup, formatter, lambda value, threshold: value < threshold)


def at_most(lookup: MetricLookup, formatter: Callable[[float], str] = str) -> ValueSource:
    """Value source for metrics that must not exceed the threshold."""
    return _threshold_check(lookup, formatter, lambda value, threshold: value > threshold)


class QualityGateEvaluator(Generic[G]):
    """
    Evaluates an ordered list of quality gates.

    Gates are kept in the order they were added. Gates with equal names
    are evaluated independently.
    """

    def __init__(self, quality_gates: Iterable[G] = ()) -> None:
        self._quality_gates: list[G] = list(quality_gates)

    def add_all(self, quality_gates: Iterable[G]) -> None:
        """Append gates after the existing ones."""
        self._quality_gates.extend(quality_gates)

    def is_enabled(self) -> bool:
        """Return True if at least one quality gate has been added."""
        return bool(self._quality_gates)

    @property
    def quality_gates(self) -> tuple[G, ...]:
        return tuple(self._quality_gates)

    def create_result(self) -> QualityGateResult:
        return QualityGateResult()

    def evaluate(
        self,
        value_source: ValueSource,
        log: FilteredLog,
        notifier: QualityGateNotifier | None = None,
    ) -> QualityGateResult:
        """
        Evaluate all quality gates.

        Args:
            value_source: Returns the outcome of a single gate
            log: Receives the evaluation narration
            notifier: Receives the overall status if a gate has been missed

        Returns:
            The aggregated result of all gates
        """
        if notifier is None:
            notifier = NullResultHandler()

        if not self._quality_gates:
            log.log_info(NO_GATES_MESSAGE)
            logger.info("quality_gates_skipped")
            return QualityGateResult()

        log.log_info(START_MESSAGE)

        result = self.create_result()
        for quality_gate in self._quality_gates:
            outcome = value_source(quality_gate)
            result.add(quality_gate, outcome.status, outcome.actual_value)

        if result.is_successful():
            log.log_info(PASSED_MESSAGE)
        else:
            message = MISSED_MESSAGE % result.overall_status.result.value
            log.log_info(message)
            notifier.publish_result(result.overall_status, message)

        for message in result.get_messages():
            log.log_info(message)

        logger.info(
            "quality_gates_evaluated",
            gate_count=len(self._quality_gates),
            overall_status=result.overall_status.value,
        )
        return result

    def __len__(self) -> int:
        return len(self._quality_gates)

    def __iter__(self) -> Iterator[G]:
        return iter(self._quality_gates)
