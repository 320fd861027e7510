"""
Quality gate definitions.

A quality gate is a named threshold policy. When a measured value misses
the threshold, the gate's criticality decides which QualityGateStatus the
outcome gets. The comparison direction is not part of the gate; it is
supplied by the value source used during evaluation.
"""

from __future__ import annotations

from enum import Enum

from gatewarden.status import QualityGateStatus


class QualityGateCriticality(str, Enum):
    """Determines the status of a missed quality gate."""

    NOTE = "NOTE"  # stage is marked with a warning
    UNSTABLE = "UNSTABLE"  # stage and build are marked as unstable
    ERROR = "ERROR"  # stage is marked as failed
    FAILURE = "FAILURE"  # stage and build are marked as failed

    @property
    def status(self) -> QualityGateStatus:
        """Status assigned to a gate of this criticality when it is missed."""
        return _CRITICALITY_STATUS[self]

    @classmethod
    def from_name(cls, name: str) -> QualityGateCriticality:
        """
        Parse a criticality name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If the name is not a known criticality
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(member.name for member in cls)
            raise ValueError(f"Unknown criticality '{name}', expected one of: {valid}") from None


_CRITICALITY_STATUS: dict[QualityGateCriticality, QualityGateStatus] = {
    QualityGateCriticality.NOTE: QualityGateStatus.NOTE,
    QualityGateCriticality.UNSTABLE: QualityGateStatus.WARNING,
    QualityGateCriticality.ERROR: QualityGateStatus.ERROR,
    QualityGateCriticality.FAILURE: QualityGateStatus.FAILED,
}

_FREESTYLE_OPTIONS: list[tuple[str, QualityGateCriticality]] = [
    ("Build unstable", QualityGateCriticality.UNSTABLE),
    ("Build failed", QualityGateCriticality.FAILURE),
]

_PIPELINE_OPTIONS: list[tuple[str, QualityGateCriticality]] = [
    ("Stage unstable", QualityGateCriticality.NOTE),
    ("Stage and build unstable", QualityGateCriticality.UNSTABLE),
    ("Stage failed", QualityGateCriticality.ERROR),
    ("Stage and build failed", QualityGateCriticality.FAILURE),
]


def criticality_options(pipeline: bool = True) -> list[tuple[str, QualityGateCriticality]]:
    """
    Return the selectable criticalities as (label, criticality) pairs.

    Freestyle jobs have no stages, so only the build-level criticalities
    are offered for them.
    """
    return list(_PIPELINE_OPTIONS if pipeline else _FREESTYLE_OPTIONS)


class QualityGate:
    """
    A named threshold policy with a criticality.

    Gates are configured once and then only read during evaluation. The
    setters exist for configuration binding.
    """

    def __init__(
        self,
        name: str | None = None,
        threshold: float = 0.0,
        criticality: QualityGateCriticality = QualityGateCriticality.UNSTABLE,
    ) -> None:
        """
        Initialize quality gate.

        Args:
            name: Display name. Subclasses that derive their name may omit it.
            threshold: Threshold value, its meaning depends on the value source
            criticality: Criticality applied when the gate is missed

        Raises:
            ValueError: If the resolved name is empty
        """
        self._name = name
        self._threshold = float(threshold)
        self._criticality = criticality

        if not self.name or not self.name.strip():
            raise ValueError("Quality gate name must not be empty")

    @property
    def name(self) -> str:
        """Human-readable name of the quality gate."""
        return self._name or ""

    @property
    def threshold(self) -> float:
        return self._threshold

    def set_threshold(self, threshold: float) -> None:
        self._threshold = float(threshold)

    @property
    def integer_threshold(self) -> int:
        """Threshold truncated toward zero."""
        return int(self._threshold)

    def set_integer_threshold(self, integer_threshold: float) -> None:
        """
        Set the threshold from an integer input field.

        This is a lossy convenience path for numeric form bindings: the
        value is truncated toward zero, it is not validated.
        """
        self._threshold = float(int(integer_threshold))

    @property
    def criticality(self) -> QualityGateCriticality:
        return self._criticality

    def set_criticality(self, criticality: QualityGateCriticality) -> None:
        self._criticality = criticality

    @property
    def status(self) -> QualityGateStatus:
        """Status of this gate when it has been missed."""
        return self._criticality.status

    def __str__(self) -> str:
        return f"{self.name} - {self._criticality.name}: {self._threshold:f}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, threshold={self._threshold}, "
            f"criticality={self._criticality.name})"
        )


class MetricQualityGate(QualityGate):
    """
    Quality gate bound to a metric key.

    The display name is derived from the metric and the optional baseline
    the metric is measured against, e.g. ``"Line coverage (project)"``.
    """

    def __init__(
        self,
        metric: str,
        threshold: float = 0.0,
        criticality: QualityGateCriticality = QualityGateCriticality.UNSTABLE,
        baseline: str | None = None,
    ) -> None:
        self.metric = metric
        self.baseline = baseline
        super().__init__(threshold=threshold, criticality=criticality)

    @property
    def name(self) -> str:
        label = self.metric.replace("_", " ").replace("-", " ").strip().capitalize()
        if self.baseline:
            return f"{label} ({self.baseline})"
        return label
