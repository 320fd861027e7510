"""
Result propagation contracts.

A quality gate evaluation ends with a status and a message. The classes in
this module describe the sinks that receive them: the whole build, a single
stage, or both.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gatewarden.status import QualityGateStatus, Result


class QualityGateNotifier(ABC):
    """Notifies the build or stage about a quality gate status."""

    @abstractmethod
    def publish_result(self, status: QualityGateStatus, message: str) -> None:
        """
        Publish a quality gate status.

        Args:
            status: The quality gate status
            message: A message that describes the cause for the status
        """
        ...


class ResultHandler(QualityGateNotifier):
    """Sets the result of the build or stage."""

    @abstractmethod
    def publish_build_result(self, result: Result, message: str) -> None:
        """
        Publish a result classification directly.

        Args:
            result: The new result
            message: A message that describes the cause for the result
        """
        ...


class StageResultHandler(ABC):
    """Sets the result of a single stage rather than the whole run."""

    @abstractmethod
    def set_result(self, result: Result, message: str) -> None:
        """
        Set the result of the stage.

        Args:
            result: The result to set
            message: A message that describes the cause for the result
        """
        ...


def require_status(status: object) -> QualityGateStatus:
    if not isinstance(status, QualityGateStatus):
        raise TypeError(f"Expected a QualityGateStatus, got {type(status).__name__}: {status!r}")
    return status


def require_result(result: object) -> Result:
    if not isinstance(result, Result):
        raise TypeError(f"Expected a Result, got {type(result).__name__}: {result!r}")
    return result
