"""
In-memory build and stage state.

Run and FlowNode are the mutable sinks the result handlers write to. Host
integrations can pass any object with the same shape (see RunState and
StageNode).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import structlog

from gatewarden.status import Result

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class WarningAction:
    """Warning marker attached to a stage node."""

    result: Result
    message: str | None = None

    def with_message(self, message: str) -> WarningAction:
        return WarningAction(self.result, message)


class RunState(Protocol):
    """Anything that stores the overall result of a run."""

    def set_result(self, result: Result) -> None: ...


class StageNode(Protocol):
    """Anything that can carry a single warning marker."""

    def get_warning(self) -> WarningAction | None: ...

    def add_or_replace(self, action: WarningAction) -> None: ...


class Run:
    """
    Overall state of a build run.

    The stored result only ever gets worse: setting a result that is
    better than the current one is ignored.
    """

    def __init__(self, name: str = "run", result: Result | None = None) -> None:
        self.name = name
        self._result = result

    @property
    def result(self) -> Result | None:
        """Current result, None while nothing has been set."""
        return self._result

    def set_result(self, result: Result) -> None:
        combined = result if self._result is None else self._result.combine(result)
        if combined is not self._result:
            logger.debug(
                "run_result_changed",
                run=self.name,
                old=self._result.value if self._result else None,
                new=combined.value,
            )
            self._result = combined

    def __repr__(self) -> str:
        current = self._result.value if self._result else None
        return f"Run(name={self.name!r}, result={current})"


class FlowNode:
    """A pipeline stage node that holds at most one warning marker."""

    def __init__(self, name: str = "stage") -> None:
        self.name = name
        self._warning: WarningAction | None = None

    def get_warning(self) -> WarningAction | None:
        return self._warning

    def add_or_replace(self, action: WarningAction) -> None:
        self._warning = action

    def __repr__(self) -> str:
        return f"FlowNode(name={self.name!r}, warning={self._warning!r})"
