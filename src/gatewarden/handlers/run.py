"""
Result handlers that act on the whole run.
"""

from __future__ import annotations

import structlog

from gatewarden.handlers.base import ResultHandler, StageResultHandler, require_result, require_status
from gatewarden.handlers.model import RunState
from gatewarden.status import QualityGateStatus, Result

logger = structlog.get_logger(__name__)


class RunResultHandler(StageResultHandler, ResultHandler):
    """
    Sets the overall result of a run.

    Only UNSTABLE and FAILURE are written to the run, every other result
    is ignored. The run itself keeps the worst result it has seen, so a
    milder result never overwrites a worse one.
    """

    def __init__(self, run: RunState) -> None:
        self.run = run
        self._log = logger.bind(handler="run")

    def set_result(self, result: Result, message: str) -> None:
        self.publish_build_result(result, message)

    def publish_build_result(self, result: Result, message: str) -> None:
        result = require_result(result)
        if result in (Result.UNSTABLE, Result.FAILURE):
            self._log.info("run_result_published", result=result.value, message=message)
            self.run.set_result(result)
        else:
            self._log.debug("run_result_ignored", result=result.value)

    def publish_result(self, status: QualityGateStatus, message: str) -> None:
        self.set_result(require_status(status).result, message)


class NullResultHandler(ResultHandler):
    """A ResultHandler that does nothing."""

    def publish_result(self, status: QualityGateStatus, message: str) -> None:
        pass

    def publish_build_result(self, result: Result, message: str) -> None:
        pass
