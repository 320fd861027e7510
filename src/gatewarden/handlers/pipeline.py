"""
Result handler for nested pipeline stages.

A pipeline run must end with the worst outcome of all its stages, while
every stage still shows its own, possibly milder, warning marker.
"""

from __future__ import annotations

import structlog

from gatewarden.handlers.base import QualityGateNotifier, StageResultHandler, require_result, require_status
from gatewarden.handlers.model import RunState, StageNode, WarningAction
from gatewarden.status import QualityGateStatus, Result

logger = structlog.get_logger(__name__)


class PipelineResultHandler(StageResultHandler, QualityGateNotifier):
    """
    Sets the run result and annotates the current stage node.

    Dispatch by status:
        NOTE, ERROR     -> stage marker only
        WARNING, FAILED -> run result and stage marker
        PASSED, INACTIVE -> nothing

    An existing stage marker is replaced only by a strictly worse result.
    """

    def __init__(self, run: RunState, flow_node: StageNode) -> None:
        self.run = run
        self.flow_node = flow_node
        self._log = logger.bind(handler="pipeline")

    def set_result(self, result: Result, message: str) -> None:
        result = require_result(result)
        self._log.info("run_result_published", result=result.value, message=message)
        self.run.set_result(result)

        self._set_stage_result(result, message)

    def _set_stage_result(self, result: Result, message: str) -> None:
        existing = self.flow_node.get_warning()
        if existing is None or existing.result.is_better_than(result):
            self._log.info(
                "stage_marker_set",
                result=result.value,
                previous=existing.result.value if existing else None,
            )
            self.flow_node.add_or_replace(WarningAction(result).with_message(message))

    def publish_result(self, status: QualityGateStatus, message: str) -> None:
        status = require_status(status)
        if status in (QualityGateStatus.NOTE, QualityGateStatus.ERROR):
            self._set_stage_result(status.result, message)
        elif status in (QualityGateStatus.WARNING, QualityGateStatus.FAILED):
            self.set_result(status.result, message)
