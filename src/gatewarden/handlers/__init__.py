"""
Result propagation handlers.

These handlers receive the overall quality gate status and decide how to
change the result of the surrounding build or stage.
"""

from gatewarden.handlers.base import (
    QualityGateNotifier,
    ResultHandler,
    StageResultHandler,
)
from gatewarden.handlers.model import (
    FlowNode,
    Run,
    RunState,
    StageNode,
    WarningAction,
)
from gatewarden.handlers.pipeline import PipelineResultHandler
from gatewarden.handlers.run import NullResultHandler, RunResultHandler

__all__ = [
    # Contracts
    "QualityGateNotifier",
    "ResultHandler",
    "StageResultHandler",
    # Handlers
    "RunResultHandler",
    "PipelineResultHandler",
    "NullResultHandler",
    # Build and stage state
    "Run",
    "RunState",
    "FlowNode",
    "StageNode",
    "WarningAction",
]
