"""
Gatewarden: quality gate evaluation and result propagation.

Evaluates named threshold policies against measured values, aggregates
their outcomes into a single worst-case status and propagates that status
to the surrounding build or pipeline stage.
"""

from gatewarden.evaluator import GateOutcome, QualityGateEvaluator, at_least, at_most
from gatewarden.gate import (
    MetricQualityGate,
    QualityGate,
    QualityGateCriticality,
    criticality_options,
)
from gatewarden.handlers import (
    FlowNode,
    NullResultHandler,
    PipelineResultHandler,
    QualityGateNotifier,
    ResultHandler,
    Run,
    RunResultHandler,
    StageResultHandler,
    WarningAction,
)
from gatewarden.log import FilteredLog, LogHandler
from gatewarden.result import QualityGateResult, QualityGateResultItem
from gatewarden.runner import QualityGateRunner
from gatewarden.status import QualityGateStatus, Result

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Status lattice
    "QualityGateStatus",
    "Result",
    # Gates
    "QualityGate",
    "QualityGateCriticality",
    "MetricQualityGate",
    "criticality_options",
    # Evaluation
    "QualityGateEvaluator",
    "GateOutcome",
    "at_least",
    "at_most",
    "QualityGateResult",
    "QualityGateResultItem",
    "QualityGateRunner",
    # Result propagation
    "QualityGateNotifier",
    "ResultHandler",
    "StageResultHandler",
    "RunResultHandler",
    "PipelineResultHandler",
    "NullResultHandler",
    "Run",
    "FlowNode",
    "WarningAction",
    # Logging
    "FilteredLog",
    "LogHandler",
]
