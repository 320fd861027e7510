"""
Configured quality gate run.

Wires settings, evaluator, evaluation log and result propagation together:
the gates declared in GatewardenSettings are evaluated against a value
source, the narration is forwarded through a LogHandler and a missed
evaluation is published to the given notifier.
"""

from __future__ import annotations

from typing import TextIO

import structlog

from gatewarden.config.environment import setup_logging
from gatewarden.config.settings import GatewardenSettings
from gatewarden.evaluator import QualityGateEvaluator, ValueSource
from gatewarden.gate import QualityGate
from gatewarden.handlers.base import QualityGateNotifier
from gatewarden.log import FilteredLog, LogHandler
from gatewarden.result import QualityGateResult

logger = structlog.get_logger(__name__)


class QualityGateRunner:
    """Evaluates the quality gates of a GatewardenSettings instance."""

    def __init__(self, settings: GatewardenSettings, sink: TextIO | None = None) -> None:
        self.settings = settings
        self.evaluator: QualityGateEvaluator[QualityGate] = QualityGateEvaluator(settings.build_gates())
        self.log = FilteredLog()
        self.log_handler = LogHandler(settings.log_name, self.log, sink=sink)
        self.log_handler.quiet = settings.quiet

    @classmethod
    def from_settings(cls, settings: GatewardenSettings, sink: TextIO | None = None) -> QualityGateRunner:
        """
        Configure logging from ``settings`` and create a runner for them.

        Args:
            settings: Gatewarden configuration settings
            sink: Text stream for forwarded evaluation lines (default: stdout)
        """
        setup_logging(settings)
        logger.debug("quality_gate_runner_created", log_level=settings.log_level, quiet=settings.quiet)
        return cls(settings, sink=sink)

    def run(
        self,
        value_source: ValueSource,
        notifier: QualityGateNotifier | None = None,
    ) -> QualityGateResult:
        """
        Evaluate the configured gates and forward the evaluation log.

        Exceptions raised by the value source propagate unchanged.
        """
        logger.info("quality_gate_run_started", gate_count=len(self.evaluator))
        result = self.evaluator.evaluate(value_source, self.log, notifier)
        self.log.log_summary()
        self.log_handler.log_all(self.log)
        return result
