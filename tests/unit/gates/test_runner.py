"""
Unit tests for QualityGateRunner.
"""

from unittest.mock import Mock

from gatewarden.config import load_settings
from gatewarden.evaluator import at_least
from gatewarden.handlers import FlowNode, PipelineResultHandler, Run
from gatewarden.runner import QualityGateRunner
from gatewarden.status import QualityGateStatus, Result

GATES = [
    {"name": "Line coverage", "threshold": 80, "criticality": "unstable"},
    {"name": "Branch coverage", "threshold": 60, "criticality": "error"},
]

METRICS = {"Line coverage": 85.0, "Branch coverage": 55.0}


def test_run_forwards_log(sink):
    settings = load_settings(log_name="Coverage", quality_gates=GATES)
    run, stage = Run(), FlowNode()

    runner = QualityGateRunner(settings, sink=sink)
    result = runner.run(at_least(lambda gate: METRICS[gate.name]), PipelineResultHandler(run, stage))

    assert result.overall_status is QualityGateStatus.ERROR
    assert run.result is None
    assert stage.get_warning().result is Result.FAILURE
    assert sink.getvalue().splitlines() == [
        "[Coverage] Evaluating quality gates",
        "[Coverage] -> Some quality gates have been missed: overall result is FAILURE",
        "[Coverage] [Line coverage]: «Success» - (Actual value: 85.0, Quality gate: 80.00)",
        "[Coverage] [Branch coverage]: «Error» - (Actual value: 55.0, Quality gate: 60.00)",
    ]


def test_run_without_gates(sink):
    runner = QualityGateRunner(load_settings(), sink=sink)
    result = runner.run(at_least(lambda gate: 0.0))

    assert result.is_inactive()
    assert sink.getvalue() == "[Quality Gates] No quality gates have been set - skipping\n"


def test_quiet_run(sink):
    runner = QualityGateRunner(load_settings(quiet=True, quality_gates=GATES), sink=sink)
    runner.run(at_least(lambda gate: 100.0))

    assert sink.getvalue() == ""
    assert runner.log.info_messages[1] == "-> All quality gates have been passed"


def test_from_settings_configures_logging(monkeypatch, sink):
    configure = Mock()
    monkeypatch.setattr("gatewarden.runner.setup_logging", configure)
    settings = load_settings(log_level="WARNING", quality_gates=GATES)

    runner = QualityGateRunner.from_settings(settings, sink=sink)

    configure.assert_called_once_with(settings)
    assert runner.settings is settings
    assert len(runner.evaluator) == 2
    assert runner.log_handler.sink is sink
