"""
Unit tests for QualityGateResult aggregation.
"""

import itertools

import pytest

from gatewarden.gate import QualityGate
from gatewarden.result import QualityGateResult, format_threshold
from gatewarden.status import QualityGateStatus

GATE = QualityGate("Gate", threshold=50.0)


class TestAggregation:
    """Tests for the monotonic overall status."""

    def test_empty_result_is_inactive(self):
        result = QualityGateResult()

        assert result.overall_status is QualityGateStatus.INACTIVE
        assert result.is_inactive()
        assert result.is_successful()
        assert result.get_messages() == []
        assert str(result) == "INACTIVE"

    def test_single_pass(self):
        result = QualityGateResult()
        result.add(GATE, QualityGateStatus.PASSED, "60.0")

        assert result.overall_status is QualityGateStatus.PASSED
        assert result.is_successful()
        assert not result.is_inactive()

    @pytest.mark.parametrize("statuses", list(itertools.product(list(QualityGateStatus), repeat=3)))
    def test_overall_status_is_running_maximum(self, statuses):
        """After every add the overall status is the worst status added so far."""
        result = QualityGateResult()

        for count, status in enumerate(statuses, start=1):
            result.add(GATE, status, "1")
            expected = max(statuses[:count], key=lambda s: s.rank)
            assert result.overall_status is expected
            assert result.is_successful() == expected.is_successful()

    def test_status_never_improves(self):
        result = QualityGateResult()
        result.add(GATE, QualityGateStatus.ERROR, "1")
        result.add(GATE, QualityGateStatus.PASSED, "99")
        result.add(GATE, QualityGateStatus.NOTE, "3")

        assert result.overall_status is QualityGateStatus.ERROR

    def test_preset_status_is_kept(self):
        result = QualityGateResult(QualityGateStatus.FAILED)
        result.add(GATE, QualityGateStatus.PASSED, "1")

        assert result.overall_status is QualityGateStatus.FAILED

    @pytest.mark.parametrize("status", ["FAILED", 5, None, object()])
    def test_reject_unknown_status(self, status):
        result = QualityGateResult()

        with pytest.raises(TypeError):
            result.add(GATE, status, "1")

        assert len(result) == 0
        assert result.is_inactive()


class TestMessages:
    """Tests for message formatting."""

    def test_message_format(self):
        result = QualityGateResult()
        result.add(QualityGate("Line coverage", threshold=80), QualityGateStatus.WARNING, "75.5")

        assert result.get_messages() == [
            "[Line coverage]: «Unstable» - (Actual value: 75.5, Quality gate: 80.00)"
        ]

    def test_threshold_always_has_two_decimals(self):
        result = QualityGateResult()
        result.add(QualityGate("Integer", threshold=80), QualityGateStatus.PASSED, "0")
        result.add(QualityGate("Huge", threshold=123456.789), QualityGateStatus.PASSED, "0")
        result.add(QualityGate("Tiny", threshold=1e-7), QualityGateStatus.PASSED, "0")

        messages = result.get_messages()
        assert messages[0].endswith("Quality gate: 80.00)")
        assert messages[1].endswith("Quality gate: 123456.79)")
        assert messages[2].endswith("Quality gate: 0.00)")

    @pytest.mark.parametrize(
        "threshold,expected",
        [
            (0.125, "0.13"),
            (2.675, "2.68"),
            (0.005, "0.01"),
            (-0.125, "-0.13"),
            (1.994, "1.99"),
            (1e20, "100000000000000000000.00"),
        ],
    )
    def test_threshold_rounds_half_up(self, threshold, expected):
        result = QualityGateResult()
        result.add(QualityGate("Half", threshold=threshold), QualityGateStatus.PASSED, "1")

        assert result.get_messages() == [
            f"[Half]: «Success» - (Actual value: 1, Quality gate: {expected})"
        ]
        assert format_threshold(threshold) == expected

    def test_non_finite_threshold(self):
        assert format_threshold(float("inf")) == "Infinity"
        assert format_threshold(float("-inf")) == "-Infinity"
        assert format_threshold(float("nan")) == "NaN"

    def test_messages_in_insertion_order(self):
        result = QualityGateResult()
        for name in ["C", "A", "B"]:
            result.add(QualityGate(name), QualityGateStatus.PASSED, "1")

        assert [m[:3] for m in result.get_messages()] == ["[C]", "[A]", "[B]"]
        assert result.get_messages() == result.get_messages()

    def test_items(self):
        result = QualityGateResult()
        result.add(GATE, QualityGateStatus.NOTE, "42")

        (item,) = result.result_items
        assert item.quality_gate is GATE
        assert item.status is QualityGateStatus.NOTE
        assert item.actual_value == "42"

    def test_to_api(self):
        result = QualityGateResult()
        result.add(GATE, QualityGateStatus.FAILED, "10")

        assert result.to_api() == {
            "overall_result": "FAILED",
            "result_items": [
                {"quality_gate": "Gate", "threshold": 50.0, "result": "FAILURE", "value": "10"},
            ],
        }
