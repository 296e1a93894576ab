"""
Tests for chained compounding, diagnostics and OpReport.
"""

import json
import logging

import numpy as np
import pytest

from se3cov import SE3Cov, compound_chain, covariance_diagnostics
from se3cov.common.op_report import OpReport
from se3cov.common.param_models import CompoundingParams
from se3cov.common.geometry import rotvec_to_rotmat, se3_from_rt


@pytest.fixture
def odometry_steps():
    """Ten forward steps with a slight left turn."""
    T = se3_from_rt(rotvec_to_rotmat([0.0, 0.0, 0.05]), [0.5, 0.0, 0.0])
    cov = np.diag([1e-4, 1e-4, 4e-4, 1e-3, 1e-3, 1e-4])
    return [SE3Cov(T, cov) for _ in range(10)]


class TestCompoundChain:
    def test_matches_manual_fold(self, odometry_steps):
        start = SE3Cov(np.eye(4), np.zeros((6, 6)))
        expected = start
        for step in odometry_steps:
            expected = expected * step

        result, report = compound_chain(start, odometry_steps)
        np.testing.assert_allclose(result.pose, expected.pose, atol=1e-12)
        np.testing.assert_allclose(result.covariance(), expected.covariance(), atol=1e-12)
        assert report.metrics["n_steps"] == 10
        assert report.metrics["order"] == "2nd"

    def test_fourth_order(self, odometry_steps):
        start = SE3Cov(np.eye(4), np.zeros((6, 6)))
        expected = start
        for step in odometry_steps:
            expected = expected.compound_4th_order(step)

        result, report = compound_chain(start, odometry_steps, CompoundingParams(order="4th"))
        np.testing.assert_allclose(result.covariance(), expected.covariance(), atol=1e-12)
        assert report.approximation_triggers == ["truncated_bch_series"]

    def test_uncertainty_grows(self, odometry_steps):
        start = SE3Cov(np.eye(4), np.zeros((6, 6)))
        result, report = compound_chain(start, odometry_steps)
        assert np.trace(result.covariance()) > np.trace(odometry_steps[0].covariance())
        assert report.metrics["is_symmetric"]
        assert report.metrics["is_psd"]

    def test_empty_sequence_copies_start(self, random_pose, random_spd):
        start = SE3Cov(random_pose, random_spd(seed=31))
        result, report = compound_chain(start, [])
        assert result is not start
        np.testing.assert_array_equal(result.pose, start.pose)
        np.testing.assert_array_equal(result.covariance(), start.covariance())
        assert report.metrics["n_steps"] == 0

    def test_report_disabled(self, odometry_steps):
        _, report = compound_chain(SE3Cov(), odometry_steps, CompoundingParams(emit_report=False))
        assert report is None

    def test_inputs_unchanged(self, odometry_steps):
        start = SE3Cov()
        before = [s.covariance().copy() for s in odometry_steps]
        compound_chain(start, odometry_steps, CompoundingParams(order="4th"))
        np.testing.assert_array_equal(start.covariance(), np.eye(6))
        for s, b in zip(odometry_steps, before):
            np.testing.assert_array_equal(s.covariance(), b)

    def test_warns_on_indefinite_result(self, caplog):
        bad = SE3Cov(np.eye(4), -np.eye(6))
        with caplog.at_level(logging.WARNING, logger="se3cov.backend.chain"):
            result, report = compound_chain(SE3Cov(np.eye(4), np.zeros((6, 6))), [bad])
        assert not report.metrics["is_psd"]
        assert "failed covariance checks" in caplog.text
        # Reported, not clamped
        np.testing.assert_array_equal(result.covariance(), -np.eye(6))

    def test_overflowed_covariance_is_reported(self, caplog):
        huge = SE3Cov(np.eye(4), np.full((6, 6), 1e308))
        start = SE3Cov(np.eye(4), np.zeros((6, 6)))
        with np.errstate(over="ignore"), caplog.at_level(logging.WARNING, logger="se3cov.backend.chain"):
            result, report = compound_chain(start, [huge, huge])
        assert not np.all(np.isfinite(result.covariance()))
        assert report.metrics["n_steps"] == 2
        assert not report.metrics["is_finite"]
        assert not report.metrics["is_psd"]
        assert "failed covariance checks" in caplog.text


class TestDiagnostics:
    def test_spd(self, random_spd):
        d = covariance_diagnostics(random_spd(seed=32))
        assert d["is_finite"] and d["is_symmetric"] and d["is_psd"]
        assert d["min_eigenvalue"] > 0.0

    def test_asymmetric(self):
        cov = np.eye(6)
        cov[0, 5] = 1e-3
        d = covariance_diagnostics(cov)
        assert not d["is_symmetric"]
        assert d["symmetry_error"] == pytest.approx(1e-3)

    def test_does_not_modify_input(self):
        cov = -np.eye(6)
        covariance_diagnostics(cov)
        np.testing.assert_array_equal(cov, -np.eye(6))

    def test_trace(self):
        assert covariance_diagnostics(np.diag([1.0, 2, 3, 4, 5, 6]))["trace"] == pytest.approx(21.0)

    @pytest.mark.parametrize("bad", [np.nan, np.inf])
    def test_non_finite(self, bad):
        cov = np.eye(6)
        cov[2, 4] = bad
        d = covariance_diagnostics(cov)
        assert not d["is_finite"]
        assert not d["is_symmetric"] and not d["is_psd"]
        assert np.isnan(d["min_eigenvalue"])


class TestOpReport:
    def test_chain_report_is_valid_and_serializable(self, odometry_steps):
        _, report = compound_chain(SE3Cov(), odometry_steps)
        report.validate()
        payload = json.loads(report.to_json())
        assert payload["name"] == "CompoundChainSE3"
        assert payload["exact"] is False
        assert payload["closed_form"] is True
        assert payload["approximation_triggers"] == ["linearization"]

    def test_exact_with_triggers_rejected(self):
        with pytest.raises(ValueError):
            OpReport(name="x", exact=True, approximation_triggers=["linearization"]).validate()

    def test_approximate_without_trigger_rejected(self):
        with pytest.raises(ValueError):
            OpReport(name="x", exact=False).validate()

    def test_closed_form_with_solver_rejected(self):
        with pytest.raises(ValueError):
            OpReport(name="x", exact=True, closed_form=True, solver_used="gauss_newton").validate()
