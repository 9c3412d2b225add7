"""Tests for heart rate variability metrics."""

import math

import pytest

from biofeedback.errors import BiofeedbackError, InsufficientDataError
from biofeedback.vitals.hrv import HRVMetrics, compute_hrv, pnn50, rmssd, sdnn, successive_differences


class TestSuccessiveDifferences:
	def test_signed_differences(self, rr_intervals):
		assert list(successive_differences(rr_intervals)) == [20.0, -10.0, 20.0, -15.0]


class TestRMSSD:
	def test_reference_sequence(self, rr_intervals):
		assert rmssd(rr_intervals) == pytest.approx(math.sqrt(1125 / 4))
		assert rmssd(rr_intervals) == pytest.approx(16.77, abs=0.01)

	def test_two_intervals(self):
		assert rmssd([800.0, 900.0]) == pytest.approx(100.0)


class TestSDNN:
	def test_population_std(self, rr_intervals):
		# mean 815, squared deviations sum to 500 over n=5
		assert sdnn(rr_intervals) == pytest.approx(10.0)

	def test_constant_sequence_is_zero(self):
		assert sdnn([100.0, 100.0, 100.0]) == 0.0


class TestPNN50:
	def test_no_large_differences(self, rr_intervals):
		assert pnn50(rr_intervals) == 0.0

	def test_counts_absolute_differences(self):
		# diffs 100, 5, -105
		assert pnn50([800.0, 900.0, 905.0, 800.0]) == pytest.approx(200.0 / 3.0)

	def test_exactly_50_not_counted(self):
		assert pnn50([800.0, 850.0]) == 0.0

	def test_custom_threshold(self, rr_intervals):
		assert pnn50(rr_intervals, threshold_ms=12.0) == pytest.approx(75.0)


class TestComputeHRV:
	def test_returns_all_three(self, rr_intervals):
		metrics = compute_hrv(rr_intervals)
		assert isinstance(metrics, HRVMetrics)
		assert metrics.rmssd == pytest.approx(16.77, abs=0.01)
		assert metrics.sdnn == pytest.approx(10.0)
		assert metrics.pnn50 == 0.0

	def test_unpacks_as_tuple(self, rr_intervals):
		r, s, p = compute_hrv(rr_intervals)
		assert (r, s, p) == compute_hrv(rr_intervals).as_tuple()

	@pytest.mark.parametrize("intervals", [[], [800.0]])
	def test_insufficient_data(self, intervals):
		with pytest.raises(InsufficientDataError) as exc_info:
			compute_hrv(intervals)
		assert exc_info.value.count == len(intervals)
		assert exc_info.value.required == 2
		assert isinstance(exc_info.value, BiofeedbackError)

	def test_two_intervals_succeed(self):
		metrics = compute_hrv([800.0, 900.0])
		assert metrics.as_tuple() == pytest.approx((100.0, 50.0, 100.0))

	def test_to_dict(self, rr_intervals):
		assert set(compute_hrv(rr_intervals).to_dict()) == {"rmssd", "sdnn", "pnn50"}
