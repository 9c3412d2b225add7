"""Tests for signal smoothing and peak detection."""

import operator
from functools import reduce

import numpy as np
import pytest

from biofeedback.vitals.filters import ExponentialSmoother, Filter, MovingAverageBandpass, window_half_width
from biofeedback.vitals.peaks import find_peaks


class TestWindowHalfWidth:
	def test_respiratory_band_at_30hz(self):
		assert window_half_width(30.0, 0.1, 0.5, 300) == 25

	def test_clamped_to_quarter_length(self):
		assert window_half_width(30.0, 0.1, 0.5, 40) == 10

	def test_minimum_of_three(self):
		assert window_half_width(30.0, 0.1, 0.5, 8) == 3
		assert window_half_width(2.0, 0.1, 0.5, 1000) == 3


class TestFilterInterface:
	def test_process_is_the_only_abstract_method(self):
		class Identity(Filter):
			def process(self, signal):
				return signal

		x = np.arange(5.0)
		np.testing.assert_array_equal(Identity().process(x), x)
		assert Filter.__abstractmethods__ == frozenset({"process"})


class TestMovingAverageBandpass:
	def test_preserves_length(self, breathing_signal):
		f = MovingAverageBandpass(sample_rate_hz=30.0, low_freq_hz=0.1, high_freq_hz=0.5)
		out = f.process(breathing_signal)
		assert len(out) == len(breathing_signal)
		assert out.dtype == np.float64

	def test_constant_signal_unchanged(self):
		f = MovingAverageBandpass(sample_rate_hz=30.0)
		out = f.process(np.full(200, 2.0))
		np.testing.assert_allclose(out, 2.0)

	def test_shrinking_windows_at_edges(self):
		# 12 samples clamps the half-width to 3
		f = MovingAverageBandpass(sample_rate_hz=30.0)
		out = f.process(np.arange(12, dtype=float))
		assert out[0] == pytest.approx(1.5)    # mean of 0..3
		assert out[5] == pytest.approx(5.0)    # mean of 2..8
		assert out[11] == pytest.approx(9.5)   # mean of 8..11

	def test_attenuates_fast_component(self):
		t = np.arange(600) / 30.0
		fast = np.sin(2 * np.pi * 3.0 * t)
		out = MovingAverageBandpass(sample_rate_hz=30.0).process(fast)
		assert np.max(np.abs(out[100:500])) < 0.1

	def test_windows_summed_left_to_right(self):
		x = np.random.default_rng(7).normal(size=300)
		f = MovingAverageBandpass(sample_rate_hz=30.0)
		w = f.half_width(len(x))
		expected = [
			reduce(operator.add, x[max(0, i - w):i + w + 1].tolist()) / len(x[max(0, i - w):i + w + 1])
			for i in range(len(x))
		]
		np.testing.assert_array_equal(f.process(x), expected)

	def test_empty_signal(self):
		assert len(MovingAverageBandpass(sample_rate_hz=30.0).process(np.array([]))) == 0

	def test_invalid_freq_range(self):
		with pytest.raises(ValueError):
			MovingAverageBandpass(sample_rate_hz=30.0, low_freq_hz=0.5, high_freq_hz=0.1)

	def test_invalid_sample_rate(self):
		with pytest.raises(ValueError):
			MovingAverageBandpass(sample_rate_hz=0.0)


class TestExponentialSmoother:
	def test_first_value(self):
		assert ExponentialSmoother(alpha=0.5).smooth(np.array([100.0])) == 100.0

	def test_weights_latest_sample(self):
		assert ExponentialSmoother(alpha=0.3).smooth(np.array([0.0, 10.0])) == pytest.approx(3.0)

	def test_converges(self):
		s = ExponentialSmoother(alpha=0.3)
		assert s.smooth(np.full(30, 60.0)) == pytest.approx(60.0)

	def test_empty(self):
		assert ExponentialSmoother().smooth(np.array([])) == 0.0

	def test_invalid_alpha(self):
		with pytest.raises(ValueError):
			ExponentialSmoother(alpha=0.0)


class TestFindPeaks:
	def test_threshold_is_half_the_maximum(self):
		# threshold 1.0; the peak at index 1 equals it and is rejected
		assert list(find_peaks(np.array([0.0, 1.0, 0.0, 2.0, 0.0]))) == [3]

	def test_endpoints_never_peaks(self):
		assert list(find_peaks(np.array([5.0, 1.0, 5.0]))) == []

	def test_plateau_is_not_a_peak(self):
		assert list(find_peaks(np.array([0.0, 3.0, 3.0, 0.0]))) == []

	def test_multiple_peaks_in_order(self):
		signal = np.array([0.0, 2.0, 0.0, 1.5, 0.0, 2.0, 0.0])
		assert list(find_peaks(signal)) == [1, 3, 5]

	def test_short_signals(self):
		assert len(find_peaks(np.array([]))) == 0
		assert len(find_peaks(np.array([1.0, 2.0]))) == 0

	def test_all_negative_signal(self):
		assert list(find_peaks(np.array([-3.0, -1.0, -3.0, -2.0, -3.0]))) == []
