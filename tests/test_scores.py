"""Tests for stress and relaxation scoring."""

import pytest

from biofeedback.buffers import FacialSample
from biofeedback.vitals.hrv import HRVMetrics
from biofeedback.vitals.scores import (
	blink_rate_level,
	eye_movement_level,
	facial_levels,
	relaxation_level,
	relaxation_score,
	stress_index,
	stress_level,
	symmetry_level,
	tension_level,
)


class TestStress:
	def test_index_from_rmssd(self):
		assert stress_index(HRVMetrics(rmssd=200.0, sdnn=0.0, pnn50=0.0)) == pytest.approx(80.0)

	def test_index_floor_is_zero(self):
		assert stress_index(HRVMetrics(rmssd=2000.0, sdnn=0.0, pnn50=0.0)) == 0.0

	@pytest.mark.parametrize(
		"index, level",
		[(0.0, "Low"), (29.9, "Low"), (30.0, "Moderate"), (59.9, "Moderate"), (60.0, "High"), (100.0, "High")],
	)
	def test_levels(self, index, level):
		assert stress_level(index) == level


class TestRelaxation:
	def test_fully_relaxed(self):
		assert relaxation_score(FacialSample(0.0, 0.0, 0.0, 1.0)) == 100

	def test_fully_tense(self):
		assert relaxation_score(FacialSample(1.0, 1.0, 1.0, 0.0)) == 0

	def test_channels_above_one_clamp_to_zero(self):
		assert relaxation_score(FacialSample(5.0, 5.0, 5.0, 0.0)) == 0

	def test_midpoint(self):
		assert relaxation_score(FacialSample(0.5, 0.5, 0.5, 0.5)) == 50

	@pytest.mark.parametrize(
		"score, level",
		[(100, "Very Relaxed"), (81, "Very Relaxed"), (80, "Relaxed"), (61, "Relaxed"),
		 (60, "Moderate"), (41, "Moderate"), (40, "Tense"), (21, "Tense"), (20, "Very Tense"), (0, "Very Tense")],
	)
	def test_levels(self, score, level):
		assert relaxation_level(score) == level


class TestChannelLevels:
	def test_tension(self):
		assert tension_level(0.1) == "Relaxed"
		assert tension_level(0.3) == "Moderate"
		assert tension_level(0.6) == "High"

	def test_eye_movement(self):
		assert eye_movement_level(0.1) == "Still"
		assert eye_movement_level(0.2) == "Moderate"
		assert eye_movement_level(0.5) == "Active"

	def test_blink_rate(self):
		assert blink_rate_level(0.05) == "Normal"
		assert blink_rate_level(0.1) == "Frequent"
		assert blink_rate_level(0.3) == "Very Frequent"

	def test_symmetry(self):
		assert symmetry_level(0.9) == "Balanced"
		assert symmetry_level(0.8) == "Slight Asymmetry"
		assert symmetry_level(0.6) == "Asymmetric"

	def test_facial_levels(self):
		levels = facial_levels(FacialSample(0.1, 0.6, 0.05, 0.95))
		assert levels == {
			"muscle_tension": "Relaxed",
			"eye_movement": "Active",
			"blink_rate": "Normal",
			"facial_symmetry": "Balanced",
		}
