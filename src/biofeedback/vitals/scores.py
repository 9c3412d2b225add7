"""Interpretive scores layered on top of the raw metrics.

These map HRV and facial readings onto the coarse 0-100 scales and labels
shown to a user during a biofeedback session.
"""

from __future__ import annotations

from biofeedback.buffers import FacialSample
from biofeedback.vitals.hrv import HRVMetrics


def stress_index(hrv: HRVMetrics) -> float:
	"""Simplified stress index in [0, 100]; lower RMSSD means more stress."""
	return max(0.0, 100.0 - hrv.rmssd / 10.0)


def stress_level(index: float) -> str:
	if index < 30:
		return "Low"
	if index < 60:
		return "Moderate"
	return "High"


def relaxation_score(sample: FacialSample) -> int:
	"""Average of the four facial channels mapped onto 0-100, higher is calmer."""
	tension_score = max(0.0, 1.0 - sample.muscle_tension)
	movement_score = max(0.0, 1.0 - sample.eye_movement)
	blink_score = max(0.0, 1.0 - sample.blink_rate)
	symmetry_score = sample.facial_symmetry
	return round((tension_score + movement_score + blink_score + symmetry_score) / 4 * 100)


def relaxation_level(score: float) -> str:
	if score > 80:
		return "Very Relaxed"
	if score > 60:
		return "Relaxed"
	if score > 40:
		return "Moderate"
	if score > 20:
		return "Tense"
	return "Very Tense"


def tension_level(tension: float) -> str:
	if tension < 0.3:
		return "Relaxed"
	if tension < 0.6:
		return "Moderate"
	return "High"


def eye_movement_level(movement: float) -> str:
	if movement < 0.2:
		return "Still"
	if movement < 0.5:
		return "Moderate"
	return "Active"


def blink_rate_level(rate: float) -> str:
	if rate < 0.1:
		return "Normal"
	if rate < 0.3:
		return "Frequent"
	return "Very Frequent"


def symmetry_level(symmetry: float) -> str:
	if symmetry > 0.8:
		return "Balanced"
	if symmetry > 0.6:
		return "Slight Asymmetry"
	return "Asymmetric"


def facial_levels(sample: FacialSample) -> dict[str, str]:
	"""Label for each facial channel."""
	return {
		"muscle_tension": tension_level(sample.muscle_tension),
		"eye_movement": eye_movement_level(sample.eye_movement),
		"blink_rate": blink_rate_level(sample.blink_rate),
		"facial_symmetry": symmetry_level(sample.facial_symmetry),
	}
