"""Pytest fixtures."""

import numpy as np
import pytest

from biofeedback.processor import BiofeedbackProcessor


@pytest.fixture
def rr_intervals() -> list[float]:
	"""Five RR intervals with successive differences [20, -10, 20, -15]."""
	return [800.0, 820.0, 810.0, 830.0, 815.0]


@pytest.fixture
def breathing_signal() -> np.ndarray:
	"""0.2 Hz sine (12 breaths/min) sampled at 30 Hz for 10 s, phased so no crest falls midway between samples."""
	t = np.arange(300) / 30.0
	return np.sin(2 * np.pi * 0.2 * t + 0.3)


@pytest.fixture
def processor() -> BiofeedbackProcessor:
	return BiofeedbackProcessor(30.0)
