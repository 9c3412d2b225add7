"""Aggregate statistics over the facial telemetry histories."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np
import structlog
from numpy.typing import NDArray

from biofeedback.buffers import FacialChannels
from biofeedback.errors import NoFacialDataError

logger = structlog.get_logger(__name__)

EYE_MOVEMENT_THRESHOLD = 0.1


@dataclass(frozen=True)
class FacialMetrics:
	mean_tension: float
	tension_variability: float
	mean_eye_movement: float
	eye_movement_frequency: float  # Hz
	mean_blink_rate: float
	mean_symmetry: float

	def as_tuple(self) -> tuple[float, float, float, float, float, float]:
		return (
			self.mean_tension,
			self.tension_variability,
			self.mean_eye_movement,
			self.eye_movement_frequency,
			self.mean_blink_rate,
			self.mean_symmetry,
		)

	def __iter__(self) -> Iterator[float]:
		return iter(self.as_tuple())

	def to_dict(self) -> dict[str, float]:
		return {
			"mean_tension": self.mean_tension,
			"tension_variability": self.tension_variability,
			"mean_eye_movement": self.mean_eye_movement,
			"eye_movement_frequency": self.eye_movement_frequency,
			"mean_blink_rate": self.mean_blink_rate,
			"mean_symmetry": self.mean_symmetry,
		}


def channel_mean(values: Sequence[float] | NDArray) -> float:
	return float(np.mean(np.asarray(values, dtype=np.float64)))


def variability(values: Sequence[float] | NDArray) -> float:
	"""Population standard deviation."""
	return float(np.std(np.asarray(values, dtype=np.float64)))


def movement_frequency(
	values: Sequence[float] | NDArray,
	sample_rate_hz: float,
	threshold: float = EYE_MOVEMENT_THRESHOLD,
) -> float:
	"""Rate of significant sample-to-sample jumps, in events per second.

	A jump counts when |v[i+1] - v[i]| > threshold. The fraction of jumping
	pairs is scaled by the sampling rate; fewer than two samples give 0.0.
	"""
	x = np.asarray(values, dtype=np.float64)
	if x.size < 2:
		return 0.0
	movements = np.count_nonzero(np.abs(np.diff(x)) > threshold)
	return float(movements / (x.size - 1) * sample_rate_hz)


def compute_facial_metrics(
	channels: FacialChannels,
	sample_rate_hz: float,
	eye_movement_threshold: float = EYE_MOVEMENT_THRESHOLD,
) -> FacialMetrics:
	"""Summarise the current facial histories.

	Raises:
		NoFacialDataError: no sample has been recorded yet.
	"""
	if len(channels.muscle_tension) == 0:
		raise NoFacialDataError(count=0, required=1)

	tension = channels.muscle_tension.as_array()
	eye = channels.eye_movement.as_array()

	metrics = FacialMetrics(
		mean_tension=channel_mean(tension),
		tension_variability=variability(tension),
		mean_eye_movement=channel_mean(eye),
		eye_movement_frequency=movement_frequency(eye, sample_rate_hz, eye_movement_threshold),
		mean_blink_rate=channel_mean(channels.blink_rate.as_array()),
		mean_symmetry=channel_mean(channels.facial_symmetry.as_array()),
	)
	logger.debug("facial_metrics_computed", samples=int(tension.size))
	return metrics
