"""Processing context holding RR and facial state for one session."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
import structlog
from numpy.typing import NDArray

from biofeedback.buffers import FacialChannels, FacialSample, RRIntervalStore
from biofeedback.config import ProcessingConfig
from biofeedback.vitals.facial import FacialMetrics, compute_facial_metrics
from biofeedback.vitals.filters import ExponentialSmoother
from biofeedback.vitals.hrv import HRVMetrics, compute_hrv
from biofeedback.vitals.respiratory import RespirationResult, RespiratoryRateEstimator

logger = structlog.get_logger(__name__)

DEFAULT_SAMPLING_RATE = 30.0


class BiofeedbackProcessor:
	"""Owns the RR interval series and facial histories for one session.

	Mutators (``add_*``, ``clear_*``) change buffered state; every
	``compute_*`` method is a pure read of the current state, so calling one
	twice without an intervening mutation returns the same result. A failed
	computation leaves all buffers untouched.

	Not thread-safe: callers sharing an instance across threads must
	serialize access themselves.
	"""

	def __init__(self, sampling_rate: float | None = None, config: ProcessingConfig | None = None) -> None:
		self.config = config or ProcessingConfig()
		if errors := self.config.validate():
			raise ValueError(f"Invalid processing config: {'; '.join(errors)}")
		self.sampling_rate = float(sampling_rate if sampling_rate is not None else self.config.sample_rate_hz)
		if self.sampling_rate <= 0:
			raise ValueError(f"Invalid sampling rate: {self.sampling_rate} Hz")

		self._rr = RRIntervalStore()
		self._facial = FacialChannels(self.config.facial_history_size)
		self._resp_estimator = RespiratoryRateEstimator(
			sample_rate_hz=self.sampling_rate,
			freq_min_hz=self.config.resp_freq_min_hz,
			freq_max_hz=self.config.resp_freq_max_hz,
			min_samples=self.config.resp_min_samples,
			peak_threshold_ratio=self.config.peak_threshold_ratio,
		)
		self._smoother = ExponentialSmoother(alpha=self.config.facial_smoothing_alpha)
		logger.debug("biofeedback_processor_init", sampling_rate=self.sampling_rate)

	# RR intervals

	def add_rr_intervals(self, intervals: Iterable[float]) -> None:
		self._rr.add(intervals)

	def clear_rr_intervals(self) -> None:
		self._rr.clear()
		logger.debug("rr_intervals_cleared")

	@property
	def rr_intervals(self) -> tuple[float, ...]:
		return self._rr.values()

	def compute_hrv(self) -> HRVMetrics:
		"""RMSSD, SDNN and pNN50 of the stored intervals.

		Raises:
			InsufficientDataError: fewer than two intervals are stored.
		"""
		return compute_hrv(
			self._rr.as_array(),
			pnn_threshold_ms=self.config.pnn_threshold_ms,
			min_intervals=self.config.rr_min_intervals,
		)

	# Facial telemetry

	def add_facial_data(
		self,
		muscle_tension: float,
		eye_movement: float,
		blink_rate: float,
		facial_symmetry: float,
	) -> None:
		self._facial.add(FacialSample(muscle_tension, eye_movement, blink_rate, facial_symmetry))

	def clear_facial_data(self) -> None:
		self._facial.clear()
		logger.debug("facial_data_cleared")

	@property
	def facial_channels(self) -> FacialChannels:
		return self._facial

	def compute_facial_metrics(self) -> FacialMetrics:
		"""Means, tension variability and eye movement frequency.

		Raises:
			NoFacialDataError: no facial sample has been added.
		"""
		return compute_facial_metrics(
			self._facial,
			self.sampling_rate,
			eye_movement_threshold=self.config.eye_movement_threshold,
		)

	def smoothed_facial_sample(self) -> FacialSample | None:
		"""Exponentially smoothed value of each channel, None without data."""
		if len(self._facial) == 0:
			return None
		return FacialSample(*(self._smoother.smooth(ch.as_array()) for ch in self._facial.channels()))

	# Respiration

	def compute_resp_rate(self, signal: Sequence[float] | NDArray) -> float:
		"""Breaths per minute from a raw waveform sampled at ``sampling_rate``.

		Raises:
			SignalTooShortError: fewer than 100 samples.
			InsufficientPeaksError: fewer than two peaks after filtering.
		"""
		return self._resp_estimator.estimate(np.asarray(signal, dtype=np.float64))

	def compute_resp_details(self, signal: Sequence[float] | NDArray) -> RespirationResult:
		return self._resp_estimator.estimate_with_details(np.asarray(signal, dtype=np.float64))


def compute_hrv_metrics(rr_intervals: Sequence[float] | NDArray) -> HRVMetrics:
	"""HRV metrics for a one-off batch of intervals."""
	processor = BiofeedbackProcessor(DEFAULT_SAMPLING_RATE)
	processor.add_rr_intervals(rr_intervals)
	return processor.compute_hrv()


def compute_respiratory_rate(signal: Sequence[float] | NDArray, sampling_rate: float) -> float:
	"""Respiratory rate for a one-off waveform."""
	return BiofeedbackProcessor(sampling_rate).compute_resp_rate(signal)


def compute_facial_metrics_from_data(
	muscle_tension: Sequence[float],
	eye_movement: Sequence[float],
	blink_rate: Sequence[float],
	facial_symmetry: Sequence[float],
	sampling_rate: float = DEFAULT_SAMPLING_RATE,
) -> FacialMetrics:
	"""Facial metrics for one-off channel arrays of equal length.

	Samples are replayed in order, so only the most recent 100 contribute.
	"""
	lengths = {len(muscle_tension), len(eye_movement), len(blink_rate), len(facial_symmetry)}
	if len(lengths) != 1:
		raise ValueError(
			"Facial channels must have equal length: "
			f"tension={len(muscle_tension)}, eye={len(eye_movement)}, "
			f"blink={len(blink_rate)}, symmetry={len(facial_symmetry)}"
		)

	processor = BiofeedbackProcessor(sampling_rate)
	for sample in zip(muscle_tension, eye_movement, blink_rate, facial_symmetry):
		processor.add_facial_data(*sample)
	return processor.compute_facial_metrics()
