"""Respiratory rate estimation from a PPG-like waveform."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import structlog
from numpy.typing import NDArray

from biofeedback.errors import InsufficientPeaksError, SignalTooShortError
from biofeedback.vitals.filters import MovingAverageBandpass
from biofeedback.vitals.peaks import PEAK_THRESHOLD_RATIO, find_peaks

logger = structlog.get_logger(__name__)

MIN_SIGNAL_SAMPLES = 100
MIN_PEAKS = 2


@dataclass
class RespirationResult:
	"""Breathing rate plus the intermediate signals it was derived from."""
	rate_bpm: float
	peaks: NDArray[np.intp]
	intervals_s: NDArray[np.float64]
	filtered: NDArray[np.float64] = field(repr=False)

	@property
	def breath_count(self) -> int:
		return int(len(self.peaks))


class RespiratoryRateEstimator:
	"""Peak-counting respiratory rate estimation (0.1-0.5 Hz band).

	The waveform is smoothed with a moving average and peaks above half the
	smoothed maximum are located. Peaks closer to either end than the window
	half-width are dropped. The mean spacing of the rest is converted to
	breaths per minute. Holds no state between calls.
	"""

	def __init__(
		self,
		sample_rate_hz: float = 30.0,
		freq_min_hz: float = 0.1,
		freq_max_hz: float = 0.5,
		min_samples: int = MIN_SIGNAL_SAMPLES,
		peak_threshold_ratio: float = PEAK_THRESHOLD_RATIO,
	) -> None:
		self.sample_rate_hz = sample_rate_hz
		self.min_samples = min_samples
		self.peak_threshold_ratio = peak_threshold_ratio
		self._filter = MovingAverageBandpass(sample_rate_hz, freq_min_hz, freq_max_hz)

	def estimate(self, signal: NDArray) -> float:
		"""Returns respiratory rate in breaths per minute."""
		return self.estimate_with_details(signal).rate_bpm

	def estimate_with_details(self, signal: NDArray) -> RespirationResult:
		"""Returns RespirationResult with rate, peaks and filtered waveform.

		Raises:
			SignalTooShortError: fewer than ``min_samples`` samples.
			InsufficientPeaksError: fewer than two peaks after filtering.
		"""
		x = np.asarray(signal, dtype=np.float64)
		if len(x) < self.min_samples:
			raise SignalTooShortError(count=len(x), required=self.min_samples)

		filtered = self._filter.process(x)
		peaks = find_peaks(filtered, self.peak_threshold_ratio)
		# peaks inside a truncated edge window are smoothing artefacts
		w = self._filter.half_width(len(x))
		peaks = peaks[(peaks >= w) & (peaks < len(x) - w)]

		if len(peaks) < MIN_PEAKS:
			logger.debug("respiratory_peaks_insufficient", peaks=len(peaks), samples=len(x))
			raise InsufficientPeaksError(count=len(peaks), required=MIN_PEAKS)

		intervals = np.diff(peaks) / self.sample_rate_hz
		mean_interval = float(np.mean(intervals))
		rate_bpm = 60.0 / mean_interval

		logger.debug("respiratory_rate_estimated", rate_bpm=rate_bpm, peaks=len(peaks))
		return RespirationResult(
			rate_bpm=rate_bpm,
			peaks=peaks,
			intervals_s=intervals,
			filtered=filtered,
		)
