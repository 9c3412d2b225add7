"""Signal smoothing for respiratory and facial signals."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
import structlog
from numpy.typing import NDArray

logger = structlog.get_logger(__name__)

MIN_HALF_WIDTH = 3


class Filter(ABC):
	@abstractmethod
	def process(self, signal: NDArray) -> NDArray:
		pass


def window_half_width(sample_rate_hz: float, low_freq_hz: float, high_freq_hz: float, n_samples: int) -> int:
	"""Half-width of the moving-average window, in samples.

	The window spans half a period of the summed band edges, so a component
	at the band centre is smoothed rather than cancelled. The result is
	clamped to ``max(3, min(w, n_samples // 4))``.
	"""
	w = int(round(sample_rate_hz / (2.0 * (low_freq_hz + high_freq_hz))))
	return max(MIN_HALF_WIDTH, min(w, n_samples // 4))


class MovingAverageBandpass(Filter):
	"""Symmetric moving average tuned to a frequency band.

	Only high frequencies are attenuated; there is no high-pass stage. The
	band edges set the window size. Windows shrink at the signal edges, so
	every output sample is the mean of the input samples within ``w`` of it.
	"""

	def __init__(self, sample_rate_hz: float, low_freq_hz: float = 0.1, high_freq_hz: float = 0.5) -> None:
		if sample_rate_hz <= 0:
			raise ValueError(f"Invalid sample rate: {sample_rate_hz} Hz")
		if low_freq_hz < 0 or low_freq_hz >= high_freq_hz:
			raise ValueError(f"Invalid frequency range: {low_freq_hz}-{high_freq_hz} Hz")

		self.sample_rate_hz = sample_rate_hz
		self.low_freq_hz = low_freq_hz
		self.high_freq_hz = high_freq_hz

	def half_width(self, n_samples: int) -> int:
		return window_half_width(self.sample_rate_hz, self.low_freq_hz, self.high_freq_hz, n_samples)

	def process(self, signal: NDArray) -> NDArray[np.float64]:
		x = np.asarray(signal, dtype=np.float64)
		n = len(x)
		if n == 0:
			return np.zeros(0, dtype=np.float64)

		w = self.half_width(n)
		filtered = np.empty(n, dtype=np.float64)
		for i in range(n):
			start = max(0, i - w)
			end = min(n, i + w + 1)
			# sequential sum, not pairwise: mirrored windows around a mid-sample crest tie
			filtered[i] = np.cumsum(x[start:end])[-1] / (end - start)

		logger.debug("moving_average_applied", samples=n, half_width=w)
		return filtered


class ExponentialSmoother(Filter):
	"""Exponential moving average."""

	def __init__(self, alpha: float = 0.3) -> None:
		if not 0.0 < alpha <= 1.0:
			raise ValueError(f"alpha ({alpha}) must be in (0, 1]")
		self.alpha = alpha

	def process(self, signal: NDArray) -> NDArray[np.float64]:
		x = np.asarray(signal, dtype=np.float64)
		if len(x) == 0:
			return np.zeros(0, dtype=np.float64)

		result = np.zeros_like(x)
		result[0] = x[0]
		for i in range(1, len(x)):
			result[i] = self.alpha * x[i] + (1 - self.alpha) * result[i - 1]
		return result

	def smooth(self, signal: NDArray) -> float:
		"""Final value of the smoothed series, 0.0 for an empty signal."""
		result = self.process(signal)
		return float(result[-1]) if len(result) else 0.0
