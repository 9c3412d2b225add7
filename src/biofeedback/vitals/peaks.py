"""Local-maximum detection with an amplitude gate."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import signal as sp_signal

PEAK_THRESHOLD_RATIO = 0.5


def find_peaks(signal: NDArray, threshold_ratio: float = PEAK_THRESHOLD_RATIO) -> NDArray[np.intp]:
	"""Indices of interior samples strictly above both neighbours and the threshold.

	The threshold is ``max(signal) * threshold_ratio``. Endpoints are never
	peaks and flat plateaus produce none, since both comparisons are strict.
	"""
	x = np.asarray(signal, dtype=np.float64)
	if x.size < 3:
		return np.zeros(0, dtype=np.intp)

	threshold = float(np.max(x)) * threshold_ratio
	# clip mode compares each endpoint with itself, which is never strictly greater
	(candidates,) = sp_signal.argrelextrema(x, np.greater, order=1, mode="clip")
	return candidates[x[candidates] > threshold].astype(np.intp)
