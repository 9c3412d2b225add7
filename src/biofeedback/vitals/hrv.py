"""Time-domain heart rate variability from RR intervals."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np
import structlog
from numpy.typing import NDArray

from biofeedback.errors import InsufficientDataError

logger = structlog.get_logger(__name__)

MIN_RR_INTERVALS = 2
PNN_THRESHOLD_MS = 50.0


@dataclass(frozen=True)
class HRVMetrics:
	"""RMSSD and SDNN in milliseconds, pNN50 in percent."""
	rmssd: float
	sdnn: float
	pnn50: float

	def as_tuple(self) -> tuple[float, float, float]:
		return (self.rmssd, self.sdnn, self.pnn50)

	def __iter__(self) -> Iterator[float]:
		return iter(self.as_tuple())

	def to_dict(self) -> dict[str, float]:
		return {"rmssd": self.rmssd, "sdnn": self.sdnn, "pnn50": self.pnn50}


def successive_differences(rr_intervals: Sequence[float] | NDArray) -> NDArray[np.float64]:
	"""rr[i+1] - rr[i] for every adjacent pair."""
	return np.diff(np.asarray(rr_intervals, dtype=np.float64))


def rmssd(rr_intervals: Sequence[float] | NDArray) -> float:
	"""Root mean square of successive differences."""
	diffs = successive_differences(rr_intervals)
	return float(np.sqrt(np.mean(diffs ** 2)))


def sdnn(rr_intervals: Sequence[float] | NDArray) -> float:
	"""Population standard deviation of the intervals (divides by n)."""
	return float(np.std(np.asarray(rr_intervals, dtype=np.float64)))


def pnn50(rr_intervals: Sequence[float] | NDArray, threshold_ms: float = PNN_THRESHOLD_MS) -> float:
	"""Percentage of absolute successive differences strictly above threshold_ms."""
	diffs = np.abs(successive_differences(rr_intervals))
	return float(np.count_nonzero(diffs > threshold_ms) / len(diffs) * 100.0)


def compute_hrv(
	rr_intervals: Sequence[float] | NDArray,
	pnn_threshold_ms: float = PNN_THRESHOLD_MS,
	min_intervals: int = MIN_RR_INTERVALS,
) -> HRVMetrics:
	"""Compute RMSSD, SDNN and pNN50 over one snapshot of intervals.

	Raises:
		InsufficientDataError: fewer than ``min_intervals`` values.
	"""
	rr = np.asarray(rr_intervals, dtype=np.float64)
	required = max(MIN_RR_INTERVALS, min_intervals)
	if rr.size < required:
		raise InsufficientDataError(count=int(rr.size), required=required)

	metrics = HRVMetrics(
		rmssd=rmssd(rr),
		sdnn=sdnn(rr),
		pnn50=pnn50(rr, pnn_threshold_ms),
	)
	logger.debug("hrv_computed", intervals=int(rr.size), rmssd=metrics.rmssd, sdnn=metrics.sdnn)
	return metrics
