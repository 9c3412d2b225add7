"""Heart rate variability, facial and respiratory metrics."""

from biofeedback.vitals.facial import FacialMetrics, compute_facial_metrics, movement_frequency
from biofeedback.vitals.filters import ExponentialSmoother, MovingAverageBandpass
from biofeedback.vitals.hrv import HRVMetrics, compute_hrv
from biofeedback.vitals.peaks import find_peaks
from biofeedback.vitals.respiratory import RespirationResult, RespiratoryRateEstimator

__all__ = [
	"HRVMetrics",
	"compute_hrv",
	"FacialMetrics",
	"compute_facial_metrics",
	"movement_frequency",
	"MovingAverageBandpass",
	"ExponentialSmoother",
	"find_peaks",
	"RespiratoryRateEstimator",
	"RespirationResult",
]
