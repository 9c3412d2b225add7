"""Heart rate variability, respiration and facial biofeedback metrics."""
__version__ = "0.1.0"

from biofeedback.buffers import ChannelBuffer, FacialChannels, FacialSample, RRIntervalStore
from biofeedback.errors import (
	BiofeedbackError,
	InsufficientDataError,
	InsufficientPeaksError,
	NoFacialDataError,
	SignalTooShortError,
)
from biofeedback.processor import (
	BiofeedbackProcessor,
	compute_facial_metrics_from_data,
	compute_hrv_metrics,
	compute_respiratory_rate,
)
from biofeedback.vitals.facial import FacialMetrics
from biofeedback.vitals.hrv import HRVMetrics

__all__ = [
	"BiofeedbackProcessor",
	"compute_hrv_metrics",
	"compute_respiratory_rate",
	"compute_facial_metrics_from_data",
	"HRVMetrics",
	"FacialMetrics",
	"ChannelBuffer",
	"RRIntervalStore",
	"FacialChannels",
	"FacialSample",
	"BiofeedbackError",
	"InsufficientDataError",
	"SignalTooShortError",
	"InsufficientPeaksError",
	"NoFacialDataError",
]
