"""Conversion from engine results to response schemas."""
from __future__ import annotations

from biofeedback.buffers import FacialSample
from biofeedback.vitals.facial import FacialMetrics
from biofeedback.vitals.hrv import HRVMetrics
from biofeedback.vitals.respiratory import RespirationResult
from biofeedback.vitals.scores import (
	facial_levels,
	relaxation_level,
	relaxation_score,
	stress_index,
	stress_level,
)

from .schemas import FacialMetricsResponse, HRVResponse, RespirationResponse


def hrv_response(metrics: HRVMetrics) -> HRVResponse:
	index = stress_index(metrics)
	return HRVResponse(**metrics.to_dict(), stress_index=index, stress_level=stress_level(index))


def facial_response(metrics: FacialMetrics, smoothed: FacialSample | None = None) -> FacialMetricsResponse:
	response = FacialMetricsResponse(**metrics.to_dict())
	if smoothed is not None:
		score = relaxation_score(smoothed)
		response.relaxation_score = score
		response.relaxation_level = relaxation_level(score)
		response.levels = facial_levels(smoothed)
	return response


def respiration_response(result: RespirationResult) -> RespirationResponse:
	return RespirationResponse(
		rate_bpm=result.rate_bpm,
		breath_count=result.breath_count,
		peaks=[int(p) for p in result.peaks],
	)
