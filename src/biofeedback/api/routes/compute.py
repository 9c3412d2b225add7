"""Stateless computation API routes."""
from __future__ import annotations

from fastapi import APIRouter, HTTPException

from biofeedback.processor import (
	BiofeedbackProcessor,
	compute_facial_metrics_from_data,
	compute_hrv_metrics,
)

from ..convert import facial_response, hrv_response, respiration_response
from ..schemas import (
	METRIC_ERRORS,
	ComputeFacialRequest,
	ComputeHRVRequest,
	ComputeRespirationRequest,
	FacialMetricsResponse,
	HRVResponse,
	RespirationResponse,
)

router = APIRouter(prefix="/api/compute", tags=["compute"])


@router.post("/hrv", response_model=HRVResponse, responses=METRIC_ERRORS)
async def compute_hrv(request: ComputeHRVRequest):
	return hrv_response(compute_hrv_metrics(request.rr_intervals))


@router.post("/respiration", response_model=RespirationResponse, responses=METRIC_ERRORS)
async def compute_respiration(request: ComputeRespirationRequest):
	processor = BiofeedbackProcessor(request.sampling_rate)
	return respiration_response(processor.compute_resp_details(request.signal))


@router.post("/facial", response_model=FacialMetricsResponse, responses=METRIC_ERRORS)
async def compute_facial(request: ComputeFacialRequest):
	try:
		metrics = compute_facial_metrics_from_data(
			request.muscle_tension,
			request.eye_movement,
			request.blink_rate,
			request.facial_symmetry,
			sampling_rate=request.sampling_rate,
		)
	except ValueError as e:
		raise HTTPException(status_code=400, detail=str(e)) from e
	return facial_response(metrics)
