"""Session-scoped processing API routes."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response

from ..convert import facial_response, hrv_response, respiration_response
from ..schemas import (
	METRIC_ERRORS,
	FacialMetricsResponse,
	FacialSampleRequest,
	HRVResponse,
	RespirationResponse,
	RRIntervalsRequest,
	SessionCreate,
	SessionInfo,
	WaveformRequest,
)
from ..state import Session, SessionLimitError, get_app_state

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def _get_session(session_id: str) -> Session:
	session = get_app_state().sessions.get(session_id)
	if session is None:
		raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
	return session


def _session_info(session: Session) -> SessionInfo:
	processor = session.processor
	return SessionInfo(
		id=session.id,
		sampling_rate=processor.sampling_rate,
		rr_count=len(processor.rr_intervals),
		facial_samples=len(processor.facial_channels),
		created_at=session.created_at,
	)


@router.post("", response_model=SessionInfo, status_code=201)
async def create_session(request: SessionCreate | None = None):
	"""Create a processing session."""
	sampling_rate = request.sampling_rate if request else None
	try:
		session = get_app_state().sessions.create(sampling_rate)
	except SessionLimitError as e:
		raise HTTPException(status_code=429, detail=str(e)) from e
	return _session_info(session)


@router.get("/{session_id}", response_model=SessionInfo)
async def get_session(session_id: str):
	session = _get_session(session_id)
	with session.lock:
		return _session_info(session)


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str):
	if not get_app_state().sessions.remove(session_id):
		raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
	return Response(status_code=204)


@router.post("/{session_id}/rr", response_model=SessionInfo)
async def add_rr_intervals(session_id: str, request: RRIntervalsRequest):
	"""Append RR intervals (ms) to the session."""
	session = _get_session(session_id)
	with session.lock:
		session.processor.add_rr_intervals(request.intervals)
		return _session_info(session)


@router.delete("/{session_id}/rr", response_model=SessionInfo)
async def clear_rr_intervals(session_id: str):
	session = _get_session(session_id)
	with session.lock:
		session.processor.clear_rr_intervals()
		return _session_info(session)


@router.post("/{session_id}/facial", response_model=SessionInfo)
async def add_facial_sample(session_id: str, request: FacialSampleRequest):
	"""Record one sample for all four facial channels."""
	session = _get_session(session_id)
	with session.lock:
		session.processor.add_facial_data(
			request.muscle_tension,
			request.eye_movement,
			request.blink_rate,
			request.facial_symmetry,
		)
		return _session_info(session)


@router.get("/{session_id}/hrv", response_model=HRVResponse, responses=METRIC_ERRORS)
async def get_hrv(session_id: str):
	"""HRV metrics over the stored RR intervals."""
	session = _get_session(session_id)
	with session.lock:
		metrics = session.processor.compute_hrv()
	return hrv_response(metrics)


@router.get("/{session_id}/facial", response_model=FacialMetricsResponse, responses=METRIC_ERRORS)
async def get_facial_metrics(session_id: str):
	"""Facial metrics with relaxation score from the smoothed latest values."""
	session = _get_session(session_id)
	with session.lock:
		metrics = session.processor.compute_facial_metrics()
		smoothed = session.processor.smoothed_facial_sample()
	return facial_response(metrics, smoothed)


@router.post("/{session_id}/respiration", response_model=RespirationResponse, responses=METRIC_ERRORS)
async def compute_respiration(session_id: str, request: WaveformRequest):
	"""Respiratory rate from a waveform sampled at the session rate."""
	session = _get_session(session_id)
	with session.lock:
		result = session.processor.compute_resp_details(request.signal)
	return respiration_response(result)
