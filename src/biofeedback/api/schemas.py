"""Pydantic schemas for API requests/responses."""
from __future__ import annotations

from pydantic import BaseModel, Field


class SessionCreate(BaseModel):
	sampling_rate: float | None = Field(default=None, gt=0)  # falls back to configured rate


class SessionInfo(BaseModel):
	id: str
	sampling_rate: float
	rr_count: int
	facial_samples: int
	created_at: float


class RRIntervalsRequest(BaseModel):
	intervals: list[float]  # milliseconds


class FacialSampleRequest(BaseModel):
	muscle_tension: float
	eye_movement: float
	blink_rate: float
	facial_symmetry: float


class WaveformRequest(BaseModel):
	signal: list[float]


class HRVResponse(BaseModel):
	rmssd: float
	sdnn: float
	pnn50: float
	stress_index: float
	stress_level: str


class FacialMetricsResponse(BaseModel):
	mean_tension: float
	tension_variability: float
	mean_eye_movement: float
	eye_movement_frequency: float
	mean_blink_rate: float
	mean_symmetry: float
	relaxation_score: int | None = None
	relaxation_level: str | None = None
	levels: dict[str, str] = Field(default_factory=dict)


class RespirationResponse(BaseModel):
	rate_bpm: float
	breath_count: int
	peaks: list[int]


class ComputeHRVRequest(BaseModel):
	rr_intervals: list[float]


class ComputeRespirationRequest(BaseModel):
	signal: list[float]
	sampling_rate: float = Field(gt=0)


class ComputeFacialRequest(BaseModel):
	muscle_tension: list[float]
	eye_movement: list[float]
	blink_rate: list[float]
	facial_symmetry: list[float]
	sampling_rate: float = Field(default=30.0, gt=0)


class ErrorResponse(BaseModel):
	detail: str
	error: str
	count: int = 0
	required: int = 0


# Documented body of a 422 raised by a metric precondition failure
METRIC_ERRORS = {422: {"model": ErrorResponse}}


class BreathingPhaseSchema(BaseModel):
	name: str
	duration: float
	instruction: str
	color: str


class BreathingPatternSchema(BaseModel):
	id: str
	name: str
	description: str
	cultural_origin: str
	difficulty: str
	phases: list[BreathingPhaseSchema]
	benefits: list[str]
	cycle_seconds: float
	breaths_per_minute: float
