"""Guided breathing pattern API routes."""
from __future__ import annotations

from fastapi import APIRouter, HTTPException

from biofeedback.breathing import BREATHING_PATTERNS, get_breathing_pattern, get_default_pattern

from ..schemas import BreathingPatternSchema

router = APIRouter(prefix="/api/patterns", tags=["patterns"])


@router.get("", response_model=list[BreathingPatternSchema])
async def list_patterns():
	return [BreathingPatternSchema(**p.to_dict()) for p in BREATHING_PATTERNS]


@router.get("/default", response_model=BreathingPatternSchema)
async def default_pattern():
	return BreathingPatternSchema(**get_default_pattern().to_dict())


@router.get("/{pattern_id}", response_model=BreathingPatternSchema)
async def get_pattern(pattern_id: str):
	pattern = get_breathing_pattern(pattern_id)
	if pattern is None:
		raise HTTPException(status_code=404, detail=f"Pattern not found: {pattern_id}")
	return BreathingPatternSchema(**pattern.to_dict())
