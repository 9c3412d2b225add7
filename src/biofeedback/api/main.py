"""FastAPI application for the biofeedback service."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from biofeedback import __version__
from biofeedback.config import get_config
from biofeedback.errors import BiofeedbackError

from .routes import compute, patterns, sessions
from .state import get_app_state

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Application lifespan handler."""
	logger.info("Starting biofeedback API")
	get_app_state()

	yield

	logger.info("Shutting down biofeedback API")
	get_app_state().sessions.clear()


app = FastAPI(
	title="Biofeedback API",
	description="HRV, respiratory rate and facial tension metrics",
	version=__version__,
	lifespan=lifespan,
)

app.add_middleware(
	CORSMiddleware,
	allow_origins=get_config().api.cors_origins,
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)

app.include_router(sessions.router)
app.include_router(compute.router)
app.include_router(patterns.router)


@app.exception_handler(BiofeedbackError)
async def biofeedback_error_handler(request: Request, exc: BiofeedbackError):
	"""Precondition failures become 422 with the observed and required counts."""
	logger.debug(f"{type(exc).__name__} on {request.url.path}: {exc}")
	return JSONResponse(
		status_code=422,
		content={
			"detail": str(exc),
			"error": type(exc).__name__,
			"count": exc.count,
			"required": exc.required,
		},
	)


@app.get("/")
async def root():
	"""Root endpoint."""
	return {"status": "ok", "service": "biofeedback"}


@app.get("/health")
async def health():
	"""Health check endpoint."""
	state = get_app_state()
	return {
		"status": "healthy",
		"sessions": len(state.sessions),
		"version": __version__,
	}
