"""Centralized configuration for the biofeedback engine.

All configuration can be set via BIOFEEDBACK_* environment variables
or loaded from a JSON config file.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog


@dataclass
class ProcessingConfig:
	"""Signal processing parameters for one processing context."""

	sample_rate_hz: float = 30.0
	facial_history_size: int = 100  # Samples kept per facial channel
	rr_min_intervals: int = 2
	pnn_threshold_ms: float = 50.0
	eye_movement_threshold: float = 0.1
	facial_smoothing_alpha: float = 0.3
	resp_freq_min_hz: float = 0.1  # ~6 breaths/min
	resp_freq_max_hz: float = 0.5  # ~30 breaths/min
	resp_min_samples: int = 100
	peak_threshold_ratio: float = 0.5  # Fraction of the filtered maximum

	def validate(self) -> list[str]:
		"""Validate configuration values. Returns list of error messages."""
		errors = []

		if self.sample_rate_hz <= 0:
			errors.append(f"sample_rate_hz ({self.sample_rate_hz}) must be positive")
		if self.facial_history_size < 1:
			errors.append(f"facial_history_size ({self.facial_history_size}) must be >= 1")
		if self.rr_min_intervals < 2:
			errors.append(f"rr_min_intervals ({self.rr_min_intervals}) must be >= 2")
		if self.pnn_threshold_ms <= 0:
			errors.append(f"pnn_threshold_ms ({self.pnn_threshold_ms}) must be positive")
		if not 0.0 < self.facial_smoothing_alpha <= 1.0:
			errors.append(f"facial_smoothing_alpha ({self.facial_smoothing_alpha}) must be in (0, 1]")
		if self.resp_freq_min_hz < 0 or self.resp_freq_min_hz >= self.resp_freq_max_hz:
			errors.append(
				f"resp_freq_min_hz ({self.resp_freq_min_hz}) must be >= 0 and < "
				f"resp_freq_max_hz ({self.resp_freq_max_hz})"
			)
		if self.resp_min_samples < 3:
			errors.append(f"resp_min_samples ({self.resp_min_samples}) must be >= 3")
		if not 0.0 <= self.peak_threshold_ratio <= 1.0:
			errors.append(f"peak_threshold_ratio ({self.peak_threshold_ratio}) must be between 0 and 1")

		return errors


@dataclass
class APIConfig:
	"""API server configuration."""

	host: str = "0.0.0.0"
	port: int = 8000
	cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:5173"])
	log_level: str = "INFO"
	max_sessions: int = 256


@dataclass
class AppConfig:
	"""Complete application configuration."""

	processing: ProcessingConfig = field(default_factory=ProcessingConfig)
	api: APIConfig = field(default_factory=APIConfig)

	@classmethod
	def from_env(cls) -> AppConfig:
		"""Load configuration from environment variables."""
		config = cls()

		# Processing config
		if sample_rate := os.environ.get("BIOFEEDBACK_SAMPLE_RATE"):
			config.processing.sample_rate_hz = float(sample_rate)
		if history := os.environ.get("BIOFEEDBACK_FACIAL_HISTORY"):
			config.processing.facial_history_size = int(history)
		if pnn := os.environ.get("BIOFEEDBACK_PNN_THRESHOLD_MS"):
			config.processing.pnn_threshold_ms = float(pnn)
		if eye := os.environ.get("BIOFEEDBACK_EYE_THRESHOLD"):
			config.processing.eye_movement_threshold = float(eye)
		if resp_min := os.environ.get("BIOFEEDBACK_RESP_FREQ_MIN"):
			config.processing.resp_freq_min_hz = float(resp_min)
		if resp_max := os.environ.get("BIOFEEDBACK_RESP_FREQ_MAX"):
			config.processing.resp_freq_max_hz = float(resp_max)
		if resp_samples := os.environ.get("BIOFEEDBACK_RESP_MIN_SAMPLES"):
			config.processing.resp_min_samples = int(resp_samples)
		if rr_min := os.environ.get("BIOFEEDBACK_RR_MIN_INTERVALS"):
			config.processing.rr_min_intervals = int(rr_min)
		if peak_ratio := os.environ.get("BIOFEEDBACK_PEAK_THRESHOLD"):
			config.processing.peak_threshold_ratio = float(peak_ratio)
		if alpha := os.environ.get("BIOFEEDBACK_FACIAL_SMOOTHING"):
			config.processing.facial_smoothing_alpha = float(alpha)

		# API config
		config.api.host = os.environ.get("BIOFEEDBACK_API_HOST", config.api.host)
		config.api.port = int(os.environ.get("BIOFEEDBACK_API_PORT", config.api.port))
		config.api.log_level = os.environ.get("BIOFEEDBACK_LOG_LEVEL", config.api.log_level)
		if origins := os.environ.get("BIOFEEDBACK_CORS_ORIGINS"):
			config.api.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]
		if max_sessions := os.environ.get("BIOFEEDBACK_MAX_SESSIONS"):
			config.api.max_sessions = int(max_sessions)

		return config

	@classmethod
	def from_file(cls, path: str | Path) -> AppConfig:
		"""Load configuration from JSON file."""
		with open(path) as f:
			data = json.load(f)
		return cls._from_dict(data)

	@classmethod
	def _from_dict(cls, data: dict[str, Any]) -> AppConfig:
		"""Create config from dictionary."""
		config = cls()

		if "processing" in data:
			for key, value in data["processing"].items():
				if hasattr(config.processing, key):
					setattr(config.processing, key, value)

		if "api" in data:
			for key, value in data["api"].items():
				if hasattr(config.api, key):
					setattr(config.api, key, value)

		return config

	def validate(self) -> list[str]:
		"""Validate all configuration values. Returns list of error messages."""
		errors = [f"processing.{e}" for e in self.processing.validate()]

		if not 0 < self.api.port < 65536:
			errors.append(f"api.port ({self.api.port}) must be between 1 and 65535")
		if self.api.max_sessions < 1:
			errors.append(f"api.max_sessions ({self.api.max_sessions}) must be >= 1")

		return errors


# Global config instance
_config: AppConfig | None = None


def get_config() -> AppConfig:
	"""Get the global configuration instance."""
	global _config
	if _config is None:
		_config = AppConfig.from_env()
	return _config


def set_config(config: AppConfig) -> None:
	"""Replace the global configuration instance."""
	global _config
	_config = config


def configure_logging(level: str = "INFO") -> None:
	"""Configure structured logging for the application."""
	log_level = getattr(logging, level.upper(), logging.INFO)

	structlog.configure(
		processors=[
			structlog.stdlib.filter_by_level,
			structlog.stdlib.add_logger_name,
			structlog.stdlib.add_log_level,
			structlog.stdlib.PositionalArgumentsFormatter(),
			structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
			structlog.processors.StackInfoRenderer(),
			structlog.processors.format_exc_info,
			structlog.processors.UnicodeDecoder(),
			structlog.dev.ConsoleRenderer(),
		],
		wrapper_class=structlog.stdlib.BoundLogger,
		context_class=dict,
		logger_factory=structlog.stdlib.LoggerFactory(),
		cache_logger_on_first_use=True,
	)

	logging.basicConfig(
		format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
		level=log_level,
	)

	# Reduce noise from third-party libraries
	logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
