"""Tests for configuration module."""

import json

from biofeedback.config import (
	APIConfig,
	AppConfig,
	ProcessingConfig,
	configure_logging,
	get_config,
	set_config,
)


class TestProcessingConfig:
	def test_defaults(self):
		config = ProcessingConfig()
		assert config.sample_rate_hz == 30.0
		assert config.facial_history_size == 100
		assert config.pnn_threshold_ms == 50.0
		assert config.resp_freq_min_hz == 0.1
		assert config.resp_freq_max_hz == 0.5
		assert config.resp_min_samples == 100

	def test_valid_defaults(self):
		assert ProcessingConfig().validate() == []

	def test_invalid_values(self):
		config = ProcessingConfig(sample_rate_hz=0.0, resp_freq_min_hz=0.6, peak_threshold_ratio=2.0)
		errors = config.validate()
		assert len(errors) == 3
		assert any("sample_rate_hz" in e for e in errors)


class TestAPIConfig:
	def test_defaults(self):
		config = APIConfig()
		assert config.host == "0.0.0.0"
		assert config.port == 8000
		assert config.log_level == "INFO"


class TestAppConfig:
	def test_defaults(self):
		config = AppConfig()
		assert isinstance(config.processing, ProcessingConfig)
		assert isinstance(config.api, APIConfig)

	def test_from_env(self, monkeypatch):
		monkeypatch.setenv("BIOFEEDBACK_SAMPLE_RATE", "25")
		monkeypatch.setenv("BIOFEEDBACK_API_PORT", "9000")
		monkeypatch.setenv("BIOFEEDBACK_LOG_LEVEL", "DEBUG")
		monkeypatch.setenv("BIOFEEDBACK_CORS_ORIGINS", "http://a.test, http://b.test")

		config = AppConfig.from_env()
		assert config.processing.sample_rate_hz == 25.0
		assert config.api.port == 9000
		assert config.api.log_level == "DEBUG"
		assert config.api.cors_origins == ["http://a.test", "http://b.test"]

	def test_from_env_estimator_settings(self, monkeypatch):
		monkeypatch.setenv("BIOFEEDBACK_RESP_MIN_SAMPLES", "150")
		monkeypatch.setenv("BIOFEEDBACK_RR_MIN_INTERVALS", "3")
		monkeypatch.setenv("BIOFEEDBACK_PEAK_THRESHOLD", "0.4")
		monkeypatch.setenv("BIOFEEDBACK_FACIAL_SMOOTHING", "0.5")

		config = AppConfig.from_env()
		assert config.processing.resp_min_samples == 150
		assert config.processing.rr_min_intervals == 3
		assert config.processing.peak_threshold_ratio == 0.4
		assert config.processing.facial_smoothing_alpha == 0.5
		assert config.validate() == []

	def test_from_file(self, tmp_path):
		config_data = {
			"processing": {"sample_rate_hz": 60.0, "unknown_key": 1},
			"api": {"port": 8888, "log_level": "WARNING"},
		}
		config_file = tmp_path / "config.json"
		config_file.write_text(json.dumps(config_data))

		config = AppConfig.from_file(config_file)
		assert config.processing.sample_rate_hz == 60.0
		assert not hasattr(config.processing, "unknown_key")
		assert config.api.port == 8888
		assert config.api.log_level == "WARNING"

	def test_validate(self):
		config = AppConfig()
		assert config.validate() == []
		config.api.port = 0
		config.processing.rr_min_intervals = 1
		errors = config.validate()
		assert any(e.startswith("processing.rr_min_intervals") for e in errors)
		assert any(e.startswith("api.port") for e in errors)


class TestConfigureLogging:
	def test_configure_logging_info(self):
		# Should not raise
		configure_logging("INFO")

	def test_configure_logging_debug(self):
		configure_logging("DEBUG")


class TestGetConfig:
	def test_returns_config(self):
		assert isinstance(get_config(), AppConfig)

	def test_set_config(self):
		original = get_config()
		replacement = AppConfig()
		try:
			set_config(replacement)
			assert get_config() is replacement
		finally:
			set_config(original)
