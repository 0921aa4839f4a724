"""Unit tests for configuration."""

from pathlib import Path

from stepmaster.config import Settings


class TestSettings:
    """Test Settings configuration."""

    def test_default_settings(self):
        """Test default settings values."""
        settings = Settings()
        assert settings.service_name == "stepmaster"
        assert settings.port == 8016
        assert settings.log_format == "json"
        assert settings.history_file == Path("stepmaster_history.json")

    def test_step_detection_settings(self):
        """Test step detection defaults."""
        settings = Settings()
        assert settings.smoothing_window_size == 20
        assert settings.step_threshold_g == 1.08
        assert settings.step_debounce_ms == 200.0
        assert settings.recent_step_window_ms == 2000.0
        assert settings.walking_threshold_g == 1.1
        assert settings.running_threshold_g == 1.6

    def test_progress_settings(self):
        """Test progress analytics defaults."""
        settings = Settings()
        assert settings.default_daily_goal == 10000
        assert settings.min_daily_goal == 1000
        assert settings.active_day_min_steps == 1000
        assert settings.water_goal_glasses == 8

    def test_env_override(self, monkeypatch):
        """Test environment variable override."""
        monkeypatch.setenv("STEPMASTER_SERVICE_NAME", "custom-tracker")
        monkeypatch.setenv("STEPMASTER_PORT", "8080")
        monkeypatch.setenv("STEPMASTER_STEP_THRESHOLD_G", "1.2")
        monkeypatch.setenv("STEPMASTER_HISTORY_FILE", "/tmp/steps.json")

        settings = Settings()
        assert settings.service_name == "custom-tracker"
        assert settings.port == 8080
        assert settings.step_threshold_g == 1.2
        assert settings.history_file == Path("/tmp/steps.json")
