"""
Settings for the StepMaster activity tracker
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with STEPMASTER_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="STEPMASTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Service identification
    service_name: str = Field(
        default="stepmaster", description="Name of the service for logging"
    )
    environment: str = Field(default="development", description="Deployment environment")
    host: str = "0.0.0.0"
    port: int = 8016

    # Logging configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format: json or text")

    # Step detection settings (magnitudes in g, gravity included)
    smoothing_window_size: int = 20
    step_threshold_g: float = 1.08  # Raw magnitude that counts as a footfall
    step_debounce_ms: float = 200.0  # Refractory window after a step
    recent_step_window_ms: float = 2000.0  # Steps this recent force Walking/Running
    walking_threshold_g: float = 1.1  # Smoothed magnitude above this is Walking
    running_threshold_g: float = 1.6  # Smoothed magnitude at or above this is Running
    max_abs_acceleration_g: float = 16.0  # Samples beyond this are rejected

    # Progress settings
    default_daily_goal: int = 10000
    min_daily_goal: int = 1000
    active_day_min_steps: int = 1000
    water_goal_glasses: int = 8
    calories_per_step: float = 0.04
    km_per_step: float = 0.000762

    # Storage settings
    history_file: Path = Field(
        default=Path("stepmaster_history.json"),
        description="JSON document holding step history, goal and water counts",
    )


settings = Settings()
