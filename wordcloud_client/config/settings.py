from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_provider: str = "http"
    api_base_url: str = "http://localhost:8000"
    api_timeout_seconds: int = 30

    status_poll_interval_seconds: float = Field(default=1.0, ge=0)
    result_poll_interval_seconds: float = Field(default=1.0, ge=0)
    poll_timeout_seconds: float | None = Field(default=None, gt=0)

    max_upload_size_bytes: int = 104_857_600
    accepted_extensions: list[str] = [".txt"]

    display_word_limit: int = Field(default=100, ge=0)
    render_height: int = 400
    render_width_divisor: float = Field(default=2.5, gt=0)
    notification_life_ms: int = 5000

    example_processing_polls: int = Field(default=2, ge=0)
