"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_FORMATS = ["jpg", "jpeg", "png", "gif", "webp", "avif"]


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        cloudinary_cloud_name: Cloudinary cloud name (CLOUDINARY_CLOUD_NAME).
        cloudinary_api_key: Cloudinary API key (CLOUDINARY_API_KEY).
        cloudinary_api_secret: Cloudinary API secret (CLOUDINARY_API_SECRET).
        upload_folder: Remote folder that receives uploaded media.
        upload_allowed_formats: Allow-list of file extensions.
        upload_resource_type: Cloudinary resource type ("auto" detects it).
        api_base_url: Base URL of the trading backend used by the probes.
        api_timeout_seconds: HTTP timeout for backend calls.
        otp_valid_minutes: Validity window announced in OTP emails.
        mock_email_otp_delay_seconds: Simulated latency of an OTP email.
        mock_email_success_delay_seconds: Simulated latency of a reset-success email.

    Cloudinary credentials are optional here. A missing credential is
    reported when the storage is used, not when settings load.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "ForexDesk"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"

    # Cloudinary media storage
    cloudinary_cloud_name: Optional[str] = None
    cloudinary_api_key: Optional[str] = None
    cloudinary_api_secret: Optional[str] = None
    upload_folder: str = "forex-profiles"
    upload_allowed_formats: list[str] = list(DEFAULT_ALLOWED_FORMATS)
    upload_resource_type: str = "auto"

    # Trading backend consumed by the probes
    api_base_url: str = "http://localhost:5000/api"
    api_timeout_seconds: float = 10.0

    # Mock notifications
    otp_valid_minutes: int = 10
    mock_email_otp_delay_seconds: float = 1.0
    mock_email_success_delay_seconds: float = 0.5


settings = Settings()
