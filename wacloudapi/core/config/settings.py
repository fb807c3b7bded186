"""
Settings for the wacloudapi SDK.

Environment variable configuration for the WhatsApp Cloud API client and
the webhook receiver. Values are read once and never mutated afterwards.
"""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

# Load .env file for local development - look in current working directory
load_dotenv(".env")

DEFAULT_API_VERSION = "v21.0"
GRAPH_API_URL = "https://graph.facebook.com"


def _get_version_from_pyproject() -> str:
    """
    Read version from pyproject.toml file.

    Returns:
        Version string from pyproject.toml, or fallback version
    """
    current_path = Path(__file__)
    for parent in [current_path.parent, *current_path.parents]:
        pyproject_path = parent / "pyproject.toml"
        if pyproject_path.exists():
            try:
                with open(pyproject_path, "rb") as f:
                    pyproject_data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError):
                continue
            version = pyproject_data.get("project", {}).get("version")
            if version:
                return version

    return "0.1.0"


class Settings:
    """SDK settings with environment-based configuration."""

    def __init__(self):
        # ================================================================
        # Version & General Configuration
        # ================================================================
        self.version: str = _get_version_from_pyproject()
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_dir: str = os.getenv("LOG_DIR", "./logs")
        self.environment: str = os.getenv("ENVIRONMENT", "DEV")

        # ================================================================
        # Graph API Configuration
        # ================================================================
        self.api_version: str = os.getenv("API_VERSION", DEFAULT_API_VERSION)
        self.base_url: str = os.getenv("BASE_URL", GRAPH_API_URL)
        self.request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "30"))

        # ================================================================
        # WhatsApp Configuration
        # ================================================================
        self.access_token: str | None = os.getenv("WP_ACCESS_TOKEN")
        self.phone_number_id: str | None = os.getenv("WP_PHONE_ID")
        self.waba_id: str | None = os.getenv("WP_BID")
        self.app_id: str | None = os.getenv("WHATSAPP_APP_ID")

        # Webhook verification (GET challenge) and payload signature (POST)
        self.webhook_verify_token: str | None = os.getenv(
            "WHATSAPP_WEBHOOK_VERIFY_TOKEN"
        )
        self.app_secret: str | None = os.getenv("WHATSAPP_APP_SECRET")

        self._validate_settings()

    def _validate_settings(self):
        """Validate settings values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        self.log_level = self.log_level.upper()

        valid_environments = ["DEV", "PROD"]
        if self.environment.upper() not in valid_environments:
            self.environment = "DEV"
        self.environment = self.environment.upper()

        if self.request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be a positive number of seconds")

    def validate_client_credentials(self) -> None:
        """Validate the credentials needed to build an API client."""
        if not self.access_token:
            raise ValueError("WP_ACCESS_TOKEN is required")
        if not self.phone_number_id:
            raise ValueError("WP_PHONE_ID is required")

    def validate_webhook_credentials(self) -> None:
        """Validate the credentials needed to receive webhooks."""
        if not self.app_secret:
            raise ValueError("WHATSAPP_APP_SECRET is required")
        if not self.webhook_verify_token:
            raise ValueError("WHATSAPP_WEBHOOK_VERIFY_TOKEN is required")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "DEV"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "PROD"

    def __repr__(self) -> str:
        token_state = "set" if self.access_token else "unset"
        return (
            f"Settings(api_version={self.api_version!r}, base_url={self.base_url!r}, "
            f"phone_number_id={self.phone_number_id!r}, access_token=<{token_state}>)"
        )


# Global settings instance
settings = Settings()
