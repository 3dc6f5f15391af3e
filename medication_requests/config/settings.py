"""Configuration settings for medication request processing."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self, env_file: Optional[Path] = None):
        """Initialize settings by loading from .env file and environment variables.

        Args:
            env_file: Path to .env file (default: project_root/.env)
        """
        if env_file is None:
            env_file = Path(__file__).parent.parent.parent / ".env"
        load_dotenv(dotenv_path=env_file)

        # Application Configuration
        self.log_level: str = self._get_env("LOG_LEVEL", "INFO")
        self.log_json: bool = self._get_bool("LOG_JSON", "false")
        self.data_file: Path = Path(
            self._get_env("DATA_FILE", "data/medication_requests.json")
        )

        # Email Configuration
        self.email_enabled: bool = self._get_bool("EMAIL_ENABLED", "false")
        self.mail_port: int = int(self._get_env("MAIL_PORT", "587"))
        self.mail_starttls: bool = self._get_bool("MAIL_STARTTLS", "true")
        self.mail_ssl_tls: bool = self._get_bool("MAIL_SSL_TLS", "false")

        if self.email_enabled:
            self.mail_username: Optional[str] = self._get_required_env("MAIL_USERNAME")
            self.mail_password: Optional[str] = self._get_required_env("MAIL_PASSWORD")
            self.mail_from: Optional[str] = self._get_required_env("MAIL_FROM")
            self.mail_server: Optional[str] = self._get_required_env("MAIL_SERVER")
        else:
            self.mail_username = self._get_env("MAIL_USERNAME")
            self.mail_password = self._get_env("MAIL_PASSWORD")
            self.mail_from = self._get_env("MAIL_FROM")
            self.mail_server = self._get_env("MAIL_SERVER")

    def _get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get environment variable with optional default value.

        Args:
            key: Environment variable name
            default: Default value if variable is not set

        Returns:
            Environment variable value or default
        """
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: str) -> bool:
        return self._get_env(key, default).strip().lower() in ("1", "true", "yes", "on")

    def _get_required_env(self, key: str) -> str:
        """Get required environment variable.

        Args:
            key: Environment variable name

        Returns:
            Environment variable value

        Raises:
            ValueError: If required environment variable is not set
        """
        value = os.getenv(key)
        if not value:
            raise ValueError(
                f"Required environment variable '{key}' is not set. "
                f"Please set it in .env file or system environment."
            )
        return value

    def __repr__(self) -> str:
        """Return string representation of settings (without sensitive data)."""
        return (
            f"Settings(log_level={self.log_level!r}, "
            f"data_file={str(self.data_file)!r}, "
            f"email_enabled={self.email_enabled}, "
            f"mail_server={self.mail_server!r}, "
            f"mail_port={self.mail_port})"
        )
