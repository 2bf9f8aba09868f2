"""
Configuration settings for the application.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from fileprobe.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

TRANSPORTS = ("local", "ssh")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.transport: str = self._get_env("FILEPROBE_TRANSPORT", "local").lower()
        self.os_family: str = self._get_env("FILEPROBE_OS_FAMILY", "auto").lower()
        self.ssh_host: Optional[str] = os.getenv("FILEPROBE_SSH_HOST") or None
        self.ssh_port: int = self._get_int_env("FILEPROBE_SSH_PORT", 22)
        self.ssh_user: Optional[str] = os.getenv("FILEPROBE_SSH_USER") or None
        self.ssh_password: Optional[str] = os.getenv("FILEPROBE_SSH_PASSWORD") or None
        self.ssh_key_file: Optional[str] = os.getenv("FILEPROBE_SSH_KEY_FILE") or None
        self.command_timeout: float = self._get_float_env(
            "FILEPROBE_COMMAND_TIMEOUT", 30.0
        )

        if self.transport not in TRANSPORTS:
            raise ConfigurationError(
                f"FILEPROBE_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {self.transport}"
            )

    def require_ssh_host(self) -> str:
        """Get the SSH host, raise error if it is not configured."""
        if not self.ssh_host:
            raise ConfigurationError(
                "Required environment variable FILEPROBE_SSH_HOST is not set"
            )
        return self.ssh_host

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        value = os.getenv(key)
        if not value:
            return default
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer")

    def _get_float_env(self, key: str, default: float) -> float:
        value = os.getenv(key)
        if not value:
            return default
        try:
            return float(value)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be a number")
