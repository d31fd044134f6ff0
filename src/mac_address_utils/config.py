"""Configuration management."""

import os
from dataclasses import dataclass

from .mac_utils import DEFAULT_SEPARATOR, SEPARATORS


@dataclass
class Config:
    """Application configuration."""

    # Output
    separator: str = DEFAULT_SEPARATOR

    # Interface directory
    sysfs_net_path: str = "/sys/class/net"
    proc_route_path: str = "/proc/net/route"

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"  # text, json or kv

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()

        config.separator = os.getenv("MAC_SEPARATOR", DEFAULT_SEPARATOR)
        config.sysfs_net_path = os.getenv("SYSFS_NET_PATH", "/sys/class/net")
        config.proc_route_path = os.getenv("PROC_ROUTE_PATH", "/proc/net/route")
        config.log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        config.log_format = os.getenv("LOG_FORMAT", "text").lower()

        return config

    def validate(self) -> None:
        """Raise ValueError on unusable settings."""
        if self.separator not in SEPARATORS:
            raise ValueError(
                f"Invalid MAC_SEPARATOR {self.separator!r}, expected one of {SEPARATORS}"
            )
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Invalid LOG_LEVEL {self.log_level!r}")
        if self.log_format not in ("text", "json", "kv"):
            raise ValueError(f"Invalid LOG_FORMAT {self.log_format!r}")
