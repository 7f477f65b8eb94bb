"""
Configuration management for the ICNDB client.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .client import DEFAULT_HOST, ApiClient, Scheme


@dataclass
class Config:
    """Client configuration."""

    # "http" or "https"
    scheme: str = "http"
    host: str = DEFAULT_HOST

    log_level: str = "WARNING"

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """Load configuration from an optional JSON file and the environment."""
        config = cls()

        if config_path is None:
            config_path = os.getenv("ICNDB_CONFIG")

        # Load from JSON file if exists
        if config_path is not None and Path(config_path).exists():
            with open(config_path) as f:
                data = json.load(f)
                for key, value in data.items():
                    if hasattr(config, key):
                        setattr(config, key, value)

        # Override with environment variables
        config.scheme = os.getenv("ICNDB_SCHEME", config.scheme)
        config.host = os.getenv("ICNDB_HOST", config.host)
        config.log_level = os.getenv("ICNDB_LOG_LEVEL", config.log_level)

        for key in ("scheme", "host", "log_level"):
            value = getattr(config, key)
            if not isinstance(value, str):
                raise ValueError(f"{key} must be a string, got {value!r}")

        # Fail here rather than on the first request
        config.transport_scheme()
        return config

    def transport_scheme(self) -> Scheme:
        try:
            return Scheme(self.scheme.lower())
        except ValueError:
            raise ValueError(
                f"Unknown scheme {self.scheme!r}, expected 'http' or 'https'"
            ) from None

    def client(self) -> ApiClient:
        """Build an ApiClient for this configuration."""
        return ApiClient(scheme=self.transport_scheme(), host=self.host)
