"""
Centralized configuration management for the phlebo regional/map core.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from phlebo.core.config import settings

    # Access configuration
    print(settings.MONEY_ROUNDING)
    print(settings.CLUSTER_DISTANCE_KM)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path(__file__).parent.parent.parent / ".env",  # repository root
    Path.cwd() / ".env",  # Current working directory
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break

ROUNDING_MODES = ("half_up", "half_even")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # Money
    # ==========================================================================
    MONEY_ROUNDING: str = field(
        default_factory=lambda: os.getenv("MONEY_ROUNDING", "half_up").strip().lower()
    )

    # ==========================================================================
    # Map clustering (kilometres)
    # ==========================================================================
    CLUSTER_DISTANCE_KM: float = field(
        default_factory=lambda: float(os.getenv("CLUSTER_DISTANCE_KM", "0.5"))
    )
    SAME_LOCATION_THRESHOLD_KM: float = field(
        default_factory=lambda: float(os.getenv("SAME_LOCATION_THRESHOLD_KM", "0.01"))
    )
    SPIDERFY_RADIUS_KM: float = field(
        default_factory=lambda: float(os.getenv("SPIDERFY_RADIUS_KM", "0.05"))
    )

    def validate(self) -> bool:
        """Check that numeric settings are in range and the rounding mode is known."""
        return (
            self.MONEY_ROUNDING in ROUNDING_MODES and
            self.CLUSTER_DISTANCE_KM >= 0 and
            self.SAME_LOCATION_THRESHOLD_KM >= 0 and
            self.SPIDERFY_RADIUS_KM > 0
        )


# Singleton settings instance
settings = Settings()
