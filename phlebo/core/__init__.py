"""
Core module providing shared configuration, errors, and utilities.

This module consolidates common functionality used across the codebase:
- Configuration management (settings, environment variables)
- Exception types
- Utility functions (geo, address, formatting, dates)

Usage:
    from phlebo.core import settings, InvalidArgumentError
    from phlebo.core.utils import haversine_distance, format_number
"""

from phlebo.core.config import settings, Settings
from phlebo.core.errors import (
    PhleboError,
    InvalidArgumentError,
    DateParseError,
    RegionConfigError,
)

__all__ = [
    "settings",
    "Settings",
    "PhleboError",
    "InvalidArgumentError",
    "DateParseError",
    "RegionConfigError",
]
