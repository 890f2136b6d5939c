"""
Shared utility functions for the phlebo core.

Modules:
- geo: Geographic calculations (haversine, degree offsets, coordinate checks)
- address: Postal code normalization and address line assembly
- formatting: Rounding, grouped number and percentage formatting
- dates: date-fns style date pattern rendering and parsing

Usage:
    from phlebo.core.utils import haversine_distance, format_number, format_pattern

    # Calculate distance
    distance = haversine_distance(51.50, -0.12, 51.51, -0.13)

    # Format number
    formatted = format_number(1234.5, 2)  # "1,234.50"
"""

from phlebo.core.utils.geo import (
    haversine_distance,
    km_to_degrees,
    is_valid_coordinate,
)
from phlebo.core.utils.address import (
    normalize_postal_code,
    build_address_lines,
)
from phlebo.core.utils.formatting import (
    ensure_finite,
    round_decimal,
    format_number,
    format_percent,
)
from phlebo.core.utils.dates import (
    coerce_datetime,
    format_pattern,
    parse_pattern,
)

__all__ = [
    # Geo utilities
    "haversine_distance",
    "km_to_degrees",
    "is_valid_coordinate",
    # Address utilities
    "normalize_postal_code",
    "build_address_lines",
    # Formatting utilities
    "ensure_finite",
    "round_decimal",
    "format_number",
    "format_percent",
    # Date utilities
    "coerce_datetime",
    "format_pattern",
    "parse_pattern",
]
