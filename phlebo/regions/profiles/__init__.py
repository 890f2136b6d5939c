"""
Built-in region profiles.
"""

from phlebo.regions.profiles.uk import UK_REGION
from phlebo.regions.profiles.india import INDIA_REGION

BUILTIN_REGIONS = (UK_REGION, INDIA_REGION)

__all__ = [
    "UK_REGION",
    "INDIA_REGION",
    "BUILTIN_REGIONS",
]
