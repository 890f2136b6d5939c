"""
Region registry: lookup of RegionConfig by country code with a default fallback.

Usage:
    from phlebo.regions.registry import get_region, RegionRegistry

    region = get_region("IN")       # India
    region = get_region("FR")       # not supported, falls back to the UK

    # Tests and multi-tenant callers can build their own table
    registry = RegionRegistry([UK_REGION], default_code="GB")
"""

import logging
import re
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Tuple

from phlebo.core.errors import RegionConfigError
from phlebo.regions.base import RegionConfig
from phlebo.regions.profiles import BUILTIN_REGIONS

logger = logging.getLogger(__name__)

# "en-IN", "en_IN", "hi-Latn-IN" -> region subtag
LOCALE_REGION_PATTERN = re.compile(r'[-_]([A-Za-z]{2})(?:[-_.@]|$)')


def _normalize_code(code: Optional[str]) -> str:
    if not isinstance(code, str):
        return ""
    return code.strip().upper()


class RegionRegistry:
    """
    Immutable table of region configs keyed by ISO country code.

    Lookups never fail: an unknown code resolves to the default region.
    """

    def __init__(self, regions: Iterable[RegionConfig], default_code: str = "GB"):
        table = {}
        for region in regions:
            if region.code in table:
                raise RegionConfigError(f"Duplicate region code: {region.code}")
            table[region.code] = region

        default_code = _normalize_code(default_code)
        if default_code not in table:
            raise RegionConfigError(
                f"Default region {default_code!r} is not registered. "
                f"Choose from: {list(table.keys())}"
            )

        self._regions = MappingProxyType(table)
        self._default_code = default_code

    @property
    def default(self) -> RegionConfig:
        return self._regions[self._default_code]

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(self._regions)

    def get(self, code: Optional[str]) -> RegionConfig:
        """
        Get the region registered under `code`, or the default region.

        Args:
            code: ISO country code, case and surrounding whitespace ignored

        Returns:
            Matching RegionConfig, or the default when code is unknown/empty
        """
        region = self._regions.get(_normalize_code(code))
        if region is None:
            logger.debug(f"Unknown region {code!r}, using default {self._default_code}")
            return self.default
        return region

    def for_locale(self, locale: Optional[str]) -> RegionConfig:
        """
        Resolve a UI locale tag ("en-IN", "en_GB") to its region.

        A bare country code is accepted too. Locales without a supported
        region subtag get the default region.
        """
        if not isinstance(locale, str) or not locale.strip():
            return self.default

        tag = locale.strip()
        for region in self._regions.values():
            if region.locale.lower() == tag.lower():
                return region

        match = LOCALE_REGION_PATTERN.search(tag)
        return self.get(match.group(1) if match else tag)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and _normalize_code(code) in self._regions

    def __iter__(self) -> Iterator[RegionConfig]:
        return iter(self._regions.values())

    def __len__(self) -> int:
        return len(self._regions)


# Process-wide table built once at import; unknown codes always resolve to the UK
default_registry = RegionRegistry(BUILTIN_REGIONS, default_code="GB")


def get_region(code: Optional[str], registry: Optional[RegionRegistry] = None) -> RegionConfig:
    """
    Get the RegionConfig for a country code, falling back to the default region.

    Example:
        >>> get_region("IN").currency.symbol
        "₹"
        >>> get_region("ZZ").code
        "GB"
    """
    return (registry or default_registry).get(code)


def get_region_for_locale(
    locale: Optional[str],
    registry: Optional[RegionRegistry] = None
) -> RegionConfig:
    """Get the RegionConfig for a UI locale tag such as "en-IN"."""
    return (registry or default_registry).for_locale(locale)
