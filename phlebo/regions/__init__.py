"""
Regional conventions for currency, dates, phone numbers, addresses and tax.

Provides a registry of supported regions and pure formatting functions:
- RegionRegistry / get_region: look up a RegionConfig, UK by default
- formatter: format_currency, format_date, parse_date, format_phone,
  validate_phone, validate_postal_code, calculate_tax, format_tax_label, ...

Usage:
    from phlebo.regions import get_region, format_currency, format_phone

    india = get_region("IN")
    format_currency(1234.5, india)          # "₹1,234.50"
    format_phone("9876543210", india)       # "98765 43210"
"""

from phlebo.regions.base import (
    AddressConfig,
    CurrencyConfig,
    DateFormatConfig,
    DateKind,
    PhoneConfig,
    RegionConfig,
    SymbolPosition,
    TaxConfig,
    TaxRate,
)
from phlebo.regions.profiles import UK_REGION, INDIA_REGION, BUILTIN_REGIONS
from phlebo.regions.registry import (
    RegionRegistry,
    default_registry,
    get_region,
    get_region_for_locale,
)
from phlebo.regions.formatter import (
    format_amount,
    format_currency,
    format_date,
    parse_date,
    format_phone,
    validate_phone,
    validate_postal_code,
    normalize_postal_code,
    format_address,
    calculate_tax,
    calculate_total_with_tax,
    tax_breakdown,
    format_tax_label,
)

__all__ = [
    # Models
    "AddressConfig",
    "CurrencyConfig",
    "DateFormatConfig",
    "DateKind",
    "PhoneConfig",
    "RegionConfig",
    "SymbolPosition",
    "TaxConfig",
    "TaxRate",
    # Profiles
    "UK_REGION",
    "INDIA_REGION",
    "BUILTIN_REGIONS",
    # Registry
    "RegionRegistry",
    "default_registry",
    "get_region",
    "get_region_for_locale",
    # Formatting
    "format_amount",
    "format_currency",
    "format_date",
    "parse_date",
    "format_phone",
    "validate_phone",
    "validate_postal_code",
    "normalize_postal_code",
    "format_address",
    "calculate_tax",
    "calculate_total_with_tax",
    "tax_breakdown",
    "format_tax_label",
]
