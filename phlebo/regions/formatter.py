"""
Region-aware formatting, validation and tax helpers.

Every function takes the RegionConfig explicitly; look one up with
`phlebo.regions.get_region()` first.

Usage:
    from phlebo.regions import get_region
    from phlebo.regions.formatter import format_currency, format_tax_label

    uk = get_region("GB")
    format_currency(1234.5, uk)     # "£1,234.50"
    format_tax_label(uk)            # "VAT (20%)"
"""

import re
from datetime import datetime
from typing import List, Mapping, Optional, Tuple, Union

from phlebo.core.errors import InvalidArgumentError
from phlebo.core.utils.address import build_address_lines, normalize_postal_code as _normalize
from phlebo.core.utils.dates import DateInput, format_pattern, parse_pattern
from phlebo.core.utils.formatting import ensure_finite, format_number, format_percent
from phlebo.regions.base import DateKind, RegionConfig, SymbolPosition
from phlebo.regions.phone import get_phone_formatter

KindType = Union[DateKind, str]


# =============================================================================
# Currency
# =============================================================================

def format_amount(amount: float, region: RegionConfig) -> str:
    """
    Format an amount with the region's separators and decimals, no symbol.

    Raises:
        InvalidArgumentError: If amount is NaN, infinite or not a number
    """
    currency = region.currency
    return format_number(
        amount,
        currency.decimal_places,
        currency.thousands_separator,
        currency.decimal_separator,
    )


def format_currency(amount: float, region: RegionConfig) -> str:
    """
    Format a currency amount according to regional settings.

    Negative amounts keep the sign outside the symbol ("-£5.00").

    Args:
        amount: Amount in major units (pounds, rupees)
        region: Region whose currency conventions apply

    Returns:
        Formatted currency string

    Raises:
        InvalidArgumentError: If amount is NaN, infinite or not a number

    Example:
        >>> format_currency(1234.5, get_region("GB"))
        "£1,234.50"
        >>> format_currency(1234.5, get_region("IN"))
        "₹1,234.50"
    """
    formatted = format_amount(amount, region)
    sign = ''
    if formatted.startswith('-'):
        sign, formatted = '-', formatted[1:]

    currency = region.currency
    if currency.position == SymbolPosition.BEFORE:
        return f"{sign}{currency.symbol}{formatted}"
    return f"{sign}{formatted}{currency.symbol}"


# =============================================================================
# Dates
# =============================================================================

def _date_pattern(kind: KindType, region: RegionConfig) -> str:
    try:
        kind = DateKind(kind)
    except ValueError as e:
        raise InvalidArgumentError(
            f"Unknown date format kind: {kind}. Choose from: {[k.value for k in DateKind]}"
        ) from e
    return getattr(region.date_format, kind.value)


def format_date(
    date: DateInput,
    kind: KindType = DateKind.SHORT,
    region: Optional[RegionConfig] = None
) -> str:
    """
    Format a date according to regional settings.

    Args:
        date: datetime, date, ISO-like string or epoch milliseconds
        kind: "short", "long" or "time"
        region: Region whose date patterns apply

    Raises:
        DateParseError: If a string input cannot be read as a date
        InvalidArgumentError: If kind or the input type is not supported

    Example:
        >>> format_date("2024-03-05", "short", get_region("IN"))
        "05-03-2024"
    """
    if region is None:
        raise InvalidArgumentError("region is required")
    return format_pattern(date, _date_pattern(kind, region))


def parse_date(
    text: str,
    kind: KindType = DateKind.SHORT,
    region: Optional[RegionConfig] = None,
    reference: Optional[datetime] = None
) -> datetime:
    """
    Parse a date string using the regional pattern for `kind`.

    Fields the pattern does not contain (the date for "time", the time of
    day for "short"/"long") come from `reference`, defaulting to today at
    midnight.

    Raises:
        DateParseError: If text does not match the pattern
    """
    if region is None:
        raise InvalidArgumentError("region is required")
    return parse_pattern(text, _date_pattern(kind, region), reference)


# =============================================================================
# Phone numbers
# =============================================================================

def format_phone(phone: Optional[str], region: RegionConfig) -> str:
    """
    Format a phone number for display using the region's strategy.

    Example:
        >>> format_phone("07123456789", get_region("GB"))
        "07123 456789"
    """
    if not phone:
        return ''
    return get_phone_formatter(region.phone.format_strategy)(phone)


def validate_phone(phone: Optional[str], region: RegionConfig) -> bool:
    """Validate a phone number against the regional pattern."""
    if not phone or not phone.strip():
        return False
    return re.search(region.phone.pattern, phone.strip()) is not None


# =============================================================================
# Addresses
# =============================================================================

def validate_postal_code(code: Optional[str], region: RegionConfig) -> bool:
    """Validate a postal code against the regional pattern."""
    if not code or not code.strip():
        return False
    return re.search(region.address.postal_code_pattern, code.strip()) is not None


def normalize_postal_code(code: Optional[str], region: RegionConfig) -> str:
    """
    Uppercase a postal code and apply the region's spacing.

    Example:
        >>> normalize_postal_code("sw1a1aa", get_region("GB"))
        "SW1A 1AA"
    """
    return _normalize(code, region.address.postal_code_inward_length)


def format_address(parts: Mapping[str, Optional[str]], region: RegionConfig) -> List[str]:
    """
    Build display lines for an address in the region's field order.

    Empty fields are dropped and the postal code is normalized.
    """
    address = region.address
    return build_address_lines(
        parts,
        address.fields,
        postal_code_field=address.postal_code_field,
        inward_length=address.postal_code_inward_length,
    )


# =============================================================================
# Tax
# =============================================================================

def calculate_tax(amount: float, region: RegionConfig) -> float:
    """
    Calculate tax on an amount as the sum of all regional rates.

    The result is not rounded; format it with format_currency for display.

    Raises:
        InvalidArgumentError: If amount is NaN, infinite or not a number
    """
    return ensure_finite(amount) * region.tax.total_rate


def calculate_total_with_tax(amount: float, region: RegionConfig) -> float:
    """Calculate the amount plus tax."""
    return ensure_finite(amount) + calculate_tax(amount, region)


def tax_breakdown(amount: float, region: RegionConfig) -> List[Tuple[str, float]]:
    """
    Split the tax on an amount into its component rates.

    Example:
        >>> tax_breakdown(100, get_region("IN"))
        [("CGST", 9.0), ("SGST", 9.0)]
    """
    base = ensure_finite(amount)
    return [(rate.name, base * rate.rate) for rate in region.tax.rates]


def format_tax_label(region: RegionConfig) -> str:
    """
    Format the tax label, e.g. "VAT (20%)" or "GST (CGST 9% + SGST 9%)".
    """
    tax = region.tax

    if len(tax.rates) == 1:
        return f"{tax.type} ({format_percent(tax.rates[0].rate)})"

    rate_labels = ' + '.join(
        f"{rate.name} {format_percent(rate.rate)}" for rate in tax.rates
    )
    return f"{tax.type} ({rate_labels})"
