"""
Address and postal code normalization utilities.

These helpers are region-agnostic; the regional formatter feeds them the
field order and postal code layout from a RegionConfig.

Usage:
    from phlebo.core.utils.address import normalize_postal_code, build_address_lines

    normalize_postal_code(" sw1a1aa ", inward_length=3)   # "SW1A 1AA"
    normalize_postal_code("110 001")                      # "110001"

    build_address_lines(
        {"line1": "10 Downing St", "city": "London", "postcode": "SW1A 2AA"},
        ["line1", "line2", "city", "county", "postcode"],
    )
    # ["10 Downing St", "London", "SW1A 2AA"]
"""

import re
from typing import Mapping, Optional, Sequence, List

WHITESPACE_PATTERN = re.compile(r'\s+')


def clean_field(value: Optional[str]) -> str:
    """
    Collapse internal whitespace and strip trailing punctuation from a field.

    Example:
        >>> clean_field("  Flat 2,   High  Street, ")
        "Flat 2, High Street"
    """
    if not value:
        return ""

    text = WHITESPACE_PATTERN.sub(' ', str(value)).strip()
    return text.rstrip('.,;').strip()


def normalize_postal_code(code: Optional[str], inward_length: Optional[int] = None) -> str:
    """
    Normalize a postal code for storage and display.

    Removes all whitespace and uppercases the code. When `inward_length` is
    given (UK postcodes use 3), a single space is inserted before that many
    trailing characters.

    Args:
        code: Raw postal code
        inward_length: Length of the trailing block to separate with a space

    Returns:
        Normalized code, or empty string if input is None/empty

    Example:
        >>> normalize_postal_code("ec1a1bb", inward_length=3)
        "EC1A 1BB"
        >>> normalize_postal_code("560 034")
        "560034"
    """
    if not code:
        return ""

    compact = WHITESPACE_PATTERN.sub('', code).upper()

    if inward_length and len(compact) > inward_length:
        return f"{compact[:-inward_length]} {compact[-inward_length:]}"

    return compact


def build_address_lines(
    parts: Mapping[str, Optional[str]],
    fields: Sequence[str],
    postal_code_field: Optional[str] = None,
    inward_length: Optional[int] = None
) -> List[str]:
    """
    Assemble display lines for an address in the given field order.

    Empty fields are skipped; unknown keys in `parts` are ignored.

    Args:
        parts: Mapping of field name to raw value
        fields: Ordered field names for the region
        postal_code_field: Field holding the postal code, normalized if set
        inward_length: Passed to normalize_postal_code for the postal field

    Returns:
        List of non-empty, cleaned lines
    """
    lines = []
    for name in fields:
        value = parts.get(name)
        if name == postal_code_field:
            line = normalize_postal_code(value, inward_length)
        else:
            line = clean_field(value)
        if line:
            lines.append(line)
    return lines
