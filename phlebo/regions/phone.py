"""
Phone number display formatters, one per region.

A RegionConfig names its formatter through `phone.format_strategy`; the
functions themselves live here so the config stays plain data.
"""

import re
from typing import Callable, Dict

NON_DIGITS = re.compile(r'\D')


def digits_only(value: str) -> str:
    """Strip everything but digits."""
    return NON_DIGITS.sub('', value or '')


def format_uk_phone(value: str) -> str:
    """
    Format a UK number as 0XXXX XXXXXX.

    A leading trunk "0" or country code "44" is dropped and the "0" put back,
    so "+44 7123 456789" and "07123456789" both give "07123 456789".
    """
    digits = re.sub(r'^(?:0|44)', '', digits_only(value), count=1)

    if len(digits) <= 5:
        return f"0{digits}"
    if len(digits) <= 9:
        return f"0{digits[:4]} {digits[4:]}"
    return f"0{digits[:4]} {digits[4:10]}"


def format_india_phone(value: str) -> str:
    """Format an Indian mobile number as XXXXX XXXXX."""
    digits = re.sub(r'^(?:0|91)', '', digits_only(value), count=1)

    if len(digits) <= 5:
        return digits
    return f"{digits[:5]} {digits[5:10]}"


PHONE_FORMATTERS: Dict[str, Callable[[str], str]] = {
    'uk': format_uk_phone,
    'india': format_india_phone,
}


def get_phone_formatter(strategy: str) -> Callable[[str], str]:
    """
    Look up a phone formatter by strategy name.

    Raises:
        ValueError: If no formatter is registered under that name
    """
    if strategy not in PHONE_FORMATTERS:
        raise ValueError(
            f"Unknown phone format strategy: {strategy}. "
            f"Choose from: {list(PHONE_FORMATTERS.keys())}"
        )
    return PHONE_FORMATTERS[strategy]
