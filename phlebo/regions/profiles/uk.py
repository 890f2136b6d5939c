"""
United Kingdom region profile.
"""
from phlebo.regions.base import RegionConfig

UK_REGION = RegionConfig(
    code="GB",
    name="United Kingdom",
    locale="en-GB",
    currency={
        "code": "GBP",
        "symbol": "£",
        "position": "before",
        "decimal_places": 2,
        "thousands_separator": ",",
        "decimal_separator": ".",
    },
    date_format={
        "short": "dd/MM/yyyy",
        "long": "dd MMMM yyyy",
        "time": "HH:mm",
    },
    phone={
        "country_code": "+44",
        "pattern": r"^(?:0|\+44)\s?(?:\d\s?){9,10}$",
        "placeholder": "07123 456789",
        "format_strategy": "uk",
    },
    address={
        "fields": ("line1", "line2", "city", "county", "postcode"),
        "postal_code_field": "postcode",
        "postal_code_label": "Postcode",
        # Outward code may end in a letter (SW1A, EC1A, W1D)
        "postal_code_pattern": r"(?i)^[A-Z]{1,2}\d[A-Z\d]?\s?\d[A-Z]{2}$",
        "postal_code_placeholder": "SW1A 1AA",
        "postal_code_inward_length": 3,
    },
    tax={
        "type": "VAT",
        "rates": ({"name": "Standard Rate", "rate": 0.20},),
    },
)
