"""
India region profile.
"""
from phlebo.regions.base import RegionConfig

INDIA_REGION = RegionConfig(
    code="IN",
    name="India",
    locale="en-IN",
    currency={
        "code": "INR",
        "symbol": "₹",
        "position": "before",
        "decimal_places": 2,
        "thousands_separator": ",",
        "decimal_separator": ".",
    },
    date_format={
        "short": "dd-MM-yyyy",
        "long": "dd MMMM yyyy",
        "time": "HH:mm",
    },
    phone={
        "country_code": "+91",
        "pattern": r"^(?:\+91|0)?[6-9]\d{9}$",
        "placeholder": "98765 43210",
        "format_strategy": "india",
    },
    address={
        "fields": ("line1", "line2", "city", "state", "pincode"),
        "postal_code_field": "pincode",
        "postal_code_label": "PIN Code",
        "postal_code_pattern": r"^\d{6}$",
        "postal_code_placeholder": "110001",
    },
    tax={
        "type": "GST",
        "rates": (
            {"name": "CGST", "rate": 0.09},
            {"name": "SGST", "rate": 0.09},
        ),
    },
)
