"""
Pydantic models describing a region's formatting, validation and tax conventions.
"""
import re
from enum import Enum
from typing import Annotated, Optional, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from phlebo.regions.phone import PHONE_FORMATTERS


class SymbolPosition(str, Enum):
    """Where the currency symbol goes relative to the amount."""
    BEFORE = "before"
    AFTER = "after"


class DateKind(str, Enum):
    """Named date patterns every region provides."""
    SHORT = "short"
    LONG = "long"
    TIME = "time"


class FrozenModel(BaseModel):
    """Immutable base for config models."""
    model_config = ConfigDict(frozen=True, extra="forbid")


def _check_regex(value: str) -> str:
    try:
        re.compile(value)
    except re.error as e:
        raise ValueError(f"invalid regular expression {value!r}: {e}") from e
    return value


RegexPattern = Annotated[str, AfterValidator(_check_regex)]


class CurrencyConfig(FrozenModel):
    """How money is written in a region."""
    code: str = Field(..., min_length=3, max_length=3, description="ISO 4217 code")
    symbol: str
    position: SymbolPosition = SymbolPosition.BEFORE
    decimal_places: int = Field(default=2, ge=0, le=6)
    thousands_separator: str = ","
    decimal_separator: str = "."


class DateFormatConfig(FrozenModel):
    """date-fns style patterns for each DateKind."""
    short: str
    long: str
    time: str


class PhoneConfig(FrozenModel):
    """Phone number conventions."""
    country_code: str = Field(..., pattern=r"^\+\d{1,3}$")
    pattern: RegexPattern = Field(..., description="Regex a valid number must match")
    placeholder: str = ""
    format_strategy: str = Field(..., description="Key into the phone formatter table")

    @field_validator("format_strategy")
    @classmethod
    def known_strategy(cls, v: str) -> str:
        if v not in PHONE_FORMATTERS:
            raise ValueError(
                f"unknown format_strategy {v!r}, expected one of {sorted(PHONE_FORMATTERS)}"
            )
        return v


class AddressConfig(FrozenModel):
    """Address field order and postal code rules."""
    fields: Tuple[str, ...]
    postal_code_field: str = "postcode"
    postal_code_label: str
    postal_code_pattern: RegexPattern
    postal_code_placeholder: str = ""
    # Length of the trailing block written after a space (UK "SW1A 1AA" -> 3)
    postal_code_inward_length: Optional[int] = Field(default=None, ge=1)


class TaxRate(FrozenModel):
    """One component of a region's sales tax."""
    name: str
    rate: float = Field(..., ge=0.0, le=1.0, description="Fraction, 0.20 = 20%")


class TaxConfig(FrozenModel):
    """Sales tax label and component rates."""
    type: str
    rates: Tuple[TaxRate, ...] = Field(..., min_length=1)

    @property
    def total_rate(self) -> float:
        return sum(r.rate for r in self.rates)


class RegionConfig(FrozenModel):
    """Everything the UI needs to present money, dates, phones and addresses for a country."""
    code: str = Field(..., pattern=r"^[A-Z]{2}$", description="ISO 3166-1 alpha-2 code")
    name: str
    locale: str = Field(..., description="BCP 47 UI locale, e.g. en-GB")
    currency: CurrencyConfig
    date_format: DateFormatConfig
    phone: PhoneConfig
    address: AddressConfig
    tax: TaxConfig
