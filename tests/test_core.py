"""
Tests for settings and the shared geo/number/address utilities.
"""
import logging
import math
from decimal import Decimal

import pytest

from phlebo.core.config import Settings
from phlebo.core.errors import DateParseError, InvalidArgumentError, PhleboError
from phlebo.core.utils import (
    build_address_lines,
    format_number,
    format_percent,
    haversine_distance,
    is_valid_coordinate,
    km_to_degrees,
    normalize_postal_code,
    round_decimal,
)

SETTING_KEYS = (
    "MONEY_ROUNDING",
    "CLUSTER_DISTANCE_KM",
    "SAME_LOCATION_THRESHOLD_KM",
    "SPIDERFY_RADIUS_KM",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in SETTING_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


# =============================================================================
# Settings
# =============================================================================

def test_settings_defaults(clean_env):
    s = Settings()

    assert s.MONEY_ROUNDING == "half_up"
    assert s.CLUSTER_DISTANCE_KM == 0.5
    assert s.SAME_LOCATION_THRESHOLD_KM == 0.01
    assert s.SPIDERFY_RADIUS_KM == 0.05
    assert s.validate()


def test_settings_read_environment(clean_env):
    clean_env.setenv("CLUSTER_DISTANCE_KM", "0.25")
    clean_env.setenv("MONEY_ROUNDING", "HALF_EVEN")

    s = Settings()

    assert s.CLUSTER_DISTANCE_KM == 0.25
    assert s.MONEY_ROUNDING == "half_even"
    assert s.validate()


def test_settings_validate_rejects_bad_values(clean_env):
    clean_env.setenv("MONEY_ROUNDING", "truncate")
    assert not Settings().validate()

    clean_env.setenv("MONEY_ROUNDING", "half_up")
    clean_env.setenv("SPIDERFY_RADIUS_KM", "0")
    assert not Settings().validate()


def test_error_hierarchy():
    assert issubclass(InvalidArgumentError, PhleboError)
    assert issubclass(DateParseError, ValueError)

    err = DateParseError("Date does not match pattern", text="x", pattern="dd/MM/yyyy")
    assert err.text == "x"
    assert "dd/MM/yyyy" in str(err)


# =============================================================================
# Geo
# =============================================================================

def test_haversine_zero_distance():
    assert haversine_distance(51.5, -0.12, 51.5, -0.12) == 0


def test_haversine_london_paris():
    km = haversine_distance(51.5074, -0.1278, 48.8566, 2.3522)

    assert km == pytest.approx(343.5, rel=1e-2)
    assert haversine_distance(51.5074, -0.1278, 48.8566, 2.3522, unit='meters') == pytest.approx(km * 1000)
    assert haversine_distance(51.5074, -0.1278, 48.8566, 2.3522, unit='miles') == pytest.approx(km / 1.60934, rel=1e-3)


def test_one_degree_of_latitude():
    assert haversine_distance(0, 0, 1, 0) == pytest.approx(111.195, rel=1e-4)


def test_km_to_degrees():
    lat_delta, lng_delta = km_to_degrees(111.32, 0)
    assert lat_delta == pytest.approx(1)
    assert lng_delta == pytest.approx(1)

    lat_delta, lng_delta = km_to_degrees(111.32, 60)
    assert lat_delta == pytest.approx(1)
    assert lng_delta == pytest.approx(2)


@pytest.mark.parametrize("latitude", [90, -90, 90.5, math.nan])
def test_km_to_degrees_rejects_poles(latitude):
    with pytest.raises(InvalidArgumentError):
        km_to_degrees(0.05, latitude)


@pytest.mark.parametrize("lat,lng,expected", [
    (51.5, -0.12, True),
    (-33.86, 151.2, True),
    (None, -0.12, False),
    (51.5, None, False),
    (0, 0, True),
    (51.4779, 0.0, True),
    ("", -0.12, False),
    (91, 0.5, False),
    (45, 181, False),
    (math.nan, 1, False),
    ("51.5", "-0.12", True),
    ("north", "-0.12", False),
])
def test_is_valid_coordinate(lat, lng, expected):
    assert is_valid_coordinate(lat, lng) is expected


# =============================================================================
# Numbers
# =============================================================================

def test_round_decimal_modes():
    assert str(round_decimal(0.125, 2, 'half_up')) == "0.13"
    assert str(round_decimal(0.125, 2, 'half_even')) == "0.12"
    assert str(round_decimal(2.5, 0, 'half_even')) == "2"
    assert str(round_decimal(2.5, 0, 'half_up')) == "3"


def test_format_number():
    assert format_number(12345678, 0) == "12,345,678"
    assert format_number(1234.5678, 2, " ", ",") == "1 234,57"
    assert format_number(999, 2) == "999.00"
    assert format_number(-1234567.5, 1, "'", ".") == "-1'234'567.5"
    assert format_number(0.125, 2, rounding='half_even') == "0.12"


def test_round_decimal_large_values():
    assert round_decimal(1e30, 2) == Decimal(10) ** 30
    assert str(round_decimal(123456789012345678901234567.891, 2)).endswith(".00")
    assert format_number(1e30, 0) == "1" + ",000" * 10


def test_unknown_rounding_mode_warns_and_rounds_half_up(caplog):
    with caplog.at_level(logging.WARNING, logger="phlebo.core.utils.formatting"):
        assert str(round_decimal(2.5, 0, "truncate")) == "3"

    assert "Unknown rounding mode 'truncate'" in caplog.text


def test_format_number_rejects_non_finite():
    with pytest.raises(InvalidArgumentError):
        format_number(math.inf)


@pytest.mark.parametrize("rate,expected", [
    (0.2, "20%"),
    (0.09, "9%"),
    (0.175, "18%"),
    (0, "0%"),
])
def test_format_percent(rate, expected):
    assert format_percent(rate) == expected


# =============================================================================
# Addresses
# =============================================================================

def test_normalize_postal_code_helper():
    assert normalize_postal_code("ec1a1bb", inward_length=3) == "EC1A 1BB"
    assert normalize_postal_code("560 034") == "560034"
    assert normalize_postal_code("ab", inward_length=3) == "AB"
    assert normalize_postal_code(None) == ""


def test_build_address_lines_follows_field_order():
    lines = build_address_lines(
        {"city": "Leeds", "line1": "1 Park Row", "postcode": "ls1 5ab"},
        ["line1", "line2", "city", "postcode"],
        postal_code_field="postcode",
        inward_length=3,
    )

    assert lines == ["1 Park Row", "Leeds", "LS1 5AB"]
