"""
Tests for region lookup and the RegionConfig models.
"""
import importlib

import pytest
from pydantic import ValidationError

from phlebo.core.errors import RegionConfigError
from phlebo.regions import (
    INDIA_REGION,
    UK_REGION,
    RegionConfig,
    RegionRegistry,
    default_registry,
    get_region,
    get_region_for_locale,
)


@pytest.mark.parametrize("code", ["GB", "IN"])
def test_get_region_returns_matching_code(code):
    assert get_region(code).code == code


@pytest.mark.parametrize("code", ["gb", " in ", "In"])
def test_get_region_ignores_case_and_whitespace(code):
    assert get_region(code).code == code.strip().upper()


@pytest.mark.parametrize("code", ["FR", "US", "ZZ", "", None, 44])
def test_unknown_region_falls_back_to_uk(code):
    assert get_region(code) is UK_REGION


def test_environment_does_not_move_the_fallback(monkeypatch):
    from phlebo.core.config import Settings
    from phlebo.regions import registry

    monkeypatch.setenv("DEFAULT_REGION", "IN")
    try:
        reloaded = importlib.reload(registry)
        assert reloaded.get_region("FR").code == "GB"
        assert reloaded.default_registry.default is UK_REGION
    finally:
        importlib.reload(registry)

    assert not hasattr(Settings(), "DEFAULT_REGION")


def test_default_registry_contents():
    assert len(default_registry) == 2
    assert default_registry.codes == ("GB", "IN")
    assert "IN" in default_registry
    assert "in" in default_registry
    assert "FR" not in default_registry
    assert list(default_registry) == [UK_REGION, INDIA_REGION]


def test_custom_registry_with_other_default():
    registry = RegionRegistry([UK_REGION, INDIA_REGION], default_code="IN")

    assert registry.get("FR") is INDIA_REGION
    assert get_region("FR", registry=registry) is INDIA_REGION
    # Module default is untouched
    assert get_region("FR") is UK_REGION


def test_registry_rejects_duplicate_codes():
    with pytest.raises(RegionConfigError, match="Duplicate"):
        RegionRegistry([UK_REGION, UK_REGION])


def test_registry_rejects_unregistered_default():
    with pytest.raises(RegionConfigError, match="not registered"):
        RegionRegistry([INDIA_REGION], default_code="GB")


@pytest.mark.parametrize("locale,expected", [
    ("en-IN", "IN"),
    ("en_IN", "IN"),
    ("EN-in", "IN"),
    ("hi-IN", "IN"),
    ("en-GB", "GB"),
    ("IN", "IN"),
    ("fr-FR", "GB"),
    ("en", "GB"),
    ("", "GB"),
    (None, "GB"),
])
def test_region_for_locale(locale, expected):
    assert get_region_for_locale(locale).code == expected


def test_region_config_is_immutable():
    with pytest.raises(ValidationError):
        UK_REGION.code = "XX"

    with pytest.raises(ValidationError):
        UK_REGION.currency.symbol = "$"


def test_region_config_serializes_round_trip():
    data = UK_REGION.model_dump()

    assert data["phone"]["format_strategy"] == "uk"
    assert RegionConfig.model_validate(data) == UK_REGION


def test_unknown_phone_strategy_is_rejected():
    data = INDIA_REGION.model_dump()
    data["phone"]["format_strategy"] = "mars"

    with pytest.raises(ValidationError, match="format_strategy"):
        RegionConfig.model_validate(data)


def test_invalid_postal_pattern_is_rejected():
    data = INDIA_REGION.model_dump()
    data["address"]["postal_code_pattern"] = "^[0-9"

    with pytest.raises(ValidationError, match="invalid regular expression"):
        RegionConfig.model_validate(data)


def test_tax_config_requires_a_rate():
    data = UK_REGION.model_dump()
    data["tax"]["rates"] = ()

    with pytest.raises(ValidationError):
        RegionConfig.model_validate(data)
