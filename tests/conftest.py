"""
Shared fixtures for the test suite.
"""
import pytest

from phlebo.regions import get_region


@pytest.fixture
def uk():
    return get_region("GB")


@pytest.fixture
def india():
    return get_region("IN")
