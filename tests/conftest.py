"""Fixtures for the test suite."""

import pytest
from django.core.cache import caches

from sendinblue_api.backends.sendinblue import SendinblueBackend
from sendinblue_api.configuration import SendinblueApiSettings

API_URL = "https://api.brevo.com/v3"


@pytest.fixture(autouse=True)
def clear_cache():
    """Start and end every test with an empty cache."""
    caches["default"].clear()
    yield
    caches["default"].clear()


@pytest.fixture(name="api_settings")
def fixture_api_settings():
    """Settings with a secure API key."""
    return SendinblueApiSettings(api_key="test-api-key")


@pytest.fixture(name="backend")
def fixture_backend(api_settings):
    """Sendinblue backend built the way the handler builds it."""
    return SendinblueBackend.from_settings(api_settings)
