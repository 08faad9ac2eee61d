"""Test the Sendinblue API handler."""

import pytest
from django.core.exceptions import ImproperlyConfigured

from sendinblue_api.backends.dummy import DummyBackend
from sendinblue_api.backends.sendinblue import SendinblueBackend
from sendinblue_api.exceptions import SendinblueInvalidBackendError
from sendinblue_api.handler import SendinblueApiHandler


def test_handler_from_settings(settings):
    """Test the handler from the settings."""
    settings.SENDINBLUE_API = {
        "BACKEND": "sendinblue_api.backends.dummy.DummyBackend",
    }
    handler = SendinblueApiHandler()
    assert isinstance(handler(), DummyBackend)


def test_handler_from_backend():
    """Test the handler from the backend."""
    handler = SendinblueApiHandler(
        backend={
            "BACKEND": "sendinblue_api.backends.dummy.DummyBackend",
        }
    )
    assert isinstance(handler(), DummyBackend)


def test_handler_returns_same_backend():
    """The backend is only instantiated once."""
    handler = SendinblueApiHandler(backend={"BACKEND": "sendinblue_api.backends.dummy.DummyBackend"})
    assert handler() is handler()


def test_handler_no_config(settings):
    """Without settings the Sendinblue backend is used, without API key."""
    settings.SENDINBLUE_API = None
    backend = SendinblueApiHandler()()
    assert isinstance(backend, SendinblueBackend)
    assert backend.config_provider._secure_api_key is None  # noqa: SLF001


def test_handler_secure_settings():
    """The backend is wired with the settings values."""
    backend = SendinblueApiHandler(
        backend={"API_KEY": "xkeysib-123", "TIMEOUT": 3, "DEFAULT_ATTRIBUTES": {"SOURCE": "website"}}
    )()
    assert backend.config_provider._secure_api_key == "xkeysib-123"  # noqa: SLF001
    assert backend.default_attributes == {"SOURCE": "website"}
    assert backend.transport_factory.keywords["timeout"] == 3


def test_handler_invalid_backend():
    """An unknown backend path raises an error."""
    handler = SendinblueApiHandler(backend={"BACKEND": "sendinblue_api.backends.unknown.Backend"})
    with pytest.raises(SendinblueInvalidBackendError):
        handler()


def test_handler_invalid_settings():
    """Invalid settings are reported as improperly configured."""
    handler = SendinblueApiHandler(backend={"TIMEOUT": -1})
    with pytest.raises(ImproperlyConfigured):
        handler()
