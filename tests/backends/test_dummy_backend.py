"""Test the dummy backend."""

from sendinblue_api.backends import ContactRecord
from sendinblue_api.backends.dummy import DummyBackend


def test_dummy_backend():
    """The dummy backend accepts everything and knows nothing."""
    backend = DummyBackend.from_settings(None)

    assert backend.sync_contact(ContactRecord(email="test@example.com"), ["1"]).ok is True
    assert backend.unsubscribe_contact("test@example.com", "1").ok is True
    assert backend.get_config().api_key is None
    assert backend.get_lists().value == []
    assert backend.get_enabled_lists().value == []
    assert backend.get_custom_fields(use_cache=False).value == []
    assert backend.invalidate("lists") is None
