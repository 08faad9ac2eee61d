"""Dummy Sendinblue API backend."""

from sendinblue_api.backends import Result
from sendinblue_api.configuration import ApiConfig, ConfigSource

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """Dummy backend doing nothing."""

    def sync_contact(self, record, list_ids):
        """Pretend the contact was synchronized."""
        return Result.success()

    def unsubscribe_contact(self, email, list_id):
        """Pretend the contact was unsubscribed."""
        return Result.success()

    def get_config(self):
        """Return an empty configuration."""
        return ApiConfig(api_key=None, source=ConfigSource.STORED)

    def get_lists(self, use_cache=True):
        """Return no list."""
        return Result.success([])

    def get_custom_fields(self, use_cache=True):
        """Return no custom field."""
        return Result.success([])

    def invalidate(self, key):
        """Nothing is cached."""
