"""Sendinblue API backend base module."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from sendinblue_api.backends import ContactRecord, Result


class BaseBackend(ABC):
    """Base class for all Sendinblue API backends."""

    @classmethod
    def from_settings(cls, api_settings):
        """Instantiate the backend from the validated `SENDINBLUE_API` settings."""
        return cls()

    @abstractmethod
    def sync_contact(self, record: ContactRecord, list_ids: Iterable[str]) -> Result:
        """
        Create the contact or add the existing one to the given lists.

        Args:
            record: Contact information and custom fields
            list_ids: Identifiers of enabled lists to subscribe the contact to

        Returns:
            Result: success, or failure with a single error message

        """

    @abstractmethod
    def unsubscribe_contact(self, email: str, list_id: str) -> Result:
        """Remove a contact from a list."""

    @abstractmethod
    def get_config(self):
        """Return the resolved API configuration."""

    @abstractmethod
    def get_lists(self, use_cache: bool = True) -> Result:
        """Return the contact lists of the account."""

    @abstractmethod
    def get_custom_fields(self, use_cache: bool = True) -> Result:
        """Return the custom fields of the account."""

    @abstractmethod
    def invalidate(self, key: str):
        """Drop the "lists" or "custom_fields" cache entry."""

    def get_enabled_lists(self, use_cache: bool = True) -> Result:
        """Return only the lists an administrator enabled."""
        result = self.get_lists(use_cache)
        if not result.ok:
            return result
        return Result.success([mailing_list for mailing_list in result.value if mailing_list.enabled])
