"""Sendinblue contact synchronization."""

import functools
import logging
from collections.abc import Iterable
from urllib.parse import quote_plus

from sendinblue_api.backends import ContactRecord, Result
from sendinblue_api.cache import ListCache
from sendinblue_api.configuration import ConfigProvider
from sendinblue_api.exceptions import ConfigurationError, ContactValidationError, TransportError
from sendinblue_api.tools.email import is_valid_email
from sendinblue_api.transport import Transport

from .base import BaseBackend

logger = logging.getLogger(__name__)

PHONE_NUMBER_HINT = (
    "Mobile Number in SMS field should be passed with proper country code. "
    "For example: Accepted Number Formats are 91xxxxxxxxxx, +91xxxxxxxxxx, 0091xxxxxxxxxx"
)


def remote_list_id(list_id: str):
    """Sendinblue list ids are integers, keep anything else untouched."""
    return int(list_id) if list_id.isdecimal() else list_id


def normalize_list_ids(list_ids) -> list[str]:
    """Return the list ids as strings, without duplicates, in the given order."""
    if list_ids is None:
        return []
    if isinstance(list_ids, str | int):
        list_ids = [list_ids]
    return list(dict.fromkeys(str(list_id) for list_id in list_ids if list_id not in (None, "")))


class SendinblueBackend(BaseBackend):
    """
    Synchronize contacts with Sendinblue.

    Handles:
    - Contact lookup by email, then creation or list subscription
    - Local authorization of the targeted lists
    - Cached access to the account lists and custom fields

    Payload mutators are called in registration order with the record and the
    contact creation payload, which they may modify in place.
    """

    def __init__(
        self,
        config_provider: ConfigProvider,
        list_cache: ListCache,
        transport_factory,
        payload_mutators: Iterable = (),
        default_attributes: dict | None = None,
    ):
        """Configure the backend with its collaborators."""
        self.config_provider = config_provider
        self.list_cache = list_cache
        self.transport_factory = transport_factory
        self.payload_mutators = list(payload_mutators)
        self.default_attributes = default_attributes or {}

    @classmethod
    def from_settings(cls, api_settings):
        """Build the backend and its collaborators from validated settings."""
        config_provider = ConfigProvider(secure_api_key=api_settings.api_key)
        transport_factory = functools.partial(
            Transport, base_url=api_settings.base_url, timeout=api_settings.timeout
        )
        return cls(
            config_provider=config_provider,
            list_cache=ListCache(config_provider, transport_factory, cache_alias=api_settings.cache_alias),
            transport_factory=transport_factory,
            payload_mutators=api_settings.payload_mutators,
            default_attributes=api_settings.default_attributes,
        )

    def get_config(self):
        """Return the resolved API configuration."""
        return self.config_provider.get_config()

    def get_lists(self, use_cache=True):
        """Return the contact lists of the account, tagged with their enabled flag."""
        return self.list_cache.get_lists(use_cache)

    def get_custom_fields(self, use_cache=True):
        """Return the custom fields of the account."""
        return self.list_cache.get_custom_fields(use_cache)

    def invalidate(self, key):
        """Drop a cache entry."""
        self.list_cache.invalidate(key)

    def _check_preconditions(self, email, list_ids) -> str:
        """
        Check everything that can be checked without calling Sendinblue.

        Returns:
            str: the API key to use

        Raises:
            ConfigurationError: missing credentials or list not enabled
            ContactValidationError: missing list id or missing/invalid email

        """
        api_key = self.config_provider.get_config().api_key
        if not api_key:
            raise ConfigurationError("missing credentials")

        if not list_ids:
            raise ContactValidationError("a list id is required")

        enabled = self.config_provider.enabled_lists()
        for list_id in list_ids:
            if enabled.get(list_id) is not True:
                raise ConfigurationError("list not enabled or does not exist")

        if not email:
            raise ContactValidationError("email is required")
        if not is_valid_email(email):
            raise ContactValidationError("email is not valid")

        return api_key

    def sync_contact(self, record: ContactRecord, list_ids) -> Result:
        """
        Create or update a Sendinblue contact.

        An existing contact is added to each list in turn, stopping at the first
        failure. A new contact is created with all the lists and its custom
        fields as attributes.
        """
        list_ids = normalize_list_ids(list_ids)
        try:
            api_key = self._check_preconditions(record.email, list_ids)
        except (ConfigurationError, ContactValidationError) as err:
            logger.error("Cannot synchronize contact: %s", err)
            return Result.failure(str(err))

        with self.transport_factory(api_key) as transport:
            contact = self._get_contact(transport, record.email)
            if contact is not None:
                return self._add_to_lists(transport, contact, list_ids)
            return self._create_contact(transport, record, list_ids)

    def _get_contact(self, transport, email) -> dict | None:
        """Return the remote contact, None when it does not exist or cannot be fetched."""
        try:
            contact = transport.request(
                "GET", f"contacts/{quote_plus(email)}", params={"identifierType": "email_id"}
            )
        except TransportError as err:
            logger.info("No existing contact found, a new one will be created: %s", err.message)
            return None

        if not isinstance(contact, dict) or contact.get("id") is None:
            return None
        return contact

    def _add_to_lists(self, transport, contact, list_ids) -> Result:
        """Subscribe an existing contact to the lists it is not a member of yet."""
        memberships = {str(list_id) for list_id in contact.get("listIds") or []}
        for list_id in list_ids:
            if list_id in memberships:
                logger.info("Contact %s is already in list %s", contact["id"], list_id)
                continue
            try:
                transport.request(
                    "POST",
                    f"contacts/lists/{quote_plus(list_id)}/contacts/add",
                    json={"ids": [contact["id"]]},
                )
            except TransportError as err:
                if "already in list" in err.message.lower():
                    continue
                logger.error("Adding contact %s to list %s failed: %s", contact["id"], list_id, err.message)
                return Result.failure(err.message)

        logger.info("Contact %s has been added to lists %s", contact["id"], ", ".join(list_ids))
        return Result.success()

    def build_payload(self, record: ContactRecord, list_ids) -> dict:
        """Build the contact creation payload, mutators applied."""
        payload = {
            "email": record.email,
            "listIds": [remote_list_id(list_id) for list_id in list_ids],
        }
        attributes = {**self.default_attributes, **record.custom_fields}
        if attributes:
            payload["attributes"] = attributes

        for mutator in self.payload_mutators:
            mutator(record, payload)
        return payload

    def _create_contact(self, transport, record, list_ids) -> Result:
        """Create a new contact, already subscribed to the lists."""
        payload = self.build_payload(record, list_ids)
        try:
            transport.request("POST", "contacts", json=payload)
        except TransportError as err:
            message = str(err.body.get("message") or "")
            if not message:
                logger.error("Contact creation failed: %s", err.message)
                return Result.failure(err.message)

            if message.lower() == "invalid phone number":
                message = f"{message}. {PHONE_NUMBER_HINT}"
            logger.error("Contact creation failed (%s): %s", err.body.get("code"), message)
            return Result.failure(message, notices=[f"{message}."])

        logger.info("Contact has been created in lists %s", ", ".join(list_ids))
        return Result.success()

    def unsubscribe_contact(self, email, list_id) -> Result:
        """Remove a contact from a list."""
        list_ids = normalize_list_ids(list_id)
        try:
            api_key = self._check_preconditions(email, list_ids)
        except (ConfigurationError, ContactValidationError) as err:
            logger.error("Cannot unsubscribe contact: %s", err)
            return Result.failure(str(err))

        with self.transport_factory(api_key) as transport:
            try:
                transport.request(
                    "POST",
                    f"contacts/lists/{quote_plus(list_ids[0])}/contacts/remove",
                    json={"emails": [email]},
                )
            except TransportError as err:
                logger.error("Removing contact from list %s failed: %s", list_ids[0], err.message)
                return Result.failure(err.message)

        logger.info("Contact has been removed from list %s", list_ids[0])
        return Result.success()
