"""Write-through cache of the Sendinblue lists and custom fields."""

import logging
import threading

from django.core.cache import caches

from sendinblue_api.backends import CustomFieldDefinition, FieldType, MailingList, Result
from sendinblue_api.exceptions import TransportError

logger = logging.getLogger(__name__)

LISTS_PAGE_SIZE = 50
LISTS_MAX_PAGES = 10

# System attributes that cannot be filled from a signup form
IGNORED_ATTRIBUTES = frozenset({"BLACKLIST", "READERS", "CLICKERS", "DOUBLE_OPT-IN", "OPT_IN"})

CACHE_KEYS = {
    "lists": "sendinblue_api.lists",
    "custom_fields": "sendinblue_api.custom_fields",
}


def build_mailing_list(data: dict, enabled: dict[str, bool]) -> MailingList:
    """Build a mailing list from its API representation."""
    list_id = str(data["id"])
    return MailingList(
        id=list_id,
        name=data.get("name", ""),
        enabled=enabled.get(list_id) is True,
        folder_id=data.get("folderId"),
        unique_subscribers=data.get("uniqueSubscribers"),
        total_blacklisted=data.get("totalBlacklisted"),
        total_subscribers=data.get("totalSubscribers"),
    )


def build_custom_field(data: dict) -> CustomFieldDefinition:
    """Build a custom field definition from a Sendinblue attribute."""
    enumeration = data.get("enumeration") or []
    remote_type = data.get("type")
    if enumeration:
        field_type = FieldType.SELECT
    elif remote_type in ("float", "number"):
        field_type = FieldType.NUMBER
    elif remote_type == "date":
        field_type = FieldType.DATE
    else:
        field_type = FieldType.TEXT

    return CustomFieldDefinition(
        id=data["name"],
        label=data["name"],
        type=field_type,
        required=False,
        choices=[str(item.get("label", item.get("value"))) for item in enumeration],
    )


class ListCache:
    """
    Cache of the lists and custom fields fetched from Sendinblue.

    Entries never expire: they are replaced wholesale on every uncached fetch
    and dropped with `invalidate`. Overwrites of one entry are serialized by a
    lock; reads are not. Two callers missing at the same time may both fetch,
    the last write wins.
    """

    def __init__(self, config_provider, transport_factory, cache_alias="default"):
        """Configure the cache."""
        self.config_provider = config_provider
        self.transport_factory = transport_factory
        self.cache_alias = cache_alias
        self._locks = {key: threading.Lock() for key in CACHE_KEYS}

    @property
    def _cache(self):
        return caches[self.cache_alias]

    def _cached(self, key):
        return self._cache.get(CACHE_KEYS[key])

    def _store(self, key, value):
        with self._locks[key]:
            self._cache.set(CACHE_KEYS[key], value, timeout=None)

    def invalidate(self, key: str):
        """Drop a cache entry, `key` being "lists" or "custom_fields"."""
        if key not in CACHE_KEYS:
            raise ValueError(f"Unknown cache key {key!r}, expected one of {', '.join(CACHE_KEYS)}")
        with self._locks[key]:
            self._cache.delete(CACHE_KEYS[key])

    def get_lists(self, use_cache: bool = True) -> Result:
        """
        Return all the contact lists of the account.

        Pages are fetched until one comes back short or empty, at most
        `LISTS_MAX_PAGES` times. The cache is only written once every page has
        been fetched.
        """
        if use_cache:
            cached = self._cached("lists")
            if cached is not None:
                return Result.success(cached)

        api_key = self.config_provider.get_config().api_key
        if not api_key:
            return Result.success([])

        raw_lists = []
        try:
            with self.transport_factory(api_key) as transport:
                for page in range(LISTS_MAX_PAGES):
                    data = transport.request(
                        "GET",
                        "contacts/lists",
                        params={"limit": LISTS_PAGE_SIZE, "offset": page * LISTS_PAGE_SIZE, "sort": "desc"},
                    )
                    page_lists = (data or {}).get("lists") or []
                    raw_lists.extend(page_lists)
                    if len(page_lists) < LISTS_PAGE_SIZE:
                        break
        except TransportError as err:
            logger.error("There was a problem getting the contact lists: %s", err.message)
            return Result.failure(err.message)

        enabled = self.config_provider.enabled_lists()
        lists = [build_mailing_list(data, enabled) for data in raw_lists]
        self._store("lists", lists)
        return Result.success(lists)

    def get_custom_fields(self, use_cache: bool = True) -> Result:
        """Return the custom fields of the account, without the system ones."""
        if use_cache:
            cached = self._cached("custom_fields")
            if cached is not None:
                return Result.success(cached)

        api_key = self.config_provider.get_config().api_key
        if not api_key:
            return Result.success([])

        try:
            with self.transport_factory(api_key) as transport:
                data = transport.request("GET", "contacts/attributes")
        except TransportError as err:
            logger.error("There was a problem getting the custom fields: %s", err.message)
            return Result.failure(err.message)

        custom_fields = [
            build_custom_field(attribute)
            for attribute in (data or {}).get("attributes") or []
            if attribute.get("name") not in IGNORED_ATTRIBUTES
        ]
        self._store("custom_fields", custom_fields)
        return Result.success(custom_fields)
