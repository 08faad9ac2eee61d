"""Configuration of the Sendinblue API integration."""

import os
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from sendinblue_api.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

DEFAULT_BACKEND = "sendinblue_api.backends.sendinblue.SendinblueBackend"


class ConfigSource(StrEnum):
    """Where the API key was found."""

    SECURE = "secure"
    STORED = "stored"


@dataclass(frozen=True)
class ApiConfig:
    """Resolved API configuration."""

    api_key: str | None
    source: ConfigSource

    @property
    def read_only(self) -> bool:
        """Keys coming from the secure source must not be edited from the admin."""
        return self.source == ConfigSource.SECURE


class ConfigProvider:
    """
    Resolve the API key and the enabled lists.

    The secure key (from settings or a secret file) wins over the key stored in
    the database. A missing key is not an error: it means the integration is
    disabled.
    """

    def __init__(self, secure_api_key: str | None = None):
        """Keep the key coming from the secure source, if any."""
        self._secure_api_key = secure_api_key or None

    def get_config(self) -> ApiConfig:
        """Return the API key along with its source."""
        if self._secure_api_key:
            return ApiConfig(api_key=self._secure_api_key, source=ConfigSource.SECURE)

        from sendinblue_api.models import StoredConfiguration  # noqa: PLC0415

        stored = StoredConfiguration.objects.filter(pk=1).values_list("api_key", flat=True).first()
        return ApiConfig(api_key=stored or None, source=ConfigSource.STORED)

    def enabled_lists(self) -> dict[str, bool]:
        """Return the local list authorization map, keyed by list id."""
        from sendinblue_api.models import EnabledList  # noqa: PLC0415

        return {str(list_id): enabled for list_id, enabled in EnabledList.objects.values_list("list_id", "enabled")}


def read_secret_file(filename: str) -> str:
    """Read a secret from a file, dropping the trailing newline."""
    if not os.path.exists(filename):
        raise ImproperlyConfigured(f"Path {filename!r} does not exist.")
    try:
        with open(filename) as file:
            return file.read().removesuffix("\n")
    except OSError as err:
        raise ImproperlyConfigured(f"Path {filename!r} cannot be read: {err!r}") from err


@dataclass(frozen=True)
class SendinblueApiSettings:
    """Validated content of `settings.SENDINBLUE_API`."""

    backend: str = DEFAULT_BACKEND
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    payload_mutators: tuple[Callable, ...] = ()
    default_attributes: dict = field(default_factory=dict)
    cache_alias: str = "default"

    ALLOWED_KEYS = frozenset(
        {
            "BACKEND",
            "API_KEY",
            "API_KEY_FILE",
            "BASE_URL",
            "TIMEOUT",
            "PAYLOAD_MUTATORS",
            "DEFAULT_ATTRIBUTES",
            "CACHE_ALIAS",
        }
    )

    @classmethod
    def from_settings(cls, raw: dict | None):
        """
        Validate the raw settings dictionary.

        Raises:
            ImproperlyConfigured: on unknown keys or invalid values.

        """
        raw = dict(raw or {})
        unknown = set(raw) - cls.ALLOWED_KEYS
        if unknown:
            raise ImproperlyConfigured(f"Unknown SENDINBLUE_API settings: {', '.join(sorted(unknown))}")

        api_key = raw.get("API_KEY") or None
        if raw.get("API_KEY_FILE"):
            api_key = read_secret_file(raw["API_KEY_FILE"]) or None

        timeout = raw.get("TIMEOUT", DEFAULT_TIMEOUT)
        if not isinstance(timeout, int | float) or isinstance(timeout, bool) or timeout <= 0:
            raise ImproperlyConfigured(f"SENDINBLUE_API['TIMEOUT'] must be a positive number, got {timeout!r}")

        default_attributes = raw.get("DEFAULT_ATTRIBUTES") or {}
        if not isinstance(default_attributes, dict):
            raise ImproperlyConfigured("SENDINBLUE_API['DEFAULT_ATTRIBUTES'] must be a dictionary")

        mutators = []
        for path in raw.get("PAYLOAD_MUTATORS") or []:
            try:
                mutators.append(import_string(path))
            except ImportError as err:
                raise ImproperlyConfigured(f"Could not import payload mutator {path!r}: {err}") from err

        return cls(
            backend=raw.get("BACKEND") or DEFAULT_BACKEND,
            api_key=api_key,
            base_url=raw.get("BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
            payload_mutators=tuple(mutators),
            default_attributes=default_attributes,
            cache_alias=raw.get("CACHE_ALIAS") or "default",
        )
