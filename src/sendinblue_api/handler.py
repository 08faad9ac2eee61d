"""Sendinblue API backend handler."""

from django.conf import settings
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from sendinblue_api.configuration import SendinblueApiSettings
from sendinblue_api.exceptions import SendinblueInvalidBackendError


class SendinblueApiHandler:
    """Handler managing the backend instantiation."""

    def __init__(self, backend=None):
        """Initialize the handler."""
        # backend is an optional dict structured like settings.SENDINBLUE_API
        self._backend = backend
        self._sendinblue = None

    @cached_property
    def api_settings(self) -> SendinblueApiSettings:
        """Validate and cache the settings."""
        if self._backend is None:
            self._backend = getattr(settings, "SENDINBLUE_API", None) or {}
        return SendinblueApiSettings.from_settings(self._backend)

    def __call__(self):
        """Create if not existing the backend and then return it."""
        if self._sendinblue is None:
            self._sendinblue = self.create_backend(self.api_settings)
        return self._sendinblue

    def create_backend(self, api_settings):
        """Instantiate and configure the backend."""
        try:
            klass = import_string(api_settings.backend)
        except ImportError as e:
            raise SendinblueInvalidBackendError(f"Could not find backend {api_settings.backend!r}: {e}") from e
        return klass.from_settings(api_settings)
