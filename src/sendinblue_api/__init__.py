"""Synchronize site visitors with Sendinblue contacts and lists."""

from django.utils.functional import LazyObject

from .handler import SendinblueApiHandler


class DefaultSendinblueApi(LazyObject):
    """Lazy object to handle the Sendinblue API backend."""

    def _setup(self):
        """Configure the backend."""
        self._wrapped = sendinblue_handler()


sendinblue_handler = SendinblueApiHandler()
sendinblue = DefaultSendinblueApi()
