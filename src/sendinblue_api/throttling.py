"""Throttling for the public subscription endpoint."""

from logging import getLogger

from django.conf import settings
from django.utils.module_loading import import_string
from rest_framework.throttling import ScopedRateThrottle

logger = getLogger("sendinblue_api.throttling")


def simple_logger_throttle_failure(message):
    """Log a warning message when a throttle fails."""
    logger.warning(message)


def monitored_throttle_failure(message):
    """Import custom callback if existing or use the simple logger."""
    callback_path = getattr(settings, "SENDINBLUE_API_THROTTLE_FAILURE_CALLBACK", None)
    if callback_path is None:
        simple_logger_throttle_failure(message)
        return

    callback = import_string(callback_path)
    callback(message)


class SubscriptionRateThrottle(ScopedRateThrottle):
    """Scoped rate throttle reporting visitors flooding the signup endpoint."""

    def throttle_failure(self):
        """Log when a failure occurs to detect signup flooding."""
        monitored_throttle_failure(f"Rate limit exceeded for scope {self.scope}, client {self.get_ident(self.request)}")
        return super().throttle_failure()

    def allow_request(self, request, view):
        """Keep the request to report the client on failure."""
        self.request = request
        return super().allow_request(request, view)
