"""Sendinblue API tasks module."""

import logging

from celery import shared_task

from sendinblue_api import sendinblue

logger = logging.getLogger(__name__)


@shared_task
def refresh_lists():
    """Fetch the contact lists again and overwrite the cached ones."""
    result = sendinblue.get_lists(use_cache=False)
    if not result.ok:
        logger.error("Refreshing the Sendinblue lists failed: %s", result.error)
        return None
    return len(result.value)


@shared_task
def refresh_custom_fields():
    """Fetch the custom fields again and overwrite the cached ones."""
    result = sendinblue.get_custom_fields(use_cache=False)
    if not result.ok:
        logger.error("Refreshing the Sendinblue custom fields failed: %s", result.error)
        return None
    return len(result.value)
