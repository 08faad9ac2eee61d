"""Sendinblue API application configuration."""

from django.apps import AppConfig


class SendinblueApiConfig(AppConfig):
    """Configuration class for the Sendinblue API app."""

    name = "sendinblue_api"
    verbose_name = "Sendinblue API"
    default_auto_field = "django.db.models.BigAutoField"
