"""Database backed configuration for the Sendinblue API application."""

from django.db import models


class StoredConfiguration(models.Model):
    """
    Editable API configuration saved in the database.

    Only one row is ever used. A key provided through settings takes precedence
    over this one.
    """

    api_key = models.CharField("API key", max_length=255, blank=True)
    updated_at = models.DateTimeField("updated at", auto_now=True)

    class Meta:  # noqa: D106
        verbose_name = "Sendinblue API configuration"
        verbose_name_plural = "Sendinblue API configuration"

    def __str__(self):
        """Return a string representation of the configuration."""
        return "Sendinblue API configuration"

    def save(self, *args, **kwargs):
        """Always save the single configuration row."""
        self.pk = 1
        super().save(*args, **kwargs)


class EnabledList(models.Model):
    """Sendinblue contact list that public forms are allowed to target."""

    list_id = models.CharField("list id", max_length=64, unique=True)
    name = models.CharField("name", max_length=255, blank=True)
    enabled = models.BooleanField("enabled", default=False)

    class Meta:  # noqa: D106
        ordering = ["list_id"]
        verbose_name = "enabled list"
        verbose_name_plural = "enabled lists"

    def __str__(self):
        """Return a string representation of the list."""
        return self.name or self.list_id
