"""Admin of the Sendinblue API configuration."""

from django.contrib import admin, messages
from django.http import HttpResponseNotAllowed, HttpResponseRedirect
from django.urls import path, reverse

from sendinblue_api import sendinblue
from sendinblue_api.models import EnabledList, StoredConfiguration


@admin.register(StoredConfiguration)
class StoredConfigurationAdmin(admin.ModelAdmin):
    """Edit the API key, unless it is provided by the settings."""

    list_display = ("__str__", "updated_at")

    def get_readonly_fields(self, request, obj=None):
        """Lock the key when the settings already provide one."""
        if sendinblue.get_config().read_only:
            return ("api_key", "updated_at")
        return ("updated_at",)

    def has_add_permission(self, request):
        """Only one configuration row exists."""
        return not StoredConfiguration.objects.exists()


@admin.register(EnabledList)
class EnabledListAdmin(admin.ModelAdmin):
    """Choose the lists public forms are allowed to subscribe visitors to."""

    list_display = ("list_id", "name", "enabled")
    list_editable = ("enabled",)
    search_fields = ("list_id", "name")

    def get_urls(self):
        """Add the view fetching the lists from Sendinblue."""
        urls = [
            path(
                "refresh/",
                self.admin_site.admin_view(self.refresh_view),
                name="sendinblue_api_enabledlist_refresh",
            ),
        ]
        return urls + super().get_urls()

    def save_model(self, request, obj, form, change):
        """Drop the cached lists so their enabled flag is computed again."""
        super().save_model(request, obj, form, change)
        sendinblue.invalidate("lists")

    def delete_model(self, request, obj):
        """Drop the cached lists so their enabled flag is computed again."""
        super().delete_model(request, obj)
        sendinblue.invalidate("lists")

    def delete_queryset(self, request, queryset):
        """Drop the cached lists after a bulk deletion."""
        super().delete_queryset(request, queryset)
        sendinblue.invalidate("lists")

    def refresh_view(self, request):
        """Fetch the lists again and record the new ones, disabled."""
        if request.method != "POST":
            return HttpResponseNotAllowed(["POST"])

        changelist_url = reverse("admin:sendinblue_api_enabledlist_changelist")
        if not self.has_add_permission(request) or not self.has_change_permission(request):
            self.message_user(request, "You cannot refresh the lists.", messages.ERROR)
            return HttpResponseRedirect(changelist_url)

        result = sendinblue.get_lists(use_cache=False)
        if not result.ok:
            self.message_user(request, f"Could not fetch the lists: {result.error}", messages.ERROR)
            return HttpResponseRedirect(changelist_url)

        created = 0
        for mailing_list in result.value:
            _obj, was_created = EnabledList.objects.update_or_create(
                list_id=mailing_list.id, defaults={"name": mailing_list.name}
            )
            created += was_created
        self.message_user(request, f"{len(result.value)} lists fetched, {created} new.", messages.SUCCESS)
        return HttpResponseRedirect(changelist_url)
