"""Serializers for the Sendinblue API endpoints."""

from rest_framework import serializers

from sendinblue_api.backends import ContactRecord


class ContactSubmissionSerializer(serializers.Serializer):
    """Contact posted to the subscription endpoint."""

    email = serializers.EmailField()
    name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    custom_fields = serializers.DictField(child=serializers.CharField(allow_blank=True), required=False)

    def to_contact_record(self) -> ContactRecord:
        """Build the contact record from the validated data."""
        custom_fields = {key: value for key, value in self.validated_data.get("custom_fields", {}).items() if value}
        return ContactRecord(
            email=self.validated_data["email"],
            name=self.validated_data.get("name") or None,
            custom_fields=custom_fields,
        )


class MailingListSerializer(serializers.Serializer):
    """Read only representation of a mailing list."""

    id = serializers.CharField()
    name = serializers.CharField()
    enabled = serializers.BooleanField()
    folder_id = serializers.IntegerField(allow_null=True)
    unique_subscribers = serializers.IntegerField(allow_null=True)
    total_blacklisted = serializers.IntegerField(allow_null=True)
    total_subscribers = serializers.IntegerField(allow_null=True)


class CustomFieldSerializer(serializers.Serializer):
    """Read only representation of a custom field."""

    id = serializers.CharField()
    label = serializers.CharField()
    type = serializers.CharField()
    required = serializers.BooleanField()
    choices = serializers.ListField(child=serializers.CharField())
