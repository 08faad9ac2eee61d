"""Translate form and submission values into contact records."""

from datetime import date

from sendinblue_api.backends import ContactRecord

CUSTOM_FIELD_PREFIX = "custom_field__"


def _serialize(value):
    if isinstance(value, date):
        return value.isoformat()
    return value


def _is_empty(value):
    return value is None or value == "" or value == [] or value is False


def contact_from_form_values(values: dict) -> ContactRecord:
    """
    Build a contact from signup form values.

    `email` and `name` are read as is, every `custom_field__<id>` key becomes the
    `<id>` custom field. Empty values are skipped.
    """
    custom_fields = {
        key.removeprefix(CUSTOM_FIELD_PREFIX): _serialize(value)
        for key, value in values.items()
        if key.startswith(CUSTOM_FIELD_PREFIX) and not _is_empty(value)
    }
    return ContactRecord(
        email=(values.get("email") or "").strip(),
        name=values.get("name") or None,
        custom_fields=custom_fields,
    )


def list_ids_from_value(value) -> list[str]:
    """Return the selected list ids, from a single id or a collection of ids."""
    if _is_empty(value):
        return []
    if isinstance(value, str | int):
        return [str(value)]
    return [str(list_id) for list_id in value if list_id]


def contact_from_submission(data: dict, email_field: str, field_map: dict[str, str] | None = None) -> ContactRecord:
    """
    Build a contact from arbitrary submission data.

    Args:
        data: The submitted values
        email_field: Key of the email in the submitted values
        field_map: Sendinblue attribute name -> key of the submitted value

    """
    custom_fields = {}
    for attribute, key in (field_map or {}).items():
        value = data.get(key)
        if not _is_empty(value):
            custom_fields[attribute] = _serialize(value)

    return ContactRecord(
        email=str(data.get(email_field) or "").strip(),
        name=data.get("name") or None,
        custom_fields=custom_fields,
    )
