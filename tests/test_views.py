"""Test the Sendinblue API endpoints."""

from unittest import mock

import pytest
from rest_framework.test import APIClient

from sendinblue_api import views
from sendinblue_api.backends import ContactRecord, CustomFieldDefinition, FieldType, MailingList, Result

from .factories import EnabledListFactory

pytestmark = pytest.mark.django_db


def test_subscribe_success():
    """A contact posted to an enabled list is synchronized."""
    EnabledListFactory(list_id="3")
    with mock.patch.object(views, "sendinblue") as mock_sendinblue:
        mock_sendinblue.sync_contact.return_value = Result.success()

        response = APIClient().post(
            "/sendinblue_api/lists/3/subscribe/",
            {"email": "test@example.com", "name": "Jane", "custom_fields": {"FIRSTNAME": "Jane", "SMS": ""}},
            format="json",
        )

    assert response.status_code == 201
    assert response.json() == {"status": "subscribed"}
    mock_sendinblue.sync_contact.assert_called_once_with(
        ContactRecord(email="test@example.com", name="Jane", custom_fields={"FIRSTNAME": "Jane"}), ["3"]
    )


def test_subscribe_list_not_enabled():
    """Disabled or unknown lists are refused before calling Sendinblue."""
    EnabledListFactory(list_id="3", enabled=False)
    with mock.patch.object(views, "sendinblue") as mock_sendinblue:
        disabled = APIClient().post("/sendinblue_api/lists/3/subscribe/", {"email": "test@example.com"})
        unknown = APIClient().post("/sendinblue_api/lists/4/subscribe/", {"email": "test@example.com"})

    assert disabled.status_code == 403
    assert unknown.status_code == 403
    mock_sendinblue.sync_contact.assert_not_called()


def test_subscribe_invalid_email():
    """The posted email is validated."""
    EnabledListFactory(list_id="3")
    with mock.patch.object(views, "sendinblue") as mock_sendinblue:
        response = APIClient().post("/sendinblue_api/lists/3/subscribe/", {"email": "not-an-email"})

    assert response.status_code == 400
    assert "email" in response.json()
    mock_sendinblue.sync_contact.assert_not_called()


def test_subscribe_failure():
    """Failures return the generic message and the notices only."""
    EnabledListFactory(list_id="3")
    with mock.patch.object(views, "sendinblue") as mock_sendinblue:
        mock_sendinblue.sync_contact.return_value = Result.failure(
            "Invalid phone number", notices=["Invalid phone number."]
        )

        response = APIClient().post("/sendinblue_api/lists/3/subscribe/", {"email": "test@example.com"})

    assert response.status_code == 400
    assert response.json() == {
        "error": "There was a problem signing you up. Please try again later.",
        "notices": ["Invalid phone number."],
    }


def test_subscribe_failure_without_notice():
    """Raw remote errors are never sent back to visitors."""
    EnabledListFactory(list_id="3")
    with mock.patch.object(views, "sendinblue") as mock_sendinblue:
        mock_sendinblue.sync_contact.return_value = Result.failure("Key not found, unauthorized")

        response = APIClient().post("/sendinblue_api/lists/3/subscribe/", {"email": "test@example.com"})

    assert response.status_code == 400
    assert "Key not found" not in response.content.decode()
    assert response.json()["notices"] == []


def test_lists_requires_admin(client):
    """Anonymous users cannot list the lists."""
    response = client.get("/sendinblue_api/lists/")

    assert response.status_code == 403


def test_lists(admin_client):
    """Administrators get the lists, from the cache unless asked otherwise."""
    with mock.patch.object(views, "sendinblue") as mock_sendinblue:
        mock_sendinblue.get_lists.return_value = Result.success(
            [MailingList(id="3", name="News", enabled=True, folder_id=1, total_subscribers=12)]
        )

        response = admin_client.get("/sendinblue_api/lists/")
        admin_client.get("/sendinblue_api/lists/?refresh=1")

    assert response.status_code == 200
    assert response.json() == [
        {
            "id": "3",
            "name": "News",
            "enabled": True,
            "folder_id": 1,
            "unique_subscribers": None,
            "total_blacklisted": None,
            "total_subscribers": 12,
        }
    ]
    assert mock_sendinblue.get_lists.call_args_list == [mock.call(use_cache=True), mock.call(use_cache=False)]


def test_lists_failure(admin_client):
    """A remote failure is reported as a bad gateway."""
    with mock.patch.object(views, "sendinblue") as mock_sendinblue:
        mock_sendinblue.get_lists.return_value = Result.failure("Key not found")

        response = admin_client.get("/sendinblue_api/lists/")

    assert response.status_code == 502
    assert response.json() == {"error": "Key not found"}


def test_custom_fields(admin_client):
    """Administrators get the custom fields."""
    with mock.patch.object(views, "sendinblue") as mock_sendinblue:
        mock_sendinblue.get_custom_fields.return_value = Result.success(
            [CustomFieldDefinition(id="GENDER", label="GENDER", type=FieldType.SELECT, choices=["Female", "Male"])]
        )

        response = admin_client.get("/sendinblue_api/custom-fields/")

    assert response.status_code == 200
    assert response.json() == [
        {"id": "GENDER", "label": "GENDER", "type": "select", "required": False, "choices": ["Female", "Male"]}
    ]
    mock_sendinblue.get_custom_fields.assert_called_once_with(use_cache=True)
