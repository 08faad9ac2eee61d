"""URL configuration of the Sendinblue API application."""

from django.urls import path

from sendinblue_api import views

app_name = "sendinblue_api"

urlpatterns = [
    path("lists/", views.MailingListView.as_view(), name="lists"),
    path("lists/<str:list_id>/subscribe/", views.ContactSubscriptionView.as_view(), name="subscribe"),
    path("custom-fields/", views.CustomFieldListView.as_view(), name="custom-fields"),
]
