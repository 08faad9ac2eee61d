"""API views of the Sendinblue API application."""

from rest_framework import exceptions, status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from sendinblue_api import sendinblue
from sendinblue_api.forms import SIGNUP_ERROR_MESSAGE
from sendinblue_api.models import EnabledList
from sendinblue_api.serializers import ContactSubmissionSerializer, CustomFieldSerializer, MailingListSerializer
from sendinblue_api.throttling import SubscriptionRateThrottle


def _use_cache(request):
    return request.query_params.get("refresh", "").lower() not in ("1", "true", "yes")


class ContactSubscriptionView(APIView):
    """
    Subscribe a visitor to an enabled list.

    Anonymous visitors may post here, so only lists enabled by an administrator
    are reachable and the raw Sendinblue errors are never sent back.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [SubscriptionRateThrottle]
    throttle_scope = "sendinblue_subscription"

    def post(self, request, list_id):
        """Synchronize the posted contact with the list."""
        if not EnabledList.objects.filter(list_id=list_id, enabled=True).exists():
            raise exceptions.PermissionDenied("This list is not enabled or does not exist.")

        serializer = ContactSubmissionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = sendinblue.sync_contact(serializer.to_contact_record(), [list_id])
        if not result.ok:
            return Response(
                {"error": str(SIGNUP_ERROR_MESSAGE), "notices": list(result.notices)},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response({"status": "subscribed"}, status=status.HTTP_201_CREATED)


class MailingListView(APIView):
    """List the contact lists of the account. `?refresh=1` bypasses the cache."""

    permission_classes = [IsAdminUser]

    def get(self, request):
        """Return the lists along with their enabled flag."""
        result = sendinblue.get_lists(use_cache=_use_cache(request))
        if not result.ok:
            return Response({"error": result.error}, status=status.HTTP_502_BAD_GATEWAY)
        return Response(MailingListSerializer(result.value, many=True).data)


class CustomFieldListView(APIView):
    """List the custom fields available for the account. `?refresh=1` bypasses the cache."""

    permission_classes = [IsAdminUser]

    def get(self, request):
        """Return the custom fields."""
        result = sendinblue.get_custom_fields(use_cache=_use_cache(request))
        if not result.ok:
            return Response({"error": result.error}, status=status.HTTP_502_BAD_GATEWAY)
        return Response(CustomFieldSerializer(result.value, many=True).data)
