"""Signup form subscribing visitors to Sendinblue lists."""

from django import forms
from django.contrib import messages
from django.utils.translation import gettext_lazy as _

from sendinblue_api.adapters import CUSTOM_FIELD_PREFIX, contact_from_form_values, list_ids_from_value
from sendinblue_api.backends import FieldType
from sendinblue_api.backends.sendinblue import PHONE_NUMBER_HINT

SIGNUP_ERROR_MESSAGE = _("There was a problem signing you up. Please try again later.")
SIGNUP_SUCCESS_MESSAGE = _("You have been signed up. Thank you.")


def build_custom_form_field(definition):
    """Return the form field matching a custom field definition."""
    options = {"label": definition.label, "required": definition.required}
    if definition.type == FieldType.NUMBER:
        return forms.FloatField(**options)
    if definition.type == FieldType.DATE:
        return forms.DateField(**options)
    if definition.type == FieldType.SELECT:
        choices = [("", "---------"), *((choice, choice) for choice in definition.choices)]
        return forms.ChoiceField(choices=choices, **options)
    if definition.id == "SMS":
        options["help_text"] = PHONE_NUMBER_HINT
    return forms.CharField(max_length=255, **options)


class SignupForm(forms.Form):
    """
    Collect a visitor email, name and custom fields.

    The targeted lists are either fixed (`list_ids`) or picked by the visitor
    among `selectable_lists`.
    """

    email = forms.EmailField(label=_("Email"))
    name = forms.CharField(label=_("Name"), max_length=255, required=False)

    def __init__(
        self,
        *args,
        list_ids=(),
        selectable_lists=None,
        custom_fields=(),
        success_message=None,
        backend=None,
        **kwargs,
    ):
        """Add the custom fields and the list selection to the form."""
        super().__init__(*args, **kwargs)
        self.list_ids = list_ids_from_value(list_ids)
        self.success_message = success_message or SIGNUP_SUCCESS_MESSAGE
        self._backend = backend

        for definition in custom_fields:
            self.fields[f"{CUSTOM_FIELD_PREFIX}{definition.id}"] = build_custom_form_field(definition)

        if selectable_lists:
            self.fields["list_id"] = forms.MultipleChoiceField(
                label=_("Sign me up for:"),
                choices=[(mailing_list.id, mailing_list.name) for mailing_list in selectable_lists],
                widget=forms.CheckboxSelectMultiple,
            )

    @property
    def backend(self):
        """Return the backend, the default one unless given."""
        if self._backend is None:
            from sendinblue_api import sendinblue  # noqa: PLC0415

            self._backend = sendinblue
        return self._backend

    def selected_list_ids(self):
        """Return the lists the contact must be subscribed to."""
        if "list_id" in self.fields:
            return list_ids_from_value(self.cleaned_data.get("list_id"))
        return self.list_ids

    def submit(self, request):
        """
        Synchronize the contact and report the outcome to the visitor.

        Must be called on a valid form.
        """
        record = contact_from_form_values(self.cleaned_data)
        result = self.backend.sync_contact(record, self.selected_list_ids())

        if result.ok:
            messages.success(request, self.success_message)
        else:
            messages.error(request, SIGNUP_ERROR_MESSAGE)
            for notice in result.notices:
                messages.error(request, notice)
        return result
