# feedback/forms.py
from django import forms
from django.core.validators import validate_email

from .models import FeedbackCampaign


class FeedbackCampaignForm(forms.ModelForm):
    invitees = forms.CharField(
        widget=forms.Textarea(attrs={"rows": 4}),
        required=False,
        help_text="One email per line (or comma separated).",
    )

    class Meta:
        model = FeedbackCampaign
        fields = ["name", "status", "start_date", "end_date"]
        widgets = {
            "start_date": forms.DateInput(attrs={"type": "date"}),
            "end_date": forms.DateInput(attrs={"type": "date"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.invitee_emails:
            self.initial.setdefault("invitees", "\n".join(self.instance.invitee_emails))

    def clean_invitees(self):
        raw = self.cleaned_data.get("invitees") or ""
        emails = [e.strip().lower() for e in raw.replace(",", "\n").splitlines() if e.strip()]
        for email in emails:
            try:
                validate_email(email)
            except forms.ValidationError:
                raise forms.ValidationError(f"Invalid email: {email}")
        return emails

    def _post_clean(self):
        self.instance.invitee_emails = self.cleaned_data.get("invitees", [])
        super()._post_clean()
