# tolerance/forms.py
from django import forms
from django.core.exceptions import ValidationError

from .models import ToleranceRule


class MaxReportsConfigForm(forms.Form):
    max_reports = forms.IntegerField(min_value=1)


class ManagerSpanConfigForm(forms.Form):
    max_direct_reports = forms.IntegerField(min_value=1)


class OneOnOneFrequencyConfigForm(forms.Form):
    warning_threshold_days = forms.IntegerField(min_value=1)
    urgent_threshold_days = forms.IntegerField(min_value=1)
    only_full_time_employees = forms.BooleanField(required=False)

    def clean(self):
        cleaned = super().clean()
        warning = cleaned.get("warning_threshold_days")
        urgent = cleaned.get("urgent_threshold_days")
        if warning and urgent and urgent < warning:
            raise ValidationError("Urgent threshold must be greater than or equal to the warning threshold.")
        return cleaned


CONFIG_FORMS = {
    ToleranceRule.RuleType.MAX_REPORTS: MaxReportsConfigForm,
    ToleranceRule.RuleType.MANAGER_SPAN: ManagerSpanConfigForm,
    ToleranceRule.RuleType.ONE_ON_ONE_FREQUENCY: OneOnOneFrequencyConfigForm,
}


def validate_rule_config(rule_type, config) -> dict:
    """Return the cleaned config or raise a non-field ``ValidationError``."""
    form_class = CONFIG_FORMS.get(rule_type)
    if form_class is None:
        raise ValidationError({"rule_type": f"Unknown rule type: {rule_type}"})
    if config is not None and not isinstance(config, dict):
        raise ValidationError("Rule config must be an object.")
    form = form_class(data=config or {})
    if not form.is_valid():
        errors = [
            f"{field}: {message}" if field != "__all__" else message
            for field, messages in form.errors.items()
            for message in messages
        ]
        raise ValidationError(errors)
    return dict(form.cleaned_data)


class ToleranceRuleForm(forms.ModelForm):
    """
    Rule editor: the config keys are edited as extra fields and merged into
    ``config`` before model validation.
    """
    max_reports = forms.IntegerField(min_value=1, required=False)
    max_direct_reports = forms.IntegerField(min_value=1, required=False)
    warning_threshold_days = forms.IntegerField(min_value=1, required=False)
    urgent_threshold_days = forms.IntegerField(min_value=1, required=False)
    only_full_time_employees = forms.BooleanField(required=False)

    CONFIG_FIELDS = (
        "max_reports", "max_direct_reports",
        "warning_threshold_days", "urgent_threshold_days", "only_full_time_employees",
    )

    class Meta:
        model = ToleranceRule
        fields = ["name", "description", "rule_type", "enabled"]

    def __init__(self, *args, organization_id=None, **kwargs):
        super().__init__(*args, **kwargs)
        if organization_id and not self.instance.organization_id:
            self.instance.organization_id = organization_id
        for key, value in (self.instance.config or {}).items():
            if key in self.CONFIG_FIELDS:
                self.initial.setdefault(key, value)

    def clean(self):
        cleaned = super().clean()
        rule_type = cleaned.get("rule_type")
        form_class = CONFIG_FORMS.get(rule_type)
        if form_class is None:
            return cleaned
        raw = {name: cleaned.get(name) for name in form_class.base_fields if cleaned.get(name) is not None}
        try:
            self.instance.config = validate_rule_config(rule_type, raw)
        except ValidationError as exc:
            for message in exc.messages:
                self.add_error(None, message)
        return cleaned
