# people/forms.py
from django import forms

from .models import JobRole, OneOnOne, Person, Team


class OrganizationModelForm(forms.ModelForm):
    """
    Pins ``instance.organization`` before validation and limits every FK
    choice to the same organization, so ``Model.clean`` sees a complete
    instance.
    """
    def __init__(self, *args, organization_id=None, **kwargs):
        super().__init__(*args, **kwargs)
        if organization_id and not self.instance.organization_id:
            self.instance.organization_id = organization_id
        org_id = self.instance.organization_id
        for field in self.fields.values():
            qs = getattr(field, "queryset", None)
            if qs is None:
                continue
            if any(f.name == "organization" for f in qs.model._meta.get_fields()):
                field.queryset = qs.model.all_objects.filter(organization_id=org_id)


class PersonForm(OrganizationModelForm):
    class Meta:
        model = Person
        fields = [
            "name", "email", "manager", "team", "job_role",
            "status", "employee_type", "birthday", "start_date",
        ]
        widgets = {
            "birthday": forms.DateInput(attrs={"type": "date"}),
            "start_date": forms.DateInput(attrs={"type": "date"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # لا يمكن اختيار الشخص نفسه كمدير
        if self.instance.pk:
            self.fields["manager"].queryset = self.fields["manager"].queryset.exclude(pk=self.instance.pk)


class TeamForm(OrganizationModelForm):
    class Meta:
        model = Team
        fields = ["name", "description", "parent"]


class JobRoleForm(OrganizationModelForm):
    class Meta:
        model = JobRole
        fields = ["title", "level", "description"]


class OneOnOneForm(OrganizationModelForm):
    class Meta:
        model = OneOnOne
        fields = ["manager", "report", "scheduled_at", "notes"]
        widgets = {
            "scheduled_at": forms.DateTimeInput(attrs={"type": "datetime-local"}),
        }
