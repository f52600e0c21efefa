# base/forms/organization_forms.py
from django import forms
from django.utils.text import slugify

from ..models import Organization, OrganizationMember


class OrganizationCreateForm(forms.Form):
    name = forms.CharField(max_length=255)
    slug = forms.SlugField(max_length=64, required=False,
                           help_text="Leave empty to derive it from the name.")
    description = forms.CharField(widget=forms.Textarea, required=False)

    def clean(self):
        cleaned = super().clean()
        name = (cleaned.get("name") or "").strip()
        slug = slugify(cleaned.get("slug") or name)
        if not slug:
            raise forms.ValidationError("Name must contain letters or digits.")
        if Organization.objects.filter(slug=slug).exists():
            self.add_error("slug", "Slug already in use.")
        if Organization.objects.filter(name__iexact=name).exists():
            self.add_error("name", "An organization with this name already exists.")
        cleaned["slug"] = slug
        return cleaned


class MemberRoleForm(forms.ModelForm):
    class Meta:
        model = OrganizationMember
        fields = ["role"]
