# tasks/forms.py
from django import forms

from people.forms import OrganizationModelForm
from .models import Initiative, Task
from .priority import detect_priorities_in_text


class TaskForm(OrganizationModelForm):
    """
    Inline markers in the title (``Ship release !p1``) set the priority and
    are removed from the saved title.
    """
    class Meta:
        model = Task
        fields = [
            "title", "description", "assignee", "initiative", "objective",
            "status", "priority", "due_date",
        ]
        widgets = {
            "due_date": forms.DateTimeInput(attrs={"type": "datetime-local"}),
        }

    def clean(self):
        cleaned = super().clean()
        title = cleaned.get("title")
        if title:
            result = detect_priorities_in_text(title)
            if result.detected:
                if not result.cleaned_text:
                    self.add_error("title", "Title cannot consist only of a priority marker.")
                    return cleaned
                cleaned["title"] = result.cleaned_text
                cleaned["priority"] = int(result.priority)
        return cleaned


class InitiativeForm(OrganizationModelForm):
    class Meta:
        model = Initiative
        fields = ["title", "summary", "status", "owner"]
