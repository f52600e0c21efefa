# base/views/organization_views.py
import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import PermissionDenied, ValidationError
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.views.generic import FormView, ListView

from base.access import is_admin_or_owner
from base.forms import OrganizationCreateForm
from base.models import OrganizationMember
from base.services import create_organization

logger = logging.getLogger(__name__)


class OrganizationCreateView(LoginRequiredMixin, FormView):
    template_name = "base/organization_form.html"
    form_class = OrganizationCreateForm
    success_url = reverse_lazy("base:home")

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated and request.user.organization_id:
            return redirect("base:home")
        return super().dispatch(request, *args, **kwargs)

    def form_valid(self, form):
        try:
            org = create_organization(
                user=self.request.user,
                name=form.cleaned_data["name"],
                slug=form.cleaned_data["slug"],
                description=form.cleaned_data.get("description", ""),
            )
        except ValidationError as exc:
            form.add_error(None, exc)
            return self.form_invalid(form)
        messages.success(self.request, f"Organization “{org.name}” created.")
        return super().form_valid(form)


class MemberListView(LoginRequiredMixin, ListView):
    """أعضاء المؤسسة الحالية (للمدراء فقط)."""
    template_name = "base/member_list.html"
    context_object_name = "members"

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated and not is_admin_or_owner(request.user):
            raise PermissionDenied("Only organization admins can manage members.")
        return super().dispatch(request, *args, **kwargs)

    def get_queryset(self):
        return (
            OrganizationMember.objects
            .filter(organization_id=self.request.user.organization_id)
            .select_related("user")
            .order_by("user__email")
        )
