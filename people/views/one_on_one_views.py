# people/views/one_on_one_views.py
from django.contrib import messages
from django.core.exceptions import PermissionDenied
from django.urls import reverse_lazy
from django.views.generic import CreateView, ListView

from base.access import get_person, is_admin_or_owner
from base.permissions import get_action_permission
from people.access import one_on_one_access_q
from people.forms import OneOnOneForm
from people.models import OneOnOne
from .mixins import OrganizationRequiredMixin


class OneOnOneListView(OrganizationRequiredMixin, ListView):
    template_name = "people/one_on_one_list.html"
    context_object_name = "one_on_ones"
    paginate_by = 25

    def get_queryset(self):
        user = self.request.user
        qs = OneOnOne.all_objects.select_related("manager", "report")
        if is_admin_or_owner(user):
            return qs.filter(organization_id=user.organization_id)
        me = get_person(user)
        if me is None:
            return qs.none()
        return qs.filter(one_on_one_access_q(user.organization_id, me.pk))


class OneOnOneCreateView(OrganizationRequiredMixin, CreateView):
    model = OneOnOne
    form_class = OneOnOneForm
    template_name = "people/one_on_one_form.html"
    success_url = reverse_lazy("people:one_on_one_list")

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated and request.user.organization_id:
            if not get_action_permission(request.user, "oneonone.create"):
                raise PermissionDenied("You cannot schedule one on ones.")
        return super().dispatch(request, *args, **kwargs)

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["organization_id"] = self.request.user.organization_id
        return kwargs

    def form_valid(self, form):
        user = self.request.user
        me = get_person(user)
        if not is_admin_or_owner(user) and not (me and form.instance.involves(me.pk)):
            form.add_error(None, "You can only schedule one on ones you take part in.")
            return self.form_invalid(form)
        messages.success(self.request, "One on one saved.")
        return super().form_valid(form)
