# people/views/person_views.py
import logging

from django.contrib import messages
from django.core.exceptions import PermissionDenied
from django.db.models import Q
from django.urls import reverse
from django.views.generic import CreateView, ListView, TemplateView, UpdateView

from base.access import get_person, is_admin_or_owner
from people.access import can_access_person_overview, can_edit_person
from people.forms import PersonForm
from people.grouping import GROUPING_OPTIONS, group_people
from people.hierarchy import HierarchyCycleError, manager_chain
from people.models import OneOnOne, Person
from .mixins import OrganizationRequiredMixin, PersonGateMixin

logger = logging.getLogger(__name__)


class PersonListView(OrganizationRequiredMixin, ListView):
    """
    دليل الأشخاص داخل المؤسسة، مع التجميع عبر ?group=
    (manager / team / status / job_role / none).
    """
    template_name = "people/person_list.html"
    context_object_name = "people"
    default_grouping = "manager"

    def get_grouping(self) -> str:
        option = self.request.GET.get("group") or self.default_grouping
        return option if option in GROUPING_OPTIONS else self.default_grouping

    def get_queryset(self):
        qs = (
            Person.all_objects
            .filter(organization_id=self.request.user.organization_id)
            .select_related("manager", "team", "job_role")
        )
        q = self.request.GET.get("q")
        if q:
            qs = qs.filter(Q(name__icontains=q) | Q(email__icontains=q))
        status = self.request.GET.get("status")
        if status in Person.Status.values:
            qs = qs.filter(status=status)
        return qs.order_by("name")

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        grouping = self.get_grouping()
        ctx.update({
            "grouping": grouping,
            "grouping_options": GROUPING_OPTIONS,
            "groups": group_people(ctx["people"], grouping),
            "me": get_person(self.request.user),
            "can_create": is_admin_or_owner(self.request.user),
        })
        return ctx


class PersonOverviewView(PersonGateMixin, TemplateView):
    template_name = "people/person_overview.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        person = self.target_person

        try:
            chain_ids = manager_chain(person.pk)
        except HierarchyCycleError as exc:
            logger.error("Broken manager chain for person %s: %s", person.pk, exc)
            chain_ids = []
        managers = {p.pk: p for p in Person.all_objects.filter(pk__in=chain_ids)}

        ctx.update({
            "person": person,
            "manager_chain": [managers[pk] for pk in chain_ids if pk in managers],
            "direct_reports": person.reports.order_by("name"),
            "one_on_ones": (
                OneOnOne.all_objects
                .filter(Q(manager=person) | Q(report=person))
                .select_related("manager", "report")
                .order_by("-scheduled_at")[:10]
            ),
            "can_edit": can_edit_person(self.request.user, person),
        })
        return ctx


class PersonCreateView(OrganizationRequiredMixin, CreateView):
    model = Person
    form_class = PersonForm
    template_name = "people/person_form.html"

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated and request.user.organization_id and not is_admin_or_owner(request.user):
            raise PermissionDenied("Only organization admins can add people.")
        return super().dispatch(request, *args, **kwargs)

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["organization_id"] = self.request.user.organization_id
        return kwargs

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info("Person %s created by user %s", self.object.pk, self.request.user.pk)
        messages.success(self.request, "Person created.")
        return response

    def get_success_url(self):
        return reverse("people:list")


class PersonUpdateView(OrganizationRequiredMixin, UpdateView):
    model = Person
    form_class = PersonForm
    template_name = "people/person_form.html"
    context_object_name = "person"

    def get_queryset(self):
        return Person.all_objects.filter(organization_id=self.request.user.organization_id)

    def get_object(self, queryset=None):
        obj = super().get_object(queryset)
        if not can_edit_person(self.request.user, obj):
            raise PermissionDenied("You cannot edit this person.")
        return obj

    def form_valid(self, form):
        if "manager" in form.changed_data:
            logger.info(
                "Person %s manager changed to %s by user %s",
                form.instance.pk, form.instance.manager_id, self.request.user.pk,
            )
        messages.success(self.request, "Person updated.")
        return super().form_valid(form)

    def get_success_url(self):
        if can_access_person_overview(self.request.user, self.object):
            return reverse("people:overview", args=[self.object.pk])
        return reverse("people:list")
