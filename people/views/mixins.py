# people/views/mixins.py
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.shortcuts import redirect
from django.utils.functional import cached_property

from base.access import get_person
from people.access import can_access_person_overview
from people.models import Person


class OrganizationRequiredMixin(LoginRequiredMixin):
    """المستخدم بلا مؤسسة يُحوَّل لإنشاء مؤسسة."""

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated and not request.user.organization_id:
            return redirect("base:organization_create")
        return super().dispatch(request, *args, **kwargs)


class PersonGateMixin(OrganizationRequiredMixin):
    """
    Gate a page about one person (``person_pk_kwarg`` in the URL):

    - unknown person, or one from another organization -> 404
    - current user has no linked person -> redirect to the people list
    - current user is neither that person nor one of their managers -> 403
    """
    person_pk_kwarg = "pk"

    @cached_property
    def target_person(self) -> Person:
        person = (
            Person.all_objects
            .select_related("manager", "team", "job_role")
            .filter(pk=self.kwargs[self.person_pk_kwarg], organization_id=self.request.user.organization_id)
            .first()
        )
        if person is None:
            raise Http404("Person not found.")
        return person

    def dispatch(self, request, *args, **kwargs):
        if not request.user.is_authenticated or not request.user.organization_id:
            return super().dispatch(request, *args, **kwargs)

        person = self.target_person
        if get_person(request.user) is None:
            return redirect("people:list")
        if not can_access_person_overview(request.user, person):
            raise PermissionDenied("Only this person or their managers can open this page.")
        return super().dispatch(request, *args, **kwargs)
