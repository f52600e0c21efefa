# feedback/views/campaigns.py
import logging

from django.contrib import messages
from django.core.exceptions import PermissionDenied
from django.shortcuts import get_object_or_404
from django.urls import reverse
from django.views.generic import CreateView, DetailView, ListView

from feedback.access import campaign_access_q, can_manage_campaign
from feedback.forms import FeedbackCampaignForm
from feedback.models import FeedbackCampaign
from people.views.mixins import PersonGateMixin

logger = logging.getLogger(__name__)


class PersonCampaignListView(PersonGateMixin, ListView):
    """حملات الشخص التي أنشأها المستخدم الحالي."""
    template_name = "feedback/campaign_list.html"
    context_object_name = "campaigns"

    def get_queryset(self):
        user = self.request.user
        return (
            FeedbackCampaign.all_objects
            .filter(campaign_access_q(user.organization_id, user.pk), target_person=self.target_person)
            .order_by("-created_at")
        )

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["person"] = self.target_person
        return ctx


class PersonCampaignCreateView(PersonGateMixin, CreateView):
    model = FeedbackCampaign
    form_class = FeedbackCampaignForm
    template_name = "feedback/campaign_form.html"

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["instance"] = FeedbackCampaign(
            organization_id=self.request.user.organization_id,
            target_person=self.target_person,
            user=self.request.user,
        )
        return kwargs

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(
            "Feedback campaign %s for person %s created by user %s",
            self.object.pk, self.target_person.pk, self.request.user.pk,
        )
        messages.success(self.request, "Feedback campaign created.")
        return response

    def get_success_url(self):
        return reverse("feedback:campaign_detail", args=[self.target_person.pk, self.object.pk])

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["person"] = self.target_person
        return ctx


class PersonCampaignDetailView(PersonGateMixin, DetailView):
    template_name = "feedback/campaign_detail.html"
    context_object_name = "campaign"
    person_pk_kwarg = "person_pk"

    def get_object(self, queryset=None):
        campaign = get_object_or_404(
            FeedbackCampaign.all_objects,
            pk=self.kwargs["pk"],
            target_person=self.target_person,
        )
        if not can_manage_campaign(self.request.user, campaign):
            raise PermissionDenied("Only the campaign creator can open it.")
        return campaign

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["person"] = self.target_person
        return ctx
