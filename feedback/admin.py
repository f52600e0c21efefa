# feedback/admin.py
from django.contrib import admin

from base.admin_mixins import AppAdmin
from .models import FeedbackCampaign


@admin.register(FeedbackCampaign)
class FeedbackCampaignAdmin(AppAdmin):
    list_display = ("name", "target_person", "user", "status", "start_date", "end_date", "organization")
    list_filter = ("organization", "status")
    search_fields = ("name", "target_person__name")
    autocomplete_fields = ("target_person", "user")
