# notifications/admin.py
from django.contrib import admin

from base.admin_mixins import AppAdmin
from .models import Notification, NotificationResponse


class NotificationResponseInline(admin.TabularInline):
    model = NotificationResponse
    extra = 0
    readonly_fields = ("read_at", "dismissed_at")


@admin.register(Notification)
class NotificationAdmin(AppAdmin):
    list_display = ("title", "organization", "user", "type", "created_at")
    list_filter = ("organization", "type")
    search_fields = ("title", "message", "deduplication_key")
    inlines = [NotificationResponseInline]
