# notifications/views.py
from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404
from django.shortcuts import redirect
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import TemplateView

from people.views.mixins import OrganizationRequiredMixin
from .models import Notification
from .services import (
    get_all_user_notifications,
    mark_all_as_read,
    mark_notification_as_dismissed,
    mark_notification_as_read,
)


class NotificationListView(OrganizationRequiredMixin, TemplateView):
    template_name = "notifications/notification_list.html"
    per_page = 20

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        try:
            page = int(self.request.GET.get("page", 1))
        except ValueError:
            page = 1
        ctx.update(get_all_user_notifications(self.request.user, page=page, limit=self.per_page))
        return ctx


class NotificationRespondView(LoginRequiredMixin, View):
    """POST فقط: تعليم الإشعار كمقروء أو تجاهله."""
    http_method_names = ["post"]
    action = "read"

    def post(self, request, pk):
        handler = mark_notification_as_read if self.action == "read" else mark_notification_as_dismissed
        try:
            handler(request.user, pk)
        except Notification.DoesNotExist:
            raise Http404("Notification not found.")
        next_url = request.POST.get("next")
        if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
            return redirect(next_url)
        return redirect("notifications:list")


class NotificationMarkAllReadView(OrganizationRequiredMixin, View):
    http_method_names = ["post"]

    def post(self, request):
        count = mark_all_as_read(request.user)
        messages.success(request, f"{count} notifications marked as read.")
        return redirect("notifications:list")
