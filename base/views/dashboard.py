# base/views/dashboard.py
from django.apps import apps
from django.contrib.auth.mixins import LoginRequiredMixin
from django.shortcuts import redirect
from django.views.generic import TemplateView

from base.access import get_person, is_admin_or_owner


class HomeView(LoginRequiredMixin, TemplateView):
    template_name = "home.html"

    def dispatch(self, request, *args, **kwargs):
        # مستخدم بلا مؤسسة يذهب لإنشاء واحدة
        if request.user.is_authenticated and not request.user.organization_id:
            return redirect("base:organization_create")
        return super().dispatch(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        user = self.request.user

        Person = apps.get_model("people", "Person")
        Task = apps.get_model("tasks", "Task")

        from tasks.access import task_access_q
        from notifications.services import get_unread_notification_count

        me = get_person(user)
        my_tasks = Task.all_objects.filter(
            task_access_q(user.organization_id, user.pk, me.pk if me else None)
        ).exclude(status__in=Task.CLOSED_STATUSES)

        ctx.update({
            "me": me,
            "people_count": Person.objects.filter(organization_id=user.organization_id).count(),
            "direct_reports": me.reports.order_by("name") if me else [],
            "open_tasks_count": my_tasks.count(),
            "recent_tasks": my_tasks.order_by("due_date", "-created_at")[:8],
            "unread_notifications": get_unread_notification_count(user),
            "is_admin": is_admin_or_owner(user),
        })
        return ctx
