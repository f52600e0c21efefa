# tasks/views/tasks.py
import logging

from django.contrib import messages
from django.core.exceptions import PermissionDenied
from django.urls import reverse, reverse_lazy
from django.views.generic import CreateView, DeleteView, DetailView, ListView, UpdateView

from base.access import get_person
from base.permissions import get_action_permission
from people.views.mixins import OrganizationRequiredMixin
from tasks.access import can_delete_task, can_edit_task, can_view_task, visible_tasks_for
from tasks.forms import TaskForm
from tasks.models import Task

logger = logging.getLogger(__name__)


class TaskObjectMixin:
    """
    Load a task of the current organization and check access:
    missing or foreign -> 404, visible but not allowed -> 403.
    """
    access_check = staticmethod(can_view_task)

    def get_queryset(self):
        return Task.all_objects.filter(organization_id=self.request.user.organization_id).select_related(
            "assignee", "created_by", "initiative", "objective",
        )

    def get_object(self, queryset=None):
        task = super().get_object(queryset)
        if not self.access_check(self.request.user, task):
            raise PermissionDenied("You do not have access to this task.")
        return task


class MyTasksView(OrganizationRequiredMixin, ListView):
    """المهام التي أنشأها المستخدم أو المكلّف بها."""
    template_name = "tasks/task_list.html"
    context_object_name = "tasks"
    paginate_by = 25

    def get_queryset(self):
        qs = visible_tasks_for(self.request.user).select_related("assignee", "initiative")
        scope = self.request.GET.get("scope", "open")
        if scope == "open":
            qs = qs.exclude(status__in=Task.CLOSED_STATUSES)
        elif scope in Task.Status.values:
            qs = qs.filter(status=scope)
        return qs.order_by("priority", "due_date", "-created_at")

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["scope"] = self.request.GET.get("scope", "open")
        ctx["can_create"] = get_action_permission(self.request.user, "task.create")
        return ctx


class TaskDetailView(OrganizationRequiredMixin, TaskObjectMixin, DetailView):
    template_name = "tasks/task_detail.html"
    context_object_name = "task"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["can_edit"] = can_edit_task(self.request.user, self.object)
        ctx["can_delete"] = can_delete_task(self.request.user, self.object)
        return ctx


class TaskCreateView(OrganizationRequiredMixin, CreateView):
    model = Task
    form_class = TaskForm
    template_name = "tasks/task_form.html"

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated and request.user.organization_id:
            if not get_action_permission(request.user, "task.create"):
                raise PermissionDenied("You cannot create tasks.")
        return super().dispatch(request, *args, **kwargs)

    def get_initial(self):
        initial = super().get_initial()
        me = get_person(self.request.user)
        if me:
            initial.setdefault("assignee", me.pk)
        return initial

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["organization_id"] = self.request.user.organization_id
        return kwargs

    def form_valid(self, form):
        form.instance.created_by = self.request.user
        response = super().form_valid(form)
        logger.info("Task %s created by user %s", self.object.pk, self.request.user.pk)
        messages.success(self.request, "Task created.")
        return response

    def get_success_url(self):
        return reverse("tasks:detail", args=[self.object.pk])


class TaskUpdateView(OrganizationRequiredMixin, TaskObjectMixin, UpdateView):
    form_class = TaskForm
    template_name = "tasks/task_form.html"
    context_object_name = "task"
    access_check = staticmethod(can_edit_task)

    def form_valid(self, form):
        messages.success(self.request, "Task updated.")
        return super().form_valid(form)

    def get_success_url(self):
        return reverse("tasks:detail", args=[self.object.pk])


class TaskDeleteView(OrganizationRequiredMixin, TaskObjectMixin, DeleteView):
    template_name = "tasks/task_confirm_delete.html"
    context_object_name = "task"
    success_url = reverse_lazy("tasks:list")
    access_check = staticmethod(can_delete_task)

    def form_valid(self, form):
        logger.info("Task %s deleted by user %s", self.object.pk, self.request.user.pk)
        return super().form_valid(form)
