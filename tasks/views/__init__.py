# tasks/views/__init__.py
from .tasks import MyTasksView, TaskDetailView, TaskCreateView, TaskUpdateView, TaskDeleteView

__all__ = ["MyTasksView", "TaskDetailView", "TaskCreateView", "TaskUpdateView", "TaskDeleteView"]
