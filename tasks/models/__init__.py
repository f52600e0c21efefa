# tasks/models/__init__.py
from .initiative import Initiative, Objective
from .task import Task

__all__ = ["Initiative", "Objective", "Task"]
