# people/views/__init__.py
from .person_views import PersonListView, PersonOverviewView, PersonCreateView, PersonUpdateView
from .one_on_one_views import OneOnOneListView, OneOnOneCreateView

__all__ = [
    "PersonListView", "PersonOverviewView", "PersonCreateView", "PersonUpdateView",
    "OneOnOneListView", "OneOnOneCreateView",
]
