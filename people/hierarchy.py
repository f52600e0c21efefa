# people/hierarchy.py
"""
Manager-hierarchy resolution.

The walk only needs one question answered per step: "who manages this
person?". That question is the ``lookup`` collaborator
(``lookup(person_id) -> manager_id | None``). The default reads
``Person.manager_id`` without organization scoping; callers and tests can
pass any other callable (an in-memory dict, a cached query, ...).

A visited set guards every walk. A hierarchy that loops back on itself is
corrupted data and raises :class:`HierarchyCycleError` instead of spinning.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Hashable, Iterable, List, Optional, Set

from django.apps import apps

logger = logging.getLogger(__name__)

PersonId = Hashable
ManagerLookup = Callable[[PersonId], Optional[PersonId]]
ReportsLookup = Callable[[PersonId], Iterable[PersonId]]


class HierarchyError(Exception):
    """Base class for manager-hierarchy failures."""


class PersonNotFound(HierarchyError):
    def __init__(self, person_id):
        self.person_id = person_id
        super().__init__(f"Person {person_id} does not exist")


class HierarchyCycleError(HierarchyError):
    """The manager chain revisits a node (corrupted hierarchy)."""

    def __init__(self, path):
        self.path = list(path)
        super().__init__("Corrupted hierarchy, manager cycle: " + " -> ".join(str(p) for p in self.path))


def orm_manager_lookup(person_id: PersonId) -> Optional[PersonId]:
    Person = apps.get_model("people", "Person")
    rows = list(Person.all_objects.filter(pk=person_id).values_list("manager_id", flat=True)[:1])
    if not rows:
        raise PersonNotFound(person_id)
    return rows[0]


def mapping_lookup(managers: dict) -> ManagerLookup:
    """Lookup over a ``{person_id: manager_id}`` mapping."""
    def lookup(person_id):
        try:
            return managers[person_id]
        except KeyError:
            raise PersonNotFound(person_id) from None
    return lookup


def _walk_up(person_id, lookup: ManagerLookup):
    """
    Yield manager ids from the direct manager to the root.
    The first lookup fails fast when ``person_id`` itself is unknown.
    """
    visited: Set[PersonId] = {person_id}
    path: List[PersonId] = [person_id]
    manager_id = lookup(person_id)
    while manager_id is not None:
        yield manager_id
        if manager_id in visited:
            raise HierarchyCycleError(path + [manager_id])
        visited.add(manager_id)
        path.append(manager_id)
        manager_id = lookup(manager_id)


def is_manager_of(candidate_id, target_id, lookup: Optional[ManagerLookup] = None) -> bool:
    """
    True if ``candidate_id`` is the direct or an indirect manager of
    ``target_id``. A person is not their own manager here; see
    ``people.access.is_manager_or_self`` for the reflexive check.
    """
    lookup = lookup or orm_manager_lookup
    for manager_id in _walk_up(target_id, lookup):
        if manager_id == candidate_id:
            return True
    return False


def manager_chain(person_id, lookup: Optional[ManagerLookup] = None) -> List[PersonId]:
    """[direct manager, their manager, ..., root]"""
    return list(_walk_up(person_id, lookup or orm_manager_lookup))


def orm_reports_lookup(person_id: PersonId) -> List[PersonId]:
    Person = apps.get_model("people", "Person")
    return list(Person.all_objects.filter(manager_id=person_id).values_list("id", flat=True))


def mapping_reports_lookup(managers: dict) -> ReportsLookup:
    """Direct reports derived from a ``{person_id: manager_id}`` mapping."""
    def lookup(person_id):
        return [pid for pid, manager_id in managers.items() if manager_id == person_id]
    return lookup


def all_reports(person_id, reports_lookup: Optional[ReportsLookup] = None) -> Set[PersonId]:
    """Ids of everyone below ``person_id`` (direct and indirect)."""
    reports_lookup = reports_lookup or orm_reports_lookup
    found: Set[PersonId] = set()
    frontier = deque([person_id])
    while frontier:
        current = frontier.popleft()
        for child_id in reports_lookup(current):
            if child_id == person_id or child_id in found:
                logger.error("Manager cycle detected below person %s at %s", person_id, child_id)
                continue
            found.add(child_id)
            frontier.append(child_id)
    return found
