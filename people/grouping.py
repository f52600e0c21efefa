# people/grouping.py
"""
Group a list of people for the people directory.

Every grouping returns dicts with ``key``, ``label``, ``people`` (sorted by
name), ``count`` and, where a detail page exists, ``link``.
"""

from typing import Dict, Iterable, List

from django.urls import reverse

from .models import Person

GROUPING_OPTIONS = ("manager", "team", "status", "job_role", "none")

STATUS_ORDER = ("active", "inactive", "on_leave", "terminated")


def _by_name(people):
    return sorted(people, key=lambda p: (p.name or "").lower())


def _status_label(status: str) -> str:
    return status[:1].upper() + status[1:].replace("_", " ", 1)


def _group_by_relation(people, attr, empty_key, empty_label, label_attr, link_name=None):
    buckets: Dict[object, list] = {}
    related = {}
    for person in people:
        obj = getattr(person, attr)
        key = obj.pk if obj is not None else empty_key
        buckets.setdefault(key, []).append(person)
        if obj is not None:
            related[key] = obj

    groups = []
    for key, members in buckets.items():
        obj = related.get(key)
        group = {
            "key": key,
            "label": getattr(obj, label_attr) if obj is not None else empty_label,
            "people": _by_name(members),
            "count": len(members),
            "link": None,
        }
        if obj is not None and link_name:
            group["link"] = reverse(link_name, args=[key])
        groups.append(group)

    # المجموعة الفارغة دائمًا في الأخير
    groups.sort(key=lambda g: (g["key"] == empty_key, g["label"].lower()))
    return groups


def group_by_manager(people) -> List[dict]:
    return _group_by_relation(people, "manager", "no-manager", "No Manager", "name", "people:overview")


def group_by_team(people) -> List[dict]:
    return _group_by_relation(people, "team", "no-team", "No Team", "name")


def group_by_job_role(people) -> List[dict]:
    return _group_by_relation(people, "job_role", "no-job-role", "No Job Role", "title")


def group_by_status(people) -> List[dict]:
    buckets: Dict[str, list] = {}
    for person in people:
        buckets.setdefault(person.status, []).append(person)
    return [
        {
            "key": status,
            "label": _status_label(status),
            "people": _by_name(buckets[status]),
            "count": len(buckets[status]),
            "link": None,
        }
        for status in STATUS_ORDER
        if buckets.get(status)
    ]


def group_by_none(people) -> List[dict]:
    people = list(people)
    if not people:
        return []
    return [{"key": "all", "label": "All People", "people": _by_name(people), "count": len(people), "link": None}]


_GROUPERS = {
    "manager": group_by_manager,
    "team": group_by_team,
    "status": group_by_status,
    "job_role": group_by_job_role,
    "none": group_by_none,
}


def group_people(people: Iterable[Person], option: str) -> List[dict]:
    grouper = _GROUPERS.get(option)
    if grouper is None:
        return []
    return grouper(list(people))
