# tasks/priority.py
"""
Task priorities (1 = most urgent) and inline priority markers.

Titles may carry a marker such as ``!high`` or ``!p1``; the markers are
case-insensitive and are stripped from the text once detected.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from django.db import models


class TaskPriority(models.IntegerChoices):
    CRITICAL = 1, "Critical"
    HIGH = 2, "High"
    MEDIUM = 3, "Medium"
    LOW = 4, "Low"
    VERY_LOW = 5, "Very Low"


DEFAULT_TASK_PRIORITY = TaskPriority.HIGH

TASK_PRIORITY_SHORT_LABELS = {p: f"P{p.value}" for p in TaskPriority}

HIGH_PRIORITIES = (TaskPriority.CRITICAL, TaskPriority.HIGH)
LOW_PRIORITIES = (TaskPriority.LOW, TaskPriority.VERY_LOW)


def priority_label(priority: int) -> str:
    return TaskPriority(priority).label


def priority_short_label(priority: int) -> str:
    return TASK_PRIORITY_SHORT_LABELS[TaskPriority(priority)]


def priority_from_number(value) -> TaskPriority:
    """Coerce to a valid priority, falling back to the default."""
    try:
        return TaskPriority(int(value))
    except (TypeError, ValueError):
        return DEFAULT_TASK_PRIORITY


def is_high_priority(priority: int) -> bool:
    return priority in HIGH_PRIORITIES


def is_low_priority(priority: int) -> bool:
    return priority in LOW_PRIORITIES


# ============================================================
# Inline markers
# ============================================================

@dataclass(frozen=True)
class DetectedPriority:
    priority: TaskPriority
    original_text: str
    start: int
    end: int


@dataclass(frozen=True)
class PriorityDetectionResult:
    detected: List[DetectedPriority]
    cleaned_text: str

    @property
    def priority(self):
        """The marker typed last wins."""
        if not self.detected:
            return None
        return max(self.detected, key=lambda d: d.start).priority


def _marker_patterns() -> List[Tuple[str, TaskPriority]]:
    patterns = [(f"!{p.label.lower()}", p) for p in TaskPriority]
    patterns += [(f"!p{p.value}", p) for p in TaskPriority]
    return patterns


PRIORITY_MARKERS = _marker_patterns()

_WHITESPACE = re.compile(r"\s+")


def detect_priorities_in_text(text: str, ignore_sections: Iterable[Sequence[int]] = ()) -> PriorityDetectionResult:
    """
    ``ignore_sections`` is a list of ``(start, end)`` spans (e.g. code or
    links) whose markers must be left alone.
    """
    ignore_sections = list(ignore_sections)
    detected: List[DetectedPriority] = []

    for marker, priority in PRIORITY_MARKERS:
        for match in re.finditer(re.escape(marker), text, flags=re.IGNORECASE):
            start, end = match.start(), match.end()
            if any(start >= s and end <= e for s, e in ignore_sections):
                continue
            detected.append(DetectedPriority(priority, match.group(0), start, end))

    # الحذف من النهاية أولاً حتى تبقى المواقع صحيحة
    detected.sort(key=lambda d: d.start, reverse=True)
    cleaned = text
    for d in detected:
        cleaned = cleaned[:d.start] + cleaned[d.end:]
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()

    return PriorityDetectionResult(detected=detected, cleaned_text=cleaned)
