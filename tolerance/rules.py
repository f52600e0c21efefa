# tolerance/rules.py
"""
Rule evaluators.

Each evaluator takes a ToleranceRule and returns the number of exceptions
it created. An entity that already has an open exception for the same rule
is skipped, so evaluation can run repeatedly.
"""

import logging
from typing import Callable, Dict, Iterable, Set

from django.apps import apps
from django.core.exceptions import ValidationError
from django.db.models import Count, Q
from django.utils import timezone

from notifications.models import Notification
from notifications.services import create_system_notification
from .forms import validate_rule_config
from .models import RuleException, ToleranceRule

logger = logging.getLogger(__name__)

RuleEvaluator = Callable[[ToleranceRule], int]

_EVALUATORS: Dict[str, RuleEvaluator] = {}


def evaluator(rule_type: str):
    def decorator(fn: RuleEvaluator) -> RuleEvaluator:
        _EVALUATORS[rule_type] = fn
        return fn
    return decorator


def existing_exception_ids(rule: ToleranceRule, entity_type: str, entity_ids: Iterable[str]) -> Set[str]:
    return set(
        RuleException.all_objects
        .filter(
            rule=rule,
            organization_id=rule.organization_id,
            entity_type=entity_type,
            entity_id__in=[str(e) for e in entity_ids],
            status__in=RuleException.OPEN_STATUSES,
        )
        .values_list("entity_id", flat=True)
    )


def _people():
    return apps.get_model("people", "Person")


def _managers_over(rule: ToleranceRule, threshold: int):
    Person = _people()
    return (
        Person.all_objects
        .filter(organization_id=rule.organization_id, status=Person.Status.ACTIVE)
        .annotate(active_reports=Count("reports", filter=Q(reports__status=Person.Status.ACTIVE)))
        .filter(active_reports__gt=threshold)
        .select_related("user")
        .order_by("id")
    )


def _report_count_exception(rule, person, threshold, count, title, metadata) -> RuleException:
    message = f"{person.name} has {count} direct reports (threshold: {threshold})"
    exception = RuleException.all_objects.create(
        rule=rule,
        organization_id=rule.organization_id,
        severity=RuleException.Severity.WARNING,
        entity_type="Person",
        entity_id=str(person.pk),
        message=message,
        metadata=metadata,
    )
    if person.user_id:
        exception.notification = create_system_notification(
            organization_id=rule.organization_id,
            user_id=person.user_id,
            title=title,
            message=message,
            type=Notification.Type.WARNING,
            metadata={
                "exception_id": exception.pk,
                "entity_type": "Person",
                "entity_id": person.pk,
                "navigation_path": f"/people/{person.pk}/",
            },
        )
        exception.save(update_fields=["notification", "updated_at"])
    return exception


# ============================================================
# max_reports / manager_span
# ============================================================

@evaluator(ToleranceRule.RuleType.MAX_REPORTS)
def evaluate_max_reports(rule: ToleranceRule) -> int:
    max_reports = rule.config["max_reports"]
    people = list(_managers_over(rule, max_reports))
    existing = existing_exception_ids(rule, "Person", (p.pk for p in people))

    created = 0
    for person in people:
        if str(person.pk) in existing:
            continue
        _report_count_exception(
            rule, person, max_reports, person.active_reports,
            title="Warning: Maximum Reports Exceeded",
            metadata={
                "person_id": person.pk,
                "person_name": person.name,
                "max_reports": max_reports,
                "current_count": person.active_reports,
            },
        )
        created += 1
    return created


@evaluator(ToleranceRule.RuleType.MANAGER_SPAN)
def evaluate_manager_span(rule: ToleranceRule) -> int:
    max_direct = rule.config["max_direct_reports"]
    managers = list(_managers_over(rule, max_direct))
    existing = existing_exception_ids(rule, "Person", (m.pk for m in managers))

    created = 0
    for manager in managers:
        if str(manager.pk) in existing:
            continue
        _report_count_exception(
            rule, manager, max_direct, manager.active_reports,
            title="Warning: Manager Span of Control",
            metadata={
                "manager_id": manager.pk,
                "manager_name": manager.name,
                "max_direct_reports": max_direct,
                "current_count": manager.active_reports,
            },
        )
        created += 1
    return created


# ============================================================
# one_on_one_frequency
# ============================================================

def one_on_one_entity_id(manager_id, report_id) -> str:
    return f"{manager_id}-{report_id}"


def one_on_one_message(manager_name, report_name, threshold_days, days_since) -> str:
    if days_since is None:
        return f"{manager_name} has never had a one on one with {report_name} (threshold: {threshold_days} days)"
    return (
        f"{manager_name} has not had a 1:1 with {report_name} in {days_since} days "
        f"(threshold: {threshold_days} days)"
    )


def last_one_on_one_dates(pairs) -> Dict[tuple, object]:
    """
    {(manager_id, report_id): latest scheduled_at} over both directions of
    every pair.
    """
    OneOnOne = apps.get_model("people", "OneOnOne")
    if not pairs:
        return {}
    condition = Q()
    for manager_id, report_id in pairs:
        condition |= Q(manager_id=manager_id, report_id=report_id)
        condition |= Q(manager_id=report_id, report_id=manager_id)

    latest: Dict[tuple, object] = {}
    rows = (
        OneOnOne.all_objects
        .filter(condition, scheduled_at__isnull=False)
        .values_list("manager_id", "report_id", "scheduled_at")
    )
    for manager_id, report_id, scheduled_at in rows:
        key = (manager_id, report_id)
        if key not in latest or scheduled_at > latest[key]:
            latest[key] = scheduled_at
    return latest


@evaluator(ToleranceRule.RuleType.ONE_ON_ONE_FREQUENCY)
def evaluate_one_on_one_frequency(rule: ToleranceRule, now=None) -> int:
    Person = _people()
    config = rule.config
    warning_days = config["warning_threshold_days"]
    urgent_days = config["urgent_threshold_days"]

    reports = Person.all_objects.filter(
        organization_id=rule.organization_id,
        status=Person.Status.ACTIVE,
        manager__status=Person.Status.ACTIVE,
        manager__isnull=False,
    )
    if config.get("only_full_time_employees"):
        reports = reports.filter(employee_type=Person.EmployeeType.FULL_TIME)
    reports = list(reports.select_related("manager").order_by("manager_id", "id"))

    pairs = [(r.manager_id, r.pk) for r in reports]
    latest = last_one_on_one_dates(pairs)
    existing = existing_exception_ids(rule, "OneOnOne", (one_on_one_entity_id(m, r) for m, r in pairs))
    now = now or timezone.now()

    created = 0
    for report in reports:
        manager = report.manager
        entity_id = one_on_one_entity_id(manager.pk, report.pk)
        if entity_id in existing:
            continue

        dates = [d for d in (latest.get((manager.pk, report.pk)), latest.get((report.pk, manager.pk))) if d]
        if not dates:
            severity, threshold, days_since = RuleException.Severity.URGENT, urgent_days, None
        else:
            days_since = (now - max(dates)).days
            if days_since > urgent_days:
                severity, threshold = RuleException.Severity.URGENT, urgent_days
            elif days_since > warning_days:
                severity, threshold = RuleException.Severity.WARNING, warning_days
            else:
                continue

        RuleException.all_objects.create(
            rule=rule,
            organization_id=rule.organization_id,
            severity=severity,
            entity_type="OneOnOne",
            entity_id=entity_id,
            message=one_on_one_message(manager.name, report.name, threshold, days_since),
            metadata={
                "manager_id": manager.pk,
                "report_id": report.pk,
                "manager_name": manager.name,
                "report_name": report.name,
                "threshold_days": threshold,
                "days_since": days_since,
            },
        )
        created += 1
    return created


# ============================================================
# Entry points
# ============================================================

def evaluate_rule(rule: ToleranceRule) -> int:
    if not rule.enabled:
        return 0
    evaluate = _EVALUATORS.get(rule.rule_type)
    if evaluate is None:
        logger.error("No evaluator for rule type %s (rule %s)", rule.rule_type, rule.pk)
        return 0
    # إعدادات قديمة/تالفة تُرفض قبل التقييم
    rule.config = validate_rule_config(rule.rule_type, rule.config)
    created = evaluate(rule)
    logger.info("Rule %s (%s) created %s exceptions", rule.pk, rule.rule_type, created)
    return created


def evaluate_organization(organization_id) -> Dict[int, int]:
    """{rule_id: exceptions created} for every enabled rule."""
    results = {}
    rules = ToleranceRule.all_objects.filter(organization_id=organization_id, enabled=True).order_by("id")
    for rule in rules:
        try:
            results[rule.pk] = evaluate_rule(rule)
        except ValidationError as exc:
            # قاعدة تالفة لا توقف بقية القواعد
            logger.error("Skipping rule %s (%s): invalid config %s", rule.pk, rule.rule_type, exc.messages)
            results[rule.pk] = 0
    return results
