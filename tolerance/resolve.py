# tolerance/resolve.py
import logging

from django.db.models import Q
from django.utils import timezone

from .models import RuleException, ToleranceRule

logger = logging.getLogger(__name__)


def _resolve(qs) -> int:
    count = qs.update(status=RuleException.Status.RESOLVED, resolved_at=timezone.now(), updated_at=timezone.now())
    return count


def resolve_one_on_one_exceptions(organization_id, manager_id, report_id) -> int:
    """
    يُستدعى بعد تسجيل 1:1: تُغلق مخالفات التكرار للزوج في الاتجاهين.
    """
    entity_ids = [f"{manager_id}-{report_id}", f"{report_id}-{manager_id}"]
    qs = RuleException.all_objects.filter(
        organization_id=organization_id,
        rule__rule_type=ToleranceRule.RuleType.ONE_ON_ONE_FREQUENCY,
        entity_type="OneOnOne",
        entity_id__in=entity_ids,
        status__in=RuleException.OPEN_STATUSES,
    )
    count = _resolve(qs)
    if count:
        logger.info("Resolved %s one on one exceptions for %s/%s", count, manager_id, report_id)
    return count


def resolve_manager_span_exceptions(organization_id, manager_id) -> int:
    """
    Closes report-count exceptions for a manager whose active direct reports
    are back within every enabled threshold.
    """
    from django.apps import apps

    Person = apps.get_model("people", "Person")
    active_reports = Person.all_objects.filter(
        organization_id=organization_id, manager_id=manager_id, status=Person.Status.ACTIVE,
    ).count()

    open_exceptions = RuleException.all_objects.filter(
        organization_id=organization_id,
        entity_type="Person",
        entity_id=str(manager_id),
        status__in=RuleException.OPEN_STATUSES,
    ).filter(
        Q(rule__rule_type=ToleranceRule.RuleType.MAX_REPORTS)
        | Q(rule__rule_type=ToleranceRule.RuleType.MANAGER_SPAN)
    ).select_related("rule")

    to_resolve = []
    for exception in open_exceptions:
        key = "max_reports" if exception.rule.rule_type == ToleranceRule.RuleType.MAX_REPORTS else "max_direct_reports"
        threshold = exception.rule.config.get(key)
        if threshold is None or active_reports <= threshold:
            to_resolve.append(exception.pk)

    count = _resolve(RuleException.all_objects.filter(pk__in=to_resolve)) if to_resolve else 0
    if count:
        logger.info("Resolved %s span exceptions for manager %s (%s reports)", count, manager_id, active_reports)
    return count
