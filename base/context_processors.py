# base/context_processors.py
from base.access import get_user_role
from base.models import Organization


def organization(request):
    if not request.user.is_authenticated:
        return {}

    org_id = getattr(request, "organization_id", None) or request.user.organization_id
    current = Organization.objects.filter(id=org_id).first() if org_id else None
    return {
        "current_organization": current,
        "current_role": get_user_role(request.user) if current else None,
    }
