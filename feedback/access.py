# file: feedback/access.py

from django.db.models import Q

from base.access import get_person_id, is_admin_or_owner
from base.permissions import register, member_with_person_or_admin
from .models import FeedbackCampaign


def campaign_access_q(organization_id, user_id) -> Q:
    """الحملة مرئية لمُنشئها فقط داخل نفس المؤسسة."""
    return Q(organization_id=organization_id, user_id=user_id)


def can_manage_campaign(user, campaign: FeedbackCampaign) -> bool:
    if not user or not user.is_authenticated or not user.organization_id:
        return False
    if campaign.organization_id != user.organization_id:
        return False
    if is_admin_or_owner(user):
        return True
    if get_person_id(user) is None:
        return False
    return campaign.user_id == user.pk


def _campaign_check(user, obj_id) -> bool:
    if not user.organization_id or not obj_id:
        return False
    campaign = FeedbackCampaign.all_objects.filter(pk=obj_id).first()
    return campaign is not None and can_manage_campaign(user, campaign)


@register("feedback-campaign.view")
def _campaign_view(user, obj_id) -> bool:
    if not user.organization_id:
        return False
    if is_admin_or_owner(user):
        return True
    if get_person_id(user) is None:
        return False
    # القائمة: كل مستخدم يرى حملاته
    if not obj_id:
        return True
    return _campaign_check(user, obj_id)


register("feedback-campaign.create")(member_with_person_or_admin)
register("feedback-campaign.edit", "feedback-campaign.delete")(_campaign_check)
