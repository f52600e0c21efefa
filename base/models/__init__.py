# base/models/__init__.py

# ملاحظة: احرص على ترتيب الاستيرادات بحيث لا تُسبب دوران.
# ال Mixins تبقى غير مُصدرة لأنها abstract.
from .organization import Organization
from .user import User
from .membership import OrganizationMember

__all__ = [
    "Organization",
    "User",
    "OrganizationMember",
]
