# base/middleware.py
from __future__ import annotations
from .org_context import (
    bootstrap_from_request,
    get_organization_id,
    clear_organization,
)


class OrganizationMiddleware:
    """
    يفعّل سياق المؤسسة لكل طلب ويحقنه على request.organization_id،
    ثم يمسحه بعد إرجاع الاستجابة لضمان عدم تسرّب السياق بين الطلبات.
    يجب وضعه بعد AuthenticationMiddleware.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        bootstrap_from_request(request)
        request.organization_id = get_organization_id()
        try:
            response = self.get_response(request)
        finally:
            clear_organization()
        return response
