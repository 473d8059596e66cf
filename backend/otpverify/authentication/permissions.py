from rest_framework.authentication import CSRFCheck
from rest_framework.permissions import BasePermission


def _dummy_get_response(request):
    return None


class CsrfTokenRequired(BasePermission):
    """Require Django's CSRF token on unsafe methods, even for anonymous callers."""

    message = "CSRF Failed"

    def has_permission(self, request, view):
        check = CSRFCheck(_dummy_get_response)
        # 쿠키의 CSRF 시크릿을 request.META 로 옮겨둔다
        check.process_request(request)
        reason = check.process_view(request, None, (), {})
        if reason:
            self.message = f"CSRF Failed: {reason}"
            return False
        return True
