from rest_framework.exceptions import NotAuthenticated, PermissionDenied, ValidationError

from otpverify.common.errors import NotVerified
from otpverify.common.exceptions import custom_exception_handler


def test_otp_errors_are_left_to_the_views():
    assert custom_exception_handler(NotVerified(), {}) is None


def test_permission_denied_keeps_reason():
    resp = custom_exception_handler(PermissionDenied("CSRF Failed: CSRF cookie not set."), {})

    assert resp.status_code == 403
    assert resp.data == {
        "success": False,
        "data": None,
        "error": {"code": "FORBIDDEN", "message": "CSRF Failed: CSRF cookie not set."},
    }


def test_not_authenticated():
    resp = custom_exception_handler(NotAuthenticated(), {})

    assert resp.data["error"]["code"] == "UNAUTHORIZED"


def test_validation_error_reports_first_message():
    resp = custom_exception_handler(ValidationError({"password": ["Too short."]}), {})

    assert resp.status_code == 400
    assert resp.data["error"]["code"] == "VALIDATION_ERROR"
    assert resp.data["error"]["message"] == "Too short."
    assert resp.data["error"]["details"] == {"password": ["Too short."]}
