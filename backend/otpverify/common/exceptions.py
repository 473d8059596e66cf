# otpverify/common/exceptions.py
from rest_framework.exceptions import (
    AuthenticationFailed,
    NotAuthenticated,
    PermissionDenied,
    ValidationError,
)
from rest_framework.views import exception_handler
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError


def _error_body(code, message, details=None):
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"success": False, "data": None, "error": error}


def _first_message(detail):
    # ValidationError.detail 는 dict/list 중첩 구조
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return "Invalid input."
    if isinstance(detail, list):
        return _first_message(detail[0]) if detail else "Invalid input."
    return str(detail)


def custom_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return response

    # InvalidToken 은 AuthenticationFailed 의 하위 클래스라 먼저 본다
    if isinstance(exc, (InvalidToken, TokenError)):
        response.data = _error_body("INVALID_TOKEN", "Invalid token")
    elif isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        response.data = _error_body("UNAUTHORIZED", "Authorization header missing")
    elif isinstance(exc, PermissionDenied):
        response.data = _error_body("FORBIDDEN", str(exc.detail))
    elif isinstance(exc, ValidationError):
        response.data = _error_body(
            "VALIDATION_ERROR", _first_message(exc.detail), details=exc.detail
        )

    return response
