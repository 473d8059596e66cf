# otpverify/authentication/views.py
import logging

from django.contrib.auth import authenticate, login
from django.db import transaction
from django.middleware.csrf import get_token
from rest_framework.response import Response
from rest_framework.views import APIView

from otpverify.common.errors import OtpError
from otpverify.common.messages import CLIENT_TEXTS

from .permissions import CsrfTokenRequired
from .serializers import LoginSerializer, RegisterSerializer
from .services import OtpRequestHandler, issue_jwt_for_user
from .session import FORM_TYPES, LOGIN, REGISTER, OtpSession

logger = logging.getLogger(__name__)

SEND_OTP = "send_otp"
VERIFY_OTP = "verify_otp"


def ok(data=None):
    return Response({"success": True, "data": data, "error": None})


def fail(code: str, message: str, http_status: int = 400, details=None):
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return Response(
        {"success": False, "data": None, "error": error},
        status=http_status,
    )


def fail_errors(errors):
    # 여러 개면 첫 번째를 대표로, 전체는 details 에
    first = errors[0]
    details = [{"code": e.code, "message": e.message} for e in errors]
    return fail(first.code, first.message, first.http_status, details=details)


def _dbg(request, label: str):
    # 값은 남기지 않는다 (전화번호/OTP)
    logger.debug(
        "%s method=%s path=%s content-type=%s data keys=%s",
        label,
        request.method,
        getattr(request, "path", ""),
        request.content_type,
        list(getattr(request, "data", {}).keys()),
    )


def _field(request, camel: str, snake: str):
    return request.data.get(camel) or request.data.get(snake) or ""


class OtpAjaxView(APIView):
    """
    GET  -> client bootstrap (endpoint url, CSRF token, display texts)
    POST -> action=send_otp | verify_otp
    """

    authentication_classes = []
    permission_classes = [CsrfTokenRequired]

    def get(self, request):
        return ok(
            {
                "ajaxUrl": request.build_absolute_uri(request.path),
                "csrfToken": get_token(request),
                "texts": CLIENT_TEXTS,
            }
        )

    def post(self, request):
        _dbg(request, "OtpAjaxView")

        action = request.data.get("action")
        handler = OtpRequestHandler.from_settings()

        try:
            if action == SEND_OTP:
                message = handler.send_otp(_field(request, "phoneNumber", "phone_number"))
            elif action == VERIFY_OTP:
                form_type = _field(request, "formType", "form_type") or None
                if form_type and form_type not in FORM_TYPES:
                    return fail("VALIDATION_ERROR", "formType must be login or register")
                message = handler.verify_otp(
                    OtpSession(request.session),
                    _field(request, "phoneNumber", "phone_number"),
                    _field(request, "otpCode", "otp_code"),
                    form_type,
                )
            else:
                return fail("VALIDATION_ERROR", "action must be send_otp or verify_otp")
        except OtpError as e:
            return fail(e.code, e.message, e.http_status)

        return ok({"message": message})


class LoginView(APIView):
    authentication_classes = []
    permission_classes = [CsrfTokenRequired]

    def post(self, request):
        _dbg(request, "LoginView")

        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        handler = OtpRequestHandler.from_settings()
        errors = handler.validate_submission(
            OtpSession(request.session), LOGIN, data["phoneNumber"]
        )
        if errors:
            return fail_errors(errors)

        user = authenticate(request, username=data["username"], password=data["password"])
        if user is None:
            return fail("INVALID_CREDENTIALS", "Invalid username or password.", 401)

        login(request, user)
        token = issue_jwt_for_user(user)
        return ok({"userId": user.id, "accessToken": token, "tokenType": "Bearer"})


class RegisterView(APIView):
    authentication_classes = []
    permission_classes = [CsrfTokenRequired]

    def post(self, request):
        _dbg(request, "RegisterView")

        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = OtpSession(request.session)
        handler = OtpRequestHandler.from_settings()
        errors = handler.validate_submission(
            session, REGISTER, serializer.validated_data["phoneNumber"]
        )
        if errors:
            return fail_errors(errors)

        with transaction.atomic():
            user = serializer.save()
            handler.on_account_created(session, user)

        login(request, user)
        token = issue_jwt_for_user(user)
        return ok({"userId": user.id, "accessToken": token, "tokenType": "Bearer"})
