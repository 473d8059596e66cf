# otpverify/authentication/services.py
import logging

from django.contrib.auth import get_user_model
from rest_framework_simplejwt.tokens import AccessToken

from otpverify.common import messages
from otpverify.common.errors import AlreadyRegistered, MissingField, NotVerified
from otpverify.common.phone import canonical_or_raw, mask_phone, normalize_phone
from otpverify.msg91.client import Msg91Client
from otpverify.msg91.config import OtpConfig

from .session import REGISTER, OtpSession

logger = logging.getLogger(__name__)


class OtpRequestHandler:
    """
    Server side of the phone OTP flow.

    send_otp / verify_otp back the AJAX endpoint; validate_submission,
    on_account_created and on_account_fields_updated are called from the
    login, registration and profile views.
    """

    def __init__(self, config: OtpConfig, client=None):
        self.config = config
        self.client = client or Msg91Client(config)

    @classmethod
    def from_settings(cls) -> "OtpRequestHandler":
        return cls(OtpConfig.from_settings())

    def send_otp(self, phone_number) -> str:
        mobile = normalize_phone(phone_number)
        self.client.send_otp(mobile)
        return messages.OTP_SENT

    def verify_otp(self, session: OtpSession, phone_number, otp_code, form_type=None) -> str:
        phone_number = str(phone_number or "").strip()
        otp_code = str(otp_code or "").strip()
        if not phone_number or not otp_code:
            raise MissingField()

        mobile = normalize_phone(phone_number)
        self.client.verify_otp(mobile, otp_code)

        session.mark_verified(mobile, form_type)
        logger.info("Phone %s verified (form=%s)", mask_phone(mobile), form_type or "any")
        return messages.OTP_VERIFIED

    def validate_submission(self, session: OtpSession, form_type, submitted_phone, errors=None) -> list:
        """Append blocking OtpErrors for a login/registration submission and return the list."""
        errors = [] if errors is None else errors

        submitted = str(submitted_phone or "").strip()
        if not submitted:
            errors.append(MissingField(messages.PHONE_REQUIRED))
            return errors

        # 검증된 번호와 글자 그대로 같아야 한다 (+91 포함)
        state = session.get(form_type)
        if not state.verified or state.phone_number != submitted:
            errors.append(NotVerified())

        phone = canonical_or_raw(submitted)
        if form_type == REGISTER and get_user_model().objects.phone_in_use(phone):
            errors.append(AlreadyRegistered())

        if errors:
            logger.info(
                "Rejected %s submission for %s: %s",
                form_type,
                mask_phone(phone),
                ", ".join(e.code for e in errors),
            )
        return errors

    def on_account_created(self, session: OtpSession, user) -> None:
        state = session.get(REGISTER)
        if state.verified and state.phone_number:
            user.phone_number = state.phone_number
            user.is_phone_verified = True
            user.save(update_fields=["phone_number", "is_phone_verified"])

        # 남아있는 인증 플래그로 다른 가입이 통과되지 않도록 초기화
        session.clear()

    def on_account_fields_updated(self, user, phone_number) -> bool:
        # 프로필 수정은 OTP 재인증 없이 저장 (기존 동작 유지)
        phone = canonical_or_raw(phone_number)
        if not phone:
            return False
        user.phone_number = phone
        user.save(update_fields=["phone_number"])
        return True


def issue_jwt_for_user(user) -> str:
    token = AccessToken.for_user(user)
    return str(token)
