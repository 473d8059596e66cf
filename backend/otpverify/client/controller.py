# otpverify/client/controller.py
import logging
import time
from dataclasses import dataclass, field
from typing import Optional

import requests

from otpverify.authentication.session import REGISTER
from otpverify.common import messages
from otpverify.common.errors import (
    InvalidPhoneNumber,
    MissingField,
    RemoteTransportError,
)
from otpverify.common.phone import is_valid_digits, strip_prefix, with_prefix

from .form import Banner, OtpForm
from .storage import phone_key, verified_key
from .transport import OtpTransport, error_code_of, message_of

logger = logging.getLogger(__name__)

BUSY = "BUSY"

# 연결 실패, JSON 아닌 응답
_TRANSPORT_ERRORS = (requests.RequestException, ValueError)


@dataclass(frozen=True)
class Result:
    success: bool
    message: str = ""
    code: Optional[str] = None
    data: dict = field(default_factory=dict)


class FormController:
    """
    Drives the OTP section of one login or register form.

    Every failure ends as a banner message with the buttons restored; nothing
    here raises on a network or server error. What the controller remembers
    in ``store`` only pre-fills the form on the next start, the server
    decides from its own session whether a submission is verified.
    """

    def __init__(self, form: OtpForm, transport: OtpTransport, store, texts=None):
        self.form = form
        self.transport = transport
        self.store = store
        self.texts = {**messages.CLIENT_TEXTS, **(texts or {})}

        form.send_button.label = self.texts["send_otp_text"]
        form.verify_button.label = self.texts["verify_otp_text"]

    @classmethod
    def connect(cls, base_url, form_type, store, clock=time.monotonic, http=None):
        transport = OtpTransport(base_url, http=http)
        transport.bootstrap()
        form = OtpForm(form_type, banner=Banner(clock))
        controller = cls(form, transport, store, texts=transport.texts)
        controller.restore_verification()
        return controller

    def _ok(self, message) -> Result:
        self.form.banner.show(message, "success")
        return Result(True, message)

    def _fail(self, code, message) -> Result:
        self.form.banner.show(message, "error")
        return Result(False, message, code)

    def send_otp(self, raw_digits) -> Result:
        digits = str(raw_digits or "").strip()
        self.form.phone = digits
        if not is_valid_digits(digits):
            return self._fail(InvalidPhoneNumber.code, messages.INVALID_PHONE)

        button = self.form.send_button
        if not button.enabled:
            return Result(False, code=BUSY)

        button.enabled = False
        button.label = self.texts["sending_text"]
        try:
            envelope = self.transport.call("send_otp", phoneNumber=with_prefix(digits))
            if envelope.get("success"):
                self.form.reveal_otp()
                return self._ok(self.texts["otp_sent_text"])
            return self._fail(
                error_code_of(envelope),
                message_of(envelope) or self.texts["otp_error_text"],
            )
        except _TRANSPORT_ERRORS as e:
            logger.warning("send_otp request failed: %s", e)
            return self._fail(RemoteTransportError.code, self.texts["otp_error_text"])
        finally:
            button.enabled = True
            if button.visible:
                button.label = self.texts["send_otp_text"]

    def verify_otp(self, raw_digits, otp_code) -> Result:
        digits = str(raw_digits or "").strip()
        code = str(otp_code or "").strip()
        self.form.phone = digits
        self.form.otp_code = code
        if not is_valid_digits(digits):
            return self._fail(InvalidPhoneNumber.code, messages.INVALID_PHONE_OR_OTP)
        if not code:
            return self._fail(MissingField.code, messages.INVALID_PHONE_OR_OTP)

        button = self.form.verify_button
        if not button.enabled:
            return Result(False, code=BUSY)

        form_type = self.form.form_type
        full_number = with_prefix(digits)

        button.enabled = False
        button.label = self.texts["verify_text"]
        try:
            envelope = self.transport.call(
                "verify_otp",
                phoneNumber=full_number,
                otpCode=code,
                formType=form_type,
            )
            if envelope.get("success"):
                self.form.submit_enabled = True
                self.store.set(verified_key(form_type), "true")
                self.store.set(phone_key(form_type), full_number)
                return self._ok(self.texts["otp_verified_text"])
            return self._fail(
                error_code_of(envelope),
                message_of(envelope) or self.texts["otp_invalid_text"],
            )
        except _TRANSPORT_ERRORS as e:
            logger.warning("verify_otp request failed: %s", e)
            return self._fail(RemoteTransportError.code, self.texts["otp_invalid_text"])
        finally:
            button.enabled = True
            button.label = self.texts["verify_otp_text"]

    def restore_verification(self) -> bool:
        form_type = self.form.form_type
        stored_phone = self.store.get(phone_key(form_type))
        if self.store.get(verified_key(form_type)) != "true" or not stored_phone:
            return False

        self.form.phone = strip_prefix(stored_phone)
        self.form.reveal_otp()
        self.form.submit_enabled = True
        return True

    def forget_verification(self) -> None:
        form_type = self.form.form_type
        self.store.remove(verified_key(form_type))
        self.store.remove(phone_key(form_type))

    def submit(self, **fields) -> Result:
        """Post the login/register form (username, password, ...) with the phone attached."""
        phone = self.form.phone.strip()
        if not phone:
            return self._fail(MissingField.code, messages.COMPLETE_VERIFICATION)

        payload = {**fields, "phoneNumber": with_prefix(phone)}
        try:
            envelope = self.transport.submit(self.form.form_type, payload)
        except _TRANSPORT_ERRORS as e:
            logger.warning("%s submit failed: %s", self.form.form_type, e)
            return self._fail(RemoteTransportError.code, messages.SERVICE_UNAVAILABLE)

        if not envelope.get("success"):
            return self._fail(
                error_code_of(envelope),
                message_of(envelope) or messages.SERVICE_UNAVAILABLE,
            )

        if self.form.form_type == REGISTER:
            # 서버 세션도 가입 후 초기화되므로 맞춰서 지운다
            self.forget_verification()
        return Result(True, data=envelope.get("data") or {})
