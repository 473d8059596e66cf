# otpverify/authentication/session.py
from dataclasses import dataclass

LOGIN = "login"
REGISTER = "register"
FORM_TYPES = (LOGIN, REGISTER)

SESSION_KEY = "otp_verification"


@dataclass(frozen=True)
class VerificationState:
    verified: bool = False
    phone_number: str = ""


class OtpSession:
    """
    Verification record kept in the caller's Django session, one slot per form type:

        {"login": {"verified": True, "phone_number": "+91..."}, "register": {...}}

    Any mapping with ``get``/``__setitem__`` works, so tests can pass a dict.
    """

    def __init__(self, session):
        self._session = session

    def _record(self) -> dict:
        return dict(self._session.get(SESSION_KEY) or {})

    def get(self, form_type: str) -> VerificationState:
        slot = self._record().get(form_type) or {}
        return VerificationState(
            verified=bool(slot.get("verified")),
            phone_number=str(slot.get("phone_number") or ""),
        )

    def mark_verified(self, phone_number: str, form_type=None) -> None:
        # form_type 없이 들어온 검증은 모든 폼에 적용 (세션당 1건)
        form_types = (form_type,) if form_type else FORM_TYPES
        record = self._record()
        for ft in form_types:
            record[ft] = {"verified": True, "phone_number": phone_number}
        # 새 dict 를 다시 넣어야 세션이 modified 로 잡힌다
        self._session[SESSION_KEY] = record

    def clear(self) -> None:
        self._session[SESSION_KEY] = {
            ft: {"verified": False, "phone_number": ""} for ft in FORM_TYPES
        }
