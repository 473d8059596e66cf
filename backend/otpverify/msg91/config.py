from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_BASE_URL = "https://control.msg91.com/api/v5"
DEFAULT_OTP_EXPIRY = 10
MIN_OTP_EXPIRY = 1
MAX_OTP_EXPIRY = 60


@dataclass(frozen=True)
class OtpConfig:
    """MSG91 credentials and OTP options, read once and passed around by value."""

    auth_key: str
    template_id: str = ""
    otp_expiry_minutes: int = DEFAULT_OTP_EXPIRY
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None

    def __post_init__(self):
        expiry = self.otp_expiry_minutes
        if isinstance(expiry, bool) or not isinstance(expiry, int):
            raise ImproperlyConfigured("MSG91_OTP_EXPIRY must be an integer")
        if not MIN_OTP_EXPIRY <= expiry <= MAX_OTP_EXPIRY:
            raise ImproperlyConfigured(
                f"MSG91_OTP_EXPIRY must be between {MIN_OTP_EXPIRY} and {MAX_OTP_EXPIRY} minutes"
            )

    @property
    def is_configured(self) -> bool:
        return bool(self.auth_key)

    @classmethod
    def from_settings(cls) -> "OtpConfig":
        return cls(
            auth_key=getattr(settings, "MSG91_AUTH_KEY", "") or "",
            template_id=getattr(settings, "MSG91_TEMPLATE_ID", "") or "",
            otp_expiry_minutes=getattr(settings, "MSG91_OTP_EXPIRY", DEFAULT_OTP_EXPIRY),
            base_url=(getattr(settings, "MSG91_BASE_URL", "") or DEFAULT_BASE_URL).rstrip("/"),
            timeout=getattr(settings, "MSG91_TIMEOUT", None),
        )
