# otpverify/common/checks.py
from django.conf import settings
from django.core.checks import Error, Warning, register

from otpverify.msg91.config import MAX_OTP_EXPIRY, MIN_OTP_EXPIRY


@register("msg91")
def check_msg91_settings(app_configs, **kwargs):
    errors = []

    if not getattr(settings, "MSG91_AUTH_KEY", ""):
        errors.append(
            Warning(
                "MSG91 auth key is not set.",
                hint="Set MSG91_AUTH_KEY; MSG91 rejects OTP requests without it.",
                id="otpverify.W001",
            )
        )

    expiry = getattr(settings, "MSG91_OTP_EXPIRY", 10)
    if isinstance(expiry, bool) or not isinstance(expiry, int) or not (
        MIN_OTP_EXPIRY <= expiry <= MAX_OTP_EXPIRY
    ):
        errors.append(
            Error(
                f"MSG91_OTP_EXPIRY must be an integer between {MIN_OTP_EXPIRY} and {MAX_OTP_EXPIRY}.",
                id="otpverify.E001",
            )
        )

    return errors
