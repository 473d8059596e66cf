# otpverify/msg91/client.py
import logging

import requests

from otpverify.common import messages
from otpverify.common.errors import RemoteRejected, RemoteTransportError
from otpverify.common.phone import mask_phone
from otpverify.msg91.config import OtpConfig

logger = logging.getLogger(__name__)

SUCCESS_TYPE = "success"


def _decode_body(resp) -> dict:
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _ensure_success(body: dict, fallback: str) -> dict:
    # MSG91 은 type == "success" 만 성공으로 본다
    if body.get("type") == SUCCESS_TYPE:
        return body
    raise RemoteRejected(body.get("message") or fallback)


class Msg91Client:
    """Thin wrapper over the MSG91 OTP send/verify endpoints."""

    def __init__(self, config: OtpConfig):
        self.config = config

    def send_otp(self, mobile: str) -> dict:
        cfg = self.config
        if not cfg.is_configured:
            logger.warning("MSG91 auth key is not configured; sending anyway")

        try:
            resp = requests.post(
                f"{cfg.base_url}/otp",
                params={
                    "otp_expiry": cfg.otp_expiry_minutes,
                    "template_id": cfg.template_id,
                    "mobile": mobile,
                    "authkey": cfg.auth_key,
                    "realTimeResponse": 1,
                },
                json={},
                headers={"Content-Type": "application/json"},
                timeout=cfg.timeout,
            )
        except requests.RequestException as e:
            logger.warning("MSG91 send failed for %s: %s", mask_phone(mobile), e)
            raise RemoteTransportError()

        body = _decode_body(resp)
        try:
            _ensure_success(body, messages.OTP_SEND_ERROR)
        except RemoteRejected as e:
            logger.warning(
                "MSG91 rejected send for %s (status=%s): %s",
                mask_phone(mobile),
                resp.status_code,
                e.message,
            )
            raise

        logger.info("MSG91 OTP sent to %s", mask_phone(mobile))
        return body

    def verify_otp(self, mobile: str, otp: str) -> dict:
        cfg = self.config
        try:
            resp = requests.get(
                f"{cfg.base_url}/otp/verify",
                params={"otp": otp, "mobile": mobile},
                headers={"authkey": cfg.auth_key},
                timeout=cfg.timeout,
            )
        except requests.RequestException as e:
            logger.warning("MSG91 verify failed for %s: %s", mask_phone(mobile), e)
            raise RemoteTransportError()

        body = _decode_body(resp)
        try:
            _ensure_success(body, messages.OTP_INVALID)
        except RemoteRejected as e:
            logger.warning(
                "MSG91 rejected verify for %s (status=%s): %s",
                mask_phone(mobile),
                resp.status_code,
                e.message,
            )
            raise

        logger.info("MSG91 OTP verified for %s", mask_phone(mobile))
        return body
