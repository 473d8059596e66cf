import pytest
import requests
from django.core.exceptions import ImproperlyConfigured

from otpverify.common import messages
from otpverify.common.errors import RemoteRejected, RemoteTransportError
from otpverify.msg91.client import Msg91Client
from otpverify.msg91.config import DEFAULT_BASE_URL, OtpConfig

from .conftest import PHONE, remote_response


def test_send_otp_posts_expected_query(msg91, config):
    body = Msg91Client(config).send_otp(PHONE)

    assert body["type"] == "success"
    msg91.post.assert_called_once()
    args, kwargs = msg91.post.call_args
    assert args[0] == f"{DEFAULT_BASE_URL}/otp"
    assert kwargs["params"] == {
        "otp_expiry": 10,
        "template_id": "tmpl-1",
        "mobile": PHONE,
        "authkey": "test-auth-key",
        "realTimeResponse": 1,
    }
    assert kwargs["json"] == {}
    assert kwargs["headers"] == {"Content-Type": "application/json"}
    assert kwargs["timeout"] is None


def test_send_otp_surfaces_remote_message(msg91, config):
    msg91.post.return_value = remote_response(
        {"type": "error", "message": "Invalid authkey"}, status_code=401
    )

    with pytest.raises(RemoteRejected) as exc_info:
        Msg91Client(config).send_otp(PHONE)

    assert exc_info.value.message == "Invalid authkey"


def test_send_otp_falls_back_to_generic_message(msg91, config):
    msg91.post.return_value = remote_response({"type": "error"})

    with pytest.raises(RemoteRejected) as exc_info:
        Msg91Client(config).send_otp(PHONE)

    assert exc_info.value.message == messages.OTP_SEND_ERROR


def test_send_otp_non_json_body_is_rejected(msg91, config):
    msg91.post.return_value = remote_response(ValueError("no json"), status_code=502)

    with pytest.raises(RemoteRejected) as exc_info:
        Msg91Client(config).send_otp(PHONE)

    assert exc_info.value.message == messages.OTP_SEND_ERROR


def test_send_otp_transport_failure(msg91, config):
    msg91.post.side_effect = requests.ConnectionError("boom")

    with pytest.raises(RemoteTransportError) as exc_info:
        Msg91Client(config).send_otp(PHONE)

    assert exc_info.value.http_status == 502


def test_verify_otp_sends_authkey_header(msg91, config):
    Msg91Client(config).verify_otp(PHONE, "1234")

    args, kwargs = msg91.get.call_args
    assert args[0] == f"{DEFAULT_BASE_URL}/otp/verify"
    assert kwargs["params"] == {"otp": "1234", "mobile": PHONE}
    assert kwargs["headers"] == {"authkey": "test-auth-key"}


def test_verify_otp_rejected(msg91, config):
    msg91.get.return_value = remote_response({"type": "error", "message": "OTP not match"})

    with pytest.raises(RemoteRejected) as exc_info:
        Msg91Client(config).verify_otp(PHONE, "0000")

    assert exc_info.value.message == "OTP not match"


def test_verify_otp_list_body_uses_fallback(msg91, config):
    msg91.get.return_value = remote_response(["unexpected"])

    with pytest.raises(RemoteRejected) as exc_info:
        Msg91Client(config).verify_otp(PHONE, "0000")

    assert exc_info.value.message == messages.OTP_INVALID


def test_timeout_is_forwarded(msg91):
    cfg = OtpConfig(auth_key="k", timeout=3.5)

    Msg91Client(cfg).verify_otp(PHONE, "1234")

    assert msg91.get.call_args.kwargs["timeout"] == 3.5


@pytest.mark.parametrize("expiry", [0, 61, -5, True, "10"])
def test_config_rejects_bad_expiry(expiry):
    with pytest.raises(ImproperlyConfigured):
        OtpConfig(auth_key="k", otp_expiry_minutes=expiry)


@pytest.mark.parametrize("expiry", [1, 10, 60])
def test_config_accepts_expiry_bounds(expiry):
    assert OtpConfig(auth_key="k", otp_expiry_minutes=expiry).otp_expiry_minutes == expiry


def test_config_from_settings(settings):
    settings.MSG91_AUTH_KEY = "live-key"
    settings.MSG91_TEMPLATE_ID = "tmpl-9"
    settings.MSG91_OTP_EXPIRY = 15
    settings.MSG91_BASE_URL = "https://msg91.example/api/v5/"

    cfg = OtpConfig.from_settings()

    assert cfg.auth_key == "live-key"
    assert cfg.template_id == "tmpl-9"
    assert cfg.otp_expiry_minutes == 15
    assert cfg.base_url == "https://msg91.example/api/v5"
    assert cfg.is_configured


def test_unconfigured_key_still_calls_remote(msg91):
    Msg91Client(OtpConfig(auth_key="")).send_otp(PHONE)

    assert msg91.post.call_args.kwargs["params"]["authkey"] == ""
