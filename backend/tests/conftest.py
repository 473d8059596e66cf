"""
Shared fixtures.

MSG91 is never called for real: ``msg91`` patches the ``requests`` calls made
by otpverify.msg91.client and answers ``{"type": "success"}`` unless a test
sets another payload with ``remote_response``.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from rest_framework.test import APIClient

from otpverify.msg91.config import OtpConfig

PHONE_DIGITS = "9760666886"
PHONE = "+919760666886"
OTHER_PHONE = "+919812345678"

OTP_URL = "/api/auth/otp/"
LOGIN_URL = "/api/auth/login/"
REGISTER_URL = "/api/auth/register/"
ME_URL = "/api/users/me/"


def remote_response(payload, status_code=200):
    resp = MagicMock()
    resp.status_code = status_code
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def msg91():
    with patch("otpverify.msg91.client.requests.post") as post, patch(
        "otpverify.msg91.client.requests.get"
    ) as get:
        post.return_value = remote_response({"type": "success", "request_id": "abc"})
        get.return_value = remote_response({"type": "success", "message": "OTP verified success"})
        yield SimpleNamespace(post=post, get=get)


@pytest.fixture
def config():
    return OtpConfig(auth_key="test-auth-key", template_id="tmpl-1", otp_expiry_minutes=10)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def csrf_client():
    return APIClient(enforce_csrf_checks=True)


@pytest.fixture
def user_factory(django_user_model):
    def make(username="asha", password="s3cret-pass", phone_number=""):
        return django_user_model.objects.create_user(
            username=username, password=password, phone_number=phone_number
        )

    return make


def verify_phone(client, phone=PHONE, form_type=None, code="1234"):
    data = {"action": "verify_otp", "phoneNumber": phone, "otpCode": code}
    if form_type:
        data["formType"] = form_type
    return client.post(OTP_URL, data)
