import pytest
from django.contrib.auth import get_user_model

from otpverify.authentication.session import LOGIN, REGISTER, SESSION_KEY
from otpverify.common import messages

from .conftest import LOGIN_URL, OTHER_PHONE, PHONE, PHONE_DIGITS, REGISTER_URL, verify_phone

pytestmark = pytest.mark.django_db

User = get_user_model()


def register(client, phone=PHONE, username="asha", password="s3cret-pass"):
    return client.post(
        REGISTER_URL,
        {"username": username, "password": password, "email": "asha@example.com", "phoneNumber": phone},
    )


def login(client, phone=PHONE, username="asha", password="s3cret-pass"):
    return client.post(
        LOGIN_URL, {"username": username, "password": password, "phoneNumber": phone}
    )


class TestRegister:
    def test_verified_phone_creates_account(self, api_client, msg91):
        verify_phone(api_client)

        resp = register(api_client)

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["data"]["tokenType"] == "Bearer"
        assert body["data"]["accessToken"]

        user = User.objects.get(id=body["data"]["userId"])
        assert user.username == "asha"
        assert user.phone_number == PHONE
        assert user.is_phone_verified
        assert user.check_password("s3cret-pass")

    def test_session_is_cleared_after_registration(self, api_client, msg91):
        verify_phone(api_client)
        register(api_client)

        record = api_client.session[SESSION_KEY]
        assert record[REGISTER] == {"verified": False, "phone_number": ""}
        assert record[LOGIN] == {"verified": False, "phone_number": ""}

        resp = register(api_client, username="second")
        assert resp.status_code == 403
        assert resp.json()["error"]["code"] == "NOT_VERIFIED"
        assert not User.objects.filter(username="second").exists()

    def test_bare_digits_do_not_match_verified_number(self, api_client, msg91):
        verify_phone(api_client, phone=PHONE_DIGITS)

        resp = register(api_client, phone=PHONE_DIGITS)

        assert resp.status_code == 403
        assert resp.json()["error"]["code"] == "NOT_VERIFIED"
        assert not User.objects.filter(username="asha").exists()

    def test_unverified_phone_is_rejected(self, api_client):
        resp = register(api_client)

        assert resp.status_code == 403
        assert resp.json()["error"] == {
            "code": "NOT_VERIFIED",
            "message": messages.NOT_VERIFIED,
            "details": [{"code": "NOT_VERIFIED", "message": messages.NOT_VERIFIED}],
        }
        assert not User.objects.exists()

    def test_other_phone_is_rejected(self, api_client, msg91):
        verify_phone(api_client)

        resp = register(api_client, phone=OTHER_PHONE)

        assert resp.status_code == 403
        assert resp.json()["error"]["code"] == "NOT_VERIFIED"

    def test_phone_already_registered(self, api_client, msg91, user_factory):
        user_factory(username="existing", phone_number=PHONE)
        verify_phone(api_client)

        resp = register(api_client)

        assert resp.status_code == 409
        assert resp.json()["error"]["message"] == messages.ALREADY_REGISTERED
        assert not User.objects.filter(username="asha").exists()

    def test_missing_phone(self, api_client):
        resp = register(api_client, phone="")

        assert resp.status_code == 400
        assert resp.json()["error"]["message"] == messages.PHONE_REQUIRED

    def test_short_password_is_a_validation_error(self, api_client, msg91):
        verify_phone(api_client)

        resp = register(api_client, password="short")

        assert resp.status_code == 400
        body = resp.json()
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert "password" in body["error"]["details"]


class TestLogin:
    def test_verified_phone_logs_in(self, api_client, msg91, user_factory):
        user = user_factory(phone_number=PHONE)
        verify_phone(api_client, form_type=LOGIN)

        resp = login(api_client)

        assert resp.status_code == 200
        assert resp.json()["data"]["userId"] == user.id
        assert api_client.session.get("_auth_user_id") == str(user.id)

    def test_unverified_phone_is_rejected(self, api_client, user_factory):
        user_factory(phone_number=PHONE)

        resp = login(api_client)

        assert resp.status_code == 403
        assert resp.json()["error"]["code"] == "NOT_VERIFIED"

    def test_register_only_verification_does_not_log_in(self, api_client, msg91, user_factory):
        user_factory(phone_number=PHONE)
        verify_phone(api_client, form_type=REGISTER)

        resp = login(api_client)

        assert resp.status_code == 403

    def test_wrong_password(self, api_client, msg91, user_factory):
        user_factory(phone_number=PHONE)
        verify_phone(api_client)

        resp = login(api_client, password="wrong-pass")

        assert resp.status_code == 401
        assert resp.json()["error"]["code"] == "INVALID_CREDENTIALS"

    def test_missing_username(self, api_client):
        resp = api_client.post(LOGIN_URL, {"password": "x", "phoneNumber": PHONE})

        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"
