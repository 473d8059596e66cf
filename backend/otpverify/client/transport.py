# otpverify/client/transport.py
import requests

AJAX_PATH = "/api/auth/otp/"


def message_of(envelope: dict) -> str:
    # 성공: data.message / 실패: error.message
    if envelope.get("success"):
        part = envelope.get("data") or {}
    else:
        part = envelope.get("error") or {}
    if not isinstance(part, dict):
        return ""
    return str(part.get("message") or "")


def error_code_of(envelope: dict):
    error = envelope.get("error") or {}
    return error.get("code") if isinstance(error, dict) else None


class OtpTransport:
    """
    HTTP side of the form controller.

    Keeps one requests.Session so the Django session cookie and CSRF cookie
    issued by the bootstrap call are sent with every later POST.
    """

    def __init__(self, base_url: str, http=None):
        self.base_url = base_url.rstrip("/")
        self.http = http or requests.Session()
        self.ajax_url = self.base_url + AJAX_PATH
        self.csrf_token = ""
        self.texts = {}

    def bootstrap(self) -> dict:
        resp = self.http.get(self.ajax_url)
        resp.raise_for_status()
        body = resp.json()
        if not isinstance(body, dict):
            raise ValueError("unexpected response body")
        data = body.get("data")
        if not isinstance(data, dict):
            data = {}
        self.ajax_url = data.get("ajaxUrl") or self.ajax_url
        self.csrf_token = data.get("csrfToken") or ""
        self.texts = data.get("texts") or {}
        return data

    def call(self, action: str, **fields) -> dict:
        return self._post(self.ajax_url, {"action": action, **fields})

    def submit(self, form_type: str, fields: dict) -> dict:
        return self._post(f"{self.base_url}/api/auth/{form_type}/", fields)

    def _post(self, url: str, data: dict) -> dict:
        resp = self.http.post(
            url,
            data=data,
            headers={"X-CSRFToken": self.csrf_token, "Referer": url},
        )
        # 4xx/5xx 도 JSON envelope 로 온다. JSON 이 아니면 ValueError
        body = resp.json()
        if not isinstance(body, dict):
            raise ValueError("unexpected response body")
        return body
