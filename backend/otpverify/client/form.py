# otpverify/client/form.py
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from otpverify.common import messages

MESSAGE_TIMEOUT_SEC = 5


@dataclass
class Button:
    label: str
    visible: bool = True
    enabled: bool = True


class Banner:
    """Message line under the OTP fields. A message disappears MESSAGE_TIMEOUT_SEC after it is shown."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._shown_at: Optional[float] = None
        self.text = ""
        self.kind = ""

    def show(self, text: str, kind: str = "success") -> None:
        self.text = text
        self.kind = kind
        self._shown_at = self._clock()

    @property
    def visible(self) -> bool:
        if self._shown_at is None:
            return False
        return self._clock() - self._shown_at < MESSAGE_TIMEOUT_SEC


@dataclass
class OtpForm:
    """State of one login/register form with the OTP section attached."""

    form_type: str
    banner: Banner = field(default_factory=Banner)
    phone: str = ""
    otp_code: str = ""
    otp_visible: bool = False
    submit_enabled: bool = False
    send_button: Button = field(default_factory=lambda: Button(messages.SEND_OTP))
    verify_button: Button = field(
        default_factory=lambda: Button(messages.VERIFY_OTP, visible=False)
    )

    def reveal_otp(self) -> None:
        self.otp_visible = True
        self.send_button.visible = False
        self.verify_button.visible = True
