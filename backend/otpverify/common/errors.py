# otpverify/common/errors.py
from otpverify.common import messages


class OtpError(Exception):
    """Base class for failures that end up as a user-facing message."""

    code = "OTP_ERROR"
    default_message = messages.OTP_SEND_ERROR
    http_status = 400

    def __init__(self, message=None):
        self.message = str(message) if message else self.default_message
        super().__init__(self.message)


class InvalidPhoneNumber(OtpError):
    code = "INVALID_PHONE_NUMBER"
    default_message = messages.INVALID_PHONE


class MissingField(OtpError):
    code = "MISSING_FIELD"
    default_message = messages.PHONE_AND_OTP_REQUIRED


class RemoteTransportError(OtpError):
    code = "REMOTE_TRANSPORT_ERROR"
    default_message = messages.SERVICE_UNAVAILABLE
    http_status = 502


class RemoteRejected(OtpError):
    code = "REMOTE_REJECTED"


class AlreadyRegistered(OtpError):
    code = "ALREADY_REGISTERED"
    default_message = messages.ALREADY_REGISTERED
    http_status = 409


class NotVerified(OtpError):
    code = "NOT_VERIFIED"
    default_message = messages.NOT_VERIFIED
    http_status = 403
