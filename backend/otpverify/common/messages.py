# otpverify/common/messages.py
# 화면/응답에 노출되는 문구 모음 (서버 응답 + 클라이언트 기본값 공용)

SENDING = "Sending OTP..."
SEND_OTP = "Send OTP"
VERIFYING = "Verifying..."
VERIFY_OTP = "Verify OTP"

OTP_SENT = "OTP sent successfully!"
OTP_SEND_ERROR = "Error sending OTP. Please try again."
OTP_VERIFIED = "OTP verified successfully!"
OTP_INVALID = "Invalid OTP. Please try again."
SERVICE_UNAVAILABLE = "Could not reach the OTP service. Please try again."

INVALID_PHONE = "Please enter a valid 10-digit phone number."
INVALID_PHONE_OR_OTP = "Please enter a valid 10-digit number and OTP"
PHONE_AND_OTP_REQUIRED = "Phone number and OTP code are required."
PHONE_REQUIRED = "Phone number is required."
NOT_VERIFIED = "Please verify your phone number with OTP first."
ALREADY_REGISTERED = (
    "An account is already registered with this phone number. Please log in."
)
COMPLETE_VERIFICATION = "Please complete OTP verification"

# GET /api/auth/otp/ 로 내려주는 클라이언트 표시 문구
CLIENT_TEXTS = {
    "sending_text": SENDING,
    "send_otp_text": SEND_OTP,
    "verify_text": VERIFYING,
    "verify_otp_text": VERIFY_OTP,
    "otp_sent_text": OTP_SENT,
    "otp_error_text": OTP_SEND_ERROR,
    "otp_verified_text": OTP_VERIFIED,
    "otp_invalid_text": OTP_INVALID,
}
