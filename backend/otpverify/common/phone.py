# otpverify/common/phone.py
import re

from otpverify.common.errors import InvalidPhoneNumber

COUNTRY_PREFIX = "+91"

_DIGITS_RE = re.compile(r"[0-9]{10}")


def strip_prefix(phone) -> str:
    # "+919760666886" -> "9760666886"
    value = str(phone or "").strip()
    if value.startswith(COUNTRY_PREFIX):
        value = value[len(COUNTRY_PREFIX) :]
    return value


def is_valid_digits(digits) -> bool:
    return bool(_DIGITS_RE.fullmatch(str(digits or "")))


def with_prefix(phone) -> str:
    return COUNTRY_PREFIX + strip_prefix(phone)


def normalize_phone(phone) -> str:
    """Return the canonical ``+91XXXXXXXXXX`` form or raise InvalidPhoneNumber."""
    digits = strip_prefix(phone)
    if not is_valid_digits(digits):
        raise InvalidPhoneNumber()
    return COUNTRY_PREFIX + digits


def canonical_or_raw(phone) -> str:
    """Canonical form when the value has a valid shape, the stripped input otherwise."""
    value = str(phone or "").strip()
    if is_valid_digits(strip_prefix(value)):
        return with_prefix(value)
    return value


def mask_phone(phone) -> str:
    phone = str(phone or "")
    if len(phone) > 4:
        return phone[:3] + "*" * (len(phone) - 5) + phone[-2:]
    return phone
