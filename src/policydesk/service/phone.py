import logging
import re

logger = logging.getLogger("policydesk-phone")

_NOT_DIALLED = re.compile(r"[^0-9+]")
_INTERNATIONAL = re.compile(r"\+27[0-9]{9}")
_INTERNATIONAL_NO_PLUS = re.compile(r"27[0-9]{9}")
_LOCAL = re.compile(r"0[0-9]{9}")

# 01-05 are landline areas, 06-08 mobile networks
LOCAL_PREFIXES = ("01", "02", "03", "04", "05", "06", "07", "08")


def _clean(phone_number: str) -> str:
    return _NOT_DIALLED.sub("", phone_number)


def is_valid_phone_number(phone_number: str | None) -> bool:
    """
    Check a South African phone number. Spaces, brackets and dashes are ignored, so all of these are accepted:

        0721234567, 072 123 4567, (072) 123-4567, 27721234567, +27 72 123 4567
    """
    if not phone_number:
        return False

    cleaned = _clean(phone_number)
    if cleaned.startswith("+27"):
        valid = bool(_INTERNATIONAL.fullmatch(cleaned))
    elif cleaned.startswith("27"):
        valid = bool(_INTERNATIONAL_NO_PLUS.fullmatch(cleaned))
    elif cleaned.startswith("0"):
        valid = bool(_LOCAL.fullmatch(cleaned)) and cleaned[:2] in LOCAL_PREFIXES
    else:
        valid = False

    if not valid:
        logger.debug("Rejected phone number %r", phone_number)
    return valid


def to_international(phone_number: str | None) -> str | None:
    """
    Return a valid phone number in +27XXXXXXXXX form, or None if it is not valid
    """
    if not is_valid_phone_number(phone_number):
        return None

    cleaned = _clean(phone_number)  # type: ignore[arg-type]
    if cleaned.startswith("+"):
        return cleaned
    if cleaned.startswith("27"):
        return "+" + cleaned
    return "+27" + cleaned[1:]
