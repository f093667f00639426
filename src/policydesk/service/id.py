"""
South African national ID numbers.

An ID number is 13 digits laid out as YYMMDD SSSS C A Z:

    YYMMDD  date of birth, the century being inferred from the reference date
    SSSS    gender sequence; 0000-4999 female, 5000-9999 male
    C       0 for a citizen, 1 for a permanent resident
    A       historical, unchecked
    Z       check digit over the first 12 digits

The validators here are total: malformed input gives False/None and never raises. `parse_rsa_id` is the raising
counterpart for places that want an error message.
"""

import enum
import logging
import re
import typing as t
from datetime import date

from pydantic import BaseModel
from stdnum import luhn

from policydesk.util.config import PolicydeskSettings
from policydesk.util.enum import CaseInsensitiveEnum

logger = logging.getLogger("policydesk-id")

ID_LENGTH = 13

_SEPARATORS = re.compile(r"[\s-]")
# \d would also accept non-ASCII digits
_DIGITS = re.compile(r"[0-9]+")

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class ChecksumParity(CaseInsensitiveEnum):
    """
    Which 0-indexed positions of the 12 digit stem get doubled when computing the check digit.

    EVEN is what the admin system has always used; ODD is the standard Luhn check that issued ID numbers satisfy.
    """

    EVEN = enum.auto()
    ODD = enum.auto()


class Gender(CaseInsensitiveEnum):
    MALE = enum.auto()
    FEMALE = enum.auto()


class Citizenship(CaseInsensitiveEnum):
    CITIZEN = enum.auto()
    PERMANENT_RESIDENT = enum.auto()


class IDSettings(PolicydeskSettings):
    id_checksum_parity: ChecksumParity = ChecksumParity.EVEN


id_settings = IDSettings()


class InvalidIDNumber(ValueError):
    """
    Raised by `parse_rsa_id`; a problem with user input rather than with the system
    """


class IDDetails(BaseModel):
    id_number: str
    date_of_birth: date
    gender: Gender
    citizenship: Citizenship


def normalize(id_number: str) -> str:
    """
    Strip whitespace and hyphens, leaving everything else in place
    """
    return _SEPARATORS.sub("", id_number)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def resolve_birth_year(two_digit_year: int, reference_date: date) -> int:
    """
    Pivot a 2 digit year onto a century. Years up to and including the reference year's last two digits are taken to
    be in the 2000s, anything later in the 1900s. The same ID number can therefore resolve to a different century as
    the reference date moves on.
    """
    if two_digit_year <= reference_date.year % 100:
        return 2000 + two_digit_year
    return 1900 + two_digit_year


def _resolve_parity(parity: ChecksumParity | None) -> ChecksumParity:
    if parity is None:
        return id_settings.id_checksum_parity
    return parity


def _checksum(stem: str, parity: ChecksumParity) -> int:
    if parity == ChecksumParity.ODD:
        return int(luhn.calc_check_digit(stem))

    # Luhn with the doubling shifted one position, so the library cannot be used
    total = 0
    for i, char in enumerate(stem):
        digit = int(char)
        if i % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return (10 - total % 10) % 10


def compute_check_digit(stem: str, parity: ChecksumParity | None = None) -> int:
    """
    Compute the check digit for the first 12 digits of an ID number.

    :raises ValueError: if stem is not exactly 12 ASCII digits
    """
    if len(stem) != ID_LENGTH - 1 or not _DIGITS.fullmatch(stem):
        raise ValueError(f"Check digit stem must be {ID_LENGTH - 1} digits")
    return _checksum(stem, _resolve_parity(parity))


def _first_error(id_number: str | None, reference_date: date, parity: ChecksumParity) -> str | None:
    if not id_number:
        return "ID number is empty"

    id_number = normalize(id_number)
    if len(id_number) != ID_LENGTH:
        return f"ID number must be {ID_LENGTH} digits"
    if not _DIGITS.fullmatch(id_number):
        return "ID number must only contain digits"

    month = int(id_number[2:4])
    if month < 1 or month > 12:
        return f"Invalid birth month {month}"
    day = int(id_number[4:6])
    if day < 1 or day > 31:
        return f"Invalid birth day {day}"

    year = resolve_birth_year(int(id_number[0:2]), reference_date)
    if day > days_in_month(year, month):
        return f"Invalid birth date {year:04}-{month:02}-{day:02}"

    gender_code = int(id_number[6:10])
    if gender_code < 0 or gender_code > 9999:
        return f"Invalid gender code {gender_code}"

    if id_number[10] not in ("0", "1"):
        return f"Invalid citizenship digit {id_number[10]}"

    if _checksum(id_number[:12], parity) != int(id_number[12]):
        return "Checksum mismatch"

    return None


def validation_error(
    id_number: str | None, reference_date: date | None = None, parity: ChecksumParity | None = None
) -> str | None:
    """
    Return the reason the first failing check rejected the ID number, or None if it is valid. Never raises for bad
    input.

    :param reference_date: the date used to pivot the birth year onto a century, today if not given
    :param parity: checksum parity, from APP_ID_CHECKSUM_PARITY if not given
    """
    reference_date = reference_date or date.today()
    parity = _resolve_parity(parity)
    try:
        error = _first_error(id_number, reference_date, parity)
    except Exception as e:
        logger.exception("Unexpected error validating ID number", exc_info=e)
        return "ID number could not be parsed"

    if error is not None:
        logger.debug("Rejected ID number: %s", error)
    return error


def is_valid(
    id_number: str | None, reference_date: date | None = None, parity: ChecksumParity | None = None
) -> bool:
    return validation_error(id_number, reference_date, parity) is None


def extract_date_of_birth(
    id_number: str | None, reference_date: date | None = None, parity: ChecksumParity | None = None
) -> date | None:
    """
    Date of birth of a valid ID number, or None if it is invalid or the birth date lies after the reference date.
    """
    reference_date = reference_date or date.today()
    if not is_valid(id_number, reference_date, parity):
        return None

    id_number = normalize(t.cast(str, id_number))
    try:
        date_of_birth = date(
            resolve_birth_year(int(id_number[0:2]), reference_date), int(id_number[2:4]), int(id_number[4:6])
        )
    except ValueError:
        return None

    if date_of_birth > reference_date:
        return None
    return date_of_birth


def extract_gender(
    id_number: str | None, reference_date: date | None = None, parity: ChecksumParity | None = None
) -> Gender | None:
    if not is_valid(id_number, reference_date, parity):
        return None
    return Gender.MALE if int(normalize(t.cast(str, id_number))[6:10]) >= 5000 else Gender.FEMALE


def extract_citizenship(
    id_number: str | None, reference_date: date | None = None, parity: ChecksumParity | None = None
) -> Citizenship | None:
    if not is_valid(id_number, reference_date, parity):
        return None
    return Citizenship.CITIZEN if normalize(t.cast(str, id_number))[10] == "0" else Citizenship.PERMANENT_RESIDENT


def parse_rsa_id(
    id_number: str, reference_date: date | None = None, parity: ChecksumParity | None = None
) -> IDDetails:
    """
    Parse details from an RSA ID Number

    :raises InvalidIDNumber: naming the first check the ID number failed
    """
    reference_date = reference_date or date.today()
    error = validation_error(id_number, reference_date, parity)
    if error is not None:
        raise InvalidIDNumber(f"RSA ID not valid: {error}")

    date_of_birth = extract_date_of_birth(id_number, reference_date, parity)
    if date_of_birth is None:
        raise InvalidIDNumber("RSA ID not valid: Date of birth is in the future")

    return IDDetails(
        id_number=normalize(id_number),
        date_of_birth=date_of_birth,
        gender=t.cast(Gender, extract_gender(id_number, reference_date, parity)),
        citizenship=t.cast(Citizenship, extract_citizenship(id_number, reference_date, parity)),
    )
