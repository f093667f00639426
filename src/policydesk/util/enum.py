import typing as t
from enum import StrEnum


class CaseInsensitiveEnum(StrEnum):
    """
    Like StrEnum but can be instantiated from any case-insensitive version of its values, so that lax user input such
    as form fields or command-line flags maps onto a member:

        class Gender(CaseInsensitiveEnum):
            MALE = enum.auto()
            FEMALE = enum.auto()

    str(Gender("Male")) # 'male'
    """

    @classmethod
    def _missing_(cls, value: object) -> t.Any | None:
        if not isinstance(value, str):
            return None
        value = value.lower()
        for member in cls:
            if member.lower() == value:
                return member
        return None
