"""
Access levels carrying a numeric code and a description
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List

from .exceptions import InvalidCodeError


class AccessLevel(Enum):
    """Access levels, most privileged first"""
    ADMIN = (1, "Acces complet")
    EDITOR = (2, "Acces de editare")
    USER = (3, "Acces standard")
    GUEST = (4, "Acces limitat")

    def __init__(self, code: int, description: str):
        self.code = code
        self.description = description

    @property
    def ordinal(self) -> int:
        """Zero-based position in declaration order"""
        return _ORDINALS[self]

    @classmethod
    def from_code(cls, code: int) -> "AccessLevel":
        """
        Look up the level with the given code

        Raises:
            InvalidCodeError: if no level has that code
        """
        try:
            return _BY_CODE[code]
        except KeyError:
            raise InvalidCodeError(code) from None

    def __str__(self) -> str:
        return self.name


_ORDINALS: Dict[AccessLevel, int] = {level: index for index, level in enumerate(AccessLevel)}
_BY_CODE: Dict[int, AccessLevel] = {}
for _level in AccessLevel:
    _BY_CODE.setdefault(_level.code, _level)
del _level


@dataclass(frozen=True)
class UserAccount:
    level: AccessLevel

    def __str__(self) -> str:
        return f"Cont cu nivel: {self.level.name}"


def privileged_accounts(accounts: Iterable[UserAccount]) -> List[UserAccount]:
    """Accounts whose level ranks above USER, in input order"""
    return [account for account in accounts if account.level.ordinal < AccessLevel.USER.ordinal]
