"""
Payment methods as a closed sum type
"""

import re
import logging
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from rich.console import Console

from .output import make_console

logger = logging.getLogger(__name__)

CVV_PATTERN = re.compile(r"[0-9]{3}")
EXPIRY_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}")
IBAN_PATTERN = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z0-9]{1,30}")

_PERMITTED_VARIANTS = frozenset({"Card", "Cash", "BankTransfer"})


class PaymentMethod:
    """
    Root of the payment sum

    Only the three variants declared in this module may derive from it,
    and the variants themselves cannot be subclassed.
    """
    name: ClassVar[str] = "MetodaPlata"

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        permitted = (
            cls.__bases__ == (PaymentMethod,)
            and cls.__module__ == __name__
            and cls.__name__ in _PERMITTED_VARIANTS
        )
        if not permitted:
            raise TypeError(f"{cls.__name__} is not a permitted payment method")


@dataclass(frozen=True)
class Card(PaymentMethod):
    cvv: str
    expiry: str

    name: ClassVar[str] = "Card"

    def validate(self) -> bool:
        """Shape check of CVV and expiry date (no issuer verification)"""
        return bool(CVV_PATTERN.fullmatch(self.cvv)) and bool(EXPIRY_PATTERN.fullmatch(self.expiry))


@dataclass(frozen=True)
class Cash(PaymentMethod):
    name: ClassVar[str] = "Cash"

    def process(self, console: Console) -> None:
        console.print("Tranzactie cash: instanta.")


@dataclass(frozen=True)
class BankTransfer(PaymentMethod):
    iban: str

    name: ClassVar[str] = "TransferBancar"

    def validate(self) -> bool:
        """Shape check of the IBAN (no checksum)"""
        return bool(IBAN_PATTERN.fullmatch(self.iban))


AnyPaymentMethod = Union[Card, Cash, BankTransfer]


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


class PaymentService:
    """
    Validates payment methods by dispatching on the variant
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or make_console()

    def validate_method(self, method: AnyPaymentMethod) -> None:
        """
        Print the method name followed by its variant-specific check

        Raises:
            TypeError: if method is not one of the three variants
        """
        if not isinstance(method, PaymentMethod):
            raise TypeError(f"Unsupported payment method: {type(method).__name__}")

        logger.debug(f"Validating payment method {method!r}")
        self.console.print(f"Metoda: {method.name}")

        if isinstance(method, Card):
            self.console.print(f"CVV si data expirare valide? {_format_bool(method.validate())}")
        elif isinstance(method, Cash):
            method.process(self.console)
        elif isinstance(method, BankTransfer):
            self.console.print(f"IBAN valid? {_format_bool(method.validate())}")

        self.console.print()
