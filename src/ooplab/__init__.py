__version__ = "0.1.0"

# Package metadata
__description__ = "Demonstrations of object-oriented and type-system idioms"

# Public API
from .permissions import Capability, User, Administrator, Editor, Visitor, ActionService
from .payments import PaymentMethod, Card, Cash, BankTransfer, PaymentService
from .reservations import ReservationService, reserve_with_report
from .adapter import LegacyXmlDisplay, JsonGenerator, JsonToXmlAdapter
from .organisms import Organism, Animal, Mammal, Bear, Dolphin
from .devices import Device, Smart, Connectable, Phone, SmartWatch, TV
from .products import Product, collect_products, show_products, show_stock
from .access import AccessLevel, UserAccount, privileged_accounts
from .demo import run_demo
from .exceptions import (
    OOPLabError,
    ReservationError,
    InvalidDateError,
    SeatUnavailableError,
    InvalidCodeError
)

__all__ = [
    # Version
    "__version__",

    # Permissions
    "Capability",
    "User",
    "Administrator",
    "Editor",
    "Visitor",
    "ActionService",

    # Payments
    "PaymentMethod",
    "Card",
    "Cash",
    "BankTransfer",
    "PaymentService",

    # Reservations
    "ReservationService",
    "reserve_with_report",

    # Adapter
    "LegacyXmlDisplay",
    "JsonGenerator",
    "JsonToXmlAdapter",

    # Organisms
    "Organism",
    "Animal",
    "Mammal",
    "Bear",
    "Dolphin",

    # Devices
    "Device",
    "Smart",
    "Connectable",
    "Phone",
    "SmartWatch",
    "TV",

    # Products
    "Product",
    "collect_products",
    "show_products",
    "show_stock",

    # Access levels
    "AccessLevel",
    "UserAccount",
    "privileged_accounts",

    # Driver
    "run_demo",

    # Exceptions
    "OOPLabError",
    "ReservationError",
    "InvalidDateError",
    "SeatUnavailableError",
    "InvalidCodeError"
]
