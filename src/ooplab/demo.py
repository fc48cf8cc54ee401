"""
Scripted demonstration of every exercise

Each section is a function taking the normal and error consoles. SECTIONS
keeps them in display order next to their banners.
"""

import logging
from typing import Callable, List, Optional, Tuple

from rich.console import Console

from .access import AccessLevel, UserAccount, privileged_accounts
from .adapter import JsonGenerator, JsonToXmlAdapter, LegacyXmlDisplay
from .devices import Device, Phone
from .organisms import Bear, Dolphin, Organism
from .output import make_console
from .payments import BankTransfer, Card, Cash, PaymentService
from .permissions import ActionService, Administrator, Editor, Visitor
from .products import Product, collect_products, show_products, show_stock
from .reservations import ReservationService, reserve_with_report

logger = logging.getLogger(__name__)


def demo_permissions(console: Console, err_console: Console) -> None:
    service = ActionService(console)
    for user in [Administrator(), Editor(), Visitor()]:
        service.show_actions(user)


def demo_payments(console: Console, err_console: Console) -> None:
    service = PaymentService(console)
    for method in [Card("123", "12/24"), Cash(), BankTransfer("RO49AAAA1B31007593840000")]:
        service.validate_method(method)


def demo_reservations(console: Console, err_console: Console) -> None:
    service = ReservationService(console)
    reserve_with_report(service, "2025-05-01", 10, console=console, err_console=err_console)


def demo_adapter(console: Console, err_console: Console) -> None:
    adapter = JsonToXmlAdapter(LegacyXmlDisplay(console))
    adapter.display(JsonGenerator().generate())


def demo_organisms(console: Console, err_console: Console) -> None:
    organisms: List[Organism] = [Bear(console), Dolphin(console)]
    for organism in organisms:
        organism.breathe()
        organism.feed()


def demo_devices(console: Console, err_console: Console) -> None:
    Device.describe(console)
    phone = Phone(console)
    phone.power_on()
    phone.status()
    phone.connect_to_internet()
    phone.power_off()


def demo_products(console: Console, err_console: Console) -> None:
    first = Product("A1", "Produs1", 10.0)
    duplicate = Product("A1", "AltNume", 12.0)
    show_products(collect_products([first, duplicate]), console)
    show_stock({first: 5}, console)


def demo_accounts(console: Console, err_console: Console) -> None:
    accounts = [
        UserAccount(AccessLevel.ADMIN),
        UserAccount(AccessLevel.USER),
        UserAccount(AccessLevel.GUEST),
    ]
    for account in privileged_accounts(accounts):
        console.print(str(account))


SECTIONS: List[Tuple[str, Callable[[Console, Console], None]]] = [
    ("Permisiuni Utilizatori", demo_permissions),
    ("Validare Metode Plata", demo_payments),
    ("Rezervari", demo_reservations),
    ("Adaptor JSON->XML", demo_adapter),
    ("Organisme Vii", demo_organisms),
    ("Dispozitive", demo_devices),
    ("Colectii Produse", demo_products),
    ("Conturi Utilizatori", demo_accounts),
]


def run_demo(console: Optional[Console] = None, err_console: Optional[Console] = None) -> None:
    """
    Run every section in order, each under its "=== title ===" banner
    """
    console = console or make_console()
    err_console = err_console or make_console(stderr=True)

    for title, section in SECTIONS:
        logger.debug(f"Running section {section.__name__}")
        console.print(f"=== {title} ===")
        section(console, err_console)
