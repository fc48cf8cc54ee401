"""
Device capabilities with default and hidden behaviour
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console

from .output import make_console


class Device(ABC):
    """
    Anything that can be powered on and off

    status() is shared by all devices and relies on a private
    internal-state check.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or make_console()

    @staticmethod
    def describe(console: Optional[Console] = None) -> None:
        """Print the generic description of a device"""
        (console or make_console()).print("Dispozitiv generic cu operatii de baza.")

    @abstractmethod
    def power_on(self) -> None:
        pass

    @abstractmethod
    def power_off(self) -> None:
        pass

    def status(self) -> None:
        self._internal_state_debug()
        self.console.print("Stare generala OK.")

    def _internal_state_debug(self) -> None:
        self.console.print("[Debug] Verificare interna de stare...")


class Smart(Device):
    """Device with internet access"""

    @abstractmethod
    def connect_to_internet(self) -> None:
        pass


class Connectable(Device):
    """Device that pairs with other devices"""

    @abstractmethod
    def connect(self) -> None:
        pass


class Phone(Smart, Connectable):

    def power_on(self) -> None:
        self.console.print("Telefon pornit.")

    def power_off(self) -> None:
        self.console.print("Telefon oprit.")

    def connect_to_internet(self) -> None:
        self.console.print("Telefon conectat la internet.")

    def connect(self) -> None:
        self.console.print("Telefon conectat la un alt dispozitiv.")


class SmartWatch(Smart):

    def power_on(self) -> None:
        self.console.print("Smartwatch pornit.")

    def power_off(self) -> None:
        self.console.print("Smartwatch oprit.")

    def connect_to_internet(self) -> None:
        self.console.print("Smartwatch conectat la internet.")


class TV(Connectable):

    def power_on(self) -> None:
        self.console.print("Televizor pornit.")

    def power_off(self) -> None:
        self.console.print("Televizor oprit.")

    def connect(self) -> None:
        self.console.print("Televizor conectat la Wi-Fi.")
