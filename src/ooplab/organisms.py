"""
Living organisms: abstract layers with behaviour fixed part way down
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console

from .output import make_console


class Organism(ABC):
    """
    Root of the taxonomy

    Every organism breathes and feeds; how is left to subclasses.
    """
    name: str = "OrganismViu"

    def __init__(self, console: Optional[Console] = None):
        self.console = console or make_console()

    @abstractmethod
    def breathe(self) -> None:
        pass

    @abstractmethod
    def feed(self) -> None:
        pass


class Animal(Organism):
    """
    Organism that breathes air

    breathe is fixed at this layer: subclasses that redefine it are
    rejected when the class is created.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "breathe" in cls.__dict__:
            raise TypeError(f"{cls.__name__} cannot override Animal.breathe")

    def breathe(self) -> None:
        self.console.print(f"{self.name} respira aer.")


class Mammal(Animal):
    """Animal with hair"""

    def show_hair(self) -> None:
        self.console.print(f"{self.name} are par.")


class Bear(Mammal):
    name = "Urs"

    def feed(self) -> None:
        self.console.print("Ursul se hraneste cu miere.")


class Dolphin(Mammal):
    name = "Delfin"

    def feed(self) -> None:
        self.console.print("Delfinul se hraneste cu pesti.")
