"""
User permissions expressed as capability sets
"""

import logging
from enum import Flag, auto
from typing import List, Optional, Tuple

from rich.console import Console

from .output import make_console

logger = logging.getLogger(__name__)


class Capability(Flag):
    """Abilities a user kind may carry"""
    NONE = 0
    VIEW = auto()
    EDIT = auto()
    DELETE = auto()


# Display order of the capability lines
CAPABILITY_LABELS: List[Tuple[Capability, str]] = [
    (Capability.VIEW, "Vizualiza"),
    (Capability.EDIT, "Edita"),
    (Capability.DELETE, "Sterge"),
]


class User:
    """
    Base user kind

    Subclasses only declare their display name and capability set.
    """
    name: str = "Utilizator"
    capabilities: Capability = Capability.NONE

    def can(self, capability: Capability) -> bool:
        """Check if this user bears the given capability"""
        return capability in self.capabilities


class Administrator(User):
    name = "Administrator"
    capabilities = Capability.VIEW | Capability.EDIT | Capability.DELETE


class Editor(User):
    name = "Editor"
    capabilities = Capability.VIEW | Capability.EDIT


class Visitor(User):
    name = "Vizitator"
    capabilities = Capability.VIEW


class ActionService:
    """
    Prints the actions available to a user
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or make_console()

    def show_actions(self, user: User) -> None:
        """
        Print the user's header and one line per capability it bears

        Lines follow the fixed View, Edit, Delete order and are selected
        by set membership, never by the concrete user class.
        """
        logger.debug(f"Showing actions for {user.name}: {user.capabilities}")

        self.console.print(f"Utilizator: {user.name}")
        for capability, label in CAPABILITY_LABELS:
            if user.can(capability):
                self.console.print(f"- Poate {label}")
        self.console.print()
