"""
Adapter feeding JSON output into an XML-only display
"""

import re
import logging
from typing import Optional

from rich.console import Console

from .output import make_console

logger = logging.getLogger(__name__)

# Single-key extraction, not a JSON parser
MESSAGE_PATTERN = re.compile(r'.*"mesaj": "(.*?)".*')


class LegacyXmlDisplay:
    """Existing system that only understands XML"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or make_console()

    def show_xml(self, xml: str) -> None:
        self.console.print("SistemExistent afiseaza XML:")
        self.console.print(xml)


class JsonGenerator:
    """Third-party component producing JSON"""

    def generate(self) -> str:
        return '{"mesaj": "Salut lume"}'


class JsonToXmlAdapter:
    """
    Presents JSON documents to a LegacyXmlDisplay

    Only the "mesaj" key is extracted. Input without that key is wrapped
    unchanged, so this is not suitable as a general converter.
    """

    def __init__(self, display: LegacyXmlDisplay):
        self.display_system = display

    def to_xml(self, json_text: str) -> str:
        """Wrap the "mesaj" value of json_text in a <root><mesaj> document"""
        message = MESSAGE_PATTERN.sub(r"\1", json_text)
        return f"<root><mesaj>{message}</mesaj></root>"

    def display(self, json_text: str) -> None:
        xml = self.to_xml(json_text)
        logger.debug(f"Adapted {json_text!r} to {xml!r}")
        self.display_system.show_xml(xml)
