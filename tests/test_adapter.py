"""
Tests for the JSON to XML adapter
"""

from unittest.mock import Mock

from ooplab.adapter import JsonGenerator, JsonToXmlAdapter, LegacyXmlDisplay
from ooplab.output import make_console


class TestJsonToXmlAdapter:
    """Test cases for JsonToXmlAdapter"""

    def setup_method(self):
        """Set up test fixtures"""
        self.display = LegacyXmlDisplay(make_console())
        self.adapter = JsonToXmlAdapter(self.display)

    def test_generator_literal(self):
        """Test generator returns the fixed document"""
        assert JsonGenerator().generate() == '{"mesaj": "Salut lume"}'

    def test_to_xml(self):
        """Test the message value is wrapped in XML"""
        xml = self.adapter.to_xml(JsonGenerator().generate())
        assert xml == "<root><mesaj>Salut lume</mesaj></root>"

    def test_capture_stops_at_next_quote(self):
        """Test only the mesaj value is captured"""
        xml = self.adapter.to_xml('{"mesaj": "Salut", "alt": "x"}')
        assert xml == "<root><mesaj>Salut</mesaj></root>"

    def test_input_without_key_is_wrapped_unchanged(self):
        """Test documents lacking mesaj pass through the naive extraction"""
        xml = self.adapter.to_xml('{"text": "x"}')
        assert xml == '<root><mesaj>{"text": "x"}</mesaj></root>'

    def test_display_hands_xml_to_sink(self):
        """Test adapter forwards the converted document to the display"""
        sink = Mock(spec=LegacyXmlDisplay)
        JsonToXmlAdapter(sink).display('{"mesaj": "Salut lume"}')
        sink.show_xml.assert_called_once_with("<root><mesaj>Salut lume</mesaj></root>")

    def test_display_output(self, capsys):
        """Test the legacy display prints header and XML on separate lines"""
        self.adapter.display(JsonGenerator().generate())
        out = capsys.readouterr().out
        assert out == (
            "SistemExistent afiseaza XML:\n"
            "<root><mesaj>Salut lume</mesaj></root>\n"
        )
