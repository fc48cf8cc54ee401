"""
Tests for the organism hierarchy
"""

import pytest

from ooplab.organisms import Animal, Bear, Dolphin, Mammal, Organism
from ooplab.output import make_console


class TestOrganisms:
    """Test cases for organisms"""

    def setup_method(self):
        """Set up test fixtures"""
        self.console = make_console()

    def test_bear(self, capsys):
        """Test bear breathes through Animal and feeds on honey"""
        bear = Bear(self.console)
        bear.breathe()
        bear.feed()
        out = capsys.readouterr().out
        assert out == "Urs respira aer.\nUrsul se hraneste cu miere.\n"

    def test_dolphin(self, capsys):
        """Test dolphin breathes through Animal and feeds on fish"""
        dolphin = Dolphin(self.console)
        dolphin.breathe()
        dolphin.feed()
        out = capsys.readouterr().out
        assert out == "Delfin respira aer.\nDelfinul se hraneste cu pesti.\n"

    def test_hair_helper(self, capsys):
        """Test the mammal hair helper"""
        Bear(self.console).show_hair()
        assert capsys.readouterr().out == "Urs are par.\n"

    @pytest.mark.parametrize("cls", [Organism, Animal, Mammal])
    def test_abstract_layers(self, cls):
        """Test abstract layers cannot be instantiated"""
        with pytest.raises(TypeError):
            cls(self.console)

    def test_breathe_is_fixed(self):
        """Test subclasses cannot redefine breathe"""
        with pytest.raises(TypeError):
            class Fish(Animal):
                def breathe(self):
                    pass

                def feed(self):
                    pass

    def test_breathe_is_fixed_below_mammal(self):
        """Test the restriction reaches every level under Animal"""
        with pytest.raises(TypeError):
            class Whale(Mammal):
                def breathe(self):
                    pass

    def test_breathe_shared(self):
        """Test concrete leaves use Animal.breathe"""
        assert Bear.breathe is Animal.breathe
        assert Dolphin.breathe is Animal.breathe
