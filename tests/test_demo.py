"""
Tests for the scripted demonstration
"""

from ooplab.demo import SECTIONS, run_demo
from ooplab.output import make_console

EXPECTED_TRANSCRIPT = """\
=== Permisiuni Utilizatori ===
Utilizator: Administrator
- Poate Vizualiza
- Poate Edita
- Poate Sterge

Utilizator: Editor
- Poate Vizualiza
- Poate Edita

Utilizator: Vizitator
- Poate Vizualiza

=== Validare Metode Plata ===
Metoda: Card
CVV si data expirare valide? true

Metoda: Cash
Tranzactie cash: instanta.

Metoda: TransferBancar
IBAN valid? true

=== Rezervari ===
Loc rezervat pentru 2025-05-01, la numarul 10
Raport final rezervare.
=== Adaptor JSON->XML ===
SistemExistent afiseaza XML:
<root><mesaj>Salut lume</mesaj></root>
=== Organisme Vii ===
Urs respira aer.
Ursul se hraneste cu miere.
Delfin respira aer.
Delfinul se hraneste cu pesti.
=== Dispozitive ===
Dispozitiv generic cu operatii de baza.
Telefon pornit.
[Debug] Verificare interna de stare...
Stare generala OK.
Telefon conectat la internet.
Telefon oprit.
=== Colectii Produse ===
Produs1 (A1): 10.0
Produs1 (A1): 10.0 -> stoc: 5
=== Conturi Utilizatori ===
Cont cu nivel: ADMIN
"""


class TestDemo:
    """Test cases for run_demo"""

    def test_section_order(self):
        """Test banners are registered in display order"""
        assert [title for title, _ in SECTIONS] == [
            "Permisiuni Utilizatori",
            "Validare Metode Plata",
            "Rezervari",
            "Adaptor JSON->XML",
            "Organisme Vii",
            "Dispozitive",
            "Colectii Produse",
            "Conturi Utilizatori",
        ]

    def test_full_transcript(self, capsys):
        """Test the complete demonstration output"""
        run_demo(make_console(), make_console(stderr=True))
        captured = capsys.readouterr()
        assert captured.out == EXPECTED_TRANSCRIPT
        assert captured.err == ""
