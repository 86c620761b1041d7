"""Tests for statement format detection."""

import pytest

from luca.parsers.caixabank import CaixaBankParser
from luca.parsers.detection import FileFormat, detect_format, get_parser
from luca.parsers.revolut import RevolutParser
from tests.conftest import CAIXABANK_CSV, REVOLUT_CSV


class TestDetectFormat:
    """Signals are checked extension, filename, content, then fallback."""

    @pytest.mark.parametrize("filename", ["nomina.pdf", "statement.png", "export.xlsx", "noextension"])
    def test_unsupported_extension(self, filename):
        assert detect_format(filename, CAIXABANK_CSV) == FileFormat.unsupported

    def test_filename_caixa(self):
        assert detect_format("CaixaBank_movimientos.csv", "") == FileFormat.caixabank

    @pytest.mark.parametrize("filename", ["revolut-march.csv", "consolidated-statement.CSV"])
    def test_filename_revolut(self, filename):
        assert detect_format(filename, "") == FileFormat.revolut

    def test_filename_beats_content(self):
        """Filename wins even when the content looks like another bank."""
        assert detect_format("caixa.csv", REVOLUT_CSV) == FileFormat.caixabank

    def test_content_revolut(self):
        assert detect_format("export.csv", REVOLUT_CSV) == FileFormat.revolut

    def test_content_mentions_revolut(self):
        assert detect_format("export.csv", "Account statement\nRevolut Bank UAB\n") == FileFormat.revolut

    def test_content_caixabank(self):
        assert detect_format("export.csv", CAIXABANK_CSV) == FileFormat.caixabank

    def test_caixabank_concept_mentioning_revolut(self):
        """A CaixaBank export with a transfer to Revolut stays CaixaBank."""
        content = CAIXABANK_CSV + "Traspaso a Revolut;06/03/2025;-50,00;1137,50\n"
        assert detect_format("movimientos.csv", content) == FileFormat.caixabank

    def test_fallback_is_caixabank(self):
        assert detect_format("export.csv", "a,b,c\n1,2,3\n") == FileFormat.caixabank


class TestGetParser:
    """Dispatch from detected format to parser."""

    def test_caixabank(self):
        assert isinstance(get_parser(FileFormat.caixabank), CaixaBankParser)

    def test_revolut(self):
        assert isinstance(get_parser(FileFormat.revolut), RevolutParser)

    def test_unsupported(self):
        assert get_parser(FileFormat.unsupported) is None
