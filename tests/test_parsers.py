"""Tests for the CaixaBank and Revolut parsers."""

import pytest
from datetime import date
from decimal import Decimal

from luca.parsers.caixabank import CaixaBankParser
from luca.parsers.revolut import RevolutParser
from luca.schemas.category import Category, Source
from tests.conftest import CAIXABANK_CSV, REVOLUT_CSV


class TestCaixaBankParser:
    """Semicolon-delimited CaixaBank exports."""

    def test_single_row(self):
        """A supermarket row comes out fully normalized."""
        text = "Concepto;Fecha;Importe;Saldo\nMercadona Barcelona;01/03/2025;-45,30;1200,00\n"
        [txn] = CaixaBankParser().parse(text)

        assert txn.date == date(2025, 3, 1)
        assert txn.concept == "Mercadona Barcelona"
        assert txn.amount == Decimal("-45.30")
        assert txn.balance == Decimal("1200.00")
        assert txn.category == Category.supermarket
        assert txn.source == Source.caixabank
        assert txn.id == "caixabank-0-01/03/2025"
        assert txn.original_row == "Mercadona Barcelona;01/03/2025;-45,30;1200,00"

    def test_sorted_most_recent_first(self):
        transactions = CaixaBankParser().parse(CAIXABANK_CSV)
        assert [t.date for t in transactions] == [
            date(2025, 3, 5),
            date(2025, 3, 1),
            date(2025, 2, 28),
        ]

    def test_positive_transfer(self):
        """'Transf.' on money in is a transfer, not income."""
        transactions = CaixaBankParser().parse(CAIXABANK_CSV)
        nomina = next(t for t in transactions if "NOMINA" in t.concept)
        assert nomina.amount == Decimal("2150.00")
        assert nomina.category == Category.transfers

    def test_header_whitespace_trimmed(self):
        text = " Concepto ; Fecha ;Importe; Saldo\nFarmacia;02/01/2025;-3,20;10,00\n"
        [txn] = CaixaBankParser().parse(text)
        assert txn.category == Category.health

    def test_bad_rows_skipped(self):
        """Bad dates, missing fields and zero amounts drop only their own row."""
        text = (
            "Concepto;Fecha;Importe;Saldo\n"
            "Bad date;32/13/2025;-1,00;0\n"
            ";01/01/2025;-1,00;0\n"
            "No amount;01/01/2025;;0\n"
            "Zero;01/01/2025;0,00;0\n"
            "Garbage amount;01/01/2025;abc;0\n"
            "Condis;02/01/2025;-7,80;\n"
        )
        [txn] = CaixaBankParser().parse(text)
        assert txn.concept == "Condis"
        assert txn.balance == 0
        assert txn.id == "caixabank-5-02/01/2025"

    def test_missing_header_yields_nothing(self):
        assert CaixaBankParser().parse("foo,bar\n1,2\n") == []
        assert CaixaBankParser().parse("") == []

    def test_no_zero_amounts(self):
        assert all(t.amount != 0 for t in CaixaBankParser().parse(CAIXABANK_CSV))


class TestRevolutParser:
    """Multi-section Revolut exports."""

    def test_money_out_row(self):
        text = "Date,Description,Money out,Money in,Balance\n5 Mar 2025,Spotify,9.99,,90.01\n"
        [txn] = RevolutParser().parse(text)

        assert txn.date == date(2025, 3, 5)
        assert txn.amount == Decimal("-9.99")
        assert txn.balance == Decimal("90.01")
        assert txn.category == Category.subscriptions
        assert txn.source == Source.revolut
        assert txn.id == "revolut-0-5 Mar 2025"

    def test_amount_rounded_to_cents(self):
        text = "Date,Description,Money out,Money in,Balance\n4 Mar 2025,Coffee,2.555,,97.445\n"
        [txn] = RevolutParser().parse(text)
        assert txn.amount == Decimal("-2.56")
        assert txn.balance == Decimal("97.45")

    def test_sub_cent_amount_dropped(self):
        text = "Date,Description,Money out,Money in,Balance\n4 Mar 2025,Fee,0.004,,10.00\n"
        assert RevolutParser().parse(text) == []

    def test_sections(self):
        """Summary sections and interest notices are skipped."""
        transactions = RevolutParser().parse(REVOLUT_CSV)

        assert [t.concept for t in transactions] == ["Spotify", "Taxi Barcelona", "Top-up by card"]
        assert all("Interés" not in t.concept for t in transactions)

    def test_ids_unique_across_sections(self):
        transactions = RevolutParser().parse(REVOLUT_CSV)
        ids = [t.id for t in transactions]
        assert len(ids) == len(set(ids))
        assert "revolut-3-5 Mar 2025" in ids

    def test_money_in_takes_precedence(self):
        text = "Date,Description,Money out,Money in,Balance\n1 Apr 2025,Refund,5.00,7.50,10\n"
        [txn] = RevolutParser().parse(text)
        assert txn.amount == Decimal("7.50")
        assert txn.category == Category.income

    @pytest.mark.parametrize("row", [
        "1 Apr 2025,Nothing,,,10",
        "1 Foo 2025,Bad month,3.00,,10",
        ",No date,3.00,,10",
        "1 Apr 2025,,3.00,,10",
    ])
    def test_rows_dropped(self, row):
        text = f"Date,Description,Money out,Money in,Balance\n{row}\n"
        assert RevolutParser().parse(text) == []

    def test_quotes_removed(self):
        text = 'Date,Description,Money out,Money in,Balance\n2 Apr 2025,"Cafe ""Sol""",3.10,,10\n'
        [txn] = RevolutParser().parse(text)
        assert txn.concept == "Cafe Sol"
        assert txn.category == Category.food

    def test_crlf_line_endings(self):
        text = REVOLUT_CSV.replace("\n", "\r\n")
        assert len(RevolutParser().parse(text)) == 3

    def test_no_header_yields_nothing(self):
        assert RevolutParser().parse("Summary for Savings\nProduct,Balance\nSavings,1\n") == []
