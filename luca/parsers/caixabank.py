"""
CaixaBank CSV parser.

Semicolon-delimited export with a ``Concepto;Fecha;Importe;Saldo`` header,
``DD/MM/YYYY`` dates and decimal-comma amounts.
"""

import csv
import io
import logging
from decimal import Decimal
from typing import Iterator

from luca.parsers.base import BaseParser, ParsedRow
from luca.parsers.normalizers import parse_dialect_a_amount, parse_dialect_a_date
from luca.schemas.category import Source

logger = logging.getLogger(__name__)

HEADER = 'Concepto;Fecha;Importe;Saldo'


class CaixaBankParser(BaseParser):
    """Parser for CaixaBank account movement exports"""

    source = Source.caixabank

    def parse_rows(self, text: str) -> Iterator[ParsedRow]:
        reader = csv.DictReader(io.StringIO(text), delimiter=';')
        if reader.fieldnames is None:
            return
        reader.fieldnames = [h.strip() for h in reader.fieldnames]

        for index, row in enumerate(reader):
            concept = (row.get('Concepto') or '').strip()
            raw_date = (row.get('Fecha') or '').strip()
            raw_amount = row.get('Importe') or ''
            raw_balance = row.get('Saldo') or ''

            if not concept or not raw_date or not raw_amount.strip():
                continue

            txn_date = parse_dialect_a_date(raw_date)
            if txn_date is None:
                logger.debug(f"Skipping row {index} with bad date {raw_date!r}")
                continue

            amount = parse_dialect_a_amount(raw_amount)
            if amount is None:
                logger.debug(f"Unparseable amount {raw_amount!r} in row {index}")
                amount = Decimal('0')

            yield ParsedRow(
                index=index,
                raw_date=raw_date,
                date=txn_date,
                concept=concept,
                amount=amount,
                balance=parse_dialect_a_amount(raw_balance) or Decimal('0'),
                original_row=f"{row.get('Concepto')};{row.get('Fecha')};{row.get('Importe')};{row.get('Saldo')}",
            )
