"""
Revolut CSV parser.

A Revolut account statement is several CSV sections glued together, each
introduced by a title line such as ``Transactions for Current account`` or
``Summary for Savings``. Only sections carrying the transaction header are
read; summaries and anything else are ignored.
"""

import csv
import io
import logging
import re
from typing import Iterator

from luca.parsers.base import BaseParser, ParsedRow
from luca.parsers.normalizers import parse_dialect_b_amount, parse_dialect_b_date
from luca.schemas.category import Source

logger = logging.getLogger(__name__)

HEADER = 'Date,Description,Money out,Money in,Balance'
SECTION_SPLIT = re.compile(r'\n(?=Transactions for |Summary for )')
INTEREST_NOTICE = 'interés neto pagado'


class RevolutParser(BaseParser):
    """Parser for Revolut consolidated statement exports"""

    source = Source.revolut

    def parse_rows(self, text: str) -> Iterator[ParsedRow]:
        # Row indexes run across sections so ids stay unique within the file
        index = -1

        for section in SECTION_SPLIT.split(text.replace('\r\n', '\n')):
            header_idx = section.find(HEADER)
            if header_idx == -1:
                continue

            reader = csv.DictReader(io.StringIO(section[header_idx:]))
            reader.fieldnames = [h.strip() for h in reader.fieldnames]

            for row in reader:
                index += 1
                raw_date = (row.get('Date') or '').strip()
                description = row.get('Description') or ''
                if not raw_date or not description:
                    continue

                txn_date = parse_dialect_b_date(raw_date)
                if txn_date is None:
                    logger.debug(f"Skipping row {index} with bad date {raw_date!r}")
                    continue

                if INTEREST_NOTICE in description.lower():
                    continue

                concept = description.replace('"', '').strip()
                if not concept:
                    continue

                money_out = parse_dialect_b_amount(row.get('Money out'))
                money_in = parse_dialect_b_amount(row.get('Money in'))
                amount = money_in if money_in > 0 else -money_out

                yield ParsedRow(
                    index=index,
                    raw_date=raw_date,
                    date=txn_date,
                    concept=concept,
                    amount=amount,
                    balance=parse_dialect_b_amount(row.get('Balance')),
                    original_row=f"{row.get('Date')},{description},{row.get('Money out')},{row.get('Money in')}",
                )
