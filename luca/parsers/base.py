"""
Base parser class for bank statement exports.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Iterator, List, NamedTuple

from luca.parsers.normalizers import to_cents
from luca.schemas.category import Source
from luca.schemas.transaction import Transaction
from luca.services.categorization_service import categorize

logger = logging.getLogger(__name__)


class ParsedRow(NamedTuple):
    """A source row whose required fields have been normalized."""
    index: int
    raw_date: str
    date: date
    concept: str
    amount: Decimal
    balance: Decimal
    original_row: str


class BaseParser(ABC):
    """Base class for bank export parsers"""

    source: Source

    @abstractmethod
    def parse_rows(self, text: str) -> Iterator[ParsedRow]:
        """
        Yield normalized rows from the decoded file text.
        Rows with a missing field or an unparseable date are not yielded.
        """
        pass

    def parse(self, text: str) -> List[Transaction]:
        """Parse file text into categorized transactions, most recent first"""
        transactions = []

        for row in self.parse_rows(text):
            amount = to_cents(row.amount)
            if amount == 0:
                logger.debug(f"Skipping zero-amount row {row.index}: {row.original_row}")
                continue

            transactions.append(Transaction(
                id=f"{self.source.value}-{row.index}-{row.raw_date}",
                date=row.date,
                concept=row.concept,
                amount=amount,
                balance=to_cents(row.balance),
                category=categorize(row.concept, amount),
                source=self.source,
                original_row=row.original_row,
            ))

        transactions.sort(key=lambda t: t.date, reverse=True)
        logger.info(f"Parsed {len(transactions)} {self.source.value} transactions")
        return transactions
