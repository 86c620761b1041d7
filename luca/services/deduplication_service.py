"""
Deduplication service for transactions.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, List, Tuple

from luca.parsers.normalizers import to_cents
from luca.schemas.category import Source
from luca.schemas.transaction import Transaction

DedupKey = Tuple[date, str, Decimal]
StorageKey = Tuple[date, str, Decimal, Source]


def dedup_key(txn: Transaction) -> DedupKey:
    """
    Identity of a real-world ledger event: date|concept|amount.
    Ids are not used; they depend on row position in the export.
    """
    return (txn.date, txn.concept, txn.amount)


def storage_key(txn: Transaction) -> StorageKey:
    """
    Dedup key used at the storage boundary, which also scopes by source.
    Amounts are compared at the stored 2-decimal scale.
    """
    return (txn.date, txn.concept, to_cents(txn.amount), txn.source)


def merge(existing: Iterable[Transaction], incoming: Iterable[Transaction]) -> List[Transaction]:
    """
    Append incoming transactions that are not already present.
    Existing records are kept as they are and in their order.
    """
    merged = list(existing)
    seen = {dedup_key(t) for t in merged}

    for txn in incoming:
        key = dedup_key(txn)
        if key in seen:
            continue
        seen.add(key)
        merged.append(txn)

    return merged
