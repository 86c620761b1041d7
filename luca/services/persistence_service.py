"""
Persistence for parsed transactions.

Batches are written to the database in chunks of at most
``settings.persist_batch_size`` rows. Storage failures never propagate: the
affected rows go to a local JSON store instead and the returned SaveResult
says how many rows the database actually confirmed.
"""

import logging
import threading
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from luca.config import settings
from luca.models.transaction import StoredTransaction
from luca.models.upload import Upload
from luca.parsers.normalizers import to_cents
from luca.schemas.category import Source
from luca.schemas.import_file import SaveResult
from luca.schemas.transaction import Transaction
from luca.services.deduplication_service import merge, storage_key

logger = logging.getLogger(__name__)

# Single writer: merges into the shared stores happen one batch at a time
_WRITE_LOCK = threading.Lock()

_LOCAL_STORE = TypeAdapter(Dict[str, List[Transaction]])


def date_range(transactions: Sequence[Transaction]) -> Tuple[Optional[date], Optional[date]]:
    """Earliest and latest transaction date, (None, None) when empty"""
    if not transactions:
        return None, None
    dates = [t.date for t in transactions]
    return min(dates), max(dates)


def _chunks(items: Sequence[Transaction], size: int) -> Iterator[Sequence[Transaction]]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


# ---- local JSON store ----

def _read_local_store() -> Dict[str, List[Transaction]]:
    path = Path(settings.local_store_path)
    if not path.exists():
        return {}
    try:
        return _LOCAL_STORE.validate_json(path.read_bytes())
    except (OSError, ValidationError) as e:
        logger.warning(f"Local store {path} unreadable, treating as empty: {e}")
        return {}


def load_local_store(user_id: str) -> List[Transaction]:
    return _read_local_store().get(user_id, [])


def save_to_local_store(user_id: str, transactions: Sequence[Transaction]) -> int:
    """Merge transactions into the local store. Returns how many were new."""
    path = Path(settings.local_store_path)
    store = _read_local_store()
    existing = store.get(user_id, [])
    merged = merge(existing, transactions)
    store[user_id] = merged

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(_LOCAL_STORE.dump_json(store, indent=2))
    except OSError as e:
        logger.error(f"Could not write local store {path}: {e}")
        return 0

    return len(merged) - len(existing)


# ---- database ----

def _insert_chunk(
    db: Session,
    user_id: str,
    upload_id: str,
    chunk: Sequence[Transaction]
) -> Tuple[int, int]:
    """Insert rows not already stored. Returns (saved, skipped)."""
    dates = [t.date for t in chunk]
    rows = db.query(
        StoredTransaction.date,
        StoredTransaction.concept,
        StoredTransaction.amount,
        StoredTransaction.source
    ).filter(
        StoredTransaction.user_id == user_id,
        StoredTransaction.date >= min(dates),
        StoredTransaction.date <= max(dates)
    ).all()
    seen = {(r.date, r.concept, to_cents(Decimal(r.amount)), r.source) for r in rows}

    new_rows = []
    for txn in chunk:
        key = storage_key(txn)
        amount = to_cents(txn.amount)
        if key in seen:
            continue
        seen.add(key)
        new_rows.append(StoredTransaction(
            user_id=user_id,
            upload_id=upload_id,
            date=txn.date,
            concept=txn.concept,
            amount=amount,
            balance=to_cents(txn.balance),
            category=txn.category,
            source=txn.source,
            is_income=amount > 0
        ))

    db.add_all(new_rows)
    db.commit()
    return len(new_rows), len(chunk) - len(new_rows)


def save_upload(
    db: Session,
    user_id: str,
    filename: str,
    source: Source,
    transactions: Sequence[Transaction],
    batch_size: Optional[int] = None
) -> SaveResult:
    """
    Record an upload and store its transactions.

    ``saved`` counts rows confirmed by the authoritative store: the database,
    or the local store when remote persistence is disabled. Rows from failed
    chunks are kept locally and counted in ``stored_locally`` instead.
    """
    batch_size = batch_size or settings.persist_batch_size
    result = SaveResult(attempted=len(transactions))

    with _WRITE_LOCK:
        if not settings.remote_persistence_enabled:
            result.saved = save_to_local_store(user_id, transactions)
            result.skipped = len(transactions) - result.saved
            return result

        first, last = date_range(transactions)
        upload = Upload(
            user_id=user_id,
            filename=filename,
            source=source,
            transaction_count=len(transactions),
            date_range_from=first,
            date_range_to=last
        )
        try:
            db.add(upload)
            db.commit()
            upload_id = upload.id
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Could not record upload {filename}, keeping it locally: {e}")
            result.stored_locally = save_to_local_store(user_id, transactions)
            return result

        result.upload_id = upload_id
        failed: List[Transaction] = []

        for i, chunk in enumerate(_chunks(transactions, batch_size)):
            try:
                saved, skipped = _insert_chunk(db, user_id, upload_id, chunk)
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Chunk {i} of upload {upload_id} failed ({len(chunk)} rows): {e}")
                result.failed_chunks.append(i)
                failed.extend(chunk)
                continue
            result.saved += saved
            result.skipped += skipped

        if failed:
            result.stored_locally = save_to_local_store(user_id, failed)

        try:
            upload.transactions_saved = result.saved
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning(f"Could not update saved count for upload {upload_id}: {e}")

    return result


def _to_transaction(row: StoredTransaction) -> Transaction:
    return Transaction(
        id=row.id,
        date=row.date,
        concept=row.concept,
        amount=Decimal(row.amount),
        balance=Decimal(row.balance) if row.balance is not None else Decimal('0'),
        category=row.category,
        source=row.source
    )


def load_transactions(db: Session, user_id: str, limit: Optional[int] = None) -> List[Transaction]:
    """
    Load a user's transactions, most recent first.
    Rows that only made it to the local store are included.
    """
    limit = limit or settings.load_limit
    local = load_local_store(user_id)

    if not settings.remote_persistence_enabled:
        transactions = local
    else:
        try:
            rows = db.query(StoredTransaction).filter(
                StoredTransaction.user_id == user_id
            ).order_by(StoredTransaction.date.desc()).limit(limit).all()
            transactions = merge([_to_transaction(r) for r in rows], local)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Loading transactions failed, using local store: {e}")
            transactions = local

    return sorted(transactions, key=lambda t: t.date, reverse=True)[:limit]


def load_uploads(db: Session, user_id: str, limit: int = 20) -> List[Upload]:
    """Get recent upload history"""
    return db.query(Upload).filter(
        Upload.user_id == user_id
    ).order_by(Upload.created_at.desc()).limit(limit).all()
