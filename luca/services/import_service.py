"""
Import service for statement uploads.
"""

import asyncio
import logging
from typing import List, NamedTuple, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from luca.parsers.detection import detect_format, get_parser
from luca.schemas.category import Source
from luca.schemas.import_file import ImportResult, ImportStatus
from luca.schemas.transaction import Transaction
from luca.services.persistence_service import date_range, save_upload

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = "PDF and other document formats are not supported yet. Please upload a CSV export."


class ParsedFile(NamedTuple):
    filename: str
    source: Optional[Source]
    transactions: List[Transaction]
    error: Optional[str] = None


def decode_content(content: bytes) -> str:
    """Decode an uploaded file. Bank exports are UTF-8 or Latin-1."""
    try:
        return content.decode('utf-8-sig')
    except UnicodeDecodeError:
        return content.decode('latin-1')


def parse_upload(filename: str, content: bytes) -> ParsedFile:
    """Detect the bank format of one file and parse it"""
    text = decode_content(content)
    file_format = detect_format(filename, text)

    parser = get_parser(file_format)
    if parser is None:
        logger.info(f"Rejecting unsupported file {filename}")
        return ParsedFile(filename, None, [], UNSUPPORTED_MESSAGE)

    transactions = parser.parse(text)
    if not transactions:
        logger.warning(f"No transactions found in {filename} (parsed as {file_format.value})")
        return ParsedFile(filename, parser.source, [], f"No transactions found in {filename}")

    return ParsedFile(filename, parser.source, transactions)


def _store(db: Session, user_id: str, parsed: ParsedFile) -> ImportResult:
    if parsed.error:
        return ImportResult(
            filename=parsed.filename,
            status=ImportStatus.ERROR,
            source=parsed.source,
            error=parsed.error
        )

    saved = save_upload(db, user_id, parsed.filename, parsed.source, parsed.transactions)
    first, last = date_range(parsed.transactions)

    error = None
    if saved.failed_chunks or (saved.upload_id is None and saved.stored_locally):
        error = f"Saved {saved.saved} of {saved.attempted} transactions; {saved.stored_locally} kept locally"

    return ImportResult(
        filename=parsed.filename,
        status=ImportStatus.DONE,
        source=parsed.source,
        transactions_parsed=len(parsed.transactions),
        transactions_saved=saved.saved,
        date_range_from=first,
        date_range_to=last,
        upload_id=saved.upload_id,
        error=error
    )


async def import_files(
    db: Session,
    user_id: str,
    files: Sequence[Tuple[str, bytes]]
) -> List[ImportResult]:
    """
    Parse several files concurrently and store each one as it finishes.
    Results come back in completion order. A failing file does not affect the others.
    Storing runs in a worker thread, one file at a time, so database waits
    do not block the event loop.
    """
    async def _parse(filename: str, content: bytes) -> ParsedFile:
        try:
            return await asyncio.to_thread(parse_upload, filename, content)
        except Exception as e:
            logger.error(f"Failed to parse {filename}: {e}")
            return ParsedFile(filename, None, [], str(e))

    results = []
    for next_done in asyncio.as_completed([_parse(name, content) for name, content in files]):
        parsed = await next_done
        results.append(await asyncio.to_thread(_store, db, user_id, parsed))

    return results
