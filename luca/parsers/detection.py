"""
Format detection for uploaded statement files.

Signals are checked in a fixed order: file extension, then bank names in the
filename, then structural markers in the content. When nothing matches the
file is treated as a CaixaBank export.
"""

import enum
from pathlib import PurePath
from typing import Optional

from luca.parsers.base import BaseParser
from luca.parsers.caixabank import CaixaBankParser, HEADER as CAIXABANK_HEADER
from luca.parsers.revolut import RevolutParser

SUPPORTED_EXTENSIONS = ['.csv']


class FileFormat(str, enum.Enum):
    caixabank = "caixabank"
    revolut = "revolut"
    unsupported = "unsupported"


FILENAME_MARKERS = [
    (FileFormat.caixabank, ('caixa',)),
    (FileFormat.revolut, ('revolut', 'consolidated')),
]

# The exact CaixaBank header goes first: its concepts can mention Revolut
CONTENT_MARKERS = [
    (FileFormat.caixabank, (CAIXABANK_HEADER,)),
    (FileFormat.revolut, ('Summary for Savings', 'Revolut')),
]

DEFAULT_FORMAT = FileFormat.caixabank


def detect_format(filename: str, content: str) -> FileFormat:
    """Decide which parser handles a file"""
    if PurePath(filename).suffix.lower() not in SUPPORTED_EXTENSIONS:
        return FileFormat.unsupported

    lower = filename.lower()
    for file_format, markers in FILENAME_MARKERS:
        if any(marker in lower for marker in markers):
            return file_format

    for file_format, markers in CONTENT_MARKERS:
        if any(marker in content for marker in markers):
            return file_format

    # TODO: reject instead of defaulting once a third bank is supported
    return DEFAULT_FORMAT


def get_parser(file_format: FileFormat) -> Optional[BaseParser]:
    """Get the parser for a detected format, None when unsupported"""
    if file_format == FileFormat.caixabank:
        return CaixaBankParser()
    if file_format == FileFormat.revolut:
        return RevolutParser()
    return None
