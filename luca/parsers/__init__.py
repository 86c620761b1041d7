"""
File parsers package.
"""

from luca.parsers.base import BaseParser, ParsedRow
from luca.parsers.caixabank import CaixaBankParser
from luca.parsers.revolut import RevolutParser
from luca.parsers.detection import FileFormat, detect_format, get_parser

__all__ = [
    'BaseParser',
    'ParsedRow',
    'CaixaBankParser',
    'RevolutParser',
    'FileFormat',
    'detect_format',
    'get_parser',
]
