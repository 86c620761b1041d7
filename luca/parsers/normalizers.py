"""
Amount and date normalizers for each bank's export dialect.

Dialect A (CaixaBank): ``-1.234,56 EUR`` amounts and ``DD/MM/YYYY`` dates.
Dialect B (Revolut): ``€1,234.56`` amounts and ``5 Mar 2025`` dates with
Spanish or English month abbreviations.

Nothing here raises on malformed input. Amount parsers report failure as
``None`` (dialect A) or ``0`` (dialect B); date parsers return ``None`` and the
caller skips the row.
"""

import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

MONTHS = {
    'ene': 1, 'jan': 1,
    'feb': 2,
    'mar': 3,
    'abr': 4, 'apr': 4,
    'may': 5,
    'jun': 6,
    'jul': 7,
    'ago': 8, 'aug': 8,
    'sep': 9, 'sept': 9,
    'oct': 10,
    'nov': 11,
    'dic': 12, 'dec': 12,
}

CENT = Decimal('0.01')


def _to_decimal(value: str) -> Optional[Decimal]:
    try:
        number = Decimal(value)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def to_cents(amount: Decimal) -> Decimal:
    """Round to the 2-decimal scale amounts are stored with."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def parse_dialect_a_amount(raw: Optional[str]) -> Optional[Decimal]:
    """Parse ``+1.234,56 EUR`` style amounts. Sign defaults to positive."""
    if raw is None:
        return None

    cleaned = raw.replace('EUR', '').strip()
    sign = -1 if cleaned.startswith('-') else 1
    cleaned = cleaned.lstrip('+-').strip()
    cleaned = cleaned.replace('.', '').replace(',', '.')

    number = _to_decimal(cleaned)
    if number is None:
        return None
    return number * sign


def parse_dialect_a_date(raw: Optional[str]) -> Optional[date]:
    """Parse ``DD/MM/YYYY``."""
    if not raw:
        return None

    parts = raw.strip().split('/')
    if len(parts) != 3:
        return None

    try:
        day, month, year = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError:
        return None


def format_dialect_a_amount(amount: Decimal) -> str:
    """Inverse of parse_dialect_a_amount: ``Decimal('-1234.5')`` -> ``-1.234,50``."""
    sign = '-' if amount < 0 else ''
    whole, _, cents = f"{abs(amount):,.2f}".partition('.')
    return f"{sign}{whole.replace(',', '.')},{cents}"


def format_dialect_a_date(value: date) -> str:
    return value.strftime('%d/%m/%Y')


def parse_dialect_b_amount(raw: Optional[str]) -> Decimal:
    """Parse ``€1,234.56`` style amounts. Empty or invalid input is 0."""
    if not raw or not raw.strip():
        return Decimal('0')

    cleaned = re.sub(r'[€$£,\s]', '', raw).replace(',', '.')

    number = _to_decimal(cleaned)
    if number is None:
        return Decimal('0')
    return number


def parse_dialect_b_date(raw: Optional[str]) -> Optional[date]:
    """Parse ``5 Mar 2025`` / ``12 sept. 2024``."""
    if not raw:
        return None

    parts = raw.split()
    if len(parts) < 3:
        return None

    month = MONTHS.get(parts[1].lower().replace('.', ''))
    if month is None:
        return None

    try:
        return date(int(parts[2]), month, int(parts[0]))
    except ValueError:
        return None
