"""
Analytics over a list of transactions.

Every function here is pure: the breakdowns are recomputed from the
transactions each time and never cached. Totals are summed as Decimal and only
converted to float in the returned schemas.
"""

import re
from datetime import date
from decimal import Decimal
from typing import Dict, List, Literal, Optional, Sequence

from luca.parsers.normalizers import to_cents
from luca.schemas.analytics import CategoryBreakdown, DetectedSubscription, FinancialSummary, MonthlyBreakdown
from luca.schemas.category import CATEGORY_CONFIG, Category
from luca.schemas.transaction import Transaction

MONTH_LABELS_ES = ['Ene', 'Feb', 'Mar', 'Abr', 'May', 'Jun', 'Jul', 'Ago', 'Sep', 'Oct', 'Nov', 'Dic']

BreakdownType = Literal['expenses', 'income', 'all']
TransactionType = Literal['income', 'expense', 'all']

ZERO = Decimal('0')


def get_month_key(value: date) -> str:
    return f"{value.year}-{value.month:02d}"


def get_month_label(key: str) -> str:
    """'2025-03' -> 'Mar 2025'"""
    year, month = key.split('-')
    return f"{MONTH_LABELS_ES[int(month) - 1]} {year}"


def _month_count(transactions: Sequence[Transaction]) -> int:
    return len({get_month_key(t.date) for t in transactions}) or 1


def compute_monthly_breakdown(transactions: Sequence[Transaction]) -> List[MonthlyBreakdown]:
    """Income, expenses and per-category spending for each month, oldest first"""
    months: Dict[str, Dict] = {}

    for txn in transactions:
        key = get_month_key(txn.date)
        month = months.setdefault(key, {
            'income': ZERO,
            'expenses': ZERO,
            'by_category': {},
            'count': 0,
        })
        if txn.amount > 0:
            month['income'] += txn.amount
        else:
            month['expenses'] += abs(txn.amount)
            month['by_category'][txn.category] = month['by_category'].get(txn.category, ZERO) + abs(txn.amount)
        month['count'] += 1

    return [
        MonthlyBreakdown(
            month=key,
            label=get_month_label(key),
            income=float(data['income']),
            expenses=float(data['expenses']),
            net=float(data['income'] - data['expenses']),
            by_category={cat: float(total) for cat, total in data['by_category'].items()},
            transaction_count=data['count']
        )
        for key, data in sorted(months.items())
    ]


def compute_category_breakdown(
    transactions: Sequence[Transaction],
    type: BreakdownType = 'expenses'
) -> List[CategoryBreakdown]:
    """Totals per category over expenses, income or everything, largest first"""
    if type == 'expenses':
        filtered = [t for t in transactions if t.amount < 0]
    elif type == 'income':
        filtered = [t for t in transactions if t.amount > 0]
    else:
        filtered = list(transactions)

    totals: Dict[Category, Decimal] = {}
    counts: Dict[Category, int] = {}
    for txn in filtered:
        totals[txn.category] = totals.get(txn.category, ZERO) + abs(txn.amount)
        counts[txn.category] = counts.get(txn.category, 0) + 1

    grand_total = sum(totals.values(), ZERO)
    months = _month_count(filtered)

    breakdown = []
    for category, total in sorted(totals.items(), key=lambda x: x[1], reverse=True):
        config = CATEGORY_CONFIG[category]
        breakdown.append(CategoryBreakdown(
            category=category,
            label=config['label'],
            color=config['color'],
            icon=config['icon'],
            total=float(total),
            count=counts[category],
            percentage=float(total / grand_total * 100) if grand_total > 0 else 0.0,
            avg_per_month=float(total / months)
        ))

    return breakdown


def compute_financial_summary(transactions: Sequence[Transaction]) -> FinancialSummary:
    month_count = _month_count(transactions)

    total_income = sum((t.amount for t in transactions if t.amount > 0), ZERO)
    total_expenses = sum((abs(t.amount) for t in transactions if t.amount < 0), ZERO)

    categories = compute_category_breakdown(transactions, 'expenses')
    top_category = categories[0].label if categories else 'N/A'

    return FinancialSummary(
        total_income=float(total_income),
        total_expenses=float(total_expenses),
        net_balance=float(total_income - total_expenses),
        avg_monthly_income=float(total_income / month_count),
        avg_monthly_expenses=float(total_expenses / month_count),
        top_expense_category=top_category,
        month_count=month_count,
        transaction_count=len(transactions)
    )


def get_recent_transactions(transactions: Sequence[Transaction], limit: int = 20) -> List[Transaction]:
    return sorted(transactions, key=lambda t: t.date, reverse=True)[:limit]


def get_top_expenses(transactions: Sequence[Transaction], limit: int = 10) -> List[Transaction]:
    """Largest outflows first"""
    expenses = [t for t in transactions if t.amount < 0]
    return sorted(expenses, key=lambda t: t.amount)[:limit]


def _subscription_name(amount: Decimal) -> str:
    """Guess a known service from its usual monthly charge"""
    def near(price: str) -> bool:
        return abs(amount - Decimal(price)) < Decimal('0.5')

    if near('17.99'):
        return 'Spotify Premium'
    if near('0.99'):
        return 'Apple iCloud'
    if Decimal('18') <= amount <= Decimal('20'):
        return 'ChatGPT Plus'
    if near('12'):
        return 'Grit Ventures'
    if near('2.36'):
        return 'Apple One'
    return 'Suscripción'


def detect_subscriptions(transactions: Sequence[Transaction]) -> List[DetectedSubscription]:
    """
    Find recurring subscription charges.

    Outflows in the subscriptions category are grouped by their concept with
    everything but letters removed. A group charged at least twice becomes one
    entry with its average amount, most expensive first.
    """
    groups: Dict[str, List[Transaction]] = {}
    for txn in transactions:
        if txn.category != Category.subscriptions or txn.amount >= 0:
            continue
        key = re.sub(r'[^a-z]', '', txn.concept.lower())
        groups.setdefault(key, []).append(txn)

    detected = []
    for charges in groups.values():
        if len(charges) < 2:
            continue
        amounts = [abs(t.amount) for t in charges]
        latest = max(charges, key=lambda t: t.date)
        detected.append(DetectedSubscription(
            name=_subscription_name(amounts[0]),
            concept=latest.concept,
            amount=float(to_cents(sum(amounts, ZERO) / len(amounts))),
            last_charge=latest.date,
            occurrences=len(charges)
        ))

    detected.sort(key=lambda s: s.amount, reverse=True)
    return detected


def filter_transactions(
    transactions: Sequence[Transaction],
    category: Optional[Category] = None,
    search: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    type: TransactionType = 'all'
) -> List[Transaction]:
    """Filter by category, concept substring, inclusive date range and direction"""
    needle = search.lower() if search else None
    result = []

    for txn in transactions:
        if category and txn.category != category:
            continue
        if needle and needle not in txn.concept.lower():
            continue
        if date_from and txn.date < date_from:
            continue
        if date_to and txn.date > date_to:
            continue
        if type == 'income' and txn.amount <= 0:
            continue
        if type == 'expense' and txn.amount >= 0:
            continue
        result.append(txn)

    return result
