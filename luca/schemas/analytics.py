"""
Analytics schemas.
"""

from pydantic import BaseModel
from typing import Dict
from datetime import date

from luca.schemas.category import Category


class MonthlyBreakdown(BaseModel):
    month: str  # YYYY-MM
    label: str  # "Ene 2025"
    income: float
    expenses: float
    net: float
    by_category: Dict[Category, float]
    transaction_count: int


class CategoryBreakdown(BaseModel):
    category: Category
    label: str
    color: str
    icon: str
    total: float
    count: int
    percentage: float
    avg_per_month: float


class FinancialSummary(BaseModel):
    total_income: float
    total_expenses: float
    net_balance: float
    avg_monthly_income: float
    avg_monthly_expenses: float
    top_expense_category: str
    month_count: int
    transaction_count: int


class DetectedSubscription(BaseModel):
    """A subscription charge that repeats under the same concept."""
    name: str
    concept: str
    amount: float  # average charge
    frequency: str = "monthly"
    last_charge: date
    occurrences: int
