"""
Dashboard API endpoints.
"""

from typing import List, Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from luca.dependencies import get_db, get_user_id
from luca.schemas.analytics import CategoryBreakdown, DetectedSubscription, FinancialSummary, MonthlyBreakdown
from luca.schemas.transaction import Transaction
from luca.services import analytics_service
from luca.services.persistence_service import load_transactions

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=FinancialSummary)
def get_summary(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """
    Get totals over all of the user's transactions.
    Returns: total_income, total_expenses, net_balance, monthly averages, top category
    """
    return analytics_service.compute_financial_summary(load_transactions(db, user_id))


@router.get("/monthly", response_model=List[MonthlyBreakdown])
def get_monthly_breakdown(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get per-month income, expenses and net, oldest month first"""
    return analytics_service.compute_monthly_breakdown(load_transactions(db, user_id))


@router.get("/categories", response_model=List[CategoryBreakdown])
def get_category_breakdown(
    type: Literal['expenses', 'income', 'all'] = 'expenses',
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get totals per category, largest first"""
    return analytics_service.compute_category_breakdown(load_transactions(db, user_id), type)


@router.get("/recent-transactions", response_model=List[Transaction])
def get_recent_transactions(
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get most recent transactions for dashboard widget"""
    return analytics_service.get_recent_transactions(load_transactions(db, user_id), limit)


@router.get("/top-expenses", response_model=List[Transaction])
def get_top_expenses(
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get the largest outflows"""
    return analytics_service.get_top_expenses(load_transactions(db, user_id), limit)


@router.get("/subscriptions", response_model=List[DetectedSubscription])
def get_subscriptions(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get subscriptions charged more than once, most expensive first"""
    return analytics_service.detect_subscriptions(load_transactions(db, user_id))
