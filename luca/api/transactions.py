"""
Transaction API endpoints.
"""

import csv
import io
from datetime import date
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from luca.dependencies import get_db, get_user_id
from luca.parsers.caixabank import HEADER
from luca.parsers.normalizers import format_dialect_a_amount, format_dialect_a_date
from luca.schemas.category import Category
from luca.schemas.transaction import Transaction, CategorizeRequest, CategorizeResponse
from luca.services.analytics_service import filter_transactions
from luca.services.categorization_service import categorize
from luca.services.persistence_service import load_transactions

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=List[Transaction])
def list_transactions(
    category: Optional[Category] = None,
    search: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    type: Literal['income', 'expense', 'all'] = 'all',
    limit: int = Query(100, ge=1, le=5000),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """List transactions with filtering, most recent first"""
    transactions = filter_transactions(
        load_transactions(db, user_id),
        category=category,
        search=search,
        date_from=start_date,
        date_to=end_date,
        type=type
    )
    return transactions[:limit]


@router.get("/export")
def export_transactions(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Export all transactions as a CaixaBank-style CSV that can be re-imported"""
    output = io.StringIO()
    writer = csv.writer(output, delimiter=';', lineterminator='\n')
    writer.writerow(HEADER.split(';'))
    for txn in load_transactions(db, user_id):
        writer.writerow([
            txn.concept,
            format_dialect_a_date(txn.date),
            format_dialect_a_amount(txn.amount),
            format_dialect_a_amount(txn.balance),
        ])

    return Response(
        content=output.getvalue(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="luca_caixa_export.csv"'}
    )


@router.post("/categorize", response_model=CategorizeResponse)
def categorize_description(request: CategorizeRequest):
    """Categorize a description and signed amount with the rule table"""
    return CategorizeResponse(category=categorize(request.description.strip(), request.amount))
