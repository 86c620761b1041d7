"""
Main API router.
"""

from fastapi import APIRouter
from luca.api import categories, imports, transactions, dashboard

api_router = APIRouter()

api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(imports.router)
api_router.include_router(transactions.router)
api_router.include_router(dashboard.router)
