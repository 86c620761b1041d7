"""
Category API endpoints.
"""

from typing import List

from fastapi import APIRouter

from luca.schemas.category import CATEGORY_CONFIG, CategoryResponse

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
def list_categories():
    """List the fixed set of categories with their display metadata."""
    return [
        CategoryResponse(id=category, **config)
        for category, config in CATEGORY_CONFIG.items()
    ]
