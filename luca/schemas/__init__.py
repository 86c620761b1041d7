"""
Pydantic schemas package.
"""

from luca.schemas.category import (
    Category,
    Source,
    CATEGORY_CONFIG,
    CategoryResponse,
)
from luca.schemas.transaction import (
    Transaction,
    CategorizeRequest,
    CategorizeResponse,
)
from luca.schemas.analytics import (
    MonthlyBreakdown,
    CategoryBreakdown,
    FinancialSummary,
    DetectedSubscription,
)
from luca.schemas.import_file import (
    ImportStatus,
    SaveResult,
    ImportResult,
    UploadResponse,
)

__all__ = [
    "Category",
    "Source",
    "CATEGORY_CONFIG",
    "CategoryResponse",
    "Transaction",
    "CategorizeRequest",
    "CategorizeResponse",
    "MonthlyBreakdown",
    "CategoryBreakdown",
    "FinancialSummary",
    "DetectedSubscription",
    "ImportStatus",
    "SaveResult",
    "ImportResult",
    "UploadResponse",
]
