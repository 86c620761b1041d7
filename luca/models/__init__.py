"""
Database models package.
"""

from luca.models.upload import Upload
from luca.models.transaction import StoredTransaction

__all__ = [
    "Upload",
    "StoredTransaction",
]
