"""
Transaction database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Date, Numeric, Text, ForeignKey, Enum, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from luca.database import Base
from luca.schemas.category import Category, Source


class StoredTransaction(Base):
    """Persisted transaction, one row per real-world ledger event per user."""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=False, index=True)
    upload_id = Column(String(36), ForeignKey("uploads.id"), nullable=True)
    date = Column(Date, nullable=False, index=True)
    concept = Column(Text, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)  # Negative = expense, positive = income
    balance = Column(Numeric(12, 2), nullable=True)
    category = Column(Enum(Category), nullable=False)
    source = Column(Enum(Source, name="transaction_source"), nullable=False)
    is_income = Column(Boolean, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    upload = relationship("Upload", back_populates="transactions")

    __table_args__ = (
        UniqueConstraint("user_id", "date", "concept", "amount", "source", name="uq_transaction_dedup"),
        Index("idx_transaction_user_date", "user_id", "date"),
    )
