"""
Upload database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Date, Enum
from sqlalchemy.orm import relationship
from luca.database import Base
from luca.schemas.category import Source


class Upload(Base):
    """One uploaded statement file and the date range it covered."""

    __tablename__ = "uploads"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=False, index=True)
    filename = Column(String(255), nullable=False)
    source = Column(Enum(Source, name="upload_source"), nullable=False)
    transaction_count = Column(Integer, default=0, nullable=False)
    transactions_saved = Column(Integer, default=0, nullable=False)
    date_range_from = Column(Date, nullable=True)
    date_range_to = Column(Date, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    transactions = relationship("StoredTransaction", back_populates="upload")
