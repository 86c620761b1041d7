"""Shared test fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal

from luca.config import settings
from luca.database import Base
from luca.dependencies import get_db
from luca.main import app
from luca.schemas.category import Category, Source
from luca.schemas.transaction import Transaction
import luca.models  # noqa: F401


CAIXABANK_CSV = (
    "Concepto;Fecha;Importe;Saldo\n"
    "Mercadona Barcelona;01/03/2025;-45,30;1200,00\n"
    "Transf. a su favor NOMINA;28/02/2025;+2.150,00EUR;1245,30\n"
    "Farmacia Gracia;05/03/2025;-12,50;1187,50\n"
)

REVOLUT_CSV = (
    "Transactions for Current account\n"
    "Date,Description,Money out,Money in,Balance\n"
    "5 Mar 2025,Spotify,9.99,,990.01\n"
    "3 Mar 2025,Top-up by card,,1000.00,1000.00\n"
    "\n"
    "Summary for Savings\n"
    "Product,Starting balance,Money out,Money in,Ending balance\n"
    "Savings,0.00,0.00,100.00,100.00\n"
    "\n"
    "Transactions for Savings\n"
    "Date,Description,Money out,Money in,Balance\n"
    "31 mar 2025,Interés neto pagado,,0.12,100.12\n"
    "5 Mar 2025,Taxi Barcelona,18.40,,81.72\n"
)


def make_txn(
    concept="Test",
    amount="-10.00",
    txn_date=date(2025, 3, 1),
    category=Category.other,
    source=Source.caixabank,
    txn_id=None
) -> Transaction:
    """Build a Transaction with sensible defaults."""
    return Transaction(
        id=txn_id or f"{source.value}-0-{txn_date.isoformat()}-{concept}",
        date=txn_date,
        concept=concept,
        amount=Decimal(amount),
        category=category,
        source=source
    )


@pytest.fixture(autouse=True)
def local_store(tmp_path, monkeypatch):
    """Point the local fallback store at a temp file for every test."""
    path = tmp_path / "local_transactions.json"
    monkeypatch.setattr(settings, "local_store_path", str(path))
    monkeypatch.setattr(settings, "remote_persistence_enabled", True)
    return path


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_transactions():
    """Two months of mixed income and spending."""
    return [
        make_txn("Nomina ACME", "2000.00", date(2025, 2, 28), Category.income),
        make_txn("Mercadona", "-80.00", date(2025, 2, 10), Category.supermarket),
        make_txn("Bar Pepe", "-20.00", date(2025, 2, 12), Category.food),
        make_txn("Mercadona", "-60.00", date(2025, 3, 3), Category.supermarket),
        make_txn("Spotify", "-9.99", date(2025, 3, 5), Category.subscriptions, Source.revolut),
        make_txn("Bizum Ana", "15.00", date(2025, 3, 6), Category.transfers, Source.revolut),
    ]
