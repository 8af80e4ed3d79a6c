"""
Test configuration and fixtures for the loan platform tests.
"""
import pytest
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport

from app.core.dependencies import get_loan_store
from app.modules.loans.store import LoanStore
from main import app


# ============================================================
# Store Fixtures
# ============================================================

@pytest.fixture
def store() -> LoanStore:
    """Fresh permissive store for each test"""
    return LoanStore()


@pytest.fixture
def guarded_store() -> LoanStore:
    """Fresh store that rejects out-of-order transitions"""
    return LoanStore(enforce_transitions=True)


@pytest.fixture
def loan_data() -> dict:
    """Loan request used throughout the lifecycle scenarios"""
    return {
        "borrower": "borrower-principal-1",
        "amount": 1000,
        "collateral_amount": 1500,
        "interest_rate": 0.05,
        "duration_days": 30,
    }


# ============================================================
# API Client Fixtures
# ============================================================

async def _client_for(loan_store: LoanStore) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_loan_store] = lambda: loan_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def client(store) -> AsyncGenerator[AsyncClient, None]:
    """Create test client bound to the permissive store"""
    async for ac in _client_for(store):
        yield ac


@pytest.fixture
async def guarded_client(guarded_store) -> AsyncGenerator[AsyncClient, None]:
    """Create test client bound to the guarded store"""
    async for ac in _client_for(guarded_store):
        yield ac
