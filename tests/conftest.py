"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from typing import List
from fastapi.testclient import TestClient
from finance_assistant.api.main import create_app
from finance_assistant.api.dependencies import get_llm_client
from finance_assistant.infrastructure.memory.store import FinanceStore
from finance_assistant.domain.models import Debt, Transaction, TransactionType

CANNED_REPLY = "## Ringkasan\n**Sehat** secara umum\n* Tambah dana darurat\n* Kurangi makan di luar"


class FakeLLMClient:
    """Records prompts and answers with canned text (or raises ``error``)"""

    def __init__(self, reply: str = CANNED_REPLY):
        self.reply = reply
        self.error: Exception | None = None
        self.prompts: List[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def store() -> FinanceStore:
    return FinanceStore()


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def client(store: FinanceStore, fake_llm: FakeLLMClient) -> TestClient:
    """Create FastAPI test client with a fresh store and a fake LLM"""
    app = create_app(store)
    app.dependency_overrides[get_llm_client] = lambda: fake_llm
    return TestClient(app)


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Salary plus two expenses"""
    return [
        Transaction(
            id="t1",
            date=date(2024, 7, 15),
            description="Gaji Bulanan",
            type=TransactionType.INCOME,
            category="Gaji",
            amount=Decimal("8000000"),
        ),
        Transaction(
            id="t2",
            date=date(2024, 7, 16),
            description="Belanja Bulanan",
            type=TransactionType.EXPENSE,
            category="Kebutuhan Pokok",
            amount=Decimal("1500000"),
        ),
        Transaction(
            id="t3",
            date=date(2024, 7, 17),
            description="Makan Siang",
            type=TransactionType.EXPENSE,
            category="Makanan",
            amount=Decimal("50000"),
        ),
    ]


@pytest.fixture
def sample_debt() -> Debt:
    """Ten-year loan with one year paid"""
    return Debt(
        id="d1",
        creditor="Bank ABC",
        total_amount=Decimal("300000000"),
        monthly_installment=Decimal("2500000"),
        total_installment_months=120,
        months_paid=12,
        start_date=date(2023, 7, 1),
    )
