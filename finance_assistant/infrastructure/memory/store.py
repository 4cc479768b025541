"""In-memory application state owned by the running app"""

from datetime import date
from decimal import Decimal
from typing import List
from finance_assistant.domain.exceptions import AnalysisInProgressError
from finance_assistant.domain.models import Debt, Transaction, TransactionType


class FinanceStore:
    """
    Holds every record for the lifetime of the process.

    Collections keep insertion order. The analysis flag allows a single
    in-flight analysis; it is a plain flag, not a queue.
    """

    def __init__(self) -> None:
        self.transactions: List[Transaction] = []
        self.debts: List[Debt] = []
        self.analysis_in_flight = False

    def begin_analysis(self) -> None:
        """
        Claim the analysis slot.

        Raises:
            AnalysisInProgressError: When another analysis is running
        """
        if self.analysis_in_flight:
            raise AnalysisInProgressError("Analysis already in progress")
        self.analysis_in_flight = True

    def end_analysis(self) -> None:
        self.analysis_in_flight = False


def seed_demo_data(store: FinanceStore) -> None:
    """Load the sample records shown on first launch"""
    store.transactions.extend(
        [
            Transaction(
                id="1",
                date=date(2024, 7, 15),
                description="Gaji Bulanan",
                type=TransactionType.INCOME,
                category="Gaji",
                amount=Decimal("8000000"),
            ),
            Transaction(
                id="2",
                date=date(2024, 7, 16),
                description="Belanja Bulanan",
                type=TransactionType.EXPENSE,
                category="Kebutuhan Pokok",
                amount=Decimal("1500000"),
            ),
            Transaction(
                id="3",
                date=date(2024, 7, 17),
                description="Makan Siang",
                type=TransactionType.EXPENSE,
                category="Makanan",
                amount=Decimal("50000"),
            ),
        ]
    )
    store.debts.append(
        Debt(
            id="d1",
            creditor="Bank ABC",
            total_amount=Decimal("300000000"),
            monthly_installment=Decimal("2500000"),
            total_installment_months=120,
            months_paid=12,
            start_date=date(2023, 7, 1),
        )
    )
