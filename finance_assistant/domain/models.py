"""Domain models - pure Python dataclasses representing finance records"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, Tuple


class TransactionType(str, Enum):
    """Direction of a cash movement"""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


@dataclass(frozen=True)
class Transaction:
    """Dated income or expense entry"""

    id: str
    date: date
    description: str
    type: TransactionType
    category: str
    amount: Decimal


@dataclass(frozen=True)
class Debt:
    """Installment-based liability. Remaining balance is derived, never stored."""

    id: str
    creditor: str
    total_amount: Decimal
    monthly_installment: Decimal
    total_installment_months: int
    months_paid: int
    start_date: date


@dataclass(frozen=True)
class DebtProgress:
    """Repayment figures derived from a single debt"""

    debt: Debt
    remaining_months: int
    remaining_debt: Decimal
    percent_paid: float


@dataclass(frozen=True)
class DashboardMetrics:
    """Aggregate figures shown on the dashboard"""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    total_remaining_debt: Decimal
    debts: Tuple[DebtProgress, ...] = ()
    expense_by_category: Dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of a narrative analysis request"""

    status: str  # "ok" | "no_data" | "error"
    markdown: str
    html: str
