"""Pydantic schemas for API request/response validation"""

import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, StringConstraints
from typing import Annotated, Dict, List
from finance_assistant.domain.models import DebtProgress, Transaction, TransactionType

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class TransactionCreate(BaseModel):
    """Request body for POST /v1/transactions"""

    date: datetime.date = Field(default_factory=datetime.date.today, description="Transaction date")
    description: NonBlankStr
    type: TransactionType = TransactionType.EXPENSE
    category: NonBlankStr
    amount: Decimal = Field(..., ge=0, description="Transaction amount in Rupiah")


class TransactionResponse(BaseModel):
    """Single transaction"""

    id: str
    date: datetime.date
    description: str
    type: TransactionType
    category: str
    amount: Decimal

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            date=transaction.date,
            description=transaction.description,
            type=transaction.type,
            category=transaction.category,
            amount=transaction.amount,
        )


class DebtCreate(BaseModel):
    """Request body for POST /v1/debts"""

    creditor: NonBlankStr
    total_amount: Decimal = Field(..., ge=0, description="Total amount owed")
    monthly_installment: Decimal = Field(..., ge=0, description="Installment paid each month")
    total_installment_months: int = Field(..., ge=0, description="Number of installments in the plan")
    months_paid: int = Field(0, ge=0, description="Installments already paid")
    start_date: datetime.date = Field(default_factory=datetime.date.today)


class DebtResponse(BaseModel):
    """Single debt with derived repayment progress"""

    id: str
    creditor: str
    total_amount: Decimal
    monthly_installment: Decimal
    total_installment_months: int
    months_paid: int
    start_date: datetime.date
    remaining_months: int
    remaining_debt: Decimal
    percent_paid: float

    @classmethod
    def from_progress(cls, progress: DebtProgress) -> "DebtResponse":
        debt = progress.debt
        return cls(
            id=debt.id,
            creditor=debt.creditor,
            total_amount=debt.total_amount,
            monthly_installment=debt.monthly_installment,
            total_installment_months=debt.total_installment_months,
            months_paid=debt.months_paid,
            start_date=debt.start_date,
            remaining_months=progress.remaining_months,
            remaining_debt=progress.remaining_debt,
            percent_paid=progress.percent_paid,
        )


class DashboardResponse(BaseModel):
    """Response for GET /v1/dashboard"""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    total_remaining_debt: Decimal
    debts: List[DebtResponse]
    expense_by_category: Dict[str, Decimal]


class AnalysisResponse(BaseModel):
    """Response for POST /v1/analysis"""

    status: str
    markdown: str
    html: str
