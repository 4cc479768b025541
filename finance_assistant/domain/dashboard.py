"""Dashboard aggregation - derived totals from transactions and debts"""

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Sequence
from finance_assistant.domain.models import (
    DashboardMetrics,
    Debt,
    DebtProgress,
    Transaction,
    TransactionType,
)

ZERO = Decimal("0")


def summarize_debt(debt: Debt) -> DebtProgress:
    """
    Derive repayment progress for a debt.

    - remaining_months = total_installment_months - months_paid (never negative)
    - remaining_debt = remaining_months * monthly_installment
    - percent_paid = months_paid / total_installment_months * 100, 0 for a
      zero-length plan, capped at 100
    """
    remaining_months = max(debt.total_installment_months - debt.months_paid, 0)
    remaining_debt = debt.monthly_installment * remaining_months

    if debt.total_installment_months > 0:
        # Multiply first so whole percentages stay exact (12 * 100 / 120 == 10.0)
        percent_paid = min(debt.months_paid * 100 / debt.total_installment_months, 100.0)
    else:
        percent_paid = 0.0

    return DebtProgress(
        debt=debt,
        remaining_months=remaining_months,
        remaining_debt=remaining_debt,
        percent_paid=percent_paid,
    )


def expense_by_category(transactions: Sequence[Transaction]) -> Dict[str, Decimal]:
    """Total expense per category, largest first (ties keep first-seen order)"""
    totals: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in transactions:
        if txn.type == TransactionType.EXPENSE:
            totals[txn.category] += txn.amount

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return dict(ranked)


def compute_dashboard(transactions: Sequence[Transaction], debts: Sequence[Debt]) -> DashboardMetrics:
    """
    Main entry point: aggregate current records into dashboard figures.

    Pure function of its inputs; callers recompute on every state change.
    """
    total_income = sum(
        (t.amount for t in transactions if t.type == TransactionType.INCOME), ZERO
    )
    total_expense = sum(
        (t.amount for t in transactions if t.type == TransactionType.EXPENSE), ZERO
    )

    progress = tuple(summarize_debt(d) for d in debts)
    total_remaining_debt = sum((p.remaining_debt for p in progress), ZERO)

    return DashboardMetrics(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
        total_remaining_debt=total_remaining_debt,
        debts=progress,
        expense_by_category=expense_by_category(transactions),
    )
