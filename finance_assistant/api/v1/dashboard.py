"""GET /v1/dashboard - aggregated figures for the summary cards"""

from fastapi import APIRouter, Depends

from finance_assistant.api.v1.schemas import DashboardResponse, DebtResponse
from finance_assistant.api.dependencies import get_store
from finance_assistant.infrastructure.memory.store import FinanceStore
from finance_assistant.domain.dashboard import compute_dashboard

router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(store: FinanceStore = Depends(get_store)):
    """Recompute totals from the current records"""
    metrics = compute_dashboard(store.transactions, store.debts)

    return DashboardResponse(
        total_income=metrics.total_income,
        total_expense=metrics.total_expense,
        balance=metrics.balance,
        total_remaining_debt=metrics.total_remaining_debt,
        debts=[DebtResponse.from_progress(p) for p in metrics.debts],
        expense_by_category=metrics.expense_by_category,
    )
