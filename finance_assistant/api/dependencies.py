"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, HTTPException, Request
from finance_assistant.config import Settings, settings
from finance_assistant.infrastructure.clients.llm import GeminiClient
from finance_assistant.infrastructure.memory.repositories import DebtRepository, TransactionRepository
from finance_assistant.infrastructure.memory.store import FinanceStore


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    return settings


def get_store(request: Request) -> FinanceStore:
    """Provide the store owned by the running application"""
    return request.app.state.store


def get_transaction_repository(store: FinanceStore = Depends(get_store)) -> TransactionRepository:
    return TransactionRepository(store)


def get_debt_repository(store: FinanceStore = Depends(get_store)) -> DebtRepository:
    return DebtRepository(store)


def get_llm_client() -> GeminiClient:
    """Provide LLM API client instance"""
    return GeminiClient()


def require_deletion_enabled(app_settings: Settings = Depends(get_settings)) -> None:
    """Reject deletes unless record deletion is switched on"""
    if not app_settings.allow_record_deletion:
        raise HTTPException(status_code=403, detail="Record deletion is disabled")
