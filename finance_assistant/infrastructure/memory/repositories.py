"""Data access layer for finance records"""

import uuid
from dataclasses import replace
from typing import List, Optional
from finance_assistant.domain.exceptions import RecordNotFoundError
from finance_assistant.domain.models import Debt, Transaction
from finance_assistant.infrastructure.memory.store import FinanceStore


class TransactionRepository:
    """Repository for income/expense transactions"""

    def __init__(self, store: FinanceStore):
        self.store = store

    def create_transaction(self, transaction: Transaction) -> Transaction:
        """Append a transaction under a freshly generated identifier"""
        created = replace(transaction, id=str(uuid.uuid4()))
        self.store.transactions.append(created)
        return created

    def list_transactions(self, newest_first: bool = False) -> List[Transaction]:
        """Transactions in entry order (or reversed)"""
        items = list(self.store.transactions)
        if newest_first:
            items.reverse()
        return items

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        return next((t for t in self.store.transactions if t.id == transaction_id), None)

    def delete_transaction(self, transaction_id: str) -> None:
        transaction = self.get_transaction(transaction_id)
        if transaction is None:
            raise RecordNotFoundError(f"Transaction {transaction_id} not found")
        self.store.transactions.remove(transaction)


class DebtRepository:
    """Repository for installment debts"""

    def __init__(self, store: FinanceStore):
        self.store = store

    def create_debt(self, debt: Debt) -> Debt:
        """Append a debt under a freshly generated identifier"""
        created = replace(debt, id=str(uuid.uuid4()))
        self.store.debts.append(created)
        return created

    def list_debts(self) -> List[Debt]:
        return list(self.store.debts)

    def get_debt(self, debt_id: str) -> Optional[Debt]:
        return next((d for d in self.store.debts if d.id == debt_id), None)

    def delete_debt(self, debt_id: str) -> None:
        debt = self.get_debt(debt_id)
        if debt is None:
            raise RecordNotFoundError(f"Debt {debt_id} not found")
        self.store.debts.remove(debt)
