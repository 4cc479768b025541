"""/v1/transactions - record and list income/expense transactions"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from finance_assistant.api.v1.schemas import TransactionCreate, TransactionResponse
from finance_assistant.api.dependencies import get_request_id, get_transaction_repository, require_deletion_enabled
from finance_assistant.infrastructure.memory.repositories import TransactionRepository
from finance_assistant.domain.models import Transaction
from finance_assistant.domain.exceptions import RecordNotFoundError
from finance_assistant.infrastructure.observability.metrics import records_created_counter, records_deleted_counter
from finance_assistant.infrastructure.observability.logging import log_record_created

router = APIRouter()


@router.post("/transactions", response_model=TransactionResponse, status_code=201)
def create_transaction(
    request_body: TransactionCreate,
    request: Request,
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """Append a transaction; records are never edited once created"""
    transaction = repo.create_transaction(
        Transaction(
            id="",
            date=request_body.date,
            description=request_body.description,
            type=request_body.type,
            category=request_body.category,
            amount=request_body.amount,
        )
    )

    records_created_counter.labels(kind="transaction").inc()
    log_record_created(get_request_id(request), "transaction", transaction.id)

    return TransactionResponse.from_domain(transaction)


@router.get("/transactions", response_model=List[TransactionResponse])
def list_transactions(
    newest_first: bool = Query(False, description="Return the most recently entered first"),
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    """List transactions in entry order"""
    return [TransactionResponse.from_domain(t) for t in repo.list_transactions(newest_first=newest_first)]


@router.delete("/transactions/{transaction_id}", status_code=204, dependencies=[Depends(require_deletion_enabled)])
def delete_transaction(
    transaction_id: str,
    request: Request,
    repo: TransactionRepository = Depends(get_transaction_repository),
):
    try:
        repo.delete_transaction(transaction_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    records_deleted_counter.labels(kind="transaction").inc()
    logging.info("Transaction deleted", extra={"request_id": get_request_id(request), "record_id": transaction_id})
    return Response(status_code=204)
