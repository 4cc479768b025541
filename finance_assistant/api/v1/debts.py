"""/v1/debts - record and list installment debts"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response

from finance_assistant.api.v1.schemas import DebtCreate, DebtResponse
from finance_assistant.api.dependencies import get_debt_repository, get_request_id, require_deletion_enabled
from finance_assistant.infrastructure.memory.repositories import DebtRepository
from finance_assistant.domain.dashboard import summarize_debt
from finance_assistant.domain.models import Debt
from finance_assistant.domain.exceptions import RecordNotFoundError
from finance_assistant.infrastructure.observability.metrics import records_created_counter, records_deleted_counter
from finance_assistant.infrastructure.observability.logging import log_record_created

router = APIRouter()


@router.post("/debts", response_model=DebtResponse, status_code=201)
def create_debt(
    request_body: DebtCreate,
    request: Request,
    repo: DebtRepository = Depends(get_debt_repository),
):
    """
    Append a debt.

    months_paid above total_installment_months is accepted as entered; derived
    figures clamp instead.
    """
    request_id = get_request_id(request)

    if request_body.months_paid > request_body.total_installment_months:
        logging.warning(
            "Debt has more paid months than installments",
            extra={
                "request_id": request_id,
                "months_paid": request_body.months_paid,
                "total_installment_months": request_body.total_installment_months,
            },
        )

    debt = repo.create_debt(
        Debt(
            id="",
            creditor=request_body.creditor,
            total_amount=request_body.total_amount,
            monthly_installment=request_body.monthly_installment,
            total_installment_months=request_body.total_installment_months,
            months_paid=request_body.months_paid,
            start_date=request_body.start_date,
        )
    )

    records_created_counter.labels(kind="debt").inc()
    log_record_created(request_id, "debt", debt.id)

    return DebtResponse.from_progress(summarize_debt(debt))


@router.get("/debts", response_model=List[DebtResponse])
def list_debts(repo: DebtRepository = Depends(get_debt_repository)):
    """List debts in entry order with repayment progress"""
    return [DebtResponse.from_progress(summarize_debt(d)) for d in repo.list_debts()]


@router.delete("/debts/{debt_id}", status_code=204, dependencies=[Depends(require_deletion_enabled)])
def delete_debt(
    debt_id: str,
    request: Request,
    repo: DebtRepository = Depends(get_debt_repository),
):
    try:
        repo.delete_debt(debt_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    records_deleted_counter.labels(kind="debt").inc()
    logging.info("Debt deleted", extra={"request_id": get_request_id(request), "record_id": debt_id})
    return Response(status_code=204)
