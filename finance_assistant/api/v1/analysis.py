"""POST /v1/analysis - narrative financial analysis endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from finance_assistant.api.v1.schemas import AnalysisResponse
from finance_assistant.api.dependencies import get_llm_client, get_request_id, get_store
from finance_assistant.infrastructure.memory.store import FinanceStore
from finance_assistant.infrastructure.clients.llm import GeminiClient
from finance_assistant.domain.advisor import analyze_financials
from finance_assistant.domain.exceptions import AnalysisInProgressError
from finance_assistant.infrastructure.observability.metrics import record_analysis
from finance_assistant.infrastructure.observability.logging import log_analysis

router = APIRouter()


@router.post("/analysis", response_model=AnalysisResponse)
async def run_analysis(
    request: Request,
    store: FinanceStore = Depends(get_store),
    llm_client: GeminiClient = Depends(get_llm_client),
):
    """
    Ask the model for a narrative analysis of the current records.

    Flow:
    1. Claim the single analysis slot (409 when another run is in flight)
    2. Snapshot records and run the analysis
    3. Release the slot, record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        store.begin_analysis()
    except AnalysisInProgressError as e:
        record_analysis("busy")
        logging.warning(f"Analysis rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    transactions = list(store.transactions)
    debts = list(store.debts)
    try:
        result = await analyze_financials(transactions, debts, llm_client)
    finally:
        store.end_analysis()

    duration_ms = (time.time() - start_time) * 1000
    record_analysis(result.status)
    log_analysis(request_id, result.status, len(transactions), len(debts), duration_ms)

    return AnalysisResponse(status=result.status, markdown=result.markdown, html=result.html)
