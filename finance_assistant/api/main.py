"""FastAPI application factory"""

import logging
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finance_assistant.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finance_assistant.api.v1 import analysis, dashboard, debts, transactions
from finance_assistant.infrastructure.memory.store import FinanceStore, seed_demo_data
from finance_assistant.infrastructure.observability.logging import setup_logging
from finance_assistant.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(store: FinanceStore | None = None) -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Finance Assistant",
        description="Transaction and debt tracking with AI-generated financial analysis",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    if store is None:
        store = FinanceStore()
        if settings.seed_demo_data:
            seed_demo_data(store)
    app.state.store = store

    # Analysis requests fail downstream without a key; the service still starts
    if not settings.api_key:
        logging.error("API_KEY is not set. Please set the API_KEY environment variable.")

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])
    app.include_router(debts.router, prefix="/v1", tags=["debts"])
    app.include_router(dashboard.router, prefix="/v1", tags=["dashboard"])
    app.include_router(analysis.router, prefix="/v1", tags=["analysis"])

    return app


app = create_app()
