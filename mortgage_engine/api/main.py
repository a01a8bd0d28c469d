"""FastAPI application factory"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from mortgage_engine.api.middleware import MetricsMiddleware, RequestIDMiddleware
from mortgage_engine.api.v1 import analytics, payments, qualification, report
from mortgage_engine.config import settings
from mortgage_engine.domain.exceptions import InvalidInputError
from mortgage_engine.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Mortgage Engine",
        description="Amortization, affordability and stress test calculations",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Inputs the request schema accepts but the domain rejects
    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        logging.warning(
            f"Invalid input: {exc}",
            extra={"request_id": getattr(request.state, "request_id", "unknown")},
        )
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(payments.router, prefix="/v1", tags=["payments"])
    app.include_router(analytics.router, prefix="/v1", tags=["analytics"])
    app.include_router(qualification.router, prefix="/v1", tags=["qualification"])
    app.include_router(report.router, prefix="/v1", tags=["report"])

    return app


app = create_app()
