"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from inbank_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from inbank_gateway.api.v1 import decision
from inbank_gateway.api.v1.schemas import DecisionResponse
from inbank_gateway.config import Settings, settings as default_settings
from inbank_gateway.infrastructure.observability.logging import setup_logging

API_VERSION = "0.1.0"
MALFORMED_REQUEST_MESSAGE = "Malformed loan request!"


async def malformed_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer unparseable bodies in the same shape as decision errors"""
    logging.warning(
        "Malformed request",
        extra={"request_id": getattr(request.state, "request_id", "unknown"), "error_count": len(exc.errors())},
    )
    body = DecisionResponse(error_message=MALFORMED_REQUEST_MESSAGE).model_dump(by_alias=True)
    return JSONResponse(status_code=422, content=body)


def create_app(config: Settings | None = None) -> FastAPI:
    """Build the loan decision service; logging is configured from the given settings"""
    config = config or default_settings
    setup_logging(config.log_level)

    app = FastAPI(
        title="Inbank Loan Decision Gateway",
        description="Maximum approvable loan amount and period for a customer",
        version=API_VERSION,
    )

    # Request IDs must exist before metrics and handlers run
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(RequestValidationError, malformed_request_handler)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": config.service_name, "version": API_VERSION}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(decision.router, prefix="/loan", tags=["decisions"])

    return app


app = create_app()
