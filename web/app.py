from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.exceptions import DomainError, NotFoundError
from infra.tracing import bind_trace_id
from infra.version import get_app_version
from web.routes.cashflow import router as cashflow_router

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Trace-Id"


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, NotFoundError):
        return 404
    return 400


def create_app() -> FastAPI:
    app = FastAPI(title="Bhima Cashflow", version=get_app_version())

    @app.middleware("http")
    async def trace_requests(request: Request, call_next):
        with bind_trace_id(request.headers.get(TRACE_HEADER)) as trace_id:
            response = await call_next(request)
        response.headers[TRACE_HEADER] = trace_id
        return response

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status = _status_for(exc)
        logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, exc.code, exc)
        return JSONResponse(status_code=status, content={"code": exc.code, "message": str(exc)})

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": get_app_version()}

    app.include_router(cashflow_router)
    return app
