from __future__ import annotations

import tempfile
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Response

from core.reporting import api as reporting_api
from core.services.cashflow import CashflowService
from core.services.cashflow.helpers import is_truthy_flag
from web.dependencies import get_cashflow_service
from web.payloads import cashflow_payload

router = APIRouter()


def _document_response(path_reader, renderer: Optional[str], basename: str) -> Response:
    renderer = reporting_api.normalize_renderer(renderer)
    media_type, suffix = reporting_api.RENDERERS[renderer]
    with tempfile.TemporaryDirectory(prefix="bhima-report-") as tmp:
        path = path_reader(tmp, renderer)
        content = path.read_bytes()
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{basename}{suffix}"'},
    )


@router.get("/finance/cashflow")
def cashflow_report(
    account_id: Optional[str] = Query(None),
    date_from: Optional[str] = Query(None, alias="dateFrom"),
    date_to: Optional[str] = Query(None, alias="dateTo"),
    weekly: Optional[str] = Query(None),
    service: CashflowService = Depends(get_cashflow_service),
) -> dict[str, Any]:
    result = service.get_cashflow(
        account_id,
        date_from=date_from,
        date_to=date_to,
        weekly=is_truthy_flag(weekly),
    )
    return cashflow_payload(result)


@router.get("/finance/cashflow/weekly")
def cashflow_weekly_report(
    account_id: Optional[str] = Query(None),
    date_from: Optional[str] = Query(None, alias="dateFrom"),
    date_to: Optional[str] = Query(None, alias="dateTo"),
    service: CashflowService = Depends(get_cashflow_service),
) -> dict[str, Any]:
    result = service.get_cashflow(account_id, date_from=date_from, date_to=date_to, weekly=True)
    return cashflow_payload(result)


@router.get("/reports/finance/cashflow")
def cashflow_document(
    account_id: Optional[str] = Query(None),
    date_from: Optional[str] = Query(None, alias="dateFrom"),
    date_to: Optional[str] = Query(None, alias="dateTo"),
    weekly: Optional[str] = Query(None),
    renderer: Optional[str] = Query("pdf"),
    orientation: Optional[str] = Query("landscape"),
    user: Optional[str] = Query(None),
    service: CashflowService = Depends(get_cashflow_service),
) -> Response:
    def render(tmp: str, kind: str):
        return reporting_api.generate_cashflow_document(
            service,
            account_id,
            tmp,
            renderer=kind,
            date_from=date_from,
            date_to=date_to,
            weekly=is_truthy_flag(weekly),
            orientation=orientation,
            user=user,
        )

    return _document_response(render, renderer, "cashflow")


@router.get("/reports/finance/cashflow/services")
def cashflow_by_service_document(
    date_from: Optional[str] = Query(None, alias="dateFrom"),
    date_to: Optional[str] = Query(None, alias="dateTo"),
    renderer: Optional[str] = Query("pdf"),
    orientation: Optional[str] = Query("landscape"),
    user: Optional[str] = Query(None),
    service: CashflowService = Depends(get_cashflow_service),
) -> Response:
    def render(tmp: str, kind: str):
        return reporting_api.generate_service_document(
            service,
            tmp,
            renderer=kind,
            date_from=date_from,
            date_to=date_to,
            orientation=orientation,
            user=user,
        )

    return _document_response(render, renderer, "cashflow_by_service")
