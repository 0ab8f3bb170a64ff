from __future__ import annotations

from typing import Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from core.services.cashflow import CashflowService
from infra.db.base import SessionLocal
from infra.services import ServiceGraph, build_service_graph


def get_session() -> Iterator[Session]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def get_services(session: Session = Depends(get_session)) -> ServiceGraph:
    return build_service_graph(session)


def get_cashflow_service(services: ServiceGraph = Depends(get_services)) -> CashflowService:
    return services.cashflow_service
