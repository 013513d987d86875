from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from common.db.dao import RegistrationStore
from common.ingest.registration_service import RegistrationIntake


def make_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, future=True)


def get_store(request: Request) -> RegistrationStore:
    return request.app.state.store


def get_intake(request: Request) -> RegistrationIntake:
    return request.app.state.intake
