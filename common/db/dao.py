from __future__ import annotations
import logging
import uuid
from typing import Any, Mapping

from pydantic import ValidationError
from sqlalchemy import insert, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from common.db.schema import metadata, registrations
from common.errors import RegistrationValidationError, StoreError
from common.norm import Registration

LOG = logging.getLogger(__name__)


def describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "record"
        problems.append(f"{loc}: {err['msg']}")
    return "Registration validation failed: " + ", ".join(problems)


def _driver_message(exc: Exception) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class RegistrationStore:
    """Write-only access to the ``registrations`` table."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_factory = async_sessionmaker(bind=engine)

    async def connect(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("select 1"))
        except (SQLAlchemyError, OSError):
            LOG.warning("database ping failed", exc_info=True)
            return False
        return True

    async def insert(self, record: Mapping[str, Any]) -> str:
        try:
            registration = Registration.model_validate(record)
        except ValidationError as exc:
            raise RegistrationValidationError(describe_validation_error(exc)) from exc

        registration_id = uuid.uuid4().hex
        try:
            async with self.session_factory() as session:
                await session.execute(
                    insert(registrations).values(id=registration_id, **registration.model_dump())
                )
                await session.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(_driver_message(exc)) from exc
        return registration_id
