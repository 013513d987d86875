import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.app.config import Settings, settings
from api.app.db import get_store, make_engine
from api.app.routers.register import router as register_router
from common.db.dao import RegistrationStore
from common.errors import SubmissionError
from common.ingest.registration_service import RegistrationIntake
from common.storage.disk import UploadStorage

LOG = logging.getLogger(__name__)


def create_app(app_settings: Settings = settings) -> FastAPI:
    logging.basicConfig(
        level=app_settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = RegistrationStore(make_engine(app_settings.database_url))
    storage = UploadStorage(app_settings.upload_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # a dead database must not keep the API from starting
        try:
            await store.connect()
            LOG.info("Database connected successfully")
        except Exception:
            LOG.exception("Database connection error")
        yield
        await store.close()

    app = FastAPI(lifespan=lifespan, title="Registration Intake API", version="0.1.0")
    app.state.settings = app_settings
    app.state.store = store
    app.state.intake = RegistrationIntake(store=store, storage=storage)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(register_router)

    @app.exception_handler(SubmissionError)
    def _bad_submission(request: Request, exc: SubmissionError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"message": exc.message, "error": exc.error})

    @app.get("/health")
    async def health(db_store: RegistrationStore = Depends(get_store)):
        db_ok = await db_store.ping()
        return {
            "status": "OK",
            "version": app.version,
            "env": app_settings.app_env,
            "services": {
                "db": "ok" if db_ok else "error",
            },
        }

    return app


app = create_app()


def run() -> None:
    LOG.info("Server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
