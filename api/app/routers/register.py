import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.app.db import get_intake
from common.errors import RegistrationError
from common.ingest.registration_service import RegistrationIntake
from common.ingest.submission import read_submission

LOG = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Registration submitted successfully!"
FAILURE_MESSAGE = "Submission failed. Please try again."

router = APIRouter(prefix="/api", tags=["registration"])


@router.post("/register")
async def register(
    request: Request,
    intake: RegistrationIntake = Depends(get_intake),
):
    fields, upload = await read_submission(request)
    try:
        await intake(fields=fields, upload=upload)
    except Exception as exc:
        LOG.exception("Error saving registration")
        error = exc.message if isinstance(exc, RegistrationError) else str(exc)
        return JSONResponse(
            status_code=500,
            content={"message": FAILURE_MESSAGE, "error": error},
        )
    return {"message": SUCCESS_MESSAGE}
