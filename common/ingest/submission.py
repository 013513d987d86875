import json
import re
from typing import Any, Dict, Optional, Tuple

from starlette.datastructures import UploadFile
from starlette.requests import Request

from common.errors import SubmissionError

PHOTO_FIELD = "profileUpload"

BOUNDARY_RE = re.compile(r'boundary="?([^";]+)"?', re.IGNORECASE)


async def read_submission(request: Request) -> Tuple[Dict[str, Any], Optional[UploadFile]]:
    """Split a request body into raw text fields and the optional photo part.

    A key sent once maps to its string value, a repeated key maps to the list
    of its values in submission order.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SubmissionError("Invalid JSON body", str(exc)) from exc
        if not isinstance(payload, dict):
            raise SubmissionError("Invalid JSON body", "expected an object")
        return payload, None

    if content_type.startswith("multipart/form-data"):
        await _require_closing_boundary(request, content_type)

    form = await request.form()
    fields: Dict[str, Any] = {}
    upload: Optional[UploadFile] = None
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if not value.filename:
                continue
            if key != PHOTO_FIELD or upload is not None:
                raise SubmissionError("Unexpected field", key)
            upload = value
            continue
        if key not in fields:
            fields[key] = value
        elif isinstance(fields[key], list):
            fields[key].append(value)
        else:
            fields[key] = [fields[key], value]
    return fields, upload


async def _require_closing_boundary(request: Request, content_type: str) -> None:
    # the form parser silently drops an unterminated last part
    m = BOUNDARY_RE.search(content_type)
    if not m:
        return
    body = await request.body()
    if b"--" + m.group(1).encode("latin-1") + b"--" not in body:
        raise SubmissionError("Malformed multipart body", "missing closing boundary")
