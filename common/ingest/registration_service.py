import logging
from typing import Any, Callable, Dict, Optional

from starlette.datastructures import UploadFile

from common.db.dao import RegistrationStore
from common.norm.fields import build_registration
from common.storage.disk import UploadStorage, now_ms

LOG = logging.getLogger(__name__)


class RegistrationIntake:
    def __init__(
        self,
        store: RegistrationStore,
        storage: UploadStorage,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.store = store
        self.storage = storage
        self.clock = clock

    async def __call__(self, *, fields: Dict[str, Any], upload: Optional[UploadFile]) -> str:
        received_at = self.clock()
        LOG.info("Received raw form data: %s", fields)

        photo_reference = None
        if upload is not None:
            data = await upload.read()
            LOG.info(
                "Received file info: filename=%s content_type=%s size=%s",
                upload.filename,
                upload.content_type,
                len(data),
            )
            photo_reference = await self.storage.put(
                data=data,
                filename=upload.filename,
                received_at_ms=received_at,
            )

        record = build_registration(fields, photo_reference)
        registration_id = await self.store.insert(record)
        LOG.info("New registration saved to database: id=%s", registration_id)
        return registration_id
