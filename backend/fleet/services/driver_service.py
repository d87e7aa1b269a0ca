from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Tuple

import structlog
from starlette.concurrency import run_in_threadpool

from fleet.domain import rules
from fleet.domain.entities.driver import Driver
from fleet.domain.errors import (
    AttachmentMissing,
    AttachmentTooLarge,
    DriverIdMismatch,
    DriverNotFound,
    InvalidAttachment,
)
from fleet.domain.interfaces.attachment_store import AttachmentStore
from fleet.domain.interfaces.driver_repo import DriverRepository
from fleet.infrastructure.storage.local_store import CNH_PDF, PHOTO

log = structlog.get_logger(__name__)


class DriverService:
    def __init__(
        self,
        repo: DriverRepository,
        store: AttachmentStore,
        *,
        max_photo_bytes: int = 5 * 1024 * 1024,
        max_cnh_pdf_bytes: int = 10 * 1024 * 1024,
    ):
        self.repo = repo
        self.store = store
        self.max_photo_bytes = max_photo_bytes
        self.max_cnh_pdf_bytes = max_cnh_pdf_bytes

    async def list_drivers(self) -> Sequence[Driver]:
        return await self.repo.list()

    async def get_driver(self, driver_id: int) -> Driver:
        obj = await self.repo.get(driver_id)
        if obj is None:
            raise DriverNotFound(driver_id)
        return obj

    async def create_driver(self, fields: Mapping[str, Any]) -> Driver:
        obj = await self.repo.create(fields=fields)
        log.info("driver.created", driver_id=obj.id)
        return obj

    async def replace_driver(self, driver_id: int, body_id: Optional[int], fields: Mapping[str, Any]) -> Driver:
        if body_id != driver_id:
            raise DriverIdMismatch(driver_id, body_id)
        obj = await self.repo.replace(driver_id, fields=fields)
        if obj is None:
            raise DriverNotFound(driver_id)
        log.info("driver.updated", driver_id=driver_id)
        return obj

    async def delete_driver(self, driver_id: int) -> None:
        if not await self.repo.delete(driver_id):
            raise DriverNotFound(driver_id)
        await run_in_threadpool(self.store.delete_all, driver_id)
        log.info("driver.deleted", driver_id=driver_id)

    async def attach_photo(self, driver_id: int, *, filename: str, content_type: str, data: bytes) -> Driver:
        if content_type not in rules.ALLOWED_PHOTO_TYPES:
            raise InvalidAttachment("photo must be a JPG, PNG or GIF image")
        if len(data) > self.max_photo_bytes:
            raise AttachmentTooLarge(len(data), self.max_photo_bytes)
        await self.get_driver(driver_id)
        await run_in_threadpool(self.store.save, driver_id, PHOTO, data)
        obj = await self.repo.set_columns(driver_id, photo_filename=filename, photo_content_type=content_type)
        if obj is None:
            raise DriverNotFound(driver_id)
        return obj

    async def attach_cnh_pdf(self, driver_id: int, *, filename: str, content_type: str, data: bytes) -> Driver:
        if content_type != rules.CNH_PDF_TYPE:
            raise InvalidAttachment("CNH document must be a PDF")
        if len(data) > self.max_cnh_pdf_bytes:
            raise AttachmentTooLarge(len(data), self.max_cnh_pdf_bytes)
        await self.get_driver(driver_id)
        await run_in_threadpool(self.store.save, driver_id, CNH_PDF, data)
        obj = await self.repo.set_columns(driver_id, cnh_pdf_filename=filename)
        if obj is None:
            raise DriverNotFound(driver_id)
        return obj

    async def photo(self, driver_id: int) -> Tuple[Path, str, str]:
        """Return (path, media_type, filename) of the stored photo."""
        obj = await self.get_driver(driver_id)
        path = self.store.path(driver_id, PHOTO)
        if path is None or not obj.photo_filename:
            raise AttachmentMissing(f"driver {driver_id} has no photo")
        return path, obj.photo_content_type or "application/octet-stream", obj.photo_filename

    async def cnh_pdf(self, driver_id: int) -> Tuple[Path, str, str]:
        obj = await self.get_driver(driver_id)
        path = self.store.path(driver_id, CNH_PDF)
        if path is None or not obj.cnh_pdf_filename:
            raise AttachmentMissing(f"driver {driver_id} has no CNH document")
        return path, "application/pdf", obj.cnh_pdf_filename
