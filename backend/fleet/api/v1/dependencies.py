from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from fleet.core.config import settings
from fleet.infrastructure.db.session import get_session
from fleet.infrastructure.repositories.driver_repo_sql import SQLDriverRepository
from fleet.infrastructure.storage.local_store import LocalAttachmentStore
from fleet.services.driver_service import DriverService

def attachment_store() -> LocalAttachmentStore:
    return LocalAttachmentStore(settings.upload_dir)

def driver_service(
    session: AsyncSession = Depends(get_session),
    store: LocalAttachmentStore = Depends(attachment_store),
) -> DriverService:
    return DriverService(
        SQLDriverRepository(session),
        store,
        max_photo_bytes=settings.max_photo_bytes,
        max_cnh_pdf_bytes=settings.max_cnh_pdf_bytes,
    )
