# fleet/api/v1/routers/drivers.py
from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status
from fastapi.responses import FileResponse

from fleet.api.v1.dependencies import driver_service
from fleet.domain.errors import (
    AttachmentMissing,
    AttachmentTooLarge,
    DriverIdMismatch,
    DriverNotFound,
    InvalidAttachment,
)
from fleet.schemas.driver import DriverIn, DriverOut
from fleet.services.driver_service import DriverService

router = APIRouter(prefix="/drivers", tags=["drivers"])


def _not_found() -> HTTPException:
    return HTTPException(status.HTTP_404_NOT_FOUND, "Driver not found")


@router.get("", response_model=list[DriverOut])
async def list_drivers(svc: DriverService = Depends(driver_service)):
    items = await svc.list_drivers()
    return [DriverOut.model_validate(i) for i in items]


@router.get("/{driver_id}", response_model=DriverOut)
async def get_driver(driver_id: int, svc: DriverService = Depends(driver_service)):
    try:
        obj = await svc.get_driver(driver_id)
    except DriverNotFound:
        raise _not_found()
    return DriverOut.model_validate(obj)


@router.post("", response_model=DriverOut, status_code=status.HTTP_201_CREATED)
async def create_driver(payload: DriverIn, response: Response, svc: DriverService = Depends(driver_service)):
    # any id in the body is ignored; storage assigns it
    obj = await svc.create_driver(payload.columns())
    response.headers["Location"] = f"/drivers/{obj.id}"
    return DriverOut.model_validate(obj)


@router.put("/{driver_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_driver(driver_id: int, payload: DriverIn, svc: DriverService = Depends(driver_service)):
    try:
        await svc.replace_driver(driver_id, payload.id, payload.columns())
    except DriverIdMismatch:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Driver id mismatch")
    except DriverNotFound:
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{driver_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_driver(driver_id: int, svc: DriverService = Depends(driver_service)):
    try:
        await svc.delete_driver(driver_id)
    except DriverNotFound:
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def _read_bounded(file: UploadFile, limit: int) -> bytes:
    # one byte past the limit is enough to reject
    return await file.read(limit + 1)


@router.put("/{driver_id}/photo", response_model=DriverOut)
async def upload_photo(driver_id: int, file: UploadFile = File(...), svc: DriverService = Depends(driver_service)):
    data = await _read_bounded(file, svc.max_photo_bytes)
    try:
        obj = await svc.attach_photo(
            driver_id, filename=file.filename or "photo", content_type=file.content_type or "", data=data
        )
    except DriverNotFound:
        raise _not_found()
    except InvalidAttachment as e:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, str(e))
    except AttachmentTooLarge as e:
        raise HTTPException(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, f"Photo exceeds {e.limit} bytes")
    return DriverOut.model_validate(obj)


@router.get("/{driver_id}/photo")
async def download_photo(driver_id: int, svc: DriverService = Depends(driver_service)):
    try:
        path, media_type, filename = await svc.photo(driver_id)
    except DriverNotFound:
        raise _not_found()
    except AttachmentMissing:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Photo not found")
    return FileResponse(
        path,
        media_type=media_type,
        filename=filename,
        content_disposition_type="inline",
        headers={"X-Content-Type-Options": "nosniff"},
    )


@router.put("/{driver_id}/cnh-pdf", response_model=DriverOut)
async def upload_cnh_pdf(driver_id: int, file: UploadFile = File(...), svc: DriverService = Depends(driver_service)):
    data = await _read_bounded(file, svc.max_cnh_pdf_bytes)
    try:
        obj = await svc.attach_cnh_pdf(
            driver_id, filename=file.filename or "cnh.pdf", content_type=file.content_type or "", data=data
        )
    except DriverNotFound:
        raise _not_found()
    except InvalidAttachment as e:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, str(e))
    except AttachmentTooLarge as e:
        raise HTTPException(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, f"CNH PDF exceeds {e.limit} bytes")
    return DriverOut.model_validate(obj)


@router.get("/{driver_id}/cnh-pdf")
async def download_cnh_pdf(driver_id: int, svc: DriverService = Depends(driver_service)):
    try:
        path, media_type, filename = await svc.cnh_pdf(driver_id)
    except DriverNotFound:
        raise _not_found()
    except AttachmentMissing:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "CNH PDF not found")
    return FileResponse(
        path,
        media_type=media_type,
        filename=filename,
        content_disposition_type="inline",
        headers={"X-Content-Type-Options": "nosniff"},
    )
