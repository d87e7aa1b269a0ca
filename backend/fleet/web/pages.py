# fleet/web/pages.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

import httpx
import structlog
from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.datastructures import UploadFile

from fleet.core.config import settings
from fleet.domain.entities.driver import DriverStatus
from fleet.domain.rules import CNH_CATEGORIES
from fleet.web import dialog, masks
from fleet.web.client import DriversClient
from fleet.web.forms import DriverForm, Upload

log = structlog.get_logger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.filters["cpf"] = masks.mask_cpf
templates.env.filters["phone"] = masks.mask_phone

router = APIRouter()

SECTIONS = [
    {"title": "Drivers", "path": "/drivers", "description": "Manage drivers data"},
    {"title": "Vehicles", "path": "/vehicles", "description": "Manage fleet vehicles"},
    {"title": "Loads", "path": "/loads", "description": "Track and manage cargo"},
    {"title": "Trips", "path": "/trips", "description": "Plan and follow trips"},
]


def drivers_client(request: Request) -> DriversClient:
    return request.app.state.drivers_client


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html", {"sections": SECTIONS})


@router.get("/vehicles", response_class=HTMLResponse)
@router.get("/loads", response_class=HTMLResponse)
@router.get("/trips", response_class=HTMLResponse)
async def stub(request: Request):
    title = request.url.path.strip("/").capitalize()
    return templates.TemplateResponse(request, "stub.html", {"title": title})


async def _render(
    request: Request,
    client: DriversClient,
    state: dialog.DialogState,
    form: Optional[DriverForm] = None,
    status_code: int = 200,
):
    rows, load_error = [], False
    try:
        rows = await client.list()
    except httpx.HTTPError as e:
        log.warning("drivers.load_failed", error=str(e))
        load_error = True

    posted_state = state
    state, row = dialog.resolve(state, rows)
    if form is not None and isinstance(posted_state, dialog.Editing) and isinstance(state, dialog.Closed):
        # the row being edited is gone; nothing left to show errors against
        return _close()
    if form is None:
        form = DriverForm.from_driver(row) if row is not None else DriverForm()

    ctx = {
        "rows": rows,
        "row": row,
        "load_error": load_error,
        "dialog": state,
        "form": form,
        "masked": form.masked(),
        "categories": CNH_CATEGORIES,
        "statuses": [s.value for s in DriverStatus],
        "api_url": settings.api_public_url.rstrip("/"),
    }
    return templates.TemplateResponse(request, "drivers.html", ctx, status_code=status_code)


@router.get("/drivers", response_class=HTMLResponse)
async def drivers_page(
    request: Request,
    dialog_name: Optional[str] = Query(default=None, alias="dialog"),
    driver_id: Optional[int] = Query(default=None, alias="id"),
    client: DriversClient = Depends(drivers_client),
):
    return await _render(request, client, dialog.from_query(dialog_name, driver_id))


async def _upload(item) -> Optional[Upload]:
    if not isinstance(item, UploadFile) or not item.filename:
        return None
    data = await item.read()
    return Upload(filename=item.filename, content_type=item.content_type or "", data=data)


async def _read_form(request: Request) -> DriverForm:
    data = await request.form()
    return DriverForm(
        name=str(data.get("name") or ""),
        cpf=str(data.get("cpf") or ""),
        phone=str(data.get("phone") or ""),
        cnh_number=str(data.get("cnh_number") or ""),
        cnh_category=[str(c) for c in data.getlist("cnh_category")],
        status=str(data.get("status") or DriverStatus.active.value),
        photo=await _upload(data.get("photo")),
        cnh_pdf=await _upload(data.get("cnh_pdf")),
    )


async def _store_attachments(client: DriversClient, driver_id: int, form: DriverForm) -> None:
    if form.photo is not None:
        await client.upload_photo(driver_id, form.photo.filename, form.photo.data, form.photo.content_type)
    if form.cnh_pdf is not None:
        await client.upload_cnh_pdf(driver_id, form.cnh_pdf.filename, form.cnh_pdf.data)


def _close() -> RedirectResponse:
    return RedirectResponse("/drivers", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/drivers", response_class=HTMLResponse)
async def submit_new(request: Request, client: DriversClient = Depends(drivers_client)):
    form = await _read_form(request)
    if not form.validate():
        return await _render(request, client, dialog.CreatingNew(), form, status.HTTP_400_BAD_REQUEST)
    try:
        created = await client.create(form.payload())
        await _store_attachments(client, created["id"], form)
    except httpx.HTTPError as e:
        log.warning("driver.create_failed", error=str(e))
    return _close()


@router.post("/drivers/{driver_id}", response_class=HTMLResponse)
async def submit_edit(driver_id: int, request: Request, client: DriversClient = Depends(drivers_client)):
    form = await _read_form(request)
    if not form.validate():
        return await _render(request, client, dialog.Editing(driver_id), form, status.HTTP_400_BAD_REQUEST)
    try:
        await client.update(form.payload(driver_id))
        await _store_attachments(client, driver_id, form)
    except httpx.HTTPError as e:
        log.warning("driver.update_failed", driver_id=driver_id, error=str(e))
    return _close()


@router.post("/drivers/{driver_id}/delete")
async def submit_delete(driver_id: int, client: DriversClient = Depends(drivers_client)):
    try:
        await client.remove(driver_id)
    except httpx.HTTPError as e:
        log.warning("driver.delete_failed", driver_id=driver_id, error=str(e))
    return _close()
