import httpx

from fleet.web.app import app as web_app
from fleet.web.client import DriversClient
from fleet.web.pages import drivers_client

FORM = {
    "name": "Jo Silva",
    "cpf": "123.456.789-01",
    "phone": "(11) 98765-4321",
    "cnh_number": "98765432100",
    "cnh_category": ["B", "C"],
    "status": "Active",
}


async def test_home_and_stubs(ui):
    r = await ui.get("/")
    assert r.status_code == 200
    for title in ("Drivers", "Vehicles", "Loads", "Trips"):
        assert title in r.text
    assert "Coming soon" in (await ui.get("/trips")).text


async def test_drivers_page_dialog_closed_by_default(ui):
    r = await ui.get("/drivers")
    assert r.status_code == 200
    assert "Add Driver" in r.text
    assert 'role="dialog"' not in r.text

    r = await ui.get("/drivers?dialog=new")
    assert "New Driver" in r.text


async def test_create_through_form(ui, api):
    r = await ui.post("/drivers", data=FORM)
    assert r.status_code == 303
    assert r.headers["location"] == "/drivers"

    rows = (await api.get("/drivers")).json()
    assert len(rows) == 1
    assert rows[0]["cpf"] == "12345678901"
    assert rows[0]["cnhCategory"] == "B,C"

    page = await ui.get("/drivers")
    assert "123.456.789-01" in page.text


async def test_invalid_form_rerenders_without_network_call(ui, api):
    r = await ui.post("/drivers", data=dict(FORM, name="Jo", cnh_category=[]))
    assert r.status_code == 400
    assert "Name must be at least 3 characters" in r.text
    assert "Select at least one category" in r.text
    assert "New Driver" in r.text
    assert (await api.get("/drivers")).json() == []


async def test_edit_prefills_and_saves(ui, api, driver_payload):
    created = (await api.post("/drivers", json=driver_payload)).json()

    r = await ui.get(f"/drivers?dialog=edit&id={created['id']}")
    assert "Edit Driver" in r.text
    assert 'value="João Silva"' in r.text
    assert f'action="/drivers/{created["id"]}"' in r.text

    r = await ui.post(f"/drivers/{created['id']}", data=dict(FORM, name="Maria Souza"))
    assert r.status_code == 303
    assert (await api.get(f"/drivers/{created['id']}")).json()["name"] == "Maria Souza"


async def test_edit_of_stale_id_closes_dialog(ui):
    r = await ui.get("/drivers?dialog=edit&id=99")
    assert 'role="dialog"' not in r.text


async def test_create_with_attachments(ui, api):
    files = {
        "photo": ("me.png", b"\x89PNG\r\n\x1a\n", "image/png"),
        "cnh_pdf": ("cnh.pdf", b"%PDF-1.4", "application/pdf"),
    }
    r = await ui.post("/drivers", data=FORM, files=files)
    assert r.status_code == 303

    row = (await api.get("/drivers")).json()[0]
    assert row["photoFilename"] == "me.png"
    assert row["cnhPdfFilename"] == "cnh.pdf"


async def test_delete_through_form(ui, api, driver_payload):
    created = (await api.post("/drivers", json=driver_payload)).json()
    await ui.get("/drivers")
    r = await ui.post(f"/drivers/{created['id']}/delete")
    assert r.status_code == 303
    assert (await api.get("/drivers")).json() == []
    assert "João Silva" not in (await ui.get("/drivers")).text


async def test_mutation_failure_is_not_shown(ui):
    r = await ui.post("/drivers/123/delete")
    assert r.status_code == 303


async def test_load_failure_shows_inline_message():
    def handler(request):
        return httpx.Response(500, json={"detail": "Internal Server Error"})

    broken = DriversClient(httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api"))
    web_app.dependency_overrides[drivers_client] = lambda: broken
    try:
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=web_app), base_url="http://ui") as c:
            r = await c.get("/drivers")
        assert r.status_code == 200
        assert "Error loading drivers" in r.text
    finally:
        web_app.dependency_overrides.clear()
        await broken.aclose()


async def test_invalid_edit_of_missing_driver_closes_dialog(ui):
    r = await ui.post("/drivers/99", data=dict(FORM, name="Jo"))
    assert r.status_code == 303
    assert r.headers["location"] == "/drivers"


async def test_invalid_edit_keeps_dialog_open_with_errors(ui, api, driver_payload):
    created = (await api.post("/drivers", json=driver_payload)).json()
    r = await ui.post(f"/drivers/{created['id']}", data=dict(FORM, name="Jo"))
    assert r.status_code == 400
    assert 'role="dialog"' in r.text
    assert "Name must be at least 3 characters" in r.text
