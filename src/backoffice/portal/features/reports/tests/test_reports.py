import httpx
import pytest

from ..models import Report

pytestmark = pytest.mark.asyncio


async def create_report_for_test(client: httpx.AsyncClient, isi: str = "Dana desa diselewengkan", **extra) -> dict:
    """Helper that files a report and returns its public representation."""
    response = await client.post("/laporan", json={"isi": isi, **extra})
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_create_report_defaults(user_client: httpx.AsyncClient):
    data = await create_report_for_test(user_client)
    assert data["nama"] == "Anonim"
    assert data["email"] == "-"
    assert data["kategori"] is None
    assert data["status"] == "pending"
    report = await Report.get(id=data["id"])
    assert report.isi == "Dana desa diselewengkan"


async def test_create_report_accepts_laporan_field(user_client: httpx.AsyncClient):
    response = await user_client.post(
        "/laporan",
        json={"laporan": "Pungutan liar di kantor kecamatan", "nama": "Budi", "kategori": "pungli"},
    )
    assert response.status_code == 201, response.text
    data = response.json()["data"]
    assert data["isi"] == "Pungutan liar di kantor kecamatan"
    assert data["nama"] == "Budi"
    assert data["kategori"] == "pungli"


async def test_create_report_requires_body(user_client: httpx.AsyncClient):
    response = await user_client.post("/laporan", json={"nama": "Budi"})
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


async def test_create_report_requires_login(client: httpx.AsyncClient):
    response = await client.post("/laporan", json={"isi": "x"})
    assert response.status_code == 401


async def test_list_my_reports_only_returns_own(user_client: httpx.AsyncClient, other_client: httpx.AsyncClient):
    mine = await create_report_for_test(user_client, "laporan saya")
    await create_report_for_test(other_client, "laporan orang lain")

    response = await user_client.get("/laporan/user")
    assert response.status_code == 200
    reports = response.json()["data"]
    assert [r["id"] for r in reports] == [mine["id"]]


async def test_list_all_reports_admin_only(
    user_client: httpx.AsyncClient, other_client: httpx.AsyncClient, admin_client: httpx.AsyncClient
):
    await create_report_for_test(user_client, "satu")
    await create_report_for_test(other_client, "dua")

    forbidden = await user_client.get("/laporan/all")
    assert forbidden.status_code == 403
    assert forbidden.json()["error"] == "forbidden"

    response = await admin_client.get("/laporan/all")
    assert response.status_code == 200
    reports = response.json()["data"]
    assert {r["username"] for r in reports} == {"warga1", "warga2"}


async def test_owner_and_admin_can_read(user_client: httpx.AsyncClient, admin_client: httpx.AsyncClient):
    report = await create_report_for_test(user_client)

    for client in (user_client, admin_client):
        response = await client.get(f"/laporan/{report['id']}")
        assert response.status_code == 200, response.text
        assert response.json()["data"]["id"] == report["id"]


async def test_other_user_is_forbidden(user_client: httpx.AsyncClient, other_client: httpx.AsyncClient):
    report = await create_report_for_test(user_client)

    read = await other_client.get(f"/laporan/{report['id']}")
    edit = await other_client.post("/laporan/edit", json={"id": report["id"], "isi": "diubah"})
    delete = await other_client.post("/laporan/hapus", json={"id": report["id"]})

    for response in (read, edit, delete):
        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    unchanged = await Report.get(id=report["id"])
    assert unchanged.isi == "Dana desa diselewengkan"


async def test_missing_report_is_not_found_before_forbidden(other_client: httpx.AsyncClient):
    read = await other_client.get("/laporan/9999")
    edit = await other_client.post("/laporan/edit", json={"id": 9999, "isi": "x"})
    delete = await other_client.post("/laporan/hapus", json={"id": 9999})

    for response in (read, edit, delete):
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


async def test_owner_edit_is_partial(user_client: httpx.AsyncClient):
    report = await create_report_for_test(user_client, kategori="suap")

    response = await user_client.post("/laporan/edit", json={"id": report["id"], "isi": "isi baru"})
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["isi"] == "isi baru"
    # Fields left out keep their value.
    assert data["kategori"] == "suap"
    assert data["nama"] == "Anonim"


async def test_admin_can_edit_and_delete_any_report(user_client: httpx.AsyncClient, admin_client: httpx.AsyncClient):
    report = await create_report_for_test(user_client)

    edit = await admin_client.post("/laporan/edit", json={"id": report["id"], "kategori": "gratifikasi"})
    assert edit.status_code == 200
    assert edit.json()["data"]["kategori"] == "gratifikasi"

    delete = await admin_client.post("/laporan/hapus", json={"id": report["id"]})
    assert delete.status_code == 200
    assert not await Report.filter(id=report["id"]).exists()


async def test_owner_can_delete(user_client: httpx.AsyncClient):
    report = await create_report_for_test(user_client)
    response = await user_client.post("/laporan/hapus", json={"id": report["id"]})
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Report deleted."}
    assert not await Report.filter(id=report["id"]).exists()


async def test_admin_sets_status(user_client: httpx.AsyncClient, admin_client: httpx.AsyncClient):
    report = await create_report_for_test(user_client)

    forbidden = await user_client.post("/laporan/status", json={"id": report["id"], "status": "diproses"})
    assert forbidden.status_code == 403

    response = await admin_client.post("/laporan/status", json={"id": report["id"], "status": "diproses"})
    assert response.status_code == 200, response.text
    assert response.json()["data"]["status"] == "diproses"

    missing = await admin_client.post("/laporan/status", json={"id": 9999, "status": "selesai"})
    assert missing.status_code == 404


async def test_edit_with_null_clears_kategori(user_client: httpx.AsyncClient):
    report = await create_report_for_test(user_client, kategori="suap", nama="Budi")

    response = await user_client.post("/laporan/edit", json={"id": report["id"], "kategori": None})
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert data["kategori"] is None
    assert data["nama"] == "Budi"
    assert data["isi"] == report["isi"]

    stored = await Report.get(id=report["id"])
    assert stored.kategori is None


async def test_edit_with_null_contact_restores_default(user_client: httpx.AsyncClient):
    report = await create_report_for_test(user_client, nama="Budi", email="budi@example.com")

    response = await user_client.post("/laporan/edit", json={"id": report["id"], "nama": None, "email": None})
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    assert (data["nama"], data["email"]) == ("Anonim", "-")


async def test_edit_with_null_body_is_rejected(user_client: httpx.AsyncClient):
    report = await create_report_for_test(user_client)

    response = await user_client.post("/laporan/edit", json={"id": report["id"], "isi": None})
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"

    stored = await Report.get(id=report["id"])
    assert stored.isi == report["isi"]
