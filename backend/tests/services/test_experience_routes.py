"""Work Experience Routes — CRUD with newest start date first."""

from uuid import uuid4

BASE = "/api/v1/experiences"


def _payload(**overrides) -> dict:
    body = {
        "jobTitle": "Backend Engineer",
        "companyName": "Acme",
        "startDate": "2023-01",
        "description": ["Built APIs", "Ran migrations"],
    }
    body.update(overrides)
    return body


async def test_create_defaults_end_date_to_present(auth_client):
    res = await auth_client.post(BASE, json=_payload())

    assert res.status_code == 201
    data = res.json()["data"]
    assert data["endDate"] == "Present"
    assert data["isCurrent"] is False
    assert data["description"] == ["Built APIs", "Ran migrations"]


async def test_create_rejects_blank_bullet(auth_client):
    res = await auth_client.post(BASE, json=_payload(description=["ok", "   "]))
    assert res.status_code == 400


async def test_list_newest_start_date_first(auth_client):
    await auth_client.post(BASE, json=_payload(companyName="Old", startDate="2019-03"))
    await auth_client.post(BASE, json=_payload(companyName="New", startDate="2024-06"))

    data = (await auth_client.get(BASE)).json()["data"]

    assert [e["companyName"] for e in data] == ["New", "Old"]


async def test_update_and_get(auth_client):
    created = (await auth_client.post(BASE, json=_payload())).json()["data"]

    res = await auth_client.put(
        f"{BASE}/{created['id']}",
        json=_payload(jobTitle="Staff Engineer", isCurrent=True),
    )
    fetched = (await auth_client.get(f"{BASE}/{created['id']}")).json()["data"]

    assert res.status_code == 200
    assert fetched["jobTitle"] == "Staff Engineer"
    assert fetched["isCurrent"] is True


async def test_delete_then_404(auth_client):
    created = (await auth_client.post(BASE, json=_payload())).json()["data"]

    res = await auth_client.delete(f"{BASE}/{created['id']}")
    missing = await auth_client.get(f"{BASE}/{created['id']}")

    assert res.json() == {"success": True, "message": "Experience deleted successfully"}
    assert missing.status_code == 404


async def test_update_missing_returns_404(auth_client):
    res = await auth_client.put(f"{BASE}/{uuid4()}", json=_payload())
    assert res.status_code == 404


async def test_requires_token(client):
    res = await client.get(BASE)
    assert res.status_code == 401
