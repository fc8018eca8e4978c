# tests/test_monuments_api.py
"""Authenticated monument CRUD and moderation"""

import pytest

from app.core.exceptions import StorageError
from app.models.gallery import GalleryItem
from app.models.monument import Monument

PAYLOAD = {
    "title": "Qutub Minar",
    "short_description": "73 m minaret",
    "long_description": "Built by Qutb ud-Din Aibak in 1199.",
    "place": "Delhi",
    "state": "DL",
    "importance": "UNESCO World Heritage Site",
    "location": "28.5245,77.1855",
}


@pytest.mark.asyncio
async def test_create_sets_owner_and_unverified(client, member, member_headers):
    resp = await client.post("/monuments/", json=PAYLOAD, headers=member_headers)
    assert resp.status_code == 201
    body = resp.json()
    assert body["title"] == "Qutub Minar"
    assert body["shortDescription"] == "73 m minaret"
    assert body["status"] == 0
    assert body["userId"] == str(member.id)
    assert body["pastCondition"] == ""


@pytest.mark.asyncio
async def test_create_requires_descriptive_fields(client, member_headers):
    payload = dict(PAYLOAD, place="  ")
    payload.pop("long_description")
    resp = await client.post("/monuments/", json=payload, headers=member_headers)
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert "long_description" in detail and "place" in detail
    assert await Monument.all().count() == 0


@pytest.mark.asyncio
async def test_monuments_require_auth(client, db_setup):
    resp = await client.get("/monuments/")
    assert resp.status_code in (401, 403)


@pytest.mark.asyncio
async def test_read_all_and_one(client, member_headers, monument):
    resp = await client.get("/monuments/", headers=member_headers)
    assert resp.status_code == 200
    assert [m["id"] for m in resp.json()] == [str(monument.id)]

    resp = await client.get(f"/monuments/{monument.id}", headers=member_headers)
    assert resp.status_code == 200
    assert resp.json()["place"] == "Agra"

    resp = await client.get("/monuments/00000000-0000-0000-0000-000000000000", headers=member_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Monument not found"


@pytest.mark.asyncio
async def test_update_merges_only_given_fields(client, member_headers, monument):
    resp = await client.put(
        f"/monuments/{monument.id}",
        json={"present_condition": "Restored in 2002", "location": ""},
        headers=member_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["presentCondition"] == "Restored in 2002"
    assert body["location"] == ""
    assert body["title"] == "Taj Mahal"


@pytest.mark.asyncio
async def test_update_rejects_blank_required_field(client, member_headers, monument):
    resp = await client.put(f"/monuments/{monument.id}", json={"title": " "}, headers=member_headers)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_verify_and_unverify_require_admin(client, member_headers, admin_headers, monument):
    resp = await client.put(f"/monuments/verify/{monument.id}", headers=member_headers)
    assert resp.status_code == 403

    resp = await client.put(f"/monuments/verify/{monument.id}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == 1
    assert (await Monument.get(id=monument.id)).is_verified

    resp = await client.put(f"/monuments/unverify/{monument.id}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == 0


@pytest.mark.asyncio
async def test_delete_cascades_to_gallery(client, storage, admin_headers, monument, make_png):
    created = await client.post(
        f"/gallery/{monument.id}",
        files={"image": ("gate.png", make_png(), "image/png")},
        data={"imgTitle": "Gate"},
        headers=admin_headers,
    )
    key = created.json()["image"]

    resp = await client.delete(f"/monuments/{monument.id}", headers=admin_headers)
    assert resp.status_code == 200
    assert await Monument.filter(id=monument.id).count() == 0
    assert await GalleryItem.filter(monument_id=monument.id).count() == 0
    assert not storage.exists(key)

    again = await client.delete(f"/monuments/{monument.id}", headers=admin_headers)
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_delete_stops_when_gallery_object_delete_fails(client, storage, admin_headers, monument, make_png):
    keys = []
    for title in ("Gate", "Dome"):
        created = await client.post(
            f"/gallery/{monument.id}",
            files={"image": (f"{title}.png", make_png(), "image/png")},
            data={"imgTitle": title},
            headers=admin_headers,
        )
        keys.append(created.json()["image"])
    stuck = keys[1]
    real_delete = storage.delete

    def flaky_delete(key):
        if key == stuck:
            raise StorageError(details={"key": key})
        return real_delete(key)

    storage.delete = flaky_delete
    resp = await client.delete(f"/monuments/{monument.id}", headers=admin_headers)

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal Server Error"}
    assert await Monument.filter(id=monument.id).count() == 1
    assert await GalleryItem.filter(image=stuck).count() == 1
    assert storage.exists(stuck)
    # items handled before the failure are gone from both stores
    remaining = await GalleryItem.filter(monument_id=monument.id).values_list("image", flat=True)
    assert all(storage.exists(k) for k in remaining)
    assert all(k in remaining or not storage.exists(k) for k in keys)
