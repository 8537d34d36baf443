"""Integration tests for the campsite endpoints."""

import pytest


@pytest.mark.asyncio
async def test_list_campsites(test_client, seeded):
    response = await test_client.get("/api/campsites")

    assert response.status_code == 200
    data = response.json()
    assert [c["nickname"] for c in data] == ["Barred Owl", "Blue Heron"]
    # The type relation is not expanded in the listing
    assert all(c["campsiteType"] is None for c in data)
    assert data[0]["campsiteTypeId"] == seeded["tent"]


@pytest.mark.asyncio
async def test_get_campsite_expands_type(test_client, seeded):
    response = await test_client.get(f"/api/campsites/{seeded['owl']}")

    assert response.status_code == 200
    data = response.json()
    assert data["nickname"] == "Barred Owl"
    assert data["imageUrl"] == "https://img.test/owl.jpg"
    assert data["campsiteType"]["id"] == seeded["tent"]
    assert data["campsiteType"]["campsiteTypeName"] == "Tent"
    assert "campsites" not in data["campsiteType"]


@pytest.mark.asyncio
async def test_get_missing_campsite_returns_404(test_client, seeded):
    response = await test_client.get("/api/campsites/9999")

    assert response.status_code == 404
    data = response.json()
    assert data["status"] == 404
    assert data["resource_type"] == "campsite"
    assert data["resource_id"] == "9999"


@pytest.mark.asyncio
async def test_create_then_get_campsite(test_client, sample_campsite_data):
    response = await test_client.post("/api/campsites", json=sample_campsite_data)

    assert response.status_code == 201
    created = response.json()
    assert response.headers["location"] == f"/api/campsites/{created['id']}"

    response = await test_client.get(response.headers["location"])
    assert response.status_code == 200
    fetched = response.json()
    assert fetched["nickname"] == sample_campsite_data["nickname"]
    assert fetched["imageUrl"] == sample_campsite_data["imageUrl"]
    assert fetched["campsiteTypeId"] == sample_campsite_data["campsiteTypeId"]


@pytest.mark.asyncio
async def test_create_campsite_ignores_client_id(test_client, sample_campsite_data):
    response = await test_client.post("/api/campsites", json={**sample_campsite_data, "id": 424242})

    assert response.status_code == 201
    assert response.json()["id"] != 424242


@pytest.mark.asyncio
async def test_create_campsite_unknown_type_returns_400(test_client, sample_campsite_data):
    payload = {**sample_campsite_data, "campsiteTypeId": 9999}

    response = await test_client.post("/api/campsites", json=payload)

    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "FOREIGN_KEY_VIOLATION"
    assert data["detail"] == "Invalid data submitted"


@pytest.mark.asyncio
async def test_create_campsite_missing_fields_returns_422(test_client, seeded):
    response = await test_client.post("/api/campsites", json={"imageUrl": "x"})

    assert response.status_code == 422
    data = response.json()
    assert data["status"] == 422
    paths = {v["path"] for v in data["violations"]}
    assert "body.nickname" in paths
    assert "body.campsiteTypeId" in paths


@pytest.mark.asyncio
async def test_update_campsite(test_client, seeded):
    payload = {
        "nickname": "Great Horned Owl",
        "campsiteTypeId": seeded["rv"],
        "imageUrl": None,
    }

    response = await test_client.put(f"/api/campsites/{seeded['owl']}", json=payload)
    assert response.status_code == 204
    assert response.content == b""

    response = await test_client.get(f"/api/campsites/{seeded['owl']}")
    data = response.json()
    assert data["nickname"] == "Great Horned Owl"
    assert data["imageUrl"] is None
    assert data["campsiteTypeId"] == seeded["rv"]
    assert data["campsiteType"]["campsiteTypeName"] == "RV"


@pytest.mark.asyncio
async def test_update_missing_campsite_returns_404(test_client, sample_campsite_data):
    response = await test_client.put("/api/campsites/9999", json=sample_campsite_data)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_campsite(test_client, seeded):
    response = await test_client.delete(f"/api/campsites/{seeded['heron']}")
    assert response.status_code == 204

    response = await test_client.get("/api/campsites")
    assert [c["id"] for c in response.json()] == [seeded["owl"]]

    response = await test_client.get(f"/api/campsites/{seeded['heron']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_missing_campsite_returns_404(test_client, seeded):
    response = await test_client.delete("/api/campsites/9999")

    assert response.status_code == 404
    assert response.json()["title"] == "Resource Not Found"


@pytest.mark.asyncio
async def test_delete_campsite_removes_its_reservations(test_client, sample_reservation_data, seeded):
    response = await test_client.post("/api/reservations", json=sample_reservation_data)
    assert response.status_code == 201

    response = await test_client.delete(f"/api/campsites/{seeded['owl']}")
    assert response.status_code == 204

    response = await test_client.get("/api/reservations")
    assert response.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("campsite_id", ["9223372036854775808", "2147483648", "0"])
async def test_get_campsite_id_out_of_range_returns_422(test_client, seeded, campsite_id):
    response = await test_client.get(f"/api/campsites/{campsite_id}")

    assert response.status_code == 422
    data = response.json()
    assert data["status"] == 422
    assert data["violations"][0]["path"] == "path.campsite_id"


@pytest.mark.asyncio
async def test_update_campsite_type_id_out_of_range_returns_422(test_client, sample_campsite_data, seeded):
    payload = {**sample_campsite_data, "campsiteTypeId": 9223372036854775808}

    response = await test_client.put(f"/api/campsites/{seeded['owl']}", json=payload)

    assert response.status_code == 422
    assert response.json()["violations"][0]["path"] == "body.campsiteTypeId"
