from __future__ import annotations

from uuid import uuid4


async def _create_pen(client, headers, name, **extra):
    response = await client.post(
        "/api/v1/pens/", json={"name": name, **extra}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_pen_crud_and_movements(client, farm_headers):
    lactating = await _create_pen(client, farm_headers, "Lactating A", type="lactating")
    assert lactating["type"] == "LACTATING"
    dry = await _create_pen(client, farm_headers, "Dry", type="DRY")

    duplicate = await client.post(
        "/api/v1/pens/", json={"name": "dry"}, headers=farm_headers
    )
    assert duplicate.status_code == 409

    cow = await client.post(
        "/api/v1/animals/",
        json={"identification": "MOVER-1", "sex": "F", "birth_date": "2020-01-01"},
        headers=farm_headers,
    )
    cow_id = cow.json()["id"]

    first_move = await client.post(
        f"/api/v1/animals/{cow_id}/move-pen",
        json={"destination_pen_id": lactating["id"]},
        headers=farm_headers,
    )
    assert first_move.status_code == 201, first_move.text
    assert first_move.json()["origin_pen_id"] is None

    second_move = await client.post(
        f"/api/v1/animals/{cow_id}/move-pen",
        json={"destination_pen_id": dry["id"], "reason": "dry-off"},
        headers=farm_headers,
    )
    assert second_move.status_code == 201
    assert second_move.json()["origin_pen_id"] == lactating["id"]
    assert second_move.json()["moved_by"] == farm_headers["X-User-ID"]

    animal = await client.get(f"/api/v1/animals/{cow_id}", headers=farm_headers)
    assert animal.json()["current_pen_id"] == dry["id"]

    in_dry = await client.get(
        "/api/v1/animals/", params={"pen_id": dry["id"]}, headers=farm_headers
    )
    assert [a["id"] for a in in_dry.json()] == [cow_id]

    history = await client.get(f"/api/v1/animals/{cow_id}/pen-movements", headers=farm_headers)
    assert len(history.json()) == 2

    deactivate = await client.put(
        f"/api/v1/pens/{lactating['id']}", json={"active": False}, headers=farm_headers
    )
    assert deactivate.status_code == 200
    active_pens = await client.get("/api/v1/pens/", params={"active": True}, headers=farm_headers)
    assert [p["id"] for p in active_pens.json()] == [dry["id"]]


async def test_move_to_pen_of_other_farm_is_rejected(client, farm_headers):
    foreign_pen = await _create_pen(client, {"X-Farm-ID": str(uuid4())}, "Foreign")
    cow = await client.post(
        "/api/v1/animals/",
        json={"identification": "STAY-1", "sex": "F", "birth_date": "2020-01-01"},
        headers=farm_headers,
    )
    response = await client.post(
        f"/api/v1/animals/{cow.json()['id']}/move-pen",
        json={"destination_pen_id": foreign_pen["id"]},
        headers=farm_headers,
    )
    assert response.status_code == 422
