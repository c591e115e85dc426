from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select

from src.application.errors import PersistenceError
from src.infrastructure.db.orm.animal import AnimalORM
from src.infrastructure.db.orm.calving import CalvingORM
from src.infrastructure.repos.lactations_sqlalchemy import LactationsSQLAlchemyRepository


async def _create_animal(client, headers, identification, **extra):
    payload = {
        "identification": identification,
        "sex": "F",
        "category": "COW",
        "birth_date": "2019-04-02",
        **extra,
    }
    response = await client.post("/api/v1/animals/", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_full_reproductive_cycle(app, client, farm_headers):
    cow = await _create_animal(client, farm_headers, "COW-100")
    bull = await _create_animal(
        client, farm_headers, "BULL-1", sex="m", category="bull", breed="Holstein"
    )

    estrus = await client.post(
        "/api/v1/estrus",
        json={"animal_id": cow["id"], "detection_method": "visual", "intensity": "strong"},
        headers=farm_headers,
    )
    assert estrus.status_code == 201, estrus.text

    breeding = await client.post(
        "/api/v1/breedings",
        json={
            "animal_id": cow["id"],
            "type": "NATURAL",
            "date": "2024-01-10",
            "estrus_id": estrus.json()["id"],
            "sire_animal_id": bull["id"],
        },
        headers=farm_headers,
    )
    assert breeding.status_code == 201, breeding.text
    breeding_id = breeding.json()["id"]

    served = await client.get(f"/api/v1/animals/{cow['id']}", headers=farm_headers)
    assert served.json()["reproductive_status"] == "SERVED"

    diagnosis = await client.post(
        "/api/v1/pregnancy-diagnoses",
        json={
            "animal_id": cow["id"],
            "date": "2024-02-20",
            "result": "POSITIVE",
            "breeding_id": breeding_id,
            "method": "ULTRASOUND",
        },
        headers=farm_headers,
    )
    assert diagnosis.status_code == 201, diagnosis.text
    pregnancy = diagnosis.json()["pregnancy"]
    assert pregnancy["status"] == "CONFIRMED"
    assert pregnancy["due_date"] == "2024-10-19"

    dry_off = await client.post(
        "/api/v1/dry-offs",
        json={"animal_id": cow["id"], "date": "2024-08-20", "pregnancy_id": pregnancy["id"]},
        headers=farm_headers,
    )
    assert dry_off.status_code == 201, dry_off.text
    assert dry_off.json()["expected_calving_date"] == "2024-10-19"

    calving = await client.post(
        "/api/v1/calvings",
        json={
            "animal_id": cow["id"],
            "date": "2024-10-17",
            "pregnancy_id": pregnancy["id"],
            "type": "normal",
        },
        headers=farm_headers,
    )
    assert calving.status_code == 201, calving.text
    body = calving.json()
    assert body["calving"]["offspring_count"] == 1
    assert body["pregnancy"]["status"] == "DELIVERED"
    assert body["lactation"]["number"] == 1
    assert body["lactation"]["status"] == "IN_PROGRESS"
    calving_id = body["calving"]["id"]

    offspring = await client.post(
        f"/api/v1/calvings/{calving_id}/offspring",
        json={"sex": "F", "condition": "ALIVE", "weight": 40.0},
        headers=farm_headers,
    )
    assert offspring.status_code == 201, offspring.text
    calf_id = offspring.json()["animal_id"]
    assert calf_id is not None

    calf = await client.get(f"/api/v1/animals/{calf_id}", headers=farm_headers)
    assert calf.status_code == 200
    calf_body = calf.json()
    assert calf_body["identification"] == f"B-{calving_id}-0"
    assert calf_body["category"] == "FEMALE_CALF"
    assert calf_body["mother_id"] == cow["id"]
    assert calf_body["birth_date"] == "2024-10-17"

    mother = await client.get(f"/api/v1/animals/{cow['id']}", headers=farm_headers)
    assert mother.json()["reproductive_status"] == "CALVED"

    second_calving = await client.post(
        "/api/v1/calvings",
        json={"animal_id": cow["id"], "date": "2025-10-20"},
        headers=farm_headers,
    )
    assert second_calving.status_code == 201, second_calving.text
    assert second_calving.json()["lactation"]["number"] == 2

    lactations = await client.get(
        "/api/v1/lactations", params={"animal_id": cow["id"]}, headers=farm_headers
    )
    assert sorted(lac["number"] for lac in lactations.json()) == [1, 2]

    pregnancies = await client.get(
        "/api/v1/pregnancies", params={"status": "delivered"}, headers=farm_headers
    )
    assert [p["id"] for p in pregnancies.json()] == [pregnancy["id"]]


async def test_positive_diagnosis_with_unknown_breeding_keeps_record(client, farm_headers):
    cow = await _create_animal(client, farm_headers, "COW-200")
    response = await client.post(
        "/api/v1/pregnancy-diagnoses",
        json={
            "animal_id": cow["id"],
            "date": "2024-02-20",
            "result": "POSITIVE",
            "breeding_id": "00000000-0000-0000-0000-000000000001",
        },
        headers=farm_headers,
    )
    assert response.status_code == 201, response.text
    assert response.json()["pregnancy"] is None

    listed = await client.get(
        "/api/v1/pregnancy-diagnoses", params={"animal_id": cow["id"]}, headers=farm_headers
    )
    assert len(listed.json()) == 1


async def test_natural_breeding_requires_sire(client, farm_headers):
    cow = await _create_animal(client, farm_headers, "COW-300")
    response = await client.post(
        "/api/v1/breedings",
        json={"animal_id": cow["id"], "type": "NATURAL", "date": "2024-01-10"},
        headers=farm_headers,
    )
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


async def test_calving_rolls_back_when_lactation_fails(app, client, farm_headers, monkeypatch):
    cow = await _create_animal(client, farm_headers, "COW-400")

    async def failing_add(self, lactation):
        raise PersistenceError("Failed to open lactation")

    monkeypatch.setattr(LactationsSQLAlchemyRepository, "add", failing_add)

    response = await client.post(
        "/api/v1/calvings",
        json={"animal_id": cow["id"], "date": "2024-10-17"},
        headers=farm_headers,
    )
    assert response.status_code == 500
    assert response.json()["code"] == "persistence_error"

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        count = await session.execute(select(func.count(CalvingORM.id)))
        assert count.scalar() == 0
        row = await session.get(AnimalORM, UUID(cow["id"]))
        assert row.reproductive_status is None


async def test_reclassify_endpoint_promotes_old_female_calves(client, farm_headers):
    old_calf = await _create_animal(
        client, farm_headers, "CALF-OLD", category="FEMALE_CALF", birth_date="2020-01-01"
    )
    young_calf = await _create_animal(
        client, farm_headers, "CALF-YOUNG", category="FEMALE_CALF", birth_date="2099-01-01"
    )

    response = await client.post(
        "/api/v1/animals/reclassify-by-age", json={"min_age_months": 12}, headers=farm_headers
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["count"] == 1
    assert body["animal_ids"] == [old_calf["id"]]

    promoted = await client.get(f"/api/v1/animals/{old_calf['id']}", headers=farm_headers)
    assert promoted.json()["category"] == "HEIFER"
    untouched = await client.get(f"/api/v1/animals/{young_calf['id']}", headers=farm_headers)
    assert untouched.json()["category"] == "FEMALE_CALF"
