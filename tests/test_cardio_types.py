"""Cardio types: built-in seeding and user CRUD."""

from sqlalchemy import func, select

from irontrack.core.constants import BUILT_IN_CARDIO_TYPES
from irontrack.models.cardio_type import CardioType
from irontrack.repositories.cardio_types import seed_built_in_cardio_types


async def test_startup_seed_inserts_every_built_in(client):
    response = await client.get("/api/cardio-types")
    types = response.json()
    assert len(types) == len(BUILT_IN_CARDIO_TYPES)
    assert all(t["isBuiltIn"] for t in types)
    rowing = next(t for t in types if t["name"] == "Rowing (Erg)")
    assert rowing["category"] == "row"
    assert rowing["paceUnit"] == "min/500m"


async def test_seeding_twice_inserts_nothing(session):
    assert await seed_built_in_cardio_types(session) == 0
    count = await session.scalar(select(func.count()).select_from(CardioType))
    assert count == len(BUILT_IN_CARDIO_TYPES)


async def test_seeding_keeps_user_edits_to_built_ins(client, session, cardio_type_id):
    await client.patch(f"/api/cardio-types/{cardio_type_id}", json={"description": "Trail loop"})

    await seed_built_in_cardio_types(session)

    response = await client.get(f"/api/cardio-types/{cardio_type_id}")
    assert response.json()["description"] == "Trail loop"


async def test_seeding_restores_deleted_built_in(client, session, cardio_type_id):
    await client.delete(f"/api/cardio-types/{cardio_type_id}")
    assert await seed_built_in_cardio_types(session) == 1


async def test_created_type_is_never_built_in(client):
    response = await client.post(
        "/api/cardio-types",
        json={"name": "Ski Erg", "category": "other", "isBuiltIn": True},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["isBuiltIn"] is False
    assert body["showDistance"] is True
    assert body["showSpeed"] is False


async def test_unknown_category_is_rejected(client):
    response = await client.post("/api/cardio-types", json={"name": "Skate", "category": "skate"})
    assert response.status_code == 400
    assert response.json()["field"] == "category"


async def test_duplicate_name_is_rejected(client):
    response = await client.post(
        "/api/cardio-types", json={"name": "Outdoor Run", "category": "run"}
    )
    assert response.status_code == 400
    assert response.json()["field"] == "name"


async def test_delete_cardio_type(client):
    created = await client.post("/api/cardio-types", json={"name": "Sled Push", "category": "other"})
    type_id = created.json()["id"]

    assert (await client.delete(f"/api/cardio-types/{type_id}")).status_code == 204
    assert (await client.get(f"/api/cardio-types/{type_id}")).status_code == 404
    assert (await client.delete(f"/api/cardio-types/{type_id}")).status_code == 404


async def test_session_of_deleted_type_renders_null_cardio_type(client):
    created = await client.post("/api/cardio-types", json={"name": "Sled Push", "category": "other"})
    type_id = created.json()["id"]
    workout = await client.post(
        "/api/workouts",
        json={
            "date": "2024-05-01T10:00:00Z",
            "sets": [],
            "cardioSessions": [{"cardioTypeId": type_id, "durationSeconds": 300}],
        },
    )
    await client.delete(f"/api/cardio-types/{type_id}")

    response = await client.get(f"/api/workouts/{workout.json()['id']}")
    (session,) = response.json()["cardioSessions"]
    assert session["cardioTypeId"] == type_id
    assert session["cardioType"] is None
