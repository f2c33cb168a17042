"""Backup export and merge-by-name import."""

import pytest
from sqlalchemy import func, select

from irontrack.core.errors import ImportFormatError
from irontrack.models.cardio_type import CardioType
from irontrack.models.exercise import Exercise
from irontrack.models.split import Split
from irontrack.models.workout import Workout
from irontrack.services.backup import parse_backup


def _document(**overrides):
    document = {
        "version": "1.0",
        "exportedAt": "2024-06-01T12:00:00Z",
        "exercises": [
            {"id": 501, "name": "Squat", "description": "Back squat"},
            {"id": 502, "name": "Pull Up", "description": None},
        ],
        "cardioTypes": [
            {"id": 601, "name": "Assault Bike", "category": "cycle", "isBuiltIn": True,
             "showDistance": False, "showPace": False, "showSpeed": True, "speedUnit": "mph"},
        ],
        "splits": [
            {
                "id": 701,
                "name": "Full Body",
                "numberOfDays": 2,
                "splitExercises": [
                    {"id": 1, "splitId": 701, "exerciseId": 501, "dayNumber": 1, "sets": 5, "repMin": 5, "repMax": 5},
                    {"id": 2, "splitId": 701, "exerciseId": 502, "dayNumber": 2, "sets": 3, "repMin": 6, "repMax": 10},
                ],
                "splitCardio": [
                    {"id": 1, "splitId": 701, "cardioTypeId": 601, "dayNumber": 2, "targetDurationSeconds": 600},
                ],
            }
        ],
        "workouts": [
            {
                "id": 801,
                "date": "2024-05-30T07:00:00Z",
                "notes": "Imported",
                "splitId": 701,
                "sets": [
                    {"id": 1, "workoutId": 801, "exerciseId": 501, "setNumber": 1, "weight": 225, "reps": 5,
                     "weightUnit": "lbs"},
                    {"id": 2, "workoutId": 801, "exerciseId": 999, "setNumber": 2, "weight": 20, "reps": 10,
                     "weightUnit": "kg"},
                ],
                "cardioSessions": [
                    {"id": 1, "workoutId": 801, "cardioTypeId": 601, "durationSeconds": 600, "calories": 150},
                ],
            },
            {"id": 802, "date": "2024-05-31T07:00:00Z", "splitId": 0, "sets": [], "cardioSessions": []},
        ],
    }
    document.update(overrides)
    return document


async def _count(session, model):
    return await session.scalar(select(func.count()).select_from(model))


async def test_import_inserts_and_remaps(client):
    response = await client.post("/api/import", json=_document())
    assert response.status_code == 200
    assert response.json() == {
        "message": "Import successful",
        "imported": {"exercises": 2, "cardioTypes": 1, "splits": 1, "workouts": 2},
    }

    exercises = {e["name"]: e["id"] for e in (await client.get("/api/exercises")).json()}
    (split,) = (await client.get("/api/splits")).json()
    assert [slot["exerciseId"] for slot in split["splitExercises"]] == [exercises["Squat"], exercises["Pull Up"]]
    assert split["splitCardio"][0]["cardioType"]["name"] == "Assault Bike"
    assert split["splitCardio"][0]["cardioType"]["isBuiltIn"] is False

    workouts = (await client.get("/api/workouts")).json()
    empty, logged = workouts
    assert empty["splitId"] is None
    assert logged["splitId"] == split["id"]
    assert logged["sets"][0]["exerciseId"] == exercises["Squat"]
    # unknown ids are kept as-is
    assert logged["sets"][1]["exerciseId"] == 999
    assert logged["sets"][1]["exercise"] is None


async def test_import_merges_existing_names(client, session):
    existing = await client.post("/api/exercises", json={"name": "Squat", "description": "Mine"})
    squat_id = existing.json()["id"]

    response = await client.post("/api/import", json=_document())
    assert response.json()["imported"]["exercises"] == 1

    squat = await session.get(Exercise, squat_id)
    assert squat.description == "Mine"
    assert await _count(session, Exercise) == 2

    logged = (await client.get("/api/workouts")).json()[1]
    assert logged["sets"][0]["exerciseId"] == squat_id


async def test_existing_split_keeps_its_slots(client, exercise_ids):
    await client.post(
        "/api/splits",
        json={
            "name": "Full Body",
            "splitExercises": [{"exerciseId": exercise_ids["Squat"], "sets": 3, "repMin": 8, "repMax": 12}],
        },
    )

    response = await client.post("/api/import", json=_document())
    assert response.json()["imported"]["splits"] == 0

    (split,) = (await client.get("/api/splits")).json()
    assert len(split["splitExercises"]) == 1
    assert (await client.get("/api/workouts")).json()[1]["splitId"] == split["id"]


async def test_importing_twice_duplicates_only_workouts(client, session):
    await client.post("/api/import", json=_document())
    counts = {m: await _count(session, m) for m in (Exercise, CardioType, Split, Workout)}

    second = await client.post("/api/import", json=_document())
    assert second.json()["imported"] == {"exercises": 0, "cardioTypes": 0, "splits": 0, "workouts": 2}

    assert await _count(session, Exercise) == counts[Exercise]
    assert await _count(session, CardioType) == counts[CardioType]
    assert await _count(session, Split) == counts[Split]
    assert await _count(session, Workout) == 2 * counts[Workout]


async def test_export_then_import_duplicates_workouts(client, session, exercise_ids, cardio_type_id):
    await client.post("/api/cardio-types", json={"name": "Ski Erg", "category": "other"})
    await client.post(
        "/api/splits",
        json={
            "name": "Legs",
            "splitExercises": [{"exerciseId": exercise_ids["Squat"], "sets": 3, "repMin": 5, "repMax": 8}],
            "splitCardio": [{"cardioTypeId": cardio_type_id}],
        },
    )
    await client.post(
        "/api/workouts",
        json={
            "date": "2024-04-01T08:00:00Z",
            "sets": [{"exerciseId": exercise_ids["Squat"], "setNumber": 1, "weight": 315, "reps": 3}],
            "cardioSessions": [{"cardioTypeId": cardio_type_id, "durationSeconds": 1200}],
        },
    )
    exported = (await client.get("/api/export")).json()

    response = await client.post("/api/import", json=exported)

    # catalog rows merge by name, workouts are appended again
    assert response.json()["imported"] == {"exercises": 0, "cardioTypes": 0, "splits": 0, "workouts": 1}
    workouts = (await client.get("/api/workouts")).json()
    assert len(workouts) == 2
    assert [s["weight"] for w in workouts for s in w["sets"]] == [315, 315]
    assert all(w["cardioSessions"][0]["cardioTypeId"] == cardio_type_id for w in workouts)


async def test_export_document_shape(client, exercise_ids, cardio_type_id):
    await client.post("/api/cardio-types", json={"name": "Ski Erg", "category": "other"})
    await client.post(
        "/api/workouts",
        json={
            "date": "2024-04-01T08:00:00Z",
            "sets": [{"exerciseId": exercise_ids["Squat"], "setNumber": 1, "weight": 315, "reps": 3}],
        },
    )

    response = await client.get("/api/export")
    assert response.status_code == 200
    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="irontrack-backup-')
    assert disposition.endswith('.json"')

    document = response.json()
    assert document["version"] == "1.0"
    assert "exportedAt" in document
    assert [e["name"] for e in document["exercises"]] == ["Bench Press", "Squat"]
    # built-in types are recreated by seeding, so they are not exported
    assert [c["name"] for c in document["cardioTypes"]] == ["Ski Erg"]
    assert document["splits"] == []
    (workout,) = document["workouts"]
    assert workout["sets"][0]["weight"] == 315
    assert workout["cardioSessions"] == []


@pytest.mark.parametrize(
    "payload, message",
    [
        ([1, 2, 3], "Invalid import data format"),
        ("backup", "Invalid import data format"),
        (
            {"version": "1.0", "exercises": [], "splits": []},
            "Invalid backup file structure. Expected version, exercises, workouts, and splits arrays.",
        ),
        (
            {"exercises": [], "workouts": [], "splits": []},
            "Invalid backup file structure. Expected version, exercises, workouts, and splits arrays.",
        ),
        (
            {"version": "1.0", "exercises": {}, "workouts": [], "splits": []},
            "Invalid backup file structure. Expected version, exercises, workouts, and splits arrays.",
        ),
        ({"version": "2.0", "exercises": [], "workouts": [], "splits": []}, "Unsupported backup version: 2.0"),
    ],
)
async def test_import_rejects_bad_envelopes(client, payload, message):
    response = await client.post("/api/import", json=payload)
    assert response.status_code == 400
    assert response.json()["message"] == message


async def test_bad_entry_names_the_field_and_writes_nothing(client, session):
    document = _document()
    del document["workouts"][0]["sets"][0]["reps"]

    response = await client.post("/api/import", json=document)
    assert response.status_code == 400
    assert response.json()["field"] == "workouts.0.sets.0.reps"
    assert await _count(session, Exercise) == 0


@pytest.mark.parametrize(
    "path, value, field",
    [
        (("exercises", 1, "name"), "", "exercises.1.name"),
        (("cardioTypes", 0, "name"), "", "cardioTypes.0.name"),
        (("cardioTypes", 0, "speedUnit"), "x" * 30, "cardioTypes.0.speedUnit"),
        (("cardioTypes", 0, "paceUnit"), "x" * 30, "cardioTypes.0.paceUnit"),
        (("splits", 0, "name"), "", "splits.0.name"),
    ],
)
async def test_entries_the_api_would_refuse_are_not_imported(client, session, path, value, field):
    document = _document()
    target = document
    for key in path[:-1]:
        target = target[key]
    target[path[-1]] = value

    response = await client.post("/api/import", json=document)
    assert response.status_code == 400
    assert response.json()["field"] == field
    assert await _count(session, Exercise) == 0

    assert (await client.get("/api/exercises")).status_code == 200
    assert (await client.get("/api/cardio-types")).status_code == 200


def test_parse_backup_without_cardio_types():
    raw = _document()
    del raw["cardioTypes"]
    assert parse_backup(raw).cardio_types == []


def test_parse_backup_version_must_match_exactly():
    with pytest.raises(ImportFormatError, match="Unsupported backup version: 1"):
        parse_backup(_document(version=1))
