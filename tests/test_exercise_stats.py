"""Per-day exercise progress."""

from datetime import datetime, timedelta, timezone

from irontrack.services.exercise_stats import SetRow, aggregate_daily_stats, utc_day

DAY_ONE = datetime(2024, 1, 15, 9, 0, tzinfo=timezone.utc)


def test_aggregate_picks_heaviest_set_and_sums_volume():
    rows = [
        SetRow(DAY_ONE, 135, 10, "lbs"),
        SetRow(DAY_ONE, 155, 8, "lbs"),
        SetRow(DAY_ONE + timedelta(days=2), 160, 5, "lbs"),
        SetRow(DAY_ONE + timedelta(days=2), 140, 8, "lbs"),
    ]

    points = aggregate_daily_stats(rows)

    assert [p.model_dump(by_alias=True) for p in points] == [
        {"date": "2024-01-15", "maxWeight": 155, "maxWeightReps": 8, "maxWeightUnit": "lbs", "totalVolume": 2590},
        {"date": "2024-01-17", "maxWeight": 160, "maxWeightReps": 5, "maxWeightUnit": "lbs", "totalVolume": 1920},
    ]


def test_worked_example_860_and_880():
    day_two = DAY_ONE + timedelta(days=1)
    rows = [SetRow(DAY_ONE, 100, 5, "lbs"), SetRow(DAY_ONE, 120, 3, "lbs"), SetRow(day_two, 110, 8, "lbs")]

    day1, day2 = aggregate_daily_stats(rows)

    assert (day1.date, day1.max_weight, day1.max_weight_reps, day1.total_volume) == ("2024-01-15", 120, 3, 860)
    assert (day2.date, day2.max_weight, day2.max_weight_reps, day2.total_volume) == ("2024-01-16", 110, 8, 880)


def test_equal_weight_keeps_first_set():
    rows = [SetRow(DAY_ONE, 100, 5, "lbs"), SetRow(DAY_ONE, 100, 8, "kg")]
    (point,) = aggregate_daily_stats(rows)
    assert (point.max_weight, point.max_weight_reps, point.max_weight_unit) == (100, 5, "lbs")


def test_mixed_units_are_summed_without_conversion():
    rows = [SetRow(DAY_ONE, 100, 1, "lbs"), SetRow(DAY_ONE, 100, 1, "kg")]
    (point,) = aggregate_daily_stats(rows)
    assert point.total_volume == 200


def test_no_rows_no_points():
    assert aggregate_daily_stats([]) == []


def test_utc_day_converts_offsets_and_trusts_naive_values():
    late_evening = datetime(2024, 1, 15, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert utc_day(late_evening) == "2024-01-16"
    assert utc_day(datetime(2024, 1, 15, 23, 30)) == "2024-01-15"


async def test_stats_endpoint(client, exercise_ids):
    bench = exercise_ids["Bench Press"]
    for date, sets in (
        ("2024-01-17T10:00:00Z", [(160, 5)]),
        ("2024-01-15T10:00:00Z", [(100, 5), (120, 3)]),
    ):
        await client.post(
            "/api/workouts",
            json={
                "date": date,
                "sets": [
                    {"exerciseId": bench, "setNumber": n, "weight": weight, "reps": reps}
                    for n, (weight, reps) in enumerate(sets, start=1)
                ],
            },
        )
    await client.post(
        "/api/workouts",
        json={
            "date": "2024-01-16T10:00:00Z",
            "sets": [{"exerciseId": exercise_ids["Squat"], "setNumber": 1, "weight": 300, "reps": 1}],
        },
    )

    response = await client.get(f"/api/stats/{bench}")
    assert response.status_code == 200
    assert response.json() == [
        {"date": "2024-01-15", "maxWeight": 120, "maxWeightReps": 3, "maxWeightUnit": "lbs", "totalVolume": 860},
        {"date": "2024-01-17", "maxWeight": 160, "maxWeightReps": 5, "maxWeightUnit": "lbs", "totalVolume": 800},
    ]


async def test_stats_for_unused_exercise_is_empty(client, exercise_ids):
    response = await client.get(f"/api/stats/{exercise_ids['Squat']}")
    assert response.json() == []


async def test_stats_for_missing_exercise_is_404(client):
    response = await client.get("/api/stats/321")
    assert response.status_code == 404


def test_all_zero_day_reports_first_logged_set():
    rows = [SetRow(DAY_ONE, 0, 12, "kg"), SetRow(DAY_ONE, 0, 20, "lbs")]
    (point,) = aggregate_daily_stats(rows)
    assert (point.max_weight, point.max_weight_reps, point.max_weight_unit) == (0, 12, "kg")
    assert point.total_volume == 0
