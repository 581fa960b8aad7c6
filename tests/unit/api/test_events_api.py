"""HTTP tests for calendar event reconciliation (in-memory SQLite)."""

from __future__ import annotations

import random

import pytest


async def _seed_with_target(seed, make_assignment, **target_kwargs):
    fillers = [make_assignment() for _ in range(11)]
    target = make_assignment(agent="Alex Loren", address="317 North 19th Street", **target_kwargs)
    assignments = fillers + [target]
    random.shuffle(assignments)
    await seed(assignments)
    return target


@pytest.mark.asyncio
async def test_confirmed_event_schedules_assignment(client, seed, make_assignment):
    target = await _seed_with_target(seed, make_assignment)

    resp = await client.post("/api/events/", json={"status": "confirmed", "address": "317 N 19th St"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == str(target.id)
    assert body["address"] == "317 North 19th Street"
    assert body["scheduled"] is True

    fetched = await client.get(f"/api/assignments/{target.id}")
    assert fetched.json()["scheduled"] is True


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["cancelled", "deleted"])
async def test_other_status_unschedules_assignment(client, seed, make_assignment, status):
    target = await _seed_with_target(seed, make_assignment, scheduled=True)

    resp = await client.post("/api/events", json={"status": status, "address": "317 N 19th St"})
    assert resp.status_code == 200
    assert resp.json()["id"] == str(target.id)
    assert resp.json()["scheduled"] is False


@pytest.mark.asyncio
async def test_confirmed_event_twice(client, seed, make_assignment):
    target = await _seed_with_target(seed, make_assignment)
    event = {"status": "confirmed", "address": "317 N 19th St"}

    first = await client.post("/api/events", json=event)
    second = await client.post("/api/events", json=event)

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["id"] == str(target.id)
    assert second.json()["scheduled"] is True


@pytest.mark.asyncio
async def test_empty_store_is_404(client):
    resp = await client.post("/api/events", json={"status": "confirmed", "address": "317 N 19th St"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "no matching assignment"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"status": "confirmed"},
        {"address": "317 N 19th St"},
        {"status": 1, "address": "317 N 19th St"},
        ["confirmed", "317 N 19th St"],
    ],
)
async def test_invalid_event_is_400(client, payload):
    resp = await client.post("/api/events", json=payload)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "event payload invalid"


@pytest.mark.asyncio
async def test_non_json_event_is_400(client):
    resp = await client.post("/api/events", content=b"status=confirmed")
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["assignments"] == 0


@pytest.mark.asyncio
async def test_health_counts_stored_assignments(client, seed, make_assignment):
    await seed([make_assignment() for _ in range(3)] + [make_assignment(hidden=True)])
    resp = await client.get("/api/health")
    assert resp.json()["assignments"] == 4
