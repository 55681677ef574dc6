"""Tests for the table availability endpoint"""

import pytest
from httpx import AsyncClient

from tests.conftest import future_date


@pytest.mark.asyncio
async def test_all_slots_available(client: AsyncClient):
    day = future_date().isoformat()

    response = await client.get("/api/tables/1/availability", params={"date": day})

    assert response.status_code == 200
    data = response.json()
    assert data["table_id"] == 1
    assert data["date"] == day
    assert len(data["slots"]) == 6
    assert all(slot["available"] for slot in data["slots"])
    assert data["slots"][0] == {"start_time": "10:00", "end_time": "12:00", "available": True}


@pytest.mark.asyncio
async def test_booked_slot_unavailable(client: AsyncClient, reservation_payload):
    created = await client.post("/api/reservations", json=reservation_payload)
    assert created.status_code == 201

    response = await client.get(
        "/api/tables/1/availability",
        params={"date": reservation_payload["reservation_date"]},
    )

    slots = {slot["start_time"]: slot["available"] for slot in response.json()["slots"]}
    assert slots.pop("18:00") is False
    assert all(slots.values())


@pytest.mark.asyncio
async def test_cancelled_booking_does_not_block(client: AsyncClient, reservation_payload):
    created = await client.post("/api/reservations", json=reservation_payload)
    reservation_id = created.json()["reservation"]["id"]
    await client.patch(f"/api/reservations/{reservation_id}/cancel")

    response = await client.get(
        "/api/tables/1/availability",
        params={"date": reservation_payload["reservation_date"]},
    )

    assert all(slot["available"] for slot in response.json()["slots"])


@pytest.mark.asyncio
async def test_other_table_and_date_unaffected(client: AsyncClient, reservation_payload):
    await client.post("/api/reservations", json=reservation_payload)

    other_table = await client.get(
        "/api/tables/2/availability",
        params={"date": reservation_payload["reservation_date"]},
    )
    other_day = await client.get(
        "/api/tables/1/availability",
        params={"date": future_date(45).isoformat()},
    )

    assert all(slot["available"] for slot in other_table.json()["slots"])
    assert all(slot["available"] for slot in other_day.json()["slots"])


@pytest.mark.asyncio
async def test_missing_date_rejected(client: AsyncClient):
    response = await client.get("/api/tables/1/availability")

    assert response.status_code == 400
    assert response.json() == {"errors": ["date query parameter is required"]}


@pytest.mark.asyncio
async def test_malformed_date_rejected(client: AsyncClient):
    response = await client.get("/api/tables/1/availability", params={"date": "tomorrow"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_huge_table_id_rejected(client: AsyncClient):
    response = await client.get(
        f"/api/tables/{2**63}/availability",
        params={"date": future_date().isoformat()},
    )

    assert response.status_code == 400
