"""
Tests for Progress API Endpoints

Tests milestone entries, category filtering, updates, and statistics.
"""

import pytest
from httpx import AsyncClient
from uuid import uuid4


async def add_entry(client: AsyncClient, child_id: str, category: str, achieved: bool, **extra) -> dict:
    entry_data = {
        "child_id": child_id,
        "category": category,
        "milestone": f"{category} milestone",
        "achieved": achieved,
        **extra,
    }
    response = await client.post("/api/v1/progress/entries", json=entry_data)
    assert response.status_code == 201
    return response.json()


class TestProgressEntries:

    @pytest.mark.asyncio
    async def test_add_entry(self, client: AsyncClient, child_id: str):
        entry = await add_entry(
            client, child_id, "communication", False,
            notes="Uses two-word phrases sometimes",
            severity="mild",
        )
        assert entry["child_id"] == child_id
        assert entry["category"] == "communication"
        assert entry["achieved"] is False
        assert entry["severity"] == "mild"
        assert entry["date_recorded"] is not None

    @pytest.mark.asyncio
    async def test_add_entry_unknown_category(self, client: AsyncClient, child_id: str):
        response = await client.post(
            "/api/v1/progress/entries",
            json={"child_id": child_id, "category": "motor", "milestone": "Climbs stairs"},
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_add_entry_for_another_parents_child(self, client: AsyncClient, child_id: str):
        response = await client.post(
            "/api/v1/progress/entries",
            json={"child_id": child_id, "category": "social", "milestone": "Waves"},
            headers={"X-User-Id": str(uuid4())},
        )
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_list_entries_newest_first(self, client: AsyncClient, child_id: str):
        first = await add_entry(client, child_id, "social", True)
        second = await add_entry(client, child_id, "behavioral", False)

        response = await client.get(f"/api/v1/progress/children/{child_id}/entries")
        assert response.status_code == 200
        assert [e["id"] for e in response.json()] == [second["id"], first["id"]]

    @pytest.mark.asyncio
    async def test_list_entries_by_category(self, client: AsyncClient, child_id: str):
        await add_entry(client, child_id, "social", True)
        await add_entry(client, child_id, "behavioral", False)

        response = await client.get(
            f"/api/v1/progress/children/{child_id}/entries",
            params={"category": "social"},
        )
        assert response.status_code == 200

        data = response.json()
        assert len(data) == 1
        assert data[0]["category"] == "social"

    @pytest.mark.asyncio
    async def test_update_entry(self, client: AsyncClient, child_id: str):
        entry = await add_entry(client, child_id, "social", False)

        response = await client.patch(
            f"/api/v1/progress/entries/{entry['id']}",
            json={"achieved": True, "notes": "Played alongside a peer"},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["achieved"] is True
        assert data["notes"] == "Played alongside a peer"
        assert data["date_recorded"] == entry["date_recorded"]

    @pytest.mark.asyncio
    async def test_update_entry_null_achieved_rejected(self, client: AsyncClient, child_id: str):
        entry = await add_entry(client, child_id, "social", True)

        response = await client.patch(
            f"/api/v1/progress/entries/{entry['id']}",
            json={"achieved": None},
        )
        assert response.status_code == 422

        entries = await client.get(f"/api/v1/progress/children/{child_id}/entries")
        assert entries.json()[0]["achieved"] is True

    @pytest.mark.asyncio
    async def test_update_entry_clears_notes(self, client: AsyncClient, child_id: str):
        entry = await add_entry(client, child_id, "social", False, notes="Needs prompting")

        response = await client.patch(
            f"/api/v1/progress/entries/{entry['id']}",
            json={"notes": None},
        )
        assert response.status_code == 200
        assert response.json()["notes"] is None
        assert response.json()["achieved"] is False

    @pytest.mark.asyncio
    async def test_update_entry_not_found(self, client: AsyncClient):
        response = await client.patch(f"/api/v1/progress/entries/{uuid4()}", json={"achieved": True})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_entry_of_another_parent(self, client: AsyncClient, child_id: str):
        entry = await add_entry(client, child_id, "social", False)
        response = await client.patch(
            f"/api/v1/progress/entries/{entry['id']}",
            json={"achieved": True},
            headers={"X-User-Id": str(uuid4())},
        )
        assert response.status_code == 403


class TestProgressStats:

    @pytest.mark.asyncio
    async def test_stats_empty(self, client: AsyncClient, child_id: str):
        response = await client.get(f"/api/v1/progress/children/{child_id}/stats")
        assert response.status_code == 200

        zero = {"total": 0, "achieved": 0, "percentage": 0}
        assert response.json() == {
            "behavioral": zero,
            "communication": zero,
            "social": zero,
            "overall": zero,
        }

    @pytest.mark.asyncio
    async def test_stats(self, client: AsyncClient, child_id: str):
        await add_entry(client, child_id, "social", True)
        await add_entry(client, child_id, "social", False)
        await add_entry(client, child_id, "behavioral", True)

        response = await client.get(f"/api/v1/progress/children/{child_id}/stats")
        assert response.status_code == 200

        data = response.json()
        assert data["social"] == {"total": 2, "achieved": 1, "percentage": 50}
        assert data["behavioral"] == {"total": 1, "achieved": 1, "percentage": 100}
        assert data["communication"] == {"total": 0, "achieved": 0, "percentage": 0}
        assert data["overall"] == {"total": 3, "achieved": 2, "percentage": 67}

    @pytest.mark.asyncio
    async def test_stats_follow_updates(self, client: AsyncClient, child_id: str):
        entry = await add_entry(client, child_id, "communication", False)
        await client.patch(f"/api/v1/progress/entries/{entry['id']}", json={"achieved": True})

        response = await client.get(f"/api/v1/progress/children/{child_id}/stats")
        assert response.json()["communication"] == {"total": 1, "achieved": 1, "percentage": 100}

    @pytest.mark.asyncio
    async def test_stats_child_not_found(self, client: AsyncClient):
        response = await client.get(f"/api/v1/progress/children/{uuid4()}/stats")
        assert response.status_code == 404
