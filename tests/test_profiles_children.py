import pytest
from httpx import AsyncClient
from uuid import uuid4
from datetime import date

from carecompanion.services.child_service import age_in_months


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_missing_identity_is_rejected(client: AsyncClient):
    response = await client.get("/api/v1/children", headers={"X-User-Id": ""})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_malformed_identity_is_rejected(client: AsyncClient):
    response = await client.get("/api/v1/children", headers={"X-User-Id": "not-a-uuid"})
    assert response.status_code == 401


# =============================================================================
# Profiles
# =============================================================================

@pytest.mark.asyncio
async def test_get_profile_before_creation(client: AsyncClient):
    response = await client.get("/api/v1/profiles/me")
    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
async def test_create_profile(client: AsyncClient, user_id: str):
    profile_data = {
        "role": "parent",
        "first_name": "Alex",
        "last_name": "Rivera",
    }
    response = await client.post("/api/v1/profiles", json=profile_data)
    assert response.status_code == 201

    data = response.json()
    assert data["user_id"] == user_id
    assert data["role"] == "parent"
    assert data["preferences"] == {"dark_mode": False, "notifications": True, "language": "en"}


@pytest.mark.asyncio
async def test_create_profile_twice(client: AsyncClient):
    profile_data = {"role": "doctor", "first_name": "Dana", "last_name": "Lee", "license_number": "MD-1"}
    await client.post("/api/v1/profiles", json=profile_data)

    response = await client.post("/api/v1/profiles", json=profile_data)
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_create_profile_invalid_role(client: AsyncClient):
    response = await client.post(
        "/api/v1/profiles",
        json={"role": "admin", "first_name": "A", "last_name": "B"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_profile(client: AsyncClient):
    await client.post(
        "/api/v1/profiles",
        json={"role": "researcher", "first_name": "Kim", "last_name": "Park"},
    )

    response = await client.patch(
        "/api/v1/profiles/me",
        json={
            "organization": "Child Development Lab",
            "preferences": {"dark_mode": True, "notifications": False, "language": "es"},
        },
    )
    assert response.status_code == 200

    data = response.json()
    assert data["organization"] == "Child Development Lab"
    assert data["first_name"] == "Kim"
    assert data["preferences"]["dark_mode"] is True
    assert data["preferences"]["language"] == "es"


@pytest.mark.asyncio
async def test_update_profile_null_name_rejected(client: AsyncClient):
    await client.post(
        "/api/v1/profiles",
        json={"role": "parent", "first_name": "Ana", "last_name": "Lopez"},
    )

    response = await client.patch("/api/v1/profiles/me", json={"last_name": None})
    assert response.status_code == 422

    response = await client.patch("/api/v1/profiles/me", json={"preferences": None})
    assert response.status_code == 422

    profile = await client.get("/api/v1/profiles/me")
    assert profile.json()["last_name"] == "Lopez"


@pytest.mark.asyncio
async def test_update_profile_not_found(client: AsyncClient):
    response = await client.patch("/api/v1/profiles/me", json={"first_name": "Nobody"})
    assert response.status_code == 404


# =============================================================================
# Children
# =============================================================================

@pytest.mark.asyncio
async def test_add_child(client: AsyncClient, user_id: str):
    child_data = {
        "first_name": "Mia",
        "last_name": "Chen",
        "date_of_birth": "2023-06-01",
        "gender": "female",
        "medical_history": "Born at 38 weeks",
    }
    response = await client.post("/api/v1/children", json=child_data)
    assert response.status_code == 201

    data = response.json()
    assert data["parent_id"] == user_id
    assert data["gender"] == "female"
    assert data["current_age_months"] == age_in_months(date(2023, 6, 1))


@pytest.mark.asyncio
async def test_add_child_invalid_gender(client: AsyncClient):
    response = await client.post(
        "/api/v1/children",
        json={"first_name": "A", "last_name": "B", "date_of_birth": "2023-01-01", "gender": "unknown"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_children(client: AsyncClient, child_id: str):
    response = await client.get("/api/v1/children")
    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [child_id]


@pytest.mark.asyncio
async def test_list_children_only_own(client: AsyncClient, child_id: str):
    response = await client.get("/api/v1/children", headers={"X-User-Id": str(uuid4())})
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_get_child(client: AsyncClient, child_id: str):
    response = await client.get(f"/api/v1/children/{child_id}")
    assert response.status_code == 200
    assert response.json()["first_name"] == "Sam"


@pytest.mark.asyncio
async def test_get_child_not_found(client: AsyncClient):
    response = await client.get(f"/api/v1/children/{uuid4()}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_child_of_another_parent(client: AsyncClient, child_id: str):
    response = await client.get(
        f"/api/v1/children/{child_id}",
        headers={"X-User-Id": str(uuid4())},
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_update_child(client: AsyncClient, child_id: str):
    response = await client.patch(
        f"/api/v1/children/{child_id}",
        json={"medical_history": "Ear infections at 12 months"},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["medical_history"] == "Ear infections at 12 months"
    assert data["first_name"] == "Sam"


@pytest.mark.asyncio
async def test_update_child_null_name_rejected(client: AsyncClient, child_id: str):
    response = await client.patch(f"/api/v1/children/{child_id}", json={"first_name": None})
    assert response.status_code == 422

    child = await client.get(f"/api/v1/children/{child_id}")
    assert child.json()["first_name"] == "Sam"


@pytest.mark.asyncio
async def test_update_child_clears_medical_history(client: AsyncClient, child_id: str):
    await client.patch(f"/api/v1/children/{child_id}", json={"medical_history": "Asthma"})

    response = await client.patch(f"/api/v1/children/{child_id}", json={"medical_history": None})
    assert response.status_code == 200
    assert response.json()["medical_history"] is None


class TestAgeInMonths:

    def test_whole_months(self):
        assert age_in_months(date(2023, 1, 1), today=date(2024, 1, 1)) == 11

    def test_newborn(self):
        assert age_in_months(date(2024, 3, 1), today=date(2024, 3, 20)) == 0

    def test_future_birth_date_clamps_to_zero(self):
        assert age_in_months(date(2030, 1, 1), today=date(2024, 1, 1)) == 0
