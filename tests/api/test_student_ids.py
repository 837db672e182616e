from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio

from attendance_app.backend.api.dependencies import get_storage
from attendance_app.backend.api.utilities.limiter import limiter
from attendance_app.backend.db.db_client import AsyncPostgresClient
from attendance_app.backend.main import app

# Larger than any value a SERIAL column can hold.
HUGE_ID = 99999999999


@pytest.fixture
def pool() -> MagicMock:
    return MagicMock()


@pytest_asyncio.fixture
async def pg_api_client(pool):
    """API client backed by the PostgreSQL client over a pool that must never be used."""
    limiter.reset()
    app.dependency_overrides[get_storage] = lambda: AsyncPostgresClient(pool=pool)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
class TestIdsBeyondStorableRange:

    async def test_record_attendance_is_404(self, pg_api_client, pool):
        response = await pg_api_client.post(
            f"/api/students/{HUGE_ID}/attendance", json={"date": "2024-01-05", "status": "present"}
        )

        assert response.status_code == 404
        assert response.json() == {"detail": "Student not found"}
        pool.acquire.assert_not_called()

    async def test_attendance_history_is_404(self, pg_api_client, pool):
        response = await pg_api_client.get(f"/api/students/{HUGE_ID}/attendance")

        assert response.status_code == 404
        pool.acquire.assert_not_called()

    async def test_update_student_is_404(self, pg_api_client, pool):
        response = await pg_api_client.put(f"/api/students/{HUGE_ID}", json={"name": "Ghost"})

        assert response.status_code == 404
        assert response.json() == {"detail": "Student not found"}
        pool.acquire.assert_not_called()

    async def test_delete_student_is_404(self, pg_api_client, pool):
        response = await pg_api_client.delete(f"/api/students/-{HUGE_ID}")

        assert response.status_code == 404
        pool.acquire.assert_not_called()
