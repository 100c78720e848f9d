"""API tests for user settings."""

from unittest.mock import patch

import pytest
from fastapi import status
from httpx import AsyncClient

from exceptions import StoreUnavailable


class TestSettingsEndpoints:
    """Test cases for /api/settings."""

    @pytest.mark.asyncio
    async def test_get_default(self, client: AsyncClient, registered_user):
        """Settings never saved come back with a null key."""
        response = await client.get(f"/api/settings/{registered_user}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"openai_api_key": None}

    @pytest.mark.asyncio
    async def test_save_twice_returns_latest(self, client: AsyncClient, registered_user):
        """Last save wins."""
        for key in ("key1", "key2"):
            response = await client.post(
                "/api/settings", json={"userId": registered_user, "openai_api_key": key}
            )
            assert response.status_code == status.HTTP_200_OK
            assert response.json() == {"success": True}

        response = await client.get(f"/api/settings/{registered_user}")

        assert response.json() == {"openai_api_key": "key2"}

    @pytest.mark.asyncio
    async def test_store_failure(self, client: AsyncClient):
        """Store failures answer 500 'Server error'."""
        with patch(
            "repositories.settings_repo.SettingsRepository.get_settings",
            side_effect=StoreUnavailable(),
        ):
            response = await client.get("/api/settings/1")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Server error", "error_code": "STORE_UNAVAILABLE"}
