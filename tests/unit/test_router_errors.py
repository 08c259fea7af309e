"""Status-code mapping for failures the service does not classify."""

import http
from unittest.mock import AsyncMock

from httpx import ASGITransport, AsyncClient
import pytest

from resource_api.dependencies import get_resource_service
from resource_api.errors import NotFoundError
from resource_api.services import ResourceService


@pytest.fixture
def failing_service():
    service = AsyncMock(spec=ResourceService)
    error = RuntimeError("connection refused")
    service.get_resource_stats.side_effect = error
    service.create_resource.side_effect = error
    service.get_resources.side_effect = error
    service.get_resource_by_id.side_effect = error
    service.update_resource.side_effect = error
    service.delete_resource.side_effect = error
    return service


@pytest.fixture
async def failing_client(app, failing_service):
    app.dependency_overrides[get_resource_service] = lambda: failing_service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path", "body", "expected"),
    [
        ("GET", "/resources/stats", None, http.HTTPStatus.INTERNAL_SERVER_ERROR),
        ("POST", "/resources", {"name": "X", "type": "t"}, http.HTTPStatus.BAD_REQUEST),
        ("GET", "/resources", None, http.HTTPStatus.INTERNAL_SERVER_ERROR),
        ("GET", "/resources/1", None, http.HTTPStatus.INTERNAL_SERVER_ERROR),
        ("PUT", "/resources/1", {"name": "Y"}, http.HTTPStatus.BAD_REQUEST),
        ("DELETE", "/resources/1", None, http.HTTPStatus.INTERNAL_SERVER_ERROR),
    ],
)
async def test_unclassified_failures(failing_client, method, path, body, expected):
    response = await failing_client.request(method, path, json=body)

    assert response.status_code == expected
    payload = response.json()
    assert payload["success"] is False
    assert payload["message"].endswith("connection refused")


@pytest.mark.asyncio
async def test_not_found_wins_over_generic_mapping(failing_client, failing_service):
    failing_service.update_resource.side_effect = NotFoundError("Resource not found")

    response = await failing_client.put("/resources/3", json={"name": "Y"})

    assert response.status_code == http.HTTPStatus.NOT_FOUND
    assert response.json() == {"success": False, "message": "Resource not found"}
