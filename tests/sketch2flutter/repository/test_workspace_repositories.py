import json
from typing import List
from unittest.mock import patch

import httpx
import pytest
from sketch2flutter.workspace.repository import view_repository
from sketch2flutter.workspace.repository.figure_repository import FigureRepository
from sketch2flutter.workspace.repository.view_repository import (
    ViewRepository,
    get_view_repository,
)

_real_async_client = httpx.AsyncClient


def mock_http(handler):
    """워크스페이스 클라이언트가 여는 AsyncClient 에 MockTransport 를 끼워 넣는다"""

    def _client(**kwargs) -> httpx.AsyncClient:
        return _real_async_client(transport=httpx.MockTransport(handler), **kwargs)

    return patch(
        "sketch2flutter.workspace.repository.workspace_api_client.httpx.AsyncClient",
        _client,
    )


class TestWorkspaceRepositories:
    async def test_views_are_parsed(self) -> None:
        # Given
        requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200, json=[{"id": 1, "nombre": "Login", "proyecto": {"nombre": "Shop"}}]
            )

        # When
        with mock_http(handler):
            views = await ViewRepository("http://workspace/api/").find_all("42")

        # Then
        assert str(requests[0].url) == "http://workspace/api/vista/proyecto/42"
        assert requests[0].headers["X-Request-Source"]
        assert views[0].id == "1"
        assert views[0].project.name == "Shop"

    async def test_figure_is_created(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert request.url.path == "/figura"
            return httpx.Response(201, json={"id": 5, **json.loads(request.content)})

        with mock_http(handler):
            created = await FigureRepository("http://workspace").create(
                {"tipo": "text", "vistaId": "v1"}
            )

        assert created == {"id": 5, "tipo": "text", "vistaId": "v1"}

    async def test_http_errors_propagate(self) -> None:
        with mock_http(lambda request: httpx.Response(500)):
            with pytest.raises(httpx.HTTPStatusError):
                await FigureRepository("http://workspace").find_all("v1")

    def test_factory_returns_none_without_uri(self) -> None:
        with patch.object(view_repository.settings, "WORKSPACE_API_URI", ""):
            assert get_view_repository() is None

        with patch.object(view_repository.settings, "WORKSPACE_API_URI", "http://ws"):
            assert isinstance(get_view_repository(), ViewRepository)
