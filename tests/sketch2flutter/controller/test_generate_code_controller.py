from unittest.mock import AsyncMock, patch

from core.ai import llm_factory
from core.exception.exceptions import UpstreamRequestFailed
from fastapi.testclient import TestClient
from sketch2flutter.common.domain.artifact import ArtifactCategory, GenerationBundle
from sketch2flutter.generate_code.service.generate_code_service import (
    GenerateCodeService,
    get_generate_code_service,
)


def sample_bundle() -> GenerationBundle:
    bundle = GenerationBundle()
    bundle.add(ArtifactCategory.SCREEN, "login_screen", "class LoginScreen {}")
    bundle.add(ArtifactCategory.MAIN, "main", "void main() {}")
    return bundle


class TestGenerateCodeControllerE2E:
    async def test_screenshot_generation(self, client: TestClient, make_llm) -> None:
        # Given
        service = GenerateCodeService(make_llm(content="unused"))
        client.app.dependency_overrides[get_generate_code_service] = lambda: service
        payload = {"image": "QUJD", "pageName": "Login"}

        # When
        with patch.object(
            GenerateCodeService,
            "generate_from_image",
            AsyncMock(return_value=sample_bundle()),
        ) as generate:
            response = client.post(
                "/code-generator/generate-flutter-from-screenshot", json=payload
            )

        # Then
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["screens"] == [
            {"name": "login_screen", "code": "class LoginScreen {}"}
        ]
        assert body["data"]["main"] == "void main() {}"
        assert body["data"]["navigation"] is None
        assert body["generatedAt"]
        generate.assert_awaited_once_with(
            image="QUJD", page_name="Login", description=None, project_id=None
        )

    async def test_blank_page_name_is_rejected(self, client: TestClient, make_llm) -> None:
        client.app.dependency_overrides[get_generate_code_service] = (
            lambda: GenerateCodeService(make_llm(content="unused"))
        )

        response = client.post(
            "/code-generator/generate-flutter-from-screenshot",
            json={"image": "QUJD", "pageName": "  "},
        )

        assert response.status_code == 200
        assert response.json()["success"] is False

    async def test_service_error_is_reported_in_envelope(
        self, client: TestClient, make_llm
    ) -> None:
        client.app.dependency_overrides[get_generate_code_service] = (
            lambda: GenerateCodeService(make_llm(error=ConnectionError("reset")))
        )

        response = client.post(
            "/code-generator/generate-flutter-from-prompt",
            json={"prompt": "A login form", "pageName": "Login"},
        )

        body = response.json()
        assert body["success"] is False
        assert body["data"] is None
        assert body["error"] == str(UpstreamRequestFailed("reset"))

    async def test_unconfigured_llm_returns_503(self, client: TestClient) -> None:
        # LLM 키가 없으면 의존성 주입 단계에서 DependencyUnavailable
        with patch.object(llm_factory, "_llm", None), patch.object(
            llm_factory.settings, "LLM_PROVIDER", "openai"
        ), patch.object(llm_factory.settings, "OPENAI_API_KEY", ""):
            response = client.post(
                "/code-generator/generate-flutter-from-prompt",
                json={"prompt": "A login form", "pageName": "Login"},
            )

        assert response.status_code == 503
        assert response.json()["success"] is False
