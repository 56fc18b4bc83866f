import json
from typing import Any, Dict, List, Optional, Set

import pytest
from core.config import get_setting
from core.exception.exceptions import (
    DependencyUnavailable,
    MalformedUpstreamJSON,
    UpstreamEmptyResponse,
    UpstreamRequestFailed,
)
from sketch2flutter.extract_elements.service.extract_elements_service import (
    ExtractElementsService,
)
from sketch2flutter.workspace.repository.figure_repository_abc import (
    FigureRepositoryABC,
)

ELEMENTS = [
    {"type": "rectangle", "x": 100, "y": 50, "width": 200, "height": 80},
    {"type": "text", "x": 130, "y": 80, "text": "Save"},
    {"type": "circle", "x": 400, "y": 200, "radius": 40},
]


class RecordingFigureRepository(FigureRepositoryABC):
    def __init__(self, failing_kinds: Optional[Set[str]] = None):
        self.failing_kinds = failing_kinds or set()
        self.saved: List[Dict[str, Any]] = []

    async def find_all(self, view_id: str) -> List[Dict[str, Any]]:
        return []

    async def create(self, figure_data: Dict[str, Any]) -> Dict[str, Any]:
        if figure_data["tipo"] in self.failing_kinds:
            raise ConnectionError("storage unavailable")
        self.saved.append(figure_data)
        return {"id": len(self.saved), **figure_data}


class TestExtractElementsService:
    async def test_elements_are_saved_to_view(self, make_llm) -> None:
        # Given
        llm = make_llm(content=f"Here you go:\n{json.dumps(ELEMENTS)}")
        repository = RecordingFigureRepository()
        service = ExtractElementsService(llm, repository)

        # When
        result = await service.extract_ui_elements(b"png-bytes", "view-9", "a login form")

        # Then
        assert [f["id"] for f in result.created] == [1, 2, 3]
        assert result.failures == []
        assert all(f["vistaId"] == "view-9" for f in repository.saved)
        assert repository.saved[0]["tipo"] == "rectangle"

        call = llm.calls[0]
        assert call["max_tokens"] == get_setting().ELEMENTS_MAX_TOKENS
        user_content = call["messages"][1]["content"]
        assert "a login form" in user_content[0]["text"]
        assert user_content[1]["image_url"]["url"] == "data:image/png;base64,cG5nLWJ5dGVz"

    async def test_single_failure_does_not_abort_batch(self, make_llm) -> None:
        # Given: text 저장 실패 + 알 수 없는 타입 1건
        elements = ELEMENTS + [{"type": "triangle", "x": 0, "y": 0}]
        service = ExtractElementsService(
            make_llm(content=json.dumps(elements)),
            RecordingFigureRepository(failing_kinds={"text"}),
        )

        # When
        result = await service.extract_ui_elements("QUJD", "view-9")

        # Then
        assert [f["tipo"] for f in result.created] == ["rectangle", "circle"]
        assert len(result.failures) == 2
        assert result.failures[0].startswith("element[1]:")
        assert result.failures[1].startswith("element[3]:")

    async def test_non_object_storage_response_is_recorded_as_failure(
        self, make_llm
    ) -> None:
        # Given: 저장소가 첫 번째 요소에 대해 null 을 돌려줌
        responses = iter([None, {"id": "ok"}, {"id": "ok-2"}])

        class NullOnceFigureRepository(RecordingFigureRepository):
            async def create(self, figure_data: Dict[str, Any]) -> Any:
                return next(responses)

        service = ExtractElementsService(
            make_llm(content=json.dumps(ELEMENTS)), NullOnceFigureRepository()
        )

        # When
        result = await service.extract_ui_elements("QUJD", "view-9")

        # Then
        assert result.created == [{"id": "ok"}, {"id": "ok-2"}]
        assert len(result.failures) == 1
        assert result.failures[0].startswith("element[0]:")

    async def test_missing_repository_raises_before_calling_llm(self, make_llm) -> None:
        llm = make_llm(content="[]")
        service = ExtractElementsService(llm, None)

        with pytest.raises(DependencyUnavailable):
            await service.extract_ui_elements("QUJD", "view-9")
        assert llm.calls == []

    async def test_empty_llm_response(self, make_llm) -> None:
        service = ExtractElementsService(make_llm(content=""), RecordingFigureRepository())

        with pytest.raises(UpstreamEmptyResponse):
            await service.extract_ui_elements("QUJD", "view-9")

    async def test_llm_failure_is_wrapped(self, make_llm) -> None:
        service = ExtractElementsService(
            make_llm(error=TimeoutError("timed out")), RecordingFigureRepository()
        )

        with pytest.raises(UpstreamRequestFailed):
            await service.extract_ui_elements("QUJD", "view-9")

    async def test_malformed_json(self, make_llm) -> None:
        service = ExtractElementsService(
            make_llm(content="no elements found"), RecordingFigureRepository()
        )

        with pytest.raises(MalformedUpstreamJSON):
            await service.extract_ui_elements("QUJD", "view-9")
