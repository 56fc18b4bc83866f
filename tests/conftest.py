from typing import Any, Dict, Iterator, List, Optional

import pytest
from core.ai.llm import LLM
from core.exception.handler import register_exception_handlers
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sketch2flutter.web.router import router


@pytest.fixture(scope="session")
def app() -> FastAPI:
    # main.py 의 lifespan/미들웨어 없이 라우터와 예외 핸들러만 마운트
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    yield TestClient(app)
    app.dependency_overrides.clear()


class MockChatCompletionMessage:
    def __init__(self, content: Optional[str]):
        self.content = content


class MockChatCompletionChoice:
    def __init__(self, message: MockChatCompletionMessage):
        self.message = message


class MockChatCompletion:
    def __init__(self, choices: List[MockChatCompletionChoice]):
        self.choices = choices


class FakeLLM(LLM):
    """정해진 응답(또는 예외)을 돌려주고 호출 인자를 기록하는 LLM"""

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None):
        super().__init__()
        self.content = content
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def generate_chat(
        self,
        messages: List[Dict[str, Any]],
        max_tokens: int,
        temperature: float,
    ) -> MockChatCompletion:
        self.calls.append(
            {"messages": messages, "max_tokens": max_tokens, "temperature": temperature}
        )
        if self.error is not None:
            raise self.error
        return MockChatCompletion(
            [MockChatCompletionChoice(MockChatCompletionMessage(self.content))]
        )


@pytest.fixture
def make_llm():
    def _make(content: Optional[str] = None, error: Optional[Exception] = None) -> FakeLLM:
        return FakeLLM(content=content, error=error)

    return _make
