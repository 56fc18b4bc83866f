from abc import ABC, abstractmethod
from typing import Any, Dict, List

from openai.types.chat.chat_completion import ChatCompletion


class LLM(ABC):
    def __init__(self):
        pass

    @abstractmethod
    async def generate_chat(
        self,
        messages: List[Dict[str, Any]],
        max_tokens: int,
        temperature: float,
    ) -> ChatCompletion:
        pass
