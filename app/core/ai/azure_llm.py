from typing import Any, Dict, List

from core.ai.llm import LLM
from openai import AsyncAzureOpenAI
from openai.types.chat.chat_completion import ChatCompletion


class AzureLLM(LLM):
    def __init__(
        self,
        api_key: str,
        base_url: str,
        deployment: str,
        api_version: str,
        timeout: float = 120.0,
    ):
        self.deployment = deployment
        self.client = AsyncAzureOpenAI(
            api_key=api_key,
            azure_endpoint=base_url,
            azure_deployment=deployment,
            api_version=api_version,
            timeout=timeout,
            max_retries=0,
        )

    async def generate_chat(
        self,
        messages: List[Dict[str, Any]],
        max_tokens: int,
        temperature: float,
    ) -> ChatCompletion:
        completion = await self.client.chat.completions.create(
            model=self.deployment,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        return completion
