# Client for the OpenAI Chat Completions API.
# Keeps user/assistant/system roles as-is; bearer auth is handled by the SDK.

from typing import Any, Callable, Dict, List, Optional

import openai
from openai import OpenAI

from ..errors import ConfigurationError, ProviderError, TransportError
from ..types import NormalizedMessage, ProviderParams


class OpenAIClient:
    name = "openai"

    def __init__(self, client_factory: Optional[Callable[..., Any]] = None):
        # factory is swapped by tests; one SDK client per call keeps requests independent
        self._client_factory = client_factory or OpenAI

    def build_payload(self, messages: List[NormalizedMessage], params: ProviderParams) -> Dict[str, Any]:
        return {
            "model": params.model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "temperature": params.temperature,
        }

    def generate(self, messages: List[NormalizedMessage], params: ProviderParams) -> str:
        if not params.api_key:
            raise ConfigurationError("OPENAI_API_KEY not set")

        client = self._client_factory(
            api_key=params.api_key,
            base_url=params.base_url,
            timeout=params.timeout,
            max_retries=0,
        )
        try:
            resp = client.chat.completions.create(**self.build_payload(messages, params))
        except openai.APIStatusError as e:
            raise ProviderError(f"OpenAI error {e.status_code}: {e.response.text}", upstream_status=e.status_code)
        except openai.APIConnectionError as e:
            raise TransportError(f"OpenAI request failed: {e}")

        return self.extract_text(resp)

    @staticmethod
    def extract_text(resp: Any) -> str:
        choices = getattr(resp, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = getattr(message, "content", None)
        text = content.strip() if isinstance(content, str) else ""
        if not text:
            raise ProviderError("OpenAI returned no content")
        return text
