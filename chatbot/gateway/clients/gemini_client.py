# Client for the Gemini generateContent API.
# Gemini has no system role: assistant -> model, system -> user.
# Auth goes in the `key` query parameter.

from typing import Any, Dict, List

import requests

from ..errors import ConfigurationError, ProviderError, TransportError
from ..types import NormalizedMessage, ProviderParams

ROLE_MAP = {"assistant": "model", "system": "user"}


class GeminiClient:
    name = "gemini"

    def build_payload(self, messages: List[NormalizedMessage], params: ProviderParams) -> Dict[str, Any]:
        contents = [
            {"role": ROLE_MAP.get(m.role, m.role), "parts": [{"text": m.content}]}
            for m in messages
        ]
        return {
            "contents": contents,
            "generationConfig": {"temperature": params.temperature},
        }

    def generate(self, messages: List[NormalizedMessage], params: ProviderParams) -> str:
        if not params.api_key:
            raise ConfigurationError("GEMINI_API_KEY not set")

        url = f"{params.base_url.rstrip('/')}/models/{params.model}:generateContent"
        try:
            resp = requests.post(
                url,
                params={"key": params.api_key},
                json=self.build_payload(messages, params),
                headers={"Content-Type": "application/json"},
                timeout=params.timeout,
            )
        except requests.RequestException as e:
            # the exception text may embed the url; drop the query string with the key
            raise TransportError(f"Gemini request failed: {type(e).__name__}")

        if not resp.ok:
            raise ProviderError(f"Gemini error {resp.status_code}: {resp.text}", upstream_status=resp.status_code)

        try:
            data = resp.json()
        except ValueError:
            raise ProviderError("Gemini returned invalid JSON")
        return self.extract_text(data)

    @staticmethod
    def extract_text(data: Any) -> str:
        text = None
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if candidates and isinstance(candidates, list) and isinstance(candidates[0], dict):
            content = candidates[0].get("content") or {}
            parts = content.get("parts") if isinstance(content, dict) else None
            if parts and isinstance(parts, list) and isinstance(parts[0], dict):
                text = parts[0].get("text")
        text = text.strip() if isinstance(text, str) else ""
        if not text:
            raise ProviderError("Gemini returned no text")
        return text
