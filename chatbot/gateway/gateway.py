# Stateless request handler in front of the upstream LLM providers:
# - normalizes the incoming history
# - routes to one provider client by name
# - returns one text reply, or a structured {error} response

from __future__ import annotations
import logging
import os
from typing import Any, Dict, List, Optional

import yaml

from chatbot.settings import Settings, settings as default_settings
from .clients import GeminiClient, OpenAIClient
from .errors import GatewayError, InvalidInput
from .normalize import normalize_messages, resolve_provider
from .types import GatewayResponse, NormalizedMessage, Provider, ProviderParams

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")


class ProviderGateway:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        clients: Optional[Dict[Provider, Any]] = None,
        config_path: str = DEFAULT_CONFIG_PATH,
    ):
        self.settings = settings or default_settings
        self.config_path = config_path
        self.cfg = self._load_config()
        self.clients = clients or {
            Provider.OPENAI: OpenAIClient(),
            Provider.GEMINI: GeminiClient(),
        }

    def _load_config(self) -> dict:
        if not os.path.exists(self.config_path):
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def params_for(self, provider: Provider) -> ProviderParams:
        """Resolve credentials + model for one call. Env settings win over config.yaml."""
        p_cfg = (self.cfg.get("providers") or {}).get(provider.value, {})
        prefix = provider.value.upper()
        return ProviderParams(
            api_key=getattr(self.settings, f"{prefix}_API_KEY", None) or None,
            model=getattr(self.settings, f"{prefix}_MODEL", None) or p_cfg.get("model", ""),
            base_url=getattr(self.settings, f"{prefix}_BASE_URL", None) or p_cfg.get("base_url", ""),
            temperature=float(self.cfg.get("temperature", 0.7)),
            timeout=float(self.settings.HTTP_TIMEOUT),
        )

    def chat(self, provider_name: Any, raw_messages: Any) -> str:
        """Raises GatewayError subclasses; see handle() for the non-raising boundary."""
        messages: List[NormalizedMessage] = normalize_messages(raw_messages)
        if not messages:
            raise InvalidInput("No messages provided")

        provider = resolve_provider(provider_name)
        client = self.clients[provider]
        logger.info(
            "routing chat request",
            extra={"extra": {"provider": provider.value, "messages": len(messages)}},
        )
        return client.generate(messages, self.params_for(provider))

    def handle(self, provider_name: Any, raw_messages: Any) -> GatewayResponse:
        try:
            text = self.chat(provider_name, raw_messages)
        except GatewayError as e:
            logger.warning(
                "chat request failed: %s",
                e.message,
                extra={"extra": {"kind": type(e).__name__, "status": e.status_code}},
            )
            return GatewayResponse(status_code=e.status_code, body={"error": e.message})
        except Exception as e:
            logger.exception("unexpected gateway failure")
            return GatewayResponse(status_code=500, body={"error": str(e) or "Unknown error"})
        return GatewayResponse(status_code=200, body={"text": text})

    def health(self) -> Dict[str, Any]:
        return {
            "ok": True,
            "providers": {p.value: self.settings.has_key(p.value) for p in Provider},
        }
