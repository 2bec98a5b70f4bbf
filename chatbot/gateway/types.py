# Data structures shared across the gateway modules.
# NormalizedMessage is the only message shape adapters ever see.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class Provider(str, Enum):
    """Closed set of upstream providers behind the gateway."""
    OPENAI = "openai"
    GEMINI = "gemini"


@dataclass(frozen=True)
class NormalizedMessage:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str


@dataclass
class ProviderParams:
    """Per-provider call parameters resolved from config + settings."""
    api_key: Optional[str]
    model: str
    base_url: str
    temperature: float
    timeout: float


@dataclass
class GatewayResponse:
    """Structured answer of the gateway: {text} or {error} plus HTTP status."""
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code < 400
