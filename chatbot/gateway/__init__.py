# Provider gateway package.
# Exposes the gateway, its message/provider types and the error taxonomy.

from .gateway import ProviderGateway
from .types import GatewayResponse, NormalizedMessage, Provider, ProviderParams
from .normalize import normalize_messages, resolve_provider
from .errors import ConfigurationError, GatewayError, InvalidInput, ProviderError, TransportError

__all__ = [
    "ProviderGateway",
    "GatewayResponse",
    "NormalizedMessage",
    "Provider",
    "ProviderParams",
    "normalize_messages",
    "resolve_provider",
    "GatewayError",
    "InvalidInput",
    "ConfigurationError",
    "ProviderError",
    "TransportError",
]
