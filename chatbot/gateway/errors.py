"""Gateway error taxonomy.

Every failure raised between request validation and response extraction is
one of these; ``ProviderGateway.handle`` renders them as ``{"error": ...}``
with the attached ``status_code``.
"""

from typing import Optional


class GatewayError(Exception):
    """Base class. ``status_code`` is the HTTP status used at the boundary."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(GatewayError):
    """Normalized message list is empty (client-caused)."""

    status_code = 400


class ConfigurationError(GatewayError):
    """Credential for the selected provider is not configured."""


class ProviderError(GatewayError):
    """Upstream answered non-2xx, or answered without usable text."""

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        self.upstream_status = upstream_status
        super().__init__(message)


class TransportError(GatewayError):
    """The provider could not be reached."""
