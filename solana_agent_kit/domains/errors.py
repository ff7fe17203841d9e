"""
Error types for the Solana Agent Kit.

Methods raise these exceptions; actions convert them into error envelopes
through ``classify_error``.
"""
from typing import Any, Optional


class AgentKitError(Exception):
    """Base class for all agent kit errors."""


class ConfigError(AgentKitError):
    """Raised when required configuration is missing or invalid."""


class PluginError(AgentKitError):
    """Raised when a plugin cannot be registered."""


class RpcError(AgentKitError):
    """Raised when the Solana JSON-RPC endpoint returns an error object."""

    def __init__(self, message: str, code: Optional[int] = None, data: Any = None):
        super().__init__(message)
        self.code = code
        self.data = data


class TransactionError(AgentKitError):
    """Raised when a transaction fails or is not confirmed in time."""

    def __init__(self, message: str, signature: Optional[str] = None):
        super().__init__(message)
        self.signature = signature


class ProtocolApiError(AgentKitError):
    """Raised when a third-party protocol HTTP API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


# Substring -> code, checked in order against the lowercased error message
_MESSAGE_CODES = (
    ("insufficient funds", "INSUFFICIENT_FUNDS"),
    ("insufficient lamports", "INSUFFICIENT_FUNDS"),
    ("rate limit", "RATE_LIMITED"),
    ("429", "RATE_LIMITED"),
    ("invalid mint", "INVALID_MINT"),
)


def classify_error(error: BaseException) -> str:
    """Return a stable error code for an exception raised by a method."""
    message = str(error).lower()
    for needle, code in _MESSAGE_CODES:
        if needle in message:
            return code
    if isinstance(error, RpcError):
        return "RPC_ERROR"
    if isinstance(error, TransactionError):
        return "TRANSACTION_FAILED"
    if isinstance(error, ProtocolApiError):
        return "PROTOCOL_API_ERROR"
    if isinstance(error, ConfigError):
        return "CONFIG_ERROR"
    return "UNKNOWN_ERROR"
