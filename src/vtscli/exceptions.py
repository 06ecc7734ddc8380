"""vtscli exception hierarchy."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "AmbiguousOrMissingSelector",
    "ApiError",
    "AuthenticationError",
    "CommandError",
    "ConfigError",
    "ConfigNotFound",
    "ConfigParseError",
    "InvalidArgument",
    "NameNotFound",
    "PersistError",
    "SessionError",
    "TransportError",
    "UnhandledCommand",
    "VtsError",
]


class VtsError(Exception):
    """Base class for vtscli exceptions."""


class ConfigError(VtsError):
    """Raised when the connection config cannot be read or written."""


class ConfigNotFound(ConfigError):
    """Raised when the config file does not exist yet."""

    def __init__(self, path) -> None:
        super().__init__(
            f"failed to load config file from {str(path)!r} "
            "(try running `vts config init` to create the file)"
        )
        self.path = path


class ConfigParseError(ConfigError):
    """Raised when the config file content is malformed."""


class PersistError(ConfigError):
    """Raised when the config file cannot be written."""


class CommandError(VtsError):
    """Raised when a command cannot be translated into requests."""


class AmbiguousOrMissingSelector(CommandError):
    """Raised when neither an id nor a name was given for a target."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"either an id or a name must be specified for the {kind}")
        self.kind = kind


class NameNotFound(CommandError):
    """Raised when a name lookup finds no matching record."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"no {kind} found with name `{name}`")
        self.kind = kind
        self.name = name


class UnhandledCommand(CommandError):
    """Raised when a command type has no registered handler."""


class InvalidArgument(VtsError, ValueError):
    """Raised when a CLI value cannot be parsed."""


class TransportError(VtsError):
    """Raised when the WebSocket connection fails or misbehaves."""


class ApiError(VtsError):
    """Raised when the server answers a request with an APIError message."""

    def __init__(
        self,
        error_id: int,
        message: str,
        *,
        request_type: Optional[str] = None,
    ) -> None:
        label = f"{request_type} failed" if request_type else "request failed"
        super().__init__(f"{label} (errorID={error_id}): {message}")
        self.error_id = error_id
        self.message = message
        self.request_type = request_type


class AuthenticationError(ApiError):
    """Raised when the server rejects a freshly issued token."""


class SessionError(VtsError):
    """Raised by the session orchestrator; names the stage that failed."""

    def __init__(self, stage: str, error: BaseException) -> None:
        super().__init__(f"{stage}: {error}")
        self.stage = stage
        self.error = error
