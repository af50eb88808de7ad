"""Exceptions raised by gigatools-agent."""


class GigaToolsError(Exception):
    """Base exception for all gigatools-agent errors."""


class StartupConfigurationError(GigaToolsError):
    """Raised when the process cannot start, e.g. the credential is missing."""


class TransportError(GigaToolsError):
    """Raised when the chat-model endpoint answers with an HTTP-level failure."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"code: {status_code} response: {body}")
        self.status_code = status_code
        self.body = body


class ToolAlreadyRegisteredError(GigaToolsError):
    pass
