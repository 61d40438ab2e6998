"""Error taxonomy for one send attempt.

Every error raised while assembling or sending a turn derives from
ChatError so the orchestrator can turn it into a visible bot reply.
"""


class ChatError(Exception):
    """Base class for failures surfaced to the user as a bot turn."""

    pass


class ConfigurationError(ChatError):
    """Raised when a required setting (the API credential) is missing."""

    pass


class FileReadError(ChatError):
    """Raised when an attached file cannot be read."""

    pass


class ParseError(ChatError):
    """Raised when an attached file cannot be decoded by its format handler."""

    pass


class ServiceError(ChatError):
    """Raised on a non-success response or a transport failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ChatError):
    """Raised when a success response carries no usable reply text."""

    pass
