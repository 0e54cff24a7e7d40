"""Error types raised while building messages or reported when sending them."""

from typing import Optional


class NotifyError(Exception):
    """Base class for every slack_notify error."""


# ---------------------------------------------------------------------------
# Build errors (raised)
# ---------------------------------------------------------------------------

class BuildError(NotifyError, ValueError):
    """A message or attachment could not be constructed."""


class MissingRequiredField(BuildError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidSeverity(BuildError):
    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid severity: {value!r}. Use one of: good, warning, danger"
        )


# ---------------------------------------------------------------------------
# Send errors (returned inside SendResult)
# ---------------------------------------------------------------------------

class SendError(NotifyError):
    """A notification was not delivered."""


class TransportError(SendError):
    """Connection, timeout, protocol or HTTP status failure."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ):
        self.cause = cause
        self.status_code = status_code
        super().__init__(message)


class RemoteRejected(SendError):
    """The endpoint accepted the request but answered ``ok: false``."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Remote rejected message: {reason}")
