"""Build and send webhook chat notifications."""

from slack_notify.builder import (
    build_message,
    build_rich_attachment,
    build_rich_message,
    fields_from_mapping,
    resolve_color,
    resolve_icon,
)
from slack_notify.errors import (
    BuildError,
    InvalidSeverity,
    MissingRequiredField,
    NotifyError,
    RemoteRejected,
    SendError,
    TransportError,
)
from slack_notify.models import Attachment, AuthorInfo, Field, Message, Severity, TitleInfo
from slack_notify.notifier import Notifier, SendResult, async_send, send
from slack_notify.wire import decode, encode, from_payload, to_payload

__all__ = [
    "Attachment",
    "AuthorInfo",
    "BuildError",
    "Field",
    "InvalidSeverity",
    "Message",
    "MissingRequiredField",
    "Notifier",
    "NotifyError",
    "RemoteRejected",
    "SendError",
    "SendResult",
    "Severity",
    "TitleInfo",
    "TransportError",
    "async_send",
    "build_message",
    "build_rich_attachment",
    "build_rich_message",
    "decode",
    "encode",
    "fields_from_mapping",
    "from_payload",
    "resolve_color",
    "resolve_icon",
    "send",
    "to_payload",
]
