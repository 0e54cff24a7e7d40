"""Builders for plain and rich notification messages.

Every builder here is pure: same inputs give structurally equal records.
"""

from collections.abc import Mapping
from typing import Iterable, Optional, Sequence, Union

from pydantic import ValidationError

from slack_notify.errors import BuildError, InvalidSeverity, MissingRequiredField
from slack_notify.format_value import format_value
from slack_notify.models import (
    Attachment,
    AuthorInfo,
    Field,
    Message,
    Severity,
    TitleInfo,
)

FieldInput = Union[Field, Mapping]

_SEVERITY_TOKENS = {s.value for s in Severity}


def resolve_color(
    severity: Optional[Union[Severity, str]] = None,
    color: Optional[str] = None,
) -> Optional[str]:
    """
    Reconcile the two color inputs into the single ``color`` slot.

    - ``severity`` must be one of good/warning/danger and wins over ``color``.
    - ``color`` alone is passed through unvalidated (hex or named color).
    """
    if severity is not None:
        token = severity.value if isinstance(severity, Severity) else severity
        if token not in _SEVERITY_TOKENS:
            raise InvalidSeverity(severity)
        return token
    return color


def resolve_icon(
    icon_url: Optional[str] = None,
    icon_emoji: Optional[str] = None,
) -> tuple[Optional[str], Optional[str]]:
    """Return ``(icon_url, icon_emoji)`` with the emoji taking precedence."""
    if icon_emoji:
        return None, icon_emoji
    return icon_url, None


def _build_field(entry: FieldInput) -> Field:
    if isinstance(entry, Field):
        return entry
    for key in ("title", "value"):
        if key not in entry:
            raise MissingRequiredField(f"fields[].{key}")
    data = dict(entry)
    for key in ("title", "value"):
        if data[key] is None:
            data[key] = ""
    try:
        return Field(**data)
    except ValidationError as e:
        raise BuildError(f"Invalid field {data['title']!r}: {e}") from e


def build_fields(entries: Optional[Iterable[FieldInput]]) -> tuple[Field, ...]:
    if not entries:
        return ()
    return tuple(_build_field(e) for e in entries)


def fields_from_mapping(
    data: Mapping,
    *,
    skip_keys: Iterable[str] = (),
    short_threshold: int = 40,
) -> list[Field]:
    """
    Turn a flat dict (e.g. a build report) into ordered fields.

    Falsy values and ``skip_keys`` are dropped. Keys are humanized
    (``build_id`` -> ``Build Id``) and values rendered with ``format_value``.
    """
    skip = set(skip_keys)
    fields = []
    for key, val in data.items():
        if not val or key in skip:
            continue
        rendered = format_value(val)
        fields.append(
            Field(
                title=str(key).replace("_", " ").title(),
                value=rendered,
                short=len(rendered) < short_threshold,
            )
        )
    return fields


def build_rich_attachment(
    fallback_text: Optional[str] = None,
    *,
    severity: Optional[Union[Severity, str]] = None,
    color: Optional[str] = None,
    pretext: Optional[str] = None,
    author_name: Optional[str] = None,
    author_link: Optional[str] = None,
    author_icon: Optional[str] = None,
    title: Optional[str] = None,
    title_link: Optional[str] = None,
    text: Optional[str] = None,
    image_url: Optional[str] = None,
    thumb_url: Optional[str] = None,
    fields: Optional[Iterable[FieldInput]] = None,
) -> Attachment:
    """
    Build one rich attachment.

    Raises:
        MissingRequiredField: ``fallback_text`` is missing or empty, or a
            field mapping lacks ``title``/``value``.
        InvalidSeverity: ``severity`` is not good, warning or danger.
    """
    if not fallback_text:
        raise MissingRequiredField("fallback_text")

    author = None
    if author_name or author_link or author_icon:
        author = AuthorInfo(name=author_name, link=author_link, icon_url=author_icon)

    title_info = None
    if title or title_link:
        title_info = TitleInfo(text=title, link=title_link)

    return Attachment(
        fallback=fallback_text,
        color=resolve_color(severity, color),
        pretext=pretext,
        author=author,
        title=title_info,
        text=text,
        image_url=image_url,
        thumb_url=thumb_url,
        fields=build_fields(fields),
    )


def build_message(
    attachments: Optional[Union[Attachment, Sequence[Attachment]]] = None,
    *,
    channel: Optional[str] = None,
    username: Optional[str] = None,
    icon_url: Optional[str] = None,
    icon_emoji: Optional[str] = None,
    text: Optional[str] = None,
) -> Message:
    """Wrap attachments (or plain ``text``) and routing metadata into a Message."""
    if attachments is None:
        attachments = ()
    elif isinstance(attachments, Attachment):
        attachments = (attachments,)

    icon_url, icon_emoji = resolve_icon(icon_url, icon_emoji)
    return Message(
        channel=channel,
        username=username,
        icon_url=icon_url,
        icon_emoji=icon_emoji,
        text=text,
        attachments=tuple(attachments),
    )


def build_rich_message(
    fallback_text: Optional[str] = None,
    *,
    channel: Optional[str] = None,
    username: Optional[str] = None,
    icon_url: Optional[str] = None,
    icon_emoji: Optional[str] = None,
    **attachment_kwargs,
) -> Message:
    """Build a single-attachment message in one call."""
    attachment = build_rich_attachment(fallback_text, **attachment_kwargs)
    return build_message(
        attachment,
        channel=channel,
        username=username,
        icon_url=icon_url,
        icon_emoji=icon_emoji,
    )
