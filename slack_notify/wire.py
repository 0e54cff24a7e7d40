"""JSON wire codec for messages.

Non-ASCII text is written as literal UTF-8 (``ensure_ascii=False``); no
``\\uXXXX`` escaping and no after-the-fact unescaping.
"""

import json
from typing import Any, Optional, Union

from slack_notify.models import Attachment, AuthorInfo, Field, Message, TitleInfo


def _compact(d: dict) -> dict:
    """Drop keys whose value is None or an empty list."""
    return {k: v for k, v in d.items() if v is not None and v != []}


def _field_payload(field: Field) -> dict:
    body = _compact({"short": field.short, **(field.model_extra or {})})
    return {
        "title": "" if field.title is None else field.title,
        "value": "" if field.value is None else field.value,
        **body,
    }


def _attachment_payload(att: Attachment) -> dict:
    author = att.author or AuthorInfo()
    title = att.title or TitleInfo()
    return _compact({
        "fallback": att.fallback,
        "color": att.color,
        "pretext": att.pretext,
        "author_name": author.name,
        "author_link": author.link,
        "author_icon": author.icon_url,
        "title": title.text,
        "title_link": title.link,
        "text": att.text,
        "fields": [_field_payload(f) for f in att.fields],
        "image_url": att.image_url,
        "thumb_url": att.thumb_url,
    })


def to_payload(message: Message) -> dict:
    """Convert a Message into the wire dict, omitting absent values."""
    return _compact({
        "channel": message.channel,
        "username": message.username,
        "icon_url": message.icon_url,
        "icon_emoji": message.icon_emoji,
        "text": message.text,
        "attachments": [_attachment_payload(a) for a in message.attachments],
    })


def encode(message: Message) -> bytes:
    return json.dumps(to_payload(message), ensure_ascii=False).encode("utf-8")


def _attachment_from_payload(data: dict) -> Attachment:
    author = None
    if any(k in data for k in ("author_name", "author_link", "author_icon")):
        author = AuthorInfo(
            name=data.get("author_name"),
            link=data.get("author_link"),
            icon_url=data.get("author_icon"),
        )

    title = None
    if "title" in data or "title_link" in data:
        title = TitleInfo(text=data.get("title"), link=data.get("title_link"))

    return Attachment(
        fallback=data["fallback"],
        color=data.get("color"),
        pretext=data.get("pretext"),
        author=author,
        title=title,
        text=data.get("text"),
        image_url=data.get("image_url"),
        thumb_url=data.get("thumb_url"),
        fields=tuple(Field(**f) for f in data.get("fields", ())),
    )


def from_payload(data: dict[str, Any]) -> Message:
    """Parse a wire dict back into a Message."""
    return Message(
        channel=data.get("channel"),
        username=data.get("username"),
        icon_url=data.get("icon_url"),
        icon_emoji=data.get("icon_emoji"),
        text=data.get("text"),
        attachments=tuple(_attachment_from_payload(a) for a in data.get("attachments", ())),
    )


def decode(raw: Union[bytes, str]) -> Message:
    return from_payload(json.loads(raw))


def response_error(body: Optional[str]) -> Optional[str]:
    """
    Return the remote error reason if ``body`` is an ``{"ok": false}`` reply.

    Incoming webhooks answer with plain ``ok``; anything that is not a JSON
    object is treated as success.
    """
    if not body:
        return None
    try:
        parsed = json.loads(body)
    except ValueError:
        return None
    if isinstance(parsed, dict) and parsed.get("ok") is False:
        return str(parsed.get("error") or "unknown_error")
    return None
