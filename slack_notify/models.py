"""Typed records for messages and their rich attachments."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field as PydanticField


class Severity(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    DANGER = "danger"


class AuthorInfo(BaseModel):
    name: Optional[str] = None
    link: Optional[str] = None
    icon_url: Optional[str] = None

    model_config = {"frozen": True}


class TitleInfo(BaseModel):
    text: Optional[str] = None
    link: Optional[str] = None

    model_config = {"frozen": True}


class Field(BaseModel):
    """A title/value pair shown in the attachment's field table.

    Unknown keys are kept and sent along unchanged.
    """

    title: Any
    value: Any
    short: Optional[bool] = None

    model_config = {"frozen": True, "extra": "allow"}


class Attachment(BaseModel):
    fallback: str = PydanticField(..., description="Plain-text summary for clients without rich rendering")
    color: Optional[str] = PydanticField(None, description="Severity token or hex color")
    pretext: Optional[str] = None
    author: Optional[AuthorInfo] = None
    title: Optional[TitleInfo] = None
    text: Optional[str] = None
    image_url: Optional[str] = None
    thumb_url: Optional[str] = None
    fields: tuple[Field, ...] = ()

    model_config = {"frozen": True}


class Message(BaseModel):
    channel: Optional[str] = PydanticField(None, description="Channel, group or user to post to")
    username: Optional[str] = PydanticField(None, description="Display name override for the bot")
    icon_url: Optional[str] = None
    icon_emoji: Optional[str] = None
    text: Optional[str] = None
    attachments: tuple[Attachment, ...] = ()

    model_config = {"frozen": True}

    @property
    def is_rich(self) -> bool:
        return bool(self.attachments)
