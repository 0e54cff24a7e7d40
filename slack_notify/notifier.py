"""Single-shot delivery of messages to a webhook or Web API endpoint."""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

import httpx

from slack_notify.builder import resolve_icon
from slack_notify.config import Settings, settings as default_settings
from slack_notify.detect import detect_endpoint_kind
from slack_notify.errors import RemoteRejected, SendError, TransportError
from slack_notify.models import Message
from slack_notify.validate import validate_endpoint
from slack_notify.wire import encode, response_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendResult:
    """Outcome of one send. ``error`` is set exactly when ``ok`` is False."""
    ok: bool
    error: Optional[SendError] = None
    status_code: Optional[int] = None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def _host(endpoint: str) -> str:
    # Webhook paths carry secrets; only the host goes to the log.
    return urlparse(endpoint).netloc or "<invalid>"


def _failure(endpoint: str, error: SendError, status_code: Optional[int] = None) -> SendResult:
    logger.warning("Notification to %s failed: %s", _host(endpoint), error)
    return SendResult(ok=False, error=error, status_code=status_code)


def _request_headers(endpoint: str, token: Optional[str]) -> dict[str, str]:
    headers = {"Content-Type": "application/json; charset=utf-8"}
    if token and detect_endpoint_kind(endpoint) == "api":
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _interpret(endpoint: str, response: httpx.Response) -> SendResult:
    if not response.is_success:
        error = TransportError(
            f"HTTP {response.status_code}: {response.text[:200]}",
            status_code=response.status_code,
        )
        return _failure(endpoint, error, response.status_code)

    reason = response_error(response.text)
    if reason is not None:
        return _failure(endpoint, RemoteRejected(reason), response.status_code)

    logger.debug("Notification delivered to %s", _host(endpoint))
    return SendResult(ok=True, status_code=response.status_code)


def send(
    endpoint: str,
    message: Message,
    *,
    token: Optional[str] = None,
    timeout: Optional[float] = None,
    client: Optional[httpx.Client] = None,
) -> SendResult:
    """
    POST ``message`` to ``endpoint`` once.

    Never raises for delivery problems; inspect the returned SendResult.

    Args:
        endpoint: Incoming Webhook URL or Web API method URL
        message: Message to deliver
        token: Bearer token, sent only to Web API endpoints
        timeout: Request timeout in seconds (defaults to settings.timeout)
        client: Optional httpx.Client to reuse; left open afterwards
    """
    err = validate_endpoint(endpoint)
    if err:
        return _failure(str(endpoint), TransportError(err))

    try:
        body = encode(message)
    except (TypeError, ValueError) as e:
        return _failure(endpoint, TransportError(f"payload not serializable: {e}", cause=e))

    headers = _request_headers(endpoint, token)
    if timeout is None:
        timeout = default_settings.timeout

    try:
        if client is not None:
            response = client.post(endpoint, content=body, headers=headers, timeout=timeout)
        else:
            with httpx.Client(timeout=timeout) as own_client:
                response = own_client.post(endpoint, content=body, headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        return _failure(endpoint, TransportError(f"{type(e).__name__}: {e}", cause=e))

    return _interpret(endpoint, response)


async def async_send(
    endpoint: str,
    message: Message,
    *,
    token: Optional[str] = None,
    timeout: Optional[float] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> SendResult:
    """Async counterpart of :func:`send` with identical outcome rules."""
    err = validate_endpoint(endpoint)
    if err:
        return _failure(str(endpoint), TransportError(err))

    try:
        body = encode(message)
    except (TypeError, ValueError) as e:
        return _failure(endpoint, TransportError(f"payload not serializable: {e}", cause=e))

    headers = _request_headers(endpoint, token)
    if timeout is None:
        timeout = default_settings.timeout

    try:
        if client is not None:
            response = await client.post(endpoint, content=body, headers=headers, timeout=timeout)
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.post(endpoint, content=body, headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        return _failure(endpoint, TransportError(f"{type(e).__name__}: {e}", cause=e))

    return _interpret(endpoint, response)


class Notifier:
    """
    Holds an endpoint plus message defaults so callers only pass messages.

    Defaults (channel, username, icon) fill slots the message leaves unset.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = 10.0,
        channel: Optional[str] = None,
        username: Optional[str] = None,
        icon_url: Optional[str] = None,
        icon_emoji: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ):
        self.endpoint = endpoint
        self.token = token
        self.timeout = timeout
        self.channel = channel
        self.username = username
        self.icon_url = icon_url
        self.icon_emoji = icon_emoji
        self.client = client
        self.async_client = async_client

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "Notifier":
        """
        Build a Notifier from SLACK_* settings.

        A configured webhook URL wins; otherwise the Web API URL is used with
        the API token.
        """
        config = config or default_settings
        if config.webhook_url:
            endpoint, token = config.webhook_url, None
        else:
            endpoint, token = config.api_url, config.api_token or None
        return cls(
            endpoint=endpoint,
            token=token,
            timeout=config.timeout,
            channel=config.default_channel,
            username=config.default_username,
            icon_url=config.default_icon_url,
            icon_emoji=config.default_icon_emoji,
        )

    def prepare(self, message: Message) -> Message:
        """Return ``message`` with unset routing slots filled from defaults."""
        update = {}
        if message.channel is None and self.channel:
            update["channel"] = self.channel
        if message.username is None and self.username:
            update["username"] = self.username
        if message.icon_url is None and message.icon_emoji is None:
            icon_url, icon_emoji = resolve_icon(self.icon_url, self.icon_emoji)
            if icon_url:
                update["icon_url"] = icon_url
            if icon_emoji:
                update["icon_emoji"] = icon_emoji
        return message.model_copy(update=update) if update else message

    def send(self, message: Message) -> SendResult:
        return send(
            self.endpoint,
            self.prepare(message),
            token=self.token,
            timeout=self.timeout,
            client=self.client,
        )

    async def asend(self, message: Message) -> SendResult:
        return await async_send(
            self.endpoint,
            self.prepare(message),
            token=self.token,
            timeout=self.timeout,
            client=self.async_client,
        )
