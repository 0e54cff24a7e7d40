from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Incoming Webhook URL; used when no endpoint is passed explicitly
    webhook_url: str = ""

    # Web API (chat.postMessage) access
    api_token: str = ""
    api_url: str = "https://slack.com/api/chat.postMessage"

    # Seconds for connect + read on the single POST
    timeout: float = 10.0

    # Message defaults applied by Notifier when the message leaves them unset
    default_channel: Optional[str] = None
    default_username: Optional[str] = None
    default_icon_emoji: Optional[str] = None
    default_icon_url: Optional[str] = None

    model_config = {"env_prefix": "SLACK_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
