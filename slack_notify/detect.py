"""Detection of the endpoint kind from its URL."""


def detect_endpoint_kind(url: str) -> str:
    """
    Detect which platform API an endpoint URL belongs to.

    Returns:
        'api' for Web API method URLs (e.g. https://slack.com/api/chat.postMessage),
        'webhook' for everything else (Incoming Webhooks and compatible services).
    """
    url_lower = url.lower()

    if "slack.com/api/" in url_lower:
        return "api"

    return "webhook"
