"""Endpoint validation for the notifier."""

from typing import Optional
from urllib.parse import urlparse


def validate_endpoint(value) -> Optional[str]:
    """
    Validate a notification endpoint URL.
    Returns None if valid, or an error message string if invalid.
    """
    if not isinstance(value, str) or not value:
        return "Missing required field: endpoint"
    try:
        parsed = urlparse(value)
    except ValueError:
        return "endpoint is not a valid URL"
    if parsed.scheme not in ("http", "https"):
        return "endpoint must use http or https protocol"
    if not parsed.netloc:
        return "endpoint is not a valid URL"
    return None
