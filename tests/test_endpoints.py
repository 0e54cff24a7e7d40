from slack_notify.detect import detect_endpoint_kind
from slack_notify.validate import validate_endpoint


def test_detect_endpoint_kind() -> None:
    assert detect_endpoint_kind("https://slack.com/api/chat.postMessage") == "api"
    assert detect_endpoint_kind("https://hooks.slack.com/services/A/B/C") == "webhook"
    assert detect_endpoint_kind("https://chat.example.com/hooks/abc") == "webhook"


def test_validate_endpoint() -> None:
    assert validate_endpoint("https://hooks.slack.com/services/A/B/C") is None
    assert validate_endpoint("") == "Missing required field: endpoint"
    assert validate_endpoint(None) == "Missing required field: endpoint"
    assert validate_endpoint("ftp://x/y") == "endpoint must use http or https protocol"
    assert validate_endpoint("https://") == "endpoint is not a valid URL"
