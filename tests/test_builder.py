import pytest

from slack_notify import (
    BuildError,
    Field,
    InvalidSeverity,
    MissingRequiredField,
    Severity,
    build_message,
    build_rich_attachment,
    build_rich_message,
    fields_from_mapping,
    resolve_color,
    to_payload,
)


def test_fallback_text_required() -> None:
    with pytest.raises(MissingRequiredField) as exc:
        build_rich_attachment(title="T")
    assert exc.value.field == "fallback_text"


def test_empty_fallback_text_rejected() -> None:
    with pytest.raises(MissingRequiredField):
        build_rich_attachment("")


def test_fallback_text_present() -> None:
    att = build_rich_attachment("deploy finished")
    assert att.fallback == "deploy finished"


@pytest.mark.parametrize("token", ["good", "warning", "danger"])
def test_severity_wins_over_color(token: str) -> None:
    att = build_rich_attachment("x", severity=token, color="#ff0000")
    assert att.color == token


def test_severity_enum_member_accepted() -> None:
    assert resolve_color(Severity.DANGER) == "danger"


def test_color_passes_through_unvalidated() -> None:
    assert build_rich_attachment("x", color="#36a64f").color == "#36a64f"
    assert build_rich_attachment("x", color="not-a-color").color == "not-a-color"


def test_unknown_severity_rejected() -> None:
    with pytest.raises(InvalidSeverity):
        build_rich_attachment("x", severity="critical")


def test_no_color_inputs() -> None:
    assert build_rich_attachment("x").color is None


def test_field_order_preserved() -> None:
    att = build_rich_attachment(
        "x",
        fields=[
            {"title": "A", "value": "1"},
            Field(title="B", value="2", short=True),
            {"title": "C", "value": "3", "short": False},
        ],
    )
    assert [f.title for f in att.fields] == ["A", "B", "C"]
    assert att.fields[0].short is None
    assert att.fields[1].short is True


def test_field_mapping_missing_value() -> None:
    with pytest.raises(MissingRequiredField):
        build_rich_attachment("x", fields=[{"title": "A"}])


def test_malformed_field_values_pass_through() -> None:
    att = build_rich_attachment("x", fields=[{"title": 7, "value": ["a", "b"], "extra": 1}])
    payload = to_payload(build_message(att))
    assert payload["attachments"][0]["fields"] == [{"title": 7, "value": ["a", "b"], "extra": 1}]


def test_author_link_without_name_accepted() -> None:
    att = build_rich_attachment("x", author_link="https://example.com", title_link="https://t")
    assert att.author.name is None
    assert att.author.link == "https://example.com"
    assert att.title.text is None


def test_builder_idempotent() -> None:
    kwargs = dict(severity="good", title="T", text="v", fields=[{"title": "a", "value": "b"}])
    assert build_rich_attachment("x", **kwargs) == build_rich_attachment("x", **kwargs)


def test_build_message_wraps_single_attachment() -> None:
    att = build_rich_attachment("x")
    msg = build_message(att, channel="#ops")
    assert msg.attachments == (att,)
    assert msg.is_rich


def test_icon_emoji_takes_precedence() -> None:
    msg = build_message(text="hi", icon_url="https://i/icon.png", icon_emoji=":robot_face:")
    assert msg.icon_emoji == ":robot_face:"
    assert msg.icon_url is None


def test_icon_url_kept_without_emoji() -> None:
    msg = build_message(text="hi", icon_url="https://i/icon.png")
    assert msg.icon_url == "https://i/icon.png"


def test_build_rich_message() -> None:
    msg = build_rich_message("x", channel="#ci", severity="warning", title="Build")
    assert msg.channel == "#ci"
    assert msg.attachments[0].color == "warning"
    assert msg.attachments[0].title.text == "Build"


def test_fields_from_mapping() -> None:
    fields = fields_from_mapping(
        {
            "build_id": 42,
            "branch": {"name": "main", "sha": "abc"},
            "skipped": "",
            "token": "secret",
            "summary": "x" * 60,
        },
        skip_keys={"token"},
    )
    assert [(f.title, f.value) for f in fields[:2]] == [("Build Id", "42"), ("Branch", "main")]
    assert [f.title for f in fields] == ["Build Id", "Branch", "Summary"]
    assert fields[0].short is True
    assert fields[2].short is False


def test_none_field_value_becomes_empty_string() -> None:
    att = build_rich_attachment("x", fields=[{"title": None, "value": None}])
    assert (att.fields[0].title, att.fields[0].value) == ("", "")


def test_malformed_short_raises_build_error() -> None:
    with pytest.raises(BuildError):
        build_rich_attachment("x", fields=[{"title": "a", "value": "b", "short": "maybe"}])
