from __future__ import annotations

import pytest

from daily_mission.domain.mission_rules import (
    FRESHNESS_WINDOW_MS,
    extract_first_text,
    is_fresh,
    is_valid_player_address,
    parse_agent_messages,
)
from daily_mission.exceptions import FetchError


def test_freshness_window_is_24_hours() -> None:
    assert FRESHNESS_WINDOW_MS == 86_400_000


def test_is_fresh_boundaries() -> None:
    now = 1_700_000_000_000
    assert is_fresh(now - 1000, now)
    assert is_fresh(now - FRESHNESS_WINDOW_MS + 1, now)
    assert not is_fresh(now - FRESHNESS_WINDOW_MS, now)
    assert not is_fresh(now - FRESHNESS_WINDOW_MS - 1, now)


def test_is_fresh_custom_window() -> None:
    assert is_fresh(900, 1000, freshness_window_ms=200)
    assert not is_fresh(800, 1000, freshness_window_ms=200)


@pytest.mark.parametrize("value", [None, 42, "", b"0xabc", ["0xabc"]])
def test_invalid_player_addresses(value) -> None:
    assert not is_valid_player_address(value)


def test_valid_player_address() -> None:
    assert is_valid_player_address("0xabc")


def test_empty_body_is_empty_list() -> None:
    assert parse_agent_messages("") == []


def test_unparseable_body() -> None:
    with pytest.raises(FetchError, match="unparseable body"):
        parse_agent_messages("<html>bad gateway</html>")


def test_extract_first_text_uses_first_message() -> None:
    messages = [
        {"user": "Solarius", "text": "Feed your beast twice", "action": "NONE"},
        {"user": "Solarius", "text": "ignored", "action": "NONE"},
    ]
    assert extract_first_text(messages) == "Feed your beast twice"


@pytest.mark.parametrize(
    "messages",
    [
        [],
        {"text": "not a list"},
        ["just a string"],
        [{"user": "a", "action": ""}],
        [{"user": "a", "text": "", "action": ""}],
        [{"user": "a", "text": None, "action": ""}],
        [{"user": "a", "text": 5, "action": ""}],
    ],
)
def test_extract_first_text_rejects_missing_mission(messages) -> None:
    with pytest.raises(FetchError, match="no mission found"):
        extract_first_text(messages)


def test_parse_bytes_body() -> None:
    assert parse_agent_messages(b'[{"user": "a", "text": "M", "action": ""}]') == [
        {"user": "a", "text": "M", "action": ""}
    ]
    assert parse_agent_messages(b"") == []


def test_parse_body_that_is_not_utf8() -> None:
    with pytest.raises(FetchError, match="unparseable body"):
        parse_agent_messages(b"\xff\xfe[{]")


def test_extract_first_text_custom_not_found_message() -> None:
    with pytest.raises(FetchError, match="no reply found"):
        extract_first_text([], not_found="no reply found")
