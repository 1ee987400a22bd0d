import asyncio

import pytest

from constants import LANDING_URL, MEET_BASE_URL
from redirects import meeting_url, parse_authuser, resolve_room, with_authuser


def test_active_room_points_at_meeting(registry):
    asyncio.run(registry.store("r1", "abc-defg-hij"))
    decision = asyncio.run(resolve_room(registry, "r1"))
    assert decision.active
    assert decision.code == "abc-defg-hij"
    assert decision.location == f"{MEET_BASE_URL}/abc-defg-hij"


def test_unknown_room_points_at_landing(registry):
    decision = asyncio.run(resolve_room(registry, "nobody"))
    assert not decision.active
    assert decision.code is None
    assert decision.location == LANDING_URL


def test_expired_room_points_at_landing_and_is_evicted(registry, clock):
    asyncio.run(registry.store("r1", "abc-defg-hij"))
    clock.advance(1201)
    decision = asyncio.run(resolve_room(registry, "r1"))
    assert decision.location == LANDING_URL
    assert "r1" not in registry


def test_meeting_url():
    assert meeting_url("abc-defg-hij") == f"{MEET_BASE_URL}/abc-defg-hij"


@pytest.mark.parametrize("raw,expected", [("0", 0), ("1", 1), ("255", 255)])
def test_parse_authuser_accepts_bytes(raw, expected):
    assert parse_authuser(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "256", "-1", "abc", "1.5", " 1", "²"])
def test_parse_authuser_ignores_others(raw):
    assert parse_authuser(raw) is None


def test_with_authuser_only_touches_meeting_urls():
    assert with_authuser(f"{MEET_BASE_URL}/abc-defg-hij", 2) == f"{MEET_BASE_URL}/abc-defg-hij?authuser=2"
    assert with_authuser(f"{LANDING_URL}?hl=en", 1) == f"{LANDING_URL}?hl=en&authuser=1"
    assert with_authuser("https://example.com/x", 1) == "https://example.com/x"
