"""
Pytest configuration and shared fixtures

Tokens are signed with PyJWT so they look exactly like real-world ones;
jut never checks the signature.
"""
import base64
import json
from datetime import UTC, datetime

import jwt
import pytest

from jut.config import get_settings

TEST_SECRET = "jut-test-secret-key-that-is-long-enough"

# Token with header {"alg":"HS256"} and payload {"sub":"1234567890"}
SAMPLE_TOKEN = "eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiIxMjM0NTY3ODkwIn0.signature"


def generate_test_token(**claims) -> str:
    """
    Generate a signed test JWT

    Args:
        claims: Payload claims

    Returns:
        JWT token string
    """
    return jwt.encode(claims, TEST_SECRET, algorithm="HS256")


def make_token(payload: dict, header: dict | None = None, signature: str | None = "sig") -> str:
    """
    Build an unsigned token from arbitrary JSON, for claims PyJWT would refuse
    """
    segments = [
        base64.urlsafe_b64encode(json.dumps(part).encode()).rstrip(b"=").decode()
        for part in (header or {"alg": "none"}, payload)
    ]
    if signature is not None:
        segments.append(signature)
    return ".".join(segments)


@pytest.fixture
def now():
    """Fixed reference time"""
    return datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def now_ts(now):
    """Fixed reference time as epoch seconds"""
    return int(now.timestamp())


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Reload settings for every test, without leaking the caller's JUT_* environment"""
    for name in ("JUT_LOG_LEVEL", "JUT_NO_COLOR", "JUT_TZ"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
