"""
Unit tests for Pydantic models
"""
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from jut.models import DecodedToken, ExpiryStatus, JSONKind, json_kind


class TestJsonKind:
    """Tests for json_kind"""

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ({"a": 1}, JSONKind.OBJECT),
            ([1, 2], JSONKind.ARRAY),
            ("text", JSONKind.STRING),
            (42, JSONKind.NUMBER),
            (1.5, JSONKind.NUMBER),
            (True, JSONKind.BOOLEAN),
            (False, JSONKind.BOOLEAN),
            (None, JSONKind.NULL),
        ],
    )
    def test_classifies_parsed_values(self, value, kind):
        assert json_kind(value) is kind

    def test_rejects_non_json_values(self):
        with pytest.raises(TypeError, match="not a JSON value"):
            json_kind(object())


class TestDecodedToken:
    """Tests for DecodedToken"""

    def test_claims_parsed_from_canonical_bytes(self):
        token = DecodedToken(header=b'{"alg":"none"}', payload=b'{"exp":1,"sub":"a"}')
        assert token.header_claims == {"alg": "none"}
        assert token.payload_claims == {"exp": 1, "sub": "a"}
        assert token.signature is None

    def test_frozen(self):
        token = DecodedToken(header=b"{}", payload=b"{}")
        with pytest.raises(ValidationError):
            token.header = b'{"alg":"none"}'


class TestExpiryStatus:
    """Tests for ExpiryStatus"""

    def test_description(self):
        expires_at = datetime(2026, 1, 1, tzinfo=UTC)
        assert ExpiryStatus(expired=True, expires_at=expires_at, duration="3d").description == "3d ago"
        assert ExpiryStatus(expired=False, expires_at=expires_at, duration="5m").description == "expires in 5m"
