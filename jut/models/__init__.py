"""Pydantic models package"""
from jut.models.claims import ExpiryStatus, TimestampInfo
from jut.models.token import Claims, DecodedToken, JSONKind, JSONValue, json_kind

__all__ = [
    # Token
    "Claims",
    "DecodedToken",
    # Claims annotations
    "ExpiryStatus",
    # JSON values
    "JSONKind",
    "JSONValue",
    "TimestampInfo",
    "json_kind",
]
