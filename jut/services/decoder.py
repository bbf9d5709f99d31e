"""
JWT segment decoding

Turns a raw token into canonical JSON for its header and payload without
verifying the signature.
"""
import base64
import binascii
import json
import math
import re
from typing import NoReturn

from loguru import logger

from jut.core.exceptions import (
    Base64DecodeError,
    InvalidClaimsShape,
    InvalidTokenStructure,
    MalformedJSON,
    SegmentDecodeError,
)
from jut.models.token import DecodedToken, JSONKind, json_kind

_BASE64URL = re.compile(r"[A-Za-z0-9_-]*=*")


def split_token(token: str) -> list[str]:
    """
    Split a token into its dot-separated segments

    Raises:
        InvalidTokenStructure: If there are not exactly 2 or 3 segments
    """
    parts = token.split(".")
    if len(parts) not in (2, 3):
        raise InvalidTokenStructure(len(parts))
    return parts


def base64url_decode(segment: str) -> bytes:
    """Decode a base64url-encoded string, adding padding if necessary."""
    valid = _BASE64URL.match(segment).end()
    if valid != len(segment):
        raise Base64DecodeError(f"unexpected {segment[valid]!r} at offset {valid}")

    padding = "=" * (-len(segment) % 4)
    try:
        return base64.b64decode(segment + padding, altchars=b"-_", validate=True)
    except binascii.Error as e:
        raise Base64DecodeError(str(e)) from e


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


def canonicalize(raw: bytes) -> bytes:
    """
    Parse a JSON object and re-serialize it deterministically

    Output is compact UTF-8 with keys sorted at every level, so equal
    structures always give equal bytes.

    Args:
        raw: JSON text as bytes

    Returns:
        Canonical JSON bytes

    Raises:
        MalformedJSON: If raw is not valid UTF-8 JSON
        InvalidClaimsShape: If the top-level value is not an object
    """
    try:
        obj = json.loads(raw, parse_float=_parse_finite_float, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedJSON(str(e)) from e

    kind = json_kind(obj)
    if kind is not JSONKind.OBJECT:
        raise InvalidClaimsShape(f"got {kind.value}")

    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False).encode("utf-8")


def decode_segment(segment: str, part: str = "segment") -> bytes:
    """
    Decode one base64url JWT segment into canonical JSON

    Args:
        segment: Segment text
        part: Name used in error messages ("header" or "payload")

    Raises:
        Base64DecodeError: If the base64 stage fails
        MalformedJSON: If the JSON stage fails on syntax
        InvalidClaimsShape: If the JSON stage finds a non-object
    """
    try:
        raw = base64url_decode(segment)
        logger.debug(f"Decoded {part}: {len(raw)} bytes")
        return canonicalize(raw)
    except SegmentDecodeError as e:
        logger.debug(f"Decoding {part} failed at {e.stage} stage: {e.detail}")
        raise e.for_part(part) from e


def decode_token(token: str) -> DecodedToken:
    """
    Decode the header and payload of a JWT

    The signature segment, when present, is kept as text and never checked.

    Raises:
        InvalidTokenStructure: If the token does not have 2 or 3 segments
        SegmentDecodeError: If the header or payload cannot be decoded
    """
    parts = split_token(token.strip())
    logger.debug(f"Token has {len(parts)} segments")

    header = decode_segment(parts[0], part="header")
    payload = decode_segment(parts[1], part="payload")
    signature = parts[2] if len(parts) == 3 else None

    return DecodedToken(header=header, payload=payload, signature=signature)
