"""
Token and JSON value models
"""
import json
from enum import Enum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field

JSONValue: TypeAlias = dict[str, "JSONValue"] | list["JSONValue"] | str | int | float | bool | None
Claims: TypeAlias = dict[str, JSONValue]


class JSONKind(str, Enum):
    """JSON value kind enumeration"""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def json_kind(value: JSONValue) -> JSONKind:
    """
    Classify a value produced by ``json.loads``

    Args:
        value: Parsed JSON value

    Returns:
        The JSON kind of the value

    Raises:
        TypeError: If value is not something JSON can represent
    """
    if value is None:
        return JSONKind.NULL
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return JSONKind.BOOLEAN
    if isinstance(value, int | float):
        return JSONKind.NUMBER
    if isinstance(value, str):
        return JSONKind.STRING
    if isinstance(value, list):
        return JSONKind.ARRAY
    if isinstance(value, dict):
        return JSONKind.OBJECT
    raise TypeError(f"not a JSON value: {type(value).__name__}")


class DecodedToken(BaseModel):
    """Header and payload of a JWT as canonical JSON bytes"""

    model_config = ConfigDict(frozen=True)

    header: bytes = Field(..., description="Canonical JSON of the header segment")
    payload: bytes = Field(..., description="Canonical JSON of the payload segment")
    signature: str | None = Field(None, description="Signature segment, never verified")

    @property
    def header_claims(self) -> Claims:
        """Parsed header"""
        return json.loads(self.header)

    @property
    def payload_claims(self) -> Claims:
        """Parsed payload"""
        return json.loads(self.payload)
