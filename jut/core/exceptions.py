"""
Custom exceptions

Every JutError is fatal for the CLI: it is reported as ``jut: <message>``
on stderr with exit status 1.
"""


class JutError(Exception):
    """Base class for fatal jut errors"""
    def __init__(self, message: str = "jut error"):
        super().__init__(message)
        self.message = message


class ConfigurationError(JutError):
    """Invalid environment configuration"""
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"invalid configuration: {detail}")


class InvalidTokenStructure(JutError):
    """Token does not have 2 or 3 dot-separated segments"""
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"invalid JWT: expected 2 or 3 dot-separated segments, got {count}")


class SegmentDecodeError(JutError):
    """
    A token segment could not be turned into canonical JSON

    ``stage`` tells which step failed ("base64" or "json") and ``part``
    which segment it was ("header", "payload", or "segment" when unknown).
    """
    stage = "segment"
    reason = "invalid segment"

    def __init__(self, detail: str | None = None, part: str = "segment"):
        self.detail = detail
        self.part = part
        cause = f"{self.reason}: {detail}" if detail else self.reason
        super().__init__(f"failed to decode {part}: {cause}")

    def for_part(self, part: str) -> "SegmentDecodeError":
        """Same error, attributed to a named token part"""
        return type(self)(self.detail, part=part)


class Base64DecodeError(SegmentDecodeError):
    """Segment is not valid base64url"""
    stage = "base64"
    reason = "illegal base64 data"


class MalformedJSON(SegmentDecodeError):
    """Segment decoded but is not valid JSON"""
    stage = "json"
    reason = "invalid JSON"


class InvalidClaimsShape(SegmentDecodeError):
    """Segment is valid JSON but not a JSON object"""
    stage = "json"
    reason = "expected a JSON object"


class StdinReadError(JutError):
    """Standard input could not be read"""
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"failed to read stdin: {detail}")


class ClipboardReadError(JutError):
    """System clipboard could not be read"""
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"failed to read clipboard: {detail}")


class EmptyClipboard(JutError):
    """Clipboard holds no token"""
    def __init__(self, message: str = "clipboard is empty"):
        super().__init__(message)
