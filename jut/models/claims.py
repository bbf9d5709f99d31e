"""
Time claim annotation models
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TimestampInfo(BaseModel):
    """Human readable view of one time claim (iat, nbf or exp)"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Claim name")
    moment: datetime = Field(..., description="Claim time in the display zone")
    formatted: str = Field(..., description="Absolute time, YYYY-MM-DD HH:MM:SS TZ")
    relative: str = Field(..., description="'in X' or 'X ago'")


class ExpiryStatus(BaseModel):
    """Whether the token is past its exp claim"""

    model_config = ConfigDict(frozen=True)

    expired: bool = Field(..., description="True once the current time is after exp")
    expires_at: datetime = Field(..., description="Expiry instant in the display zone")
    duration: str = Field(..., description="Humanized time since or until expiry")

    @property
    def description(self) -> str:
        """Relative text shown next to the status"""
        if self.expired:
            return f"{self.duration} ago"
        return f"expires in {self.duration}"
