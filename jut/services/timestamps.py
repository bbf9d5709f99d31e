"""
Time claim annotation: timestamp extraction, duration humanizing, expiry

Claims that are missing or not usable as epoch seconds are skipped
silently, never reported as errors.
"""
from datetime import UTC, datetime, timedelta, tzinfo

from loguru import logger

from jut.models.claims import ExpiryStatus, TimestampInfo
from jut.models.token import Claims, JSONKind, json_kind

TIME_CLAIMS = ("iat", "nbf", "exp")
TIME_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

# Fixed approximations, not calendar arithmetic
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365


def humanize_duration(duration: timedelta | float) -> str:
    """
    Compact human form of a duration: 45s, 12m, 3h 5m, 4d, 2mo, 1y

    Args:
        duration: timedelta or number of seconds; the sign is ignored

    Returns:
        Humanized duration, truncated (never rounded) to the largest unit
    """
    if not isinstance(duration, timedelta):
        duration = timedelta(seconds=duration)
    seconds = int(abs(duration).total_seconds())

    if seconds < 60:
        return f"{seconds}s"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m"
    hours = minutes // 60
    if hours < 24:
        remainder = minutes % 60
        if remainder > 0:
            return f"{hours}h {remainder}m"
        return f"{hours}h"
    days = hours // 24
    if days < DAYS_PER_MONTH:
        return f"{days}d"
    if days < DAYS_PER_YEAR:
        return f"{days // DAYS_PER_MONTH}mo"
    return f"{days // DAYS_PER_YEAR}y"


def _now(now: datetime | None) -> datetime:
    # Epoch claims have whole-second precision
    return (now or datetime.now(UTC)).replace(microsecond=0)


def claim_time(claims: Claims, name: str, tz: tzinfo | None = None) -> datetime | None:
    """
    Read a claim as Unix epoch seconds

    Args:
        claims: Parsed payload
        name: Claim name
        tz: Display zone (None = local system zone)

    Returns:
        Aware datetime in the display zone, or None when the claim is absent,
        not a JSON number, negative, or outside the supported date range
    """
    if name not in claims:
        return None

    value = claims[name]
    if json_kind(value) is not JSONKind.NUMBER:
        logger.debug(f"Skipping {name}: {json_kind(value).value} is not a number")
        return None
    if value < 0:
        logger.debug(f"Skipping {name}: negative timestamp {value}")
        return None

    try:
        return datetime.fromtimestamp(int(value), tz=UTC).astimezone(tz)
    except (OverflowError, OSError, ValueError):
        logger.debug(f"Skipping {name}: {value} is out of range")
        return None


def extract_timestamps(
    claims: Claims,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> list[TimestampInfo]:
    """
    Annotate the iat, nbf and exp claims, always in that order

    Args:
        claims: Parsed payload
        now: Reference time (defaults to the current time)
        tz: Display zone (None = local system zone)

    Returns:
        One TimestampInfo per usable claim
    """
    now = _now(now)
    results = []
    for name in TIME_CLAIMS:
        moment = claim_time(claims, name, tz)
        if moment is None:
            continue

        rel = humanize_duration(now - moment)
        if now < moment:
            rel = f"in {rel}"
        else:
            rel = f"{rel} ago"

        results.append(
            TimestampInfo(
                name=name,
                moment=moment,
                formatted=moment.strftime(TIME_FORMAT),
                relative=rel,
            )
        )
    return results


def evaluate_expiry(
    claims: Claims,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> ExpiryStatus | None:
    """
    Check the exp claim against the current time

    Returns:
        ExpiryStatus, or None when exp is absent or not usable
    """
    expires_at = claim_time(claims, "exp", tz)
    if expires_at is None:
        return None

    now = _now(now)
    expired = now > expires_at
    return ExpiryStatus(
        expired=expired,
        expires_at=expires_at,
        duration=humanize_duration(now - expires_at),
    )
