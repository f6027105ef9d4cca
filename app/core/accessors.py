"""
Field accessors for CreatorRecord.

Records written by different revisions of the admin tooling keep some fields
at the top level and others under ``details``. Every read goes through one of
these functions so the precedence rule lives in one place:

    top-level value  >  details value  >  neutral default

Accessors never raise; malformed values collapse to the default.
"""
import math
from typing import List, Optional

from app.models.creator import CreatorAnalytics, CreatorRecord

UNKNOWN_LOCATION = "Unknown"


def safe_number(value, default: float = 0.0) -> float:
    """Coerce analytics values (ints, floats, numeric strings) to a non-negative float."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (ValueError, TypeError):
        return default
    if math.isnan(number) or math.isinf(number) or number < 0:
        return default
    return number


def _details(record: CreatorRecord):
    return record.details


def get_name(record: CreatorRecord) -> str:
    return record.name or ""


def get_genre(record: CreatorRecord) -> str:
    return record.genre or ""


def get_platform(record: CreatorRecord) -> str:
    return record.platform or ""


def get_location(record: CreatorRecord) -> str:
    """Resolved location, ``""`` when the record is unlocated."""
    if record.location and record.location.strip():
        return record.location.strip()
    details = _details(record)
    if details is not None and details.location and details.location.strip():
        return details.location.strip()
    return ""


def get_display_location(record: CreatorRecord) -> str:
    return get_location(record) or UNKNOWN_LOCATION


def get_tags(record: CreatorRecord) -> List[str]:
    if record.tags is not None:
        return [tag for tag in record.tags if isinstance(tag, str)]
    details = _details(record)
    if details is not None and details.tags is not None:
        return [tag for tag in details.tags if isinstance(tag, str)]
    return []


def get_pricing(record: CreatorRecord) -> Optional[str]:
    if record.pricing:
        return record.pricing
    details = _details(record)
    if details is not None and details.pricing:
        return details.pricing
    return None


def get_analytics(record: CreatorRecord) -> Optional[CreatorAnalytics]:
    if record.analytics is not None:
        return record.analytics
    details = _details(record)
    if details is not None:
        return details.analytics
    return None


def get_followers(record: CreatorRecord) -> float:
    analytics = get_analytics(record)
    return safe_number(analytics.followers) if analytics else 0.0


def get_total_views(record: CreatorRecord) -> float:
    analytics = get_analytics(record)
    return safe_number(analytics.total_views) if analytics else 0.0


def get_average_views(record: CreatorRecord) -> float:
    analytics = get_analytics(record)
    return safe_number(analytics.average_views) if analytics else 0.0
