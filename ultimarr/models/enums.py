# The module defines the status enumerations reported by the upstream services.
# Date: 2026-10-17
# Version: 0.1.0

from enum import IntEnum
from typing import Optional


class _LabelledStatus(IntEnum):
    """An integer status code declared as `(code, label)`; unknown codes have an empty label."""

    def __new__(cls, value: int, label: str):
        member = int.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member

    @classmethod
    def describe(cls, value: Optional[int]) -> str:
        try:
            return cls(value).label
        except ValueError:
            return ""


class MediaAvailability(_LabelledStatus):
    """Jellyseerr `mediaInfo.status` as shown next to search results."""
    PENDING = 2, "Pending"
    PROCESSING = 3, "Processing"
    AVAILABLE = 4, "Available"
    PARTIAL = 5, "Partial"


class RequestStatus(_LabelledStatus):
    """Jellyseerr request approval status."""
    PENDING = 1, "Pending"
    APPROVED = 2, "Approved"
    DECLINED = 3, "Declined"
