from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status applied to an intern for one day."""

    PRESENT = "Present"
    ABSENT = "Absent"


class MarkType(str, Enum):
    """How an attendance entry was recorded."""

    MANUAL = "manual"
    QR = "qr"
    DAILY_QR = "daily_qr"
