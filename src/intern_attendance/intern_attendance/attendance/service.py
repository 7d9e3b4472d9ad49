from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional, Union

from ..common.datetime_utils import coerce_date, now_local
from ..core.constants import DEFAULT_TIMEZONE, NOT_MARKED_LABEL
from ..core.enums import AttendanceStatus, MarkType
from ..core.exceptions import LogSinkClosedError, NotFoundError, ValidationError
from ..interns.model import AttendanceEntry, Intern
from ..interns.repository import InternRepository
from ..logsink.sink import LogSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceStats:
    present: int
    absent: int


@dataclass(frozen=True)
class AttendanceRow:
    intern: Intern
    status: str


def parse_status(value: Union[AttendanceStatus, str, None]) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    if not value or not str(value).strip():
        raise ValidationError("Status is required")
    try:
        return AttendanceStatus(str(value).strip().capitalize())
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value}") from None


def _parse_day(value: Union[date, str]) -> date:
    try:
        return coerce_date(value)
    except ValueError:
        raise ValidationError(f"Invalid date: {value}") from None


class AttendanceService:
    def __init__(
        self,
        interns: InternRepository,
        *,
        log_sink: Optional[LogSink] = None,
        timezone: str = DEFAULT_TIMEZONE,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._interns = interns
        self._log_sink = log_sink
        self._timezone = timezone
        self._clock = clock or (lambda: now_local(self._timezone))

    def today(self) -> date:
        return self._clock().date()

    def mark_attendance(
        self,
        intern_id: str,
        status: Union[AttendanceStatus, str],
        work_date: Union[date, str, None] = None,
        *,
        mark_type: MarkType = MarkType.MANUAL,
        time_marked: Optional[datetime] = None,
        marked_by: Optional[str] = None,
    ) -> Intern:
        if not intern_id:
            raise ValidationError("Intern ID is required")
        status = parse_status(status)
        day = _parse_day(work_date) if work_date else self.today()

        intern = self._interns.get_by_id(intern_id)
        if not intern:
            raise NotFoundError(f"Intern {intern_id} not found")

        entry = AttendanceEntry(
            work_date=day,
            status=status,
            mark_type=mark_type,
            time_marked=time_marked or self._clock(),
            marked_by=marked_by,
        )
        updated = intern.with_entry(entry)
        self._interns.save(updated)

        logger.info("Marked %s (%s) as %s for %s", updated.trainee_name, updated.trainee_id, status.value, day)
        if self._log_sink:
            try:
                self._log_sink.write(
                    f"Attendance marked: intern={updated.trainee_id} status={status.value} date={day.isoformat()} type={mark_type.value}"
                )
            except LogSinkClosedError:
                logger.debug("Log sink closed; attendance line not recorded")
        return updated

    async def mark_one(self, intern_id: str, status: Union[AttendanceStatus, str], work_date: Union[date, str]) -> Intern:
        """Adapter with the signature the selection workflow expects."""
        return self.mark_attendance(intern_id, status, work_date)

    def attendance_for_date(self, work_date: Union[date, str]) -> list[AttendanceRow]:
        day = _parse_day(work_date)
        rows = []
        for intern in self._interns.list_all():
            entry = intern.entry_for(day)
            rows.append(AttendanceRow(intern=intern, status=entry.status.value if entry else NOT_MARKED_LABEL))
        return rows

    def attendance_stats(self, work_date: Union[date, str, None] = None) -> AttendanceStats:
        """Count present/absent interns.

        With a date, only entries on that day count. Without one, each
        intern's most recent entry is used; interns with no entries are skipped.
        """
        day = _parse_day(work_date) if work_date else None
        present = absent = 0
        for intern in self._interns.list_all():
            entry = intern.entry_for(day) if day else intern.latest_entry()
            if not entry:
                continue
            if entry.status == AttendanceStatus.PRESENT:
                present += 1
            else:
                absent += 1
        return AttendanceStats(present=present, absent=absent)
