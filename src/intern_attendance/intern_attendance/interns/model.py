from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus, MarkType


@dataclass(frozen=True)
class AttendanceEntry:
    """One attendance mark for one intern on one day."""

    work_date: date
    status: AttendanceStatus
    mark_type: MarkType
    time_marked: datetime
    marked_by: Optional[str] = None


@dataclass(frozen=True)
class Intern:
    """Domain entity: an intern/trainee as seen by the attendance screens.

    Only the identity and name fields are required; everything else may be
    absent in the upstream data and is modelled as Optional or empty.
    """

    intern_id: str
    trainee_id: str
    trainee_name: str
    field_of_specialization: Optional[str] = None
    email: Optional[str] = None
    institute: Optional[str] = None
    team: Optional[str] = None
    training_start_date: Optional[date] = None
    training_end_date: Optional[date] = None
    available_days: tuple[str, ...] = ()
    attendance: tuple[AttendanceEntry, ...] = field(default_factory=tuple)

    def entry_for(self, work_date: date, mark_type: Optional[MarkType] = None) -> Optional[AttendanceEntry]:
        for entry in self.attendance:
            if entry.work_date == work_date and (mark_type is None or entry.mark_type == mark_type):
                return entry
        return None

    def latest_entry(self) -> Optional[AttendanceEntry]:
        return self.attendance[-1] if self.attendance else None

    def with_entry(self, entry: AttendanceEntry) -> "Intern":
        """Return a copy with ``entry`` replacing any entry of the same date and type."""
        entries = list(self.attendance)
        for i, existing in enumerate(entries):
            if existing.work_date == entry.work_date and existing.mark_type == entry.mark_type:
                entries[i] = entry
                break
        else:
            entries.append(entry)
        return replace(self, attendance=tuple(entries))
