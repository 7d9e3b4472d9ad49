from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, Optional, Sequence

from .attendance.service import AttendanceService
from .core.constants import DEFAULT_ITEMS_PER_PAGE, DEFAULT_LOG_FILE, DEFAULT_TIMEZONE
from .interns.model import Intern
from .interns.repository import InMemoryInternRepository
from .logsink.sink import LogSink
from .pagination.state import Pagination
from .selection.session import InternSelectionSession, MarkingProgress


@dataclass(frozen=True)
class Container:
    log_sink: LogSink
    interns_repo: InMemoryInternRepository
    attendance_service: AttendanceService
    items_per_page: int

    def new_selection_session(
        self,
        *,
        interns: Optional[Sequence[Intern]] = None,
        on_select: Optional[Callable[[list[str]], None]] = None,
        on_progress: Optional[Callable[[MarkingProgress], None]] = None,
        default_date: Optional[date] = None,
    ) -> InternSelectionSession:
        return InternSelectionSession(
            interns if interns is not None else self.interns_repo.list_all(),
            mark_one=self.attendance_service.mark_one,
            on_select=on_select,
            on_progress=on_progress,
            default_date=default_date,
            today=self.attendance_service.today,
        )

    def new_pagination(self) -> Pagination:
        return Pagination(initial_items_per_page=self.items_per_page)


def build_container(*, settings: Any, interns: Iterable[Intern] = ()) -> Container:
    log_sink = LogSink(getattr(settings, "LOG_FILE", DEFAULT_LOG_FILE))
    interns_repo = InMemoryInternRepository(interns)
    attendance_service = AttendanceService(
        interns_repo,
        log_sink=log_sink,
        timezone=getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE),
    )

    return Container(
        log_sink=log_sink,
        interns_repo=interns_repo,
        attendance_service=attendance_service,
        items_per_page=int(getattr(settings, "ITEMS_PER_PAGE", DEFAULT_ITEMS_PER_PAGE)),
    )
