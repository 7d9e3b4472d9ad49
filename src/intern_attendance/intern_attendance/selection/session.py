from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Awaitable, Callable, Iterable, Optional, Sequence, Union

from ..attendance.service import parse_status
from ..common.runner import SequentialRunner
from ..common.validators import require_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..interns.model import Intern
from .operations import filter_interns, select_all, toggle_selection

logger = logging.getLogger(__name__)

MarkOne = Callable[[str, AttendanceStatus, date], Union[Awaitable[Any], Any]]


@dataclass
class MarkingProgress:
    marked_count: int = 0
    total_count: int = 0

    @property
    def percent_complete(self) -> int:
        if not self.total_count:
            return 0
        # Half-up, integer-exact: 1/8 -> 13
        return (self.marked_count * 200 + self.total_count) // (2 * self.total_count)


@dataclass(frozen=True)
class BatchResult:
    marked_count: int
    total_count: int
    failed: tuple[str, ...] = field(default_factory=tuple)
    rejected: bool = False


class InternSelectionSession:
    """Behavior behind the intern selection dialog, without any rendering.

    Holds the local selection, the search term, the chosen date and status,
    and runs batch attendance marking through the injected ``mark_one``.
    """

    def __init__(
        self,
        interns: Sequence[Intern],
        *,
        mark_one: MarkOne,
        on_select: Optional[Callable[[list[str]], None]] = None,
        on_close: Optional[Callable[[], None]] = None,
        on_progress: Optional[Callable[[MarkingProgress], None]] = None,
        default_date: Optional[date] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self._interns = list(interns)
        self._known_ids = {i.intern_id for i in self._interns}
        self._mark_one = mark_one
        self._on_select = on_select
        self._on_close = on_close
        self._on_progress = on_progress
        self._today = today or date.today

        self.is_open = False
        self.search_term = ""
        self.selected: list[str] = []
        self.work_date: date = default_date or self._today()
        self.status = AttendanceStatus.PRESENT
        self.is_marking = False
        self.progress = MarkingProgress()

    @property
    def interns(self) -> list[Intern]:
        return list(self._interns)

    def open(self, selected: Iterable[str] = ()) -> None:
        self.selected = [i for i in dict.fromkeys(selected) if i in self._known_ids]
        self.search_term = ""
        self.is_open = True

    def close(self) -> None:
        self.is_open = False
        self.selected = []
        self.search_term = ""
        if self._on_close:
            self._on_close()

    def set_search_term(self, term: str) -> None:
        self.search_term = term or ""

    def clear_search(self) -> None:
        self.search_term = ""

    @property
    def filtered_interns(self) -> list[Intern]:
        return filter_interns(self._interns, self.search_term, self.selected)

    @property
    def all_selected(self) -> bool:
        """True when the current filtered list is exactly the selection (label shows "Deselect all")."""
        return set(self.selected) == {i.intern_id for i in self.filtered_interns}

    def toggle(self, intern_id: str) -> None:
        if self.is_marking:
            return
        if intern_id not in self._known_ids:
            raise ValidationError(f"Unknown intern: {intern_id}")
        self.selected = toggle_selection(self.selected, intern_id)
        self.search_term = ""

    def select_all(self) -> None:
        if self.is_marking:
            return
        self.selected = select_all(self.selected, self.filtered_interns)
        self.search_term = ""

    def set_date(self, value: Union[date, str]) -> bool:
        """Change the marking date. Returns True if the date lies in the past."""
        self.work_date = require_iso_date(value, "Date")
        is_past = self.work_date < self._today()
        if is_past:
            logger.warning("Selecting a past date: %s", self.work_date.isoformat())
        return is_past

    def set_status(self, status: Union[AttendanceStatus, str]) -> None:
        self.status = parse_status(status)

    def confirm_selection(self) -> list[str]:
        selected = list(self.selected)
        if self._on_select:
            self._on_select(selected)
        self.close()
        return selected

    async def mark_attendance(self) -> BatchResult:
        if self.is_marking:
            raise ValidationError("A batch is already running")
        if not self.selected:
            logger.warning("Please select at least one intern")
            return BatchResult(marked_count=0, total_count=0, rejected=True)

        ids = list(self.selected)
        status, work_date = self.status, self.work_date
        self.is_marking = True
        self._set_progress(0, len(ids))

        runner = SequentialRunner(
            lambda intern_id: self._mark_one(intern_id, status, work_date),
            on_progress=self._set_progress,
        )
        try:
            results = await runner.run(ids)
            marked = sum(1 for r in results if r.ok)
            failed = tuple(r.item for r in results if not r.ok)
            logger.info("Marked %d/%d interns as %s", marked, len(ids), status.value)
            return BatchResult(marked_count=marked, total_count=len(ids), failed=failed)
        finally:
            self.selected = []
            self.is_marking = False
            self._set_progress(0, 0)

    def _set_progress(self, marked: int, total: int) -> None:
        self.progress = MarkingProgress(marked_count=marked, total_count=total)
        if self._on_progress:
            try:
                self._on_progress(self.progress)
            except Exception as e:
                logger.error("Progress callback failed: %s", e)
