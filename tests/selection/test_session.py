from __future__ import annotations

import asyncio
from datetime import date

import pytest

from src.intern_attendance.intern_attendance.core.enums import AttendanceStatus
from src.intern_attendance.intern_attendance.core.exceptions import ValidationError
from src.intern_attendance.intern_attendance.interns.model import Intern
from src.intern_attendance.intern_attendance.selection.session import InternSelectionSession, MarkingProgress

TODAY = date(2025, 1, 10)


def _interns():
    return [
        Intern(intern_id="1", trainee_id="TR-001", trainee_name="Alice"),
        Intern(intern_id="2", trainee_id="TR-002", trainee_name="Bob"),
        Intern(intern_id="3", trainee_id="TR-003", trainee_name="Carol"),
    ]


class FakeMarker:
    def __init__(self, failing: set[str] | None = None):
        self.calls: list[tuple[str, AttendanceStatus, date]] = []
        self.failing = failing or set()
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, intern_id, status, work_date):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            self.calls.append((intern_id, status, work_date))
            if intern_id in self.failing:
                raise RuntimeError("Intern not found")
            return intern_id
        finally:
            self.in_flight -= 1


def _session(marker=None, **kwargs):
    return InternSelectionSession(
        _interns(),
        mark_one=marker or FakeMarker(),
        today=lambda: TODAY,
        **kwargs,
    )


def test_open_keeps_only_known_ids():
    session = _session()

    session.open(["1", "99", "2", "1"])

    assert session.is_open
    assert session.selected == ["1", "2"]


def test_toggle_clears_search_term():
    session = _session()
    session.open([])
    session.set_search_term("bob")

    session.toggle("2")

    assert session.selected == ["2"]
    assert session.search_term == ""


def test_toggle_unknown_intern_rejected():
    session = _session()
    session.open([])

    with pytest.raises(ValidationError):
        session.toggle("42")


def test_toggle_ignored_while_marking():
    session = _session()
    session.open(["1"])
    session.is_marking = True

    session.toggle("2")

    assert session.selected == ["1"]


def test_select_all_from_search_then_deselect():
    session = _session()
    session.open([])
    session.set_search_term("tr-00")

    session.select_all()
    assert session.selected == ["1", "2", "3"]
    assert session.search_term == ""
    assert session.all_selected

    session.select_all()
    assert session.selected == []


def test_confirm_selection_hands_over_and_closes():
    received = []
    closed = []
    session = _session(on_select=received.append, on_close=lambda: closed.append(True))
    session.open(["2"])
    session.toggle("1")

    result = session.confirm_selection()

    assert result == ["2", "1"]
    assert received == [["2", "1"]]
    assert closed == [True]
    assert not session.is_open
    assert session.selected == []


def test_set_date_flags_past_dates(caplog):
    session = _session()

    assert session.set_date("2025-01-09") is True
    assert session.work_date == date(2025, 1, 9)
    assert "past date" in caplog.text
    assert session.set_date(TODAY) is False


def test_set_date_rejects_garbage():
    session = _session()

    with pytest.raises(ValidationError):
        session.set_date("10/01/2025")


def test_set_status_accepts_strings():
    session = _session()

    session.set_status("absent")

    assert session.status == AttendanceStatus.ABSENT


def test_mark_with_empty_selection_is_rejected_without_calls():
    marker = FakeMarker()
    session = _session(marker)
    session.open([])

    result = asyncio.run(session.mark_attendance())

    assert result.rejected
    assert result.total_count == 0
    assert marker.calls == []


def test_mark_batch_continues_past_failure_and_clears_selection():
    marker = FakeMarker(failing={"2"})
    session = _session(marker)
    session.open(["1", "2", "3"])
    session.set_status("Absent")

    result = asyncio.run(session.mark_attendance())

    assert result.marked_count == 2
    assert result.total_count == 3
    assert result.failed == ("2",)
    assert session.selected == []
    assert [c[0] for c in marker.calls] == ["1", "2", "3"]
    assert all(c[1] == AttendanceStatus.ABSENT and c[2] == TODAY for c in marker.calls)


def test_mark_batch_is_sequential_and_in_selection_order():
    marker = FakeMarker()
    session = _session(marker)
    session.open(["3", "1", "2"])

    asyncio.run(session.mark_attendance())

    assert marker.max_in_flight == 1
    assert [c[0] for c in marker.calls] == ["3", "1", "2"]


def test_progress_is_monotonic_and_reset_after_batch():
    updates = []
    marker = FakeMarker(failing={"2"})
    session = _session(
        marker,
        on_progress=lambda p: updates.append((p.marked_count, p.total_count, p.percent_complete)),
    )
    session.open(["1", "2", "3"])

    asyncio.run(session.mark_attendance())

    assert updates == [(0, 3, 0), (1, 3, 33), (2, 3, 67), (0, 0, 0)]
    during = [u[0] for u in updates[:-1]]
    assert during == sorted(during)
    assert all(marked <= total for marked, total, _ in updates[:-1])
    assert session.progress.marked_count == 0
    assert not session.is_marking


def test_mark_while_marking_is_rejected():
    session = _session()
    session.open(["1"])
    session.is_marking = True

    with pytest.raises(ValidationError):
        asyncio.run(session.mark_attendance())


def test_percent_complete_rounds_halves_up():
    assert MarkingProgress(marked_count=1, total_count=8).percent_complete == 13
    assert MarkingProgress(marked_count=5, total_count=8).percent_complete == 63
    assert MarkingProgress(marked_count=1, total_count=3).percent_complete == 33
    assert MarkingProgress(marked_count=2, total_count=3).percent_complete == 67
    assert MarkingProgress().percent_complete == 0


def test_batch_of_eight_reports_half_up_percentages():
    interns = [Intern(intern_id=str(n), trainee_id=f"TR-{n:03d}", trainee_name=f"Intern {n}") for n in range(1, 9)]
    percents = []
    session = InternSelectionSession(
        interns,
        mark_one=FakeMarker(),
        today=lambda: TODAY,
        on_progress=lambda p: percents.append(p.percent_complete),
    )
    session.open([i.intern_id for i in interns])

    asyncio.run(session.mark_attendance())

    assert percents == [0, 13, 25, 38, 50, 63, 75, 88, 100, 0]


def test_failing_progress_callback_does_not_abort_batch(caplog):
    marker = FakeMarker()

    def broken(progress):
        raise RuntimeError("render failed")

    session = _session(marker, on_progress=broken)
    session.open(["1", "2", "3"])

    result = asyncio.run(session.mark_attendance())

    assert (result.marked_count, result.total_count) == (3, 3)
    assert [c[0] for c in marker.calls] == ["1", "2", "3"]
    assert session.selected == []
    assert not session.is_marking
    assert "Progress callback failed" in caplog.text
