"""Example: batch attendance marking through the service layer.

Wires the container, opens a selection session over a few interns and marks
them present for today.
"""

import asyncio

from src.intern_attendance.intern_attendance.interns.model import Intern
from src.intern_attendance.intern_attendance.main import bootstrap, shutdown

INTERNS = [
    Intern(intern_id="1", trainee_id="TR-001", trainee_name="Alice Perera", field_of_specialization="Software"),
    Intern(intern_id="2", trainee_id="TR-002", trainee_name="Bob Silva", field_of_specialization="Networking"),
    Intern(intern_id="3", trainee_id="TR-003", trainee_name="Chamari Fernando"),
]


async def run(container):
    session = container.new_selection_session(
        on_progress=lambda p: print(f"progress {p.marked_count}/{p.total_count} ({p.percent_complete}%)"),
    )
    session.open(["1", "2", "3"])
    result = await session.mark_attendance()
    print(f"marked {result.marked_count} of {result.total_count}")
    print(container.attendance_service.attendance_stats(container.attendance_service.today()))


def main():
    container = bootstrap(INTERNS)
    try:
        asyncio.run(run(container))
    finally:
        shutdown(container)


if __name__ == "__main__":
    main()
