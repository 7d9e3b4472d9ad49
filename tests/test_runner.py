import asyncio

from src.intern_attendance.intern_attendance.common.runner import SequentialRunner


def test_runner_collects_results_in_order_and_reports_progress():
    progress = []

    async def task(item):
        await asyncio.sleep(0)
        if item == "b":
            raise ValueError("bad item")
        return item.upper()

    runner = SequentialRunner(task, on_progress=lambda done, total: progress.append((done, total)))
    results = asyncio.run(runner.run(["a", "b", "c"]))

    assert [(r.item, r.ok, r.value) for r in results] == [("a", True, "A"), ("b", False, None), ("c", True, "C")]
    assert isinstance(results[1].error, ValueError)
    assert progress == [(1, 3), (2, 3)]


def test_runner_accepts_plain_callables():
    runner = SequentialRunner(lambda item: item * 2)

    results = asyncio.run(runner.run([1, 2]))

    assert [r.value for r in results] == [2, 4]


def test_runner_with_no_items():
    assert asyncio.run(SequentialRunner(lambda item: item).run([])) == []
