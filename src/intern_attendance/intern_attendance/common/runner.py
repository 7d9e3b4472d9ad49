from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, Sequence, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")

Task = Callable[[T], Union[Awaitable[Any], Any]]
ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class ItemResult(Generic[T]):
    item: T
    ok: bool
    value: Any = None
    error: Optional[BaseException] = None


class SequentialRunner(Generic[T]):
    """Run one task per item, strictly in order, one at a time.

    Each task is awaited before the next one starts, so the collaborator
    behind ``task`` never sees two calls from the same run at once.
    A failing item is recorded and the run moves on.
    """

    def __init__(self, task: Task, *, on_progress: Optional[ProgressCallback] = None):
        self._task = task
        self._on_progress = on_progress

    async def run(self, items: Sequence[T]) -> list[ItemResult[T]]:
        items = list(items)
        total = len(items)
        completed = 0
        results: list[ItemResult[T]] = []

        for item in items:
            try:
                value = self._task(item)
                if inspect.isawaitable(value):
                    value = await value
            except Exception as e:
                logger.error("Task failed for %r: %s", item, e)
                results.append(ItemResult(item=item, ok=False, error=e))
                continue

            completed += 1
            results.append(ItemResult(item=item, ok=True, value=value))
            if self._on_progress:
                self._on_progress(completed, total)

        return results
