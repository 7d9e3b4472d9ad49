from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Intern


class InternRepository(Protocol):
    def list_all(self) -> Sequence[Intern]:
        raise NotImplementedError

    def get_by_id(self, intern_id: str) -> Optional[Intern]:
        raise NotImplementedError

    def save(self, intern: Intern) -> None:
        raise NotImplementedError


class InMemoryInternRepository:
    """Process-local repository keyed by intern id; keeps insertion order."""

    def __init__(self, interns: Iterable[Intern] = ()):
        self._by_id: dict[str, Intern] = {}
        for intern in interns:
            self.save(intern)

    def list_all(self) -> Sequence[Intern]:
        return list(self._by_id.values())

    def get_by_id(self, intern_id: str) -> Optional[Intern]:
        return self._by_id.get(intern_id)

    def save(self, intern: Intern) -> None:
        self._by_id[intern.intern_id] = intern
