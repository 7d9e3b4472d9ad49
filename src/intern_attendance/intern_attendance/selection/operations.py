from __future__ import annotations

from typing import Iterable, Sequence

from ..interns.model import Intern


def _contains(value, needle: str) -> bool:
    return bool(value) and needle in str(value).lower()


def filter_interns(interns: Sequence[Intern], search_term: str, selected: Iterable[str]) -> list[Intern]:
    """Interns to show in the selection list.

    With no search term only the selected interns are listed; with a term,
    every intern whose trainee id or name contains it (case-insensitive),
    selected or not. Input order is kept either way.
    """
    if not search_term:
        chosen = set(selected)
        return [i for i in interns if i.intern_id in chosen]

    needle = search_term.lower()
    return [i for i in interns if _contains(i.trainee_id, needle) or _contains(i.trainee_name, needle)]


def toggle_selection(selected: Sequence[str], intern_id: str) -> list[str]:
    if intern_id in selected:
        return [i for i in selected if i != intern_id]
    return [*selected, intern_id]


def select_all(selected: Sequence[str], filtered: Sequence[Intern]) -> list[str]:
    filtered_ids = [i.intern_id for i in filtered]
    if set(selected) == set(filtered_ids):
        return []
    return filtered_ids
