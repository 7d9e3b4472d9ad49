from __future__ import annotations

import asyncio

import pytest

from src.intern_attendance.intern_attendance.forms.state import FormState
from src.intern_attendance.intern_attendance.forms.validators import validate_intern_form


def _valid_values():
    return {
        "trainee_id": "TR-010",
        "trainee_name": "Dilan",
        "field_of_specialization": "Software",
        "email": "",
    }


def test_set_field_replaces_one_value():
    form = FormState({"a": 1, "b": 2})

    form.set_field("b", 3)

    assert form.values == {"a": 1, "b": 3}


def test_first_submit_with_invalid_values_is_blocked():
    calls = []
    form = FormState({"trainee_id": ""}, validate_intern_form)

    ran = asyncio.run(form.submit(calls.append))

    assert ran is False
    assert calls == []
    assert "trainee_id" in form.errors
    assert form.is_submitting is False


def test_submit_runs_action_once_fixed():
    calls = []
    form = FormState({"trainee_id": ""}, validate_intern_form)
    asyncio.run(form.submit(calls.append))

    for name, value in _valid_values().items():
        form.set_field(name, value)
    ran = asyncio.run(form.submit(calls.append))

    assert ran is True
    assert form.errors == {}
    assert calls == [_valid_values()]


def test_is_submitting_true_while_action_runs():
    seen = []
    form = FormState(_valid_values(), validate_intern_form)

    async def action(values):
        seen.append(form.is_submitting)

    asyncio.run(form.submit(action))

    assert seen == [True]
    assert form.is_submitting is False


def test_action_error_propagates_and_clears_flag():
    form = FormState(_valid_values(), validate_intern_form)

    async def action(values):
        raise RuntimeError("server down")

    with pytest.raises(RuntimeError):
        asyncio.run(form.submit(action))
    assert form.is_submitting is False


def test_reset_restores_initial_values():
    form = FormState({"trainee_id": "TR-1"}, validate_intern_form)
    form.set_field("trainee_id", "")
    asyncio.run(form.submit(lambda values: None))

    form.reset()

    assert form.values == {"trainee_id": "TR-1"}
    assert form.errors == {}
