from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

Values = dict[str, Any]
Errors = dict[str, str]
Validate = Callable[[Mapping[str, Any]], Mapping[str, str]]
SubmitAction = Callable[[Values], Union[Awaitable[Any], Any]]


class FormState:
    """Controlled-form state: values, per-field errors and a submitting flag."""

    def __init__(self, initial_values: Optional[Mapping[str, Any]] = None, validate: Optional[Validate] = None):
        self._initial = dict(initial_values or {})
        self._validate = validate or (lambda values: {})
        self.values: Values = dict(self._initial)
        self.errors: Errors = {}
        self.is_submitting = False

    def set_field(self, name: str, value: Any) -> None:
        self.values = {**self.values, name: value}

    def reset(self) -> None:
        self.values = dict(self._initial)
        self.errors = {}
        self.is_submitting = False

    async def submit(self, submit_action: SubmitAction) -> bool:
        """Validate the current values and run ``submit_action`` if they pass.

        The decision uses the errors computed in this call. Returns True when
        the action ran; exceptions from the action propagate after the
        submitting flag is cleared.
        """
        self.errors = dict(self._validate(self.values))
        if self.errors:
            self.is_submitting = False
            return False

        self.is_submitting = True
        try:
            result = submit_action(dict(self.values))
            if inspect.isawaitable(result):
                await result
        finally:
            self.is_submitting = False
        return True
