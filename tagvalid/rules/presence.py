"""Presence rules — ``required``."""

from typing import Any

from tagvalid.rules.base import BaseRule


class RequiredRule(BaseRule):
    """Fails on None and on the zero value of the value's type.

    Booleans are always present: an absent bool cannot be told apart from False.
    """

    @property
    def name(self) -> str:
        return "required"

    def check(self, value: Any, param: str = "") -> bool:
        if value is None:
            return False
        if isinstance(value, bool):
            return True
        return not self._is_zero(value)
