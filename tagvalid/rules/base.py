"""Base rule — abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable predicate.
New rules are added to the registry without modifying the engine.
"""

from abc import ABC, abstractmethod
from collections.abc import Sized
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, Union

Number = Union[int, float, Decimal]


class BaseRule(ABC):
    """Abstract base for all tag rules.

    Contract:
        - check() is pure: same value + param → same answer
        - check() never mutates the value
        - None is only meaningful to ``required``; every other rule passes it
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name as written in a tag."""
        ...

    @abstractmethod
    def check(self, value: Any, param: str = "") -> bool:
        """Return True when ``value`` satisfies the rule."""
        ...

    def __call__(self, value: Any, param: str = "") -> bool:
        if value is None and self.name != "required":
            return True
        return self.check(value, param)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    # ── Helper Methods ──

    @staticmethod
    def _is_numeric(value: Any) -> bool:
        """int/float/Decimal; bool is not a number here."""
        return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)

    @staticmethod
    def _parse_number(text: str) -> Optional[float]:
        """Parse a tag parameter as a number, None when it is not one."""
        try:
            return float(text.strip())
        except (AttributeError, ValueError):
            return None

    def _comparand(self, value: Any) -> Optional[Number]:
        """What a bound is compared against: string/collection length or the number itself."""
        if isinstance(value, str):
            return len(value)
        if self._is_numeric(value):
            return value
        if isinstance(value, Sized) and not isinstance(value, (bytes, bytearray)):
            return len(value)
        return None

    @staticmethod
    def _is_zero(value: Any) -> bool:
        """Zero value of the value's type (bool excluded by the caller)."""
        if isinstance(value, str):
            return value == ""
        if isinstance(value, (int, float, Decimal)):
            return value == 0
        if isinstance(value, datetime):
            return value == datetime.min
        if isinstance(value, date):
            return value == date.min
        if isinstance(value, Sized):
            return len(value) == 0
        return False
