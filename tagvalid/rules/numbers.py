"""Numeric rules — ``numeric``, the ``lt``/``lte``/``gt``/``gte`` bounds and ``range``.

Strings are measured by length, numbers by value. A bound that does not parse
as a number can never be exceeded, so ``lt``/``lte`` pass and ``gt``/``gte``
fail; ``range`` with an unparsable bound passes.
"""

import math
import operator
from decimal import Decimal
from typing import Any, Callable

from tagvalid.rules.base import BaseRule, Number


def _is_nan(value: Number) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


class NumericRule(BaseRule):
    """A number, or a string that parses completely as one."""

    @property
    def name(self) -> str:
        return "numeric"

    def check(self, value: Any, param: str = "") -> bool:
        if self._is_numeric(value):
            return True
        if isinstance(value, str):
            if value != value.strip() or "_" in value:
                return False
            try:
                return not math.isnan(float(value))
            except ValueError:
                return False
        return False


class BoundRule(BaseRule):
    """Compares the value (or its length) against a single numeric limit."""

    def __init__(self, name: str, compare: Callable[[Number, float], bool], unbounded: bool):
        self._name = name
        self._compare = compare
        # Result when the limit is not a number.
        self._unbounded = unbounded

    @property
    def name(self) -> str:
        return self._name

    def check(self, value: Any, param: str = "") -> bool:
        limit = self._parse_number(param)
        if limit is None:
            return self._unbounded

        comparand = self._comparand(value)
        if comparand is None:
            return self._unbounded
        if _is_nan(comparand):
            return False
        return self._compare(comparand, limit)


class RangeRule(BaseRule):
    """``range:a,b`` — inclusive on both ends; lenient when a bound is unparsable."""

    @property
    def name(self) -> str:
        return "range"

    def check(self, value: Any, param: str = "") -> bool:
        low_text, _, high_text = param.partition(",")
        low = self._parse_number(low_text)
        high = self._parse_number(high_text)
        if low is None or high is None:
            return True

        comparand = self._comparand(value)
        if comparand is None:
            return True
        if _is_nan(comparand):
            return False
        return low <= comparand <= high


def bound_rules() -> list[BaseRule]:
    return [
        BoundRule("lt", operator.lt, unbounded=True),
        BoundRule("lte", operator.le, unbounded=True),
        BoundRule("gt", operator.gt, unbounded=False),
        BoundRule("gte", operator.ge, unbounded=False),
    ]
