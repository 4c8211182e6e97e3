"""Rule registry — maps rule names to evaluators.

Built lazily on first use and read-only afterwards. Unknown names resolve to
``None`` and are treated as passing by the engine, so tags can carry
annotations this engine does not know about.
"""

from functools import lru_cache
from typing import Iterable, Optional

import structlog

from tagvalid.rules.base import BaseRule
from tagvalid.rules.cards import CreditCardRule
from tagvalid.rules.numbers import NumericRule, RangeRule, bound_rules
from tagvalid.rules.presence import RequiredRule
from tagvalid.rules.strings import string_rules

logger = structlog.get_logger()


class RuleRegistry:
    """Name → rule lookup."""

    def __init__(self, rules: Optional[Iterable[BaseRule]] = None):
        self._rules: dict[str, BaseRule] = {}
        for rule in rules if rules is not None else self._default_rules():
            self.add_rule(rule)

    @staticmethod
    def _default_rules() -> list[BaseRule]:
        """Every rule the tag grammar knows out of the box."""
        return [
            RequiredRule(),
            NumericRule(),
            *bound_rules(),
            RangeRule(),
            *string_rules(),
            CreditCardRule(),
        ]

    def get(self, name: str) -> Optional[BaseRule]:
        return self._rules.get(name)

    def names(self) -> list[str]:
        return sorted(self._rules)

    def add_rule(self, rule: BaseRule) -> None:
        """Register a rule; a later rule with the same name replaces the earlier one."""
        self._rules[rule.name] = rule

    def remove_rule(self, name: str) -> None:
        self._rules.pop(name, None)

    def __contains__(self, name: str) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)


@lru_cache
def get_registry() -> RuleRegistry:
    """Process-wide default registry."""
    registry = RuleRegistry()
    logger.debug("rule_registry_initialized", rules=registry.names())
    return registry
