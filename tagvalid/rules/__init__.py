"""Tag rules — the named predicates a ``valid`` tag can reference.

Usage:
    from tagvalid.rules import get_registry

    rule = get_registry().get("email")
    rule("foo@bar.com")  # True
"""

from tagvalid.rules.base import BaseRule
from tagvalid.rules.registry import RuleRegistry, get_registry

__all__ = [
    "BaseRule",
    "RuleRegistry",
    "get_registry",
]
