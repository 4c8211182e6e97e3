"""Struct walker — recursive traversal that turns tagged fields into Response entries.

Paths mirror the nesting of the value: field segments are joined with ``.``
and collection elements add their index (``members.0.age``). Optional structs
add no segment of their own; inline fields add none either.
"""

from typing import Any, Callable, Optional

from tagvalid.models import Response, Rule, RuleSet
from tagvalid.parser import has_rule
from tagvalid.schema import FieldDescriptor, describe, is_struct

REQUIRED = Rule(name="required")

# (value, rules) → first failing rule or None
FieldCheck = Callable[[Any, RuleSet], Optional[Rule]]
# (rule, field segment) → message
MessageResolver = Callable[[Rule, str], str]


def join_path(prefix: str, segment: Any) -> str:
    return f"{prefix}.{segment}" if prefix else str(segment)


class StructWalker:
    """Walks one struct value, feeding leaf fields to ``check_field``.

    The walker holds no per-call state; every ``walk`` writes into the
    Response it is handed.
    """

    def __init__(self, check_field: FieldCheck, resolve_message: MessageResolver):
        self._check_field = check_field
        self._resolve_message = resolve_message

    def walk(self, value: Any, response: Response, prefix: str = "") -> Response:
        for descriptor in describe(type(value)):
            if descriptor.skip:
                continue
            field_value = getattr(value, descriptor.name, None)
            if descriptor.inline:
                self._walk_inline(field_value, descriptor, response, prefix)
                continue

            path = join_path(prefix, descriptor.segment)
            if self._is_composite(field_value, descriptor):
                self._walk_composite(field_value, descriptor, response, path)
            elif descriptor.rules:
                self._validate_leaf(field_value, descriptor, response, path)
        return response

    # ── Composite fields ──

    @staticmethod
    def _is_composite(value: Any, descriptor: FieldDescriptor) -> bool:
        if is_struct(value):
            return True
        if isinstance(value, (list, tuple)):
            if any(is_struct(item) for item in value):
                return True
            return descriptor.composite and not value
        return value is None and descriptor.composite

    def _walk_composite(self, value: Any, descriptor: FieldDescriptor, response: Response, path: str) -> None:
        empty = value is None or (isinstance(value, (list, tuple)) and not value)
        if empty:
            if has_rule(descriptor.rules, REQUIRED.name):
                response.failure(join_path(path, REQUIRED.name), self._resolve_message(REQUIRED, descriptor.segment))
            return

        if isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                if is_struct(item):
                    self.walk(item, response, join_path(path, index))
            return

        self.walk(value, response, path)

    def _walk_inline(self, value: Any, descriptor: FieldDescriptor, response: Response, prefix: str) -> None:
        if is_struct(value):
            self.walk(value, response, prefix)
        elif value is None and has_rule(descriptor.rules, REQUIRED.name):
            path = join_path(prefix, descriptor.segment)
            response.failure(join_path(path, REQUIRED.name), self._resolve_message(REQUIRED, descriptor.segment))

    # ── Leaf fields ──

    def _validate_leaf(self, value: Any, descriptor: FieldDescriptor, response: Response, path: str) -> None:
        failed = self._check_field(value, descriptor.rules)
        if failed is not None:
            response.failure(join_path(path, failed.name), self._resolve_message(failed, descriptor.segment))
