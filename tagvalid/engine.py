"""Validation Engine — entry points for field, struct and request validation.

This is the main entry point of the package. It evaluates rule tags through
the registry, walks composite values and, for request-style validation,
layers the top-level value's own checks and message overrides on top.

Usage:
    engine = Validator()
    response = engine.request(account)
    if not response.valid:
        return response.get_errors()
"""

import time
from typing import Any, Optional

import structlog

from tagvalid.config import get_settings
from tagvalid.messages import default_message
from tagvalid.models import Response, Rule, RuleSet
from tagvalid.parser import has_rule, parse_rules
from tagvalid.protocols import MessageProvider, RequestValidator
from tagvalid.rules import RuleRegistry, get_registry
from tagvalid.schema import is_struct
from tagvalid.walker import StructWalker

logger = structlog.get_logger()

WILDCARD = "*"


def match_pattern(pattern: str, path: str) -> bool:
    """Segment-wise match where ``*`` stands for exactly one integer index."""
    pattern_parts = pattern.split(".")
    path_parts = path.split(".")
    if len(pattern_parts) != len(path_parts):
        return False
    for expected, actual in zip(pattern_parts, path_parts):
        if expected == WILDCARD:
            if not actual.isdigit():
                return False
        elif expected != actual:
            return False
    return True


def resolve_override(path: str, overrides: dict[str, str]) -> Optional[str]:
    """Exact key first, then the first wildcard pattern that matches."""
    if path in overrides:
        return overrides[path]
    for pattern, message in overrides.items():
        if WILDCARD in pattern and match_pattern(pattern, path):
            return message
    return None


class Validator:
    """Evaluates rule tags against values and collects path-addressed failures.

    Design principles:
        - Stateless: every call builds and returns its own Response
        - One failure per field: rules short-circuit on the first failure
        - Lenient: unknown rule names never invalidate a field
    """

    def __init__(self, registry: Optional[RuleRegistry] = None):
        """Initialize with the default registry or a custom one.

        Args:
            registry: Optional rule registry. If None, uses the process-wide default.
        """
        self.registry = registry if registry is not None else get_registry()
        self._walker = StructWalker(self.first_failure, default_message)

    # ── Field validation ──

    def first_failure(self, value: Any, rules: RuleSet) -> Optional[Rule]:
        """The first rule ``value`` fails, or None when it satisfies all of them."""
        if not has_rule(rules, "required") and (value is None or (isinstance(value, str) and value == "")):
            return None

        for rule in rules:
            evaluator = self.registry.get(rule.name)
            if evaluator is None:
                continue
            try:
                ok = evaluator(value, rule.param)
            except Exception as e:
                logger.error("rule_crashed", rule=rule.name, param=rule.param, error=str(e))
                ok = False
            if not ok:
                return rule
        return None

    def field(self, value: Any, tag: str) -> Response:
        """Validate a single value against a tag. Messages are keyed by rule name."""
        response = Response()
        failed = self.first_failure(value, parse_rules(tag))
        if failed is not None:
            response.failure(failed.name, default_message(failed))
        return response

    # ── Struct validation ──

    def struct(self, value: Any) -> Response:
        """Tag-driven validation of a struct and everything nested in it."""
        start = time.perf_counter()
        response = self._walk(value)
        if response is None:
            return Response(valid=False)

        self._log_run("struct", value, response, start)
        return response

    # ── Request validation ──

    def request(self, value: Any) -> Response:
        """Struct validation plus the value's own self-check and message overrides."""
        start = time.perf_counter()
        response = self._walk(value)
        if response is None:
            return Response(valid=False)

        if isinstance(value, RequestValidator):
            response.merge(value.validate_request())

        if isinstance(value, MessageProvider):
            overrides = value.validation_messages() or {}
            for path in response.messages:
                message = resolve_override(path, overrides)
                if message is not None:
                    response.messages[path] = message

        self._log_run("request", value, response, start)
        return response

    def validate(self, value: Any) -> Response:
        """Request validation when the value opts into it, struct validation otherwise."""
        if isinstance(value, (RequestValidator, MessageProvider)):
            return self.request(value)
        return self.struct(value)

    def validate_or_raise(self, value: Any) -> Any:
        """Like ``validate`` but raises ValidationError on failure; returns the value otherwise."""
        error = self.validate(value).as_error()
        if error is not None:
            raise error
        return value

    # ── Helpers ──

    def _walk(self, value: Any) -> Optional[Response]:
        """Walk a struct; None (after a warning) when ``value`` is not one."""
        if not is_struct(value):
            logger.warning("struct_shape_invalid", value_type=type(value).__name__)
            return None
        return self._walker.walk(value, Response())

    @staticmethod
    def _log_run(mode: str, value: Any, response: Response, start: float) -> None:
        if not get_settings().LOG_VALIDATION_RUNS:
            return
        logger.debug(
            "validation_complete",
            mode=mode,
            value_type=type(value).__name__,
            valid=response.valid,
            errors=len(response.messages),
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )


# Module-level singleton
validator = Validator()


def validate_field(value: Any, tag: str) -> Response:
    return validator.field(value, tag)


def validate_struct(value: Any) -> Response:
    return validator.struct(value)


def validate_request(value: Any) -> Response:
    return validator.request(value)
