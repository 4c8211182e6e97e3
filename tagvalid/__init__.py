"""tagvalid — declarative, tag-driven validation for decoded request payloads.

Usage:
    from typing import Annotated
    from pydantic import BaseModel
    from tagvalid import Rules, validate_struct

    class User(BaseModel):
        name: Annotated[str, Rules("required|match:[0-9]+")] = ""
        age: Annotated[int, Rules("required|range:1,140")] = 0

    response = validate_struct(User(name="1", age=170))
    response.get_message("age.range")  # "The age must be between 1 and 140"
"""

from tagvalid.engine import (
    Validator,
    validate_field,
    validate_request,
    validate_struct,
    validator,
)
from tagvalid.models import Response, Rule, ValidationError, new_failure, set_error
from tagvalid.parser import parse_rules
from tagvalid.protocols import MessageProvider, RequestValidator
from tagvalid.rules import BaseRule, RuleRegistry, get_registry
from tagvalid.schema import Rules

__all__ = [
    "Validator",
    "validator",
    "validate_field",
    "validate_struct",
    "validate_request",
    "Response",
    "Rule",
    "ValidationError",
    "new_failure",
    "set_error",
    "parse_rules",
    "Rules",
    "RequestValidator",
    "MessageProvider",
    "BaseRule",
    "RuleRegistry",
    "get_registry",
]
