"""Validation models — parsed rules, the path-addressed Response and its exception form.

A Response is created fresh for every validation call and only ever grows:
failures are appended, never removed, and the first message written for a
path is the one that sticks.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Rule(BaseModel):
    """One named, optionally parameterized constraint (e.g. ``gte:7``)."""

    model_config = ConfigDict(frozen=True)

    name: str
    param: str = ""

    @property
    def params(self) -> list[str]:
        """Comma separated parameter values (``range:1,140`` → ``["1", "140"]``)."""
        if not self.param:
            return []
        return [p.strip() for p in self.param.split(",")]

    def __str__(self) -> str:
        return f"{self.name}:{self.param}" if self.param else self.name


RuleSet = tuple[Rule, ...]


class Response(BaseModel):
    """Validity flag plus path → message mapping produced by a validation call."""

    valid: bool = True
    messages: dict[str, str] = Field(default_factory=dict)

    def failure(self, path: str, message: str) -> "Response":
        """Record a failure at ``path``. Later writes for the same path are ignored."""
        self.valid = False
        self.messages.setdefault(path, message)
        return self

    def merge(self, other: Optional["Response"]) -> "Response":
        """Fold another response in; existing paths keep their message."""
        if other is None:
            return self
        if not other.valid:
            self.valid = False
        for path, message in other.messages.items():
            self.messages.setdefault(path, message)
        return self

    def get_message(self, path: str) -> str:
        return self.messages.get(path, "")

    def get_messages(self) -> dict[str, str]:
        return dict(self.messages)

    def get_errors(self) -> dict[str, str]:
        """Per-field errors: every key loses its trailing rule segment.

        ``user.age.required`` becomes ``user.age``. When several entries collapse
        onto the same field, the first one recorded wins.
        """
        errors: dict[str, str] = {}
        for path, message in self.messages.items():
            field, sep, _ = path.rpartition(".")
            errors.setdefault(field if sep else path, message)
        return errors

    def error(self) -> str:
        """Summary line built from the recorded messages."""
        if not self.messages:
            return "validation failed"
        return "; ".join(self.messages.values())

    def as_error(self) -> Optional["ValidationError"]:
        """The response as an exception, or None when it is valid."""
        if self.valid:
            return None
        return ValidationError(self)


class ValidationError(Exception):
    """Raised (or returned) when a validated value breaks its rules."""

    def __init__(self, response: Response):
        self.response = response
        super().__init__(response.error())

    @property
    def messages(self) -> dict[str, str]:
        return self.response.get_messages()

    @property
    def errors(self) -> dict[str, str]:
        return self.response.get_errors()


def new_failure(path: str, message: str) -> Response:
    """Single-entry invalid response, for ad hoc programmatic errors."""
    return Response().failure(path, message)


# Alias of new_failure.
set_error = new_failure
