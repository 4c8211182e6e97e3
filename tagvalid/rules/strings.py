"""String rules — character classes, formats and literal comparisons.

All of these expect a string; any other (non-None) value fails them.
"""

import json
import re
from abc import abstractmethod
from functools import lru_cache
from typing import Any, Optional
from urllib.parse import urlparse

import structlog

from tagvalid.rules.base import BaseRule

logger = structlog.get_logger()

ALPHA_RE = re.compile(r"^[A-Za-z]+$")
ALPHA_NUM_RE = re.compile(r"^[A-Za-z0-9]+$")
ALPHA_SPACE_RE = re.compile(r"^[A-Za-z ]+$")
ALPHA_NUM_SPACE_RE = re.compile(r"^[A-Za-z0-9 ]+$")

# local-part@domain with at least one dot in the domain and a 2+ letter TLD.
EMAIL_RE = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)*"
    r"\.[A-Za-z]{2,}$"
)

URL_SCHEMES = frozenset({"http", "https"})


def _reject_constant(token: str) -> None:
    raise ValueError(f"{token} is not valid JSON")


@lru_cache(maxsize=256)
def _compile(pattern: str) -> Optional[re.Pattern]:
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.warning("invalid_match_pattern", pattern=pattern, error=str(e))
        return None


class StringRule(BaseRule):
    """Base for rules that only make sense on strings."""

    def check(self, value: Any, param: str = "") -> bool:
        if not isinstance(value, str):
            return False
        return self.check_string(value, param)

    @abstractmethod
    def check_string(self, value: str, param: str) -> bool:
        ...


class PatternRule(StringRule):
    """Whole-string match against a fixed expression."""

    def __init__(self, name: str, pattern: re.Pattern):
        self._name = name
        self._pattern = pattern

    @property
    def name(self) -> str:
        return self._name

    def check_string(self, value: str, param: str) -> bool:
        return self._pattern.fullmatch(value) is not None


class EmailRule(StringRule):
    @property
    def name(self) -> str:
        return "email"

    def check_string(self, value: str, param: str) -> bool:
        local, _, domain = value.rpartition("@")
        if len(local) > 64 or len(domain) > 255:
            return False
        if local.startswith(".") or local.endswith(".") or ".." in local:
            return False
        return EMAIL_RE.fullmatch(value) is not None


class UrlRule(StringRule):
    """Absolute http(s) URL with a host."""

    @property
    def name(self) -> str:
        return "url"

    def check_string(self, value: str, param: str) -> bool:
        try:
            parsed = urlparse(value)
        except ValueError:
            return False
        return parsed.scheme in URL_SCHEMES and bool(parsed.netloc)


class JsonRule(StringRule):
    @property
    def name(self) -> str:
        return "json"

    def check_string(self, value: str, param: str) -> bool:
        try:
            json.loads(value, parse_constant=_reject_constant)
        except ValueError:
            return False
        return True


class ContainsRule(StringRule):
    @property
    def name(self) -> str:
        return "contains"

    def check_string(self, value: str, param: str) -> bool:
        return param in value


class MatchRule(StringRule):
    """Passes when any part of the string matches the expression (search, not fullmatch)."""

    @property
    def name(self) -> str:
        return "match"

    def check_string(self, value: str, param: str) -> bool:
        pattern = _compile(param)
        if pattern is None:
            return False
        return pattern.search(value) is not None


class SameRule(StringRule):
    @property
    def name(self) -> str:
        return "same"

    def check_string(self, value: str, param: str) -> bool:
        return value == param


class InRule(BaseRule):
    """Membership in a comma separated list; ``negate`` gives ``not_in``."""

    def __init__(self, name: str = "in", negate: bool = False):
        self._name = name
        self._negate = negate

    @property
    def name(self) -> str:
        return self._name

    def check(self, value: Any, param: str = "") -> bool:
        choices = param.split(",")
        found = self._as_text(value) in choices
        return not found if self._negate else found

    def _as_text(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)


def string_rules() -> list[BaseRule]:
    return [
        PatternRule("alpha", ALPHA_RE),
        PatternRule("alpha_num", ALPHA_NUM_RE),
        PatternRule("alpha_space", ALPHA_SPACE_RE),
        PatternRule("alpha_num_space", ALPHA_NUM_SPACE_RE),
        EmailRule(),
        UrlRule(),
        JsonRule(),
        ContainsRule(),
        MatchRule(),
        SameRule(),
        InRule("in"),
        InRule("not_in", negate=True),
    ]
