"""Rule grammar parser — turns a tag like ``required|range:1,140`` into a RuleSet."""

from functools import lru_cache

from tagvalid.models import Rule, RuleSet

RULE_SEPARATOR = "|"
PARAM_SEPARATOR = ":"

# Tags that carry no rules at all.
EMPTY_TAGS = frozenset({"", "-"})


def is_skip_tag(tag: str) -> bool:
    """``-`` means "leave this field alone", including composite traversal."""
    return tag.strip() == "-"


@lru_cache(maxsize=1024)
def parse_rules(tag: str) -> RuleSet:
    """Split a tag into ordered rules.

    Segments are separated by ``|``; each segment splits on its first ``:``
    into name and raw parameter, so parameters may contain commas (``in:a,b``)
    or further colons. Blank segments are dropped.
    """
    tag = (tag or "").strip()
    if tag in EMPTY_TAGS:
        return ()

    rules = []
    for segment in tag.split(RULE_SEPARATOR):
        segment = segment.strip()
        if not segment:
            continue
        name, _, param = segment.partition(PARAM_SEPARATOR)
        rules.append(Rule(name=name.strip(), param=param))
    return tuple(rules)


def has_rule(rules: RuleSet, name: str) -> bool:
    return any(r.name == name for r in rules)
