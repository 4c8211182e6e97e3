import pytest

from tagvalid.models import Rule
from tagvalid.parser import has_rule, is_skip_tag, parse_rules


@pytest.mark.parametrize("tag", ["", "-", "  ", " - "])
def test_empty_tags_have_no_rules(tag):
    assert parse_rules(tag) == ()


def test_rules_keep_declared_order():
    rules = parse_rules("required|email|gte:7")
    assert [r.name for r in rules] == ["required", "email", "gte"]
    assert rules[2].param == "7"


def test_rule_without_colon_has_empty_param():
    assert parse_rules("required") == (Rule(name="required", param=""),)


def test_param_splits_on_first_colon_only():
    (rule,) = parse_rules("match:^a:b$")
    assert rule.name == "match"
    assert rule.param == "^a:b$"


def test_param_keeps_commas():
    (rule,) = parse_rules("range:1,140")
    assert rule.param == "1,140"
    assert rule.params == ["1", "140"]


def test_blank_segments_are_dropped():
    assert [r.name for r in parse_rules("required||email|")] == ["required", "email"]


def test_unknown_names_are_kept():
    assert parse_rules("nonexistingtag:1") == (Rule(name="nonexistingtag", param="1"),)


def test_skip_tag_and_has_rule():
    assert is_skip_tag("-")
    assert not is_skip_tag("")
    assert has_rule(parse_rules("numeric|required"), "required")
    assert not has_rule(parse_rules("numeric"), "required")


def test_rule_str():
    assert str(Rule(name="gte", param="7")) == "gte:7"
    assert str(Rule(name="cc")) == "cc"
