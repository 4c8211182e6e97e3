from tagvalid.messages import DEFAULT_TEMPLATE, TEMPLATES, default_message, humanize
from tagvalid.models import Rule


def test_templates_cover_every_registered_rule():
    from tagvalid.rules import get_registry

    for name in get_registry().names():
        assert name in TEMPLATES


def test_default_message_substitutes_field_and_params():
    assert default_message(Rule(name="required"), "age") == "The age field is required"
    assert default_message(Rule(name="range", param="1,140"), "age") == "The age must be between 1 and 140"
    assert default_message(Rule(name="gte", param="7"), "password") == "The password must be greater than or equal to 7"
    assert default_message(Rule(name="email"), "email") == "The email must be a valid email address"
    assert default_message(Rule(name="match", param="[0-9]+"), "name") == "The name format is invalid"


def test_missing_params_are_blank():
    assert default_message(Rule(name="range", param="1"), "age") == "The age must be between 1 and "


def test_unknown_rule_uses_fallback():
    assert default_message(Rule(name="custom"), "code") == "The code is invalid"


def test_no_field_returns_raw_template():
    assert default_message(Rule(name="required")) == "The %s field is required"
    assert default_message(Rule(name="custom")) == DEFAULT_TEMPLATE


def test_humanize():
    assert humanize("member_code") == "member code"
    assert humanize("age") == "age"
