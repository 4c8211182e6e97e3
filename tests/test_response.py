import pytest

from tagvalid import Response, ValidationError, new_failure, set_error


def test_failure_invalidates():
    r = Response()
    assert r.valid
    r.failure("test", "ok")
    assert r.valid is False
    assert r.get_message("test") == "ok"


def test_first_write_wins():
    r = Response()
    r.failure("email.email", "first")
    r.failure("email.email", "second")
    assert r.get_message("email.email") == "first"
    assert len(r.get_messages()) == 1


def test_missing_message_is_empty():
    assert Response().get_message("nope") == ""


def test_get_messages_is_a_copy():
    r = new_failure("a.required", "x")
    r.get_messages()["b"] = "y"
    assert r.get_messages() == {"a.required": "x"}


def test_get_errors_strips_rule_segment():
    r = Response()
    r.failure("user.age.required", "age missing")
    r.failure("members.0.name.match", "bad name")
    r.failure("email.email", "bad email")
    assert r.get_errors() == {
        "user.age": "age missing",
        "members.0.name": "bad name",
        "email": "bad email",
    }
    for key in r.get_errors():
        assert key
        assert any(path.rsplit(".", 1)[0] == key for path in r.get_messages())


def test_get_errors_first_entry_wins():
    r = Response()
    r.failure("username.required", "first")
    r.failure("username.invalid", "second")
    assert r.get_errors() == {"username": "first"}


def test_get_errors_keeps_undotted_keys():
    assert new_failure("email", "email is not valid").get_errors() == {"email": "email is not valid"}


def test_merge():
    r = new_failure("a.required", "first")
    other = Response()
    other.failure("a.required", "ignored")
    other.failure("b.invalid", "added")
    r.merge(other)
    assert r.get_messages() == {"a.required": "first", "b.invalid": "added"}

    valid = Response()
    valid.merge(Response(valid=False))
    assert not valid.valid


def test_set_error():
    e = set_error("email", "email is not valid")
    assert e.get_message("email") == "email is not valid"
    assert not e.valid


def test_as_error():
    assert Response().as_error() is None

    err = new_failure("email.email", "bad email").as_error()
    assert isinstance(err, ValidationError)
    assert str(err) == "bad email"
    assert err.errors == {"email": "bad email"}
    assert err.messages == {"email.email": "bad email"}

    with pytest.raises(ValidationError):
        raise err


def test_summary():
    r = new_failure("a.required", "A is required")
    r.failure("b.email", "B is not an email")
    assert r.error() == "A is required; B is not an email"
    assert Response(valid=False).error() == "validation failed"
