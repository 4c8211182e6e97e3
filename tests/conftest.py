import pytest

from tagvalid import Validator


@pytest.fixture()
def engine():
    return Validator()
