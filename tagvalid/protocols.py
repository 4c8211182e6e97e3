"""Request customization capabilities.

A top-level value may implement either or both. They are only consulted by
request-style validation, and only on the outermost value.

    class Account(BaseModel):
        username: Annotated[str, Rules("required")] = ""

        def validate_request(self) -> Response:
            r = Response()
            if self.username and len(self.username) < 5:
                r.failure("username.invalid", "username is not valid")
            return r

        def validation_messages(self) -> dict[str, str]:
            return {"members.*.age.range": "invalid"}
"""

from typing import Protocol, runtime_checkable

from tagvalid.models import Response


@runtime_checkable
class RequestValidator(Protocol):
    """Structural self-check contributing extra failures."""

    def validate_request(self) -> Response:
        ...


@runtime_checkable
class MessageProvider(Protocol):
    """Path pattern → message overrides; ``*`` stands for any collection index."""

    def validation_messages(self) -> dict[str, str]:
        ...
