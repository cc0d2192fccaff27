"""User lifecycle events emitted by the host's user management.

Each event is an immutable pydantic model tagged by ``kind`` so a raw
mapping (for example one JSON line from the host's event bus) can be turned
into the right variant with :func:`parse_event`.
"""

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import InvalidEvent


class _UserEvent(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    uid: str = Field(..., min_length=1, description="User identifier")


class UserCreated(_UserEvent):
    kind: Literal["user_created"] = "user_created"


class UserDeleted(_UserEvent):
    kind: Literal["user_deleted"] = "user_deleted"


class UserChanged(_UserEvent):
    kind: Literal["user_changed"] = "user_changed"
    feature: str = Field(..., min_length=1, description="Changed user property")
    value: Any = None
    old_value: Any = None


class PasswordUpdated(_UserEvent):
    kind: Literal["password_updated"] = "password_updated"
    backend_name: str = Field(..., description="Name of the user's backend, e.g. Database or LDAP")


UserEvent = Annotated[
    Union[UserCreated, UserDeleted, UserChanged, PasswordUpdated],
    Field(discriminator="kind"),
]

_event_adapter = TypeAdapter(UserEvent)


def parse_event(data: Mapping[str, Any]) -> UserEvent:
    """Build an event from a raw mapping, raising InvalidEvent if malformed."""
    try:
        return _event_adapter.validate_python(dict(data))
    except (ValidationError, TypeError, ValueError) as e:
        raise InvalidEvent(f"malformed user event: {e}") from e
