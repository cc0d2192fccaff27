"""Audit logging for user management actions.

``UserManagementAudit`` turns user lifecycle events into audit records and
hands them to a sink. It keeps no state between calls.
"""

from .config import Settings, settings as default_settings
from .errors import InvalidEvent
from .events import PasswordUpdated, UserChanged, UserCreated, UserDeleted, UserEvent
from .logging import logger
from .siem import AuditSink


class UserManagementAudit:
    """Logs all user management related actions."""

    def __init__(self, sink: AuditSink, settings: Settings | None = None):
        self.sink = sink
        self.settings = settings or default_settings

    def handle(self, event: UserEvent) -> None:
        match event:
            case UserCreated():
                self.create(event)
            case UserDeleted():
                self.delete(event)
            case UserChanged():
                self.change(event)
            case PasswordUpdated():
                self.set_password(event)
            case _:
                raise InvalidEvent(f"not a user event: {type(event).__name__}")

    def create(self, event: UserCreated) -> None:
        self.sink.log('User created: "%s"', {"uid": self._uid(event.uid)}, {"uid"})

    def delete(self, event: UserDeleted) -> None:
        self.sink.log('User deleted: "%s"', {"uid": self._uid(event.uid)}, {"uid"})

    def assign(self, uid: str) -> None:
        """Log assignment of a user id, typically by a user backend."""
        self.sink.log('UserID assigned: "%s"', {"uid": self._uid(uid)}, {"uid"})

    def unassign(self, uid: str) -> None:
        """Log unassignment of a user id. The backend removes no data."""
        self.sink.log('UserID unassigned: "%s"', {"uid": self._uid(uid)}, {"uid"})

    def change(self, event: UserChanged) -> None:
        match event.feature:
            case "enabled":
                template = 'User enabled: "%s"' if event.value is True else 'User disabled: "%s"'
            case "eMailAddress":
                template = "Email address changed for user %s"
            case _:
                logger.debug("audit_skipped", reason="unaudited_feature", feature=event.feature)
                return
        self.sink.log(template, {"user": self._uid(event.uid)}, {"user"})

    def set_password(self, event: PasswordUpdated) -> None:
        # Credentials of external backends (LDAP, SSO) are not managed here.
        if event.backend_name != self.settings.password_audit_backend:
            logger.debug("audit_skipped", reason="external_backend", backend=event.backend_name)
            return
        self.sink.log(
            'Password of user "%s" has been changed',
            {"user": self._uid(event.uid)},
            {"user"},
        )

    @staticmethod
    def _uid(uid: str) -> str:
        if not isinstance(uid, str):
            raise InvalidEvent(f"uid must be a string, got {type(uid).__name__}")
        if not uid:
            raise InvalidEvent("uid is empty")
        return uid
