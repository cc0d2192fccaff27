from typing import Any, Iterable, Mapping, Protocol

from .config import Settings, settings as default_settings
from .logging import logger
from .policies import normalize_value, redact
from .records import AuditRecord


class AuditSink(Protocol):
    def log(self, template: str, fields: Mapping[str, Any], sensitive: Iterable[str]) -> None: ...


def emit_audit_event(
    message: str,
    payload: Mapping[str, Any],
    redactions: Iterable[str] | None = None,
    placeholder: str = "[REDACTED]",
    **context: Any,
) -> None:
    redactions = redactions or []
    scrubbed = redact({k: normalize_value(v) for k, v in payload.items()}, redactions, placeholder)
    logger.info(message, **context, fields=scrubbed)


class SiemSink:
    """Writes audit records as structured log events."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings

    def log(self, template: str, fields: Mapping[str, Any], sensitive: Iterable[str]) -> None:
        record = AuditRecord.of(template, fields, sensitive)
        redactions = record.sensitive if self.settings.redact_sensitive else frozenset()
        placeholder = self.settings.redaction_placeholder
        message = record.render(placeholder if redactions else None)
        emit_audit_event(
            message,
            record.fields,
            redactions,
            placeholder=placeholder,
            app=self.settings.app_name,
        )
