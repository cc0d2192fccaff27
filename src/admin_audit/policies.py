from datetime import datetime
from typing import Any, Iterable, Mapping

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_PLACEHOLDER = "[REDACTED]"


def normalize_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.strftime(DATETIME_FORMAT)
    return value


def redact(
    fields: Mapping[str, Any],
    sensitive: Iterable[str],
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> dict[str, Any]:
    sensitive = set(sensitive)
    return {k: (placeholder if k in sensitive else v) for k, v in fields.items()}
