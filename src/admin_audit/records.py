import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .errors import InvalidRecord
from .policies import normalize_value, redact

_CONVERSION = re.compile(r"%(.?)", re.DOTALL)


@dataclass(frozen=True)
class AuditRecord:
    """One audit log line: a printf-style template and the values filling it.

    Placeholders are filled from ``fields`` in insertion order. Names listed in
    ``sensitive`` are masked by sinks that apply a redaction policy.
    """

    template: str
    fields: Mapping[str, Any]
    sensitive: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "sensitive", frozenset(self.sensitive))

        conversions = _CONVERSION.findall(self.template)
        unsupported = [c for c in conversions if c not in ("s", "%")]
        if unsupported:
            raise InvalidRecord(
                f"template {self.template!r} may only use %s placeholders, found: "
                + ", ".join("%" + c for c in unsupported)
            )
        placeholders = conversions.count("s")
        if placeholders != len(self.fields):
            raise InvalidRecord(
                f"template {self.template!r} has {placeholders} placeholder(s) "
                f"but {len(self.fields)} field(s) were given: {sorted(self.fields)}"
            )
        missing = self.sensitive - set(self.fields)
        if missing:
            raise InvalidRecord(f"sensitive fields not present in record: {sorted(missing)}")

    @classmethod
    def of(cls, template: str, fields: Mapping[str, Any], sensitive: Iterable[str] = ()) -> "AuditRecord":
        return cls(template=template, fields=fields, sensitive=frozenset(sensitive))

    def render(self, placeholder: str | None = None) -> str:
        """Format the message; sensitive values are masked when a placeholder is given."""
        values = self.fields
        if placeholder is not None:
            values = redact(values, self.sensitive, placeholder)
        try:
            return self.template % tuple(normalize_value(v) for v in values.values())
        except (TypeError, ValueError) as e:
            raise InvalidRecord(f"cannot render template {self.template!r}: {e}") from e
