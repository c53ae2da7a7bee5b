"""Fields shared by every event of one operation."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Identifies what a log event is about.

    ``service`` names the SDK service (``chat``, ``batch``...), ``job_id`` a
    batch or fine-tuning job. ``extra`` is flattened into the event; unset
    values never appear.
    """

    service: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    job_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                out[f.name] = value
        for key, value in (self.extra or {}).items():
            if value is not None:
                out[key] = value
        return out


__all__ = ["LogContext"]
