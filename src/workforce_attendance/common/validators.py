from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

# Strict 24h clock, hour may be a single digit ("7:30").
_HHMM_RE = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_hhmm(value: Optional[str], field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not _HHMM_RE.match(value):
        raise ValidationError(f"Invalid time format for {field_name}. Please use HH:mm (e.g., 19:00).")
    return value
