from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_fields(data: Any, fields: tuple[str, ...], *, error: type[ValidationError] = ValidationError) -> Mapping[str, Any]:
    """Check that ``data`` is a mapping carrying a non-empty value for every field."""
    if not isinstance(data, Mapping):
        raise error(f"expected an object, got {type(data).__name__}")
    missing = [f for f in fields if data.get(f) in (None, "")]
    if missing:
        raise error("missing field(s): " + ", ".join(missing))
    return data
