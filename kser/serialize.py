"""JSON text from objects carrying named fields."""

from __future__ import annotations

import numbers
from typing import Any, Optional

from .fields import named_fields

__all__ = ["serialize_json"]


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _is_record(value: Any) -> bool:
    if isinstance(value, type) or callable(value):
        return False
    return hasattr(value, "__dict__") or any(
        "__slots__" in cls.__dict__ for cls in type(value).__mro__
    )


def _serialize(value: Any, precision: int) -> Optional[str]:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return f"{float(value):.{precision}f}"
    if isinstance(value, str):
        return _quote(value)
    if _is_record(value):
        parts = []
        for field in named_fields(value):
            text = _serialize(field.value, precision)
            if text is not None:
                parts.append(f"{_quote(field.field_name())}: {text}")
        return "{" + ", ".join(parts) + "}"
    return None


def serialize_json(value: Any, precision: int = 2) -> str:
    """Serialize a value or an object's named fields as JSON.

    Floats are written with ``precision`` decimals. Fields whose values
    cannot be serialized are left out. Raises TypeError for an
    unsupported top-level value.
    """
    text = _serialize(value, precision)
    if text is None:
        raise TypeError(f"cannot serialize {type(value).__name__} as JSON")
    return text