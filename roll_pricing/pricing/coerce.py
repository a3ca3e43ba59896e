"""Coerce loosely typed form values into engine inputs. Nothing here raises."""
import math
from typing import Any, Mapping


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def to_number(value: Any, default: float | None = 0.0) -> float | None:
    if is_blank(value) or isinstance(value, bool):
        return default

    if isinstance(value, str):
        value = value.strip()

    try:
        number = float(value)
    except (TypeError, ValueError):
        return default

    if not math.isfinite(number):
        return default
    return number


def parse_override(value: Any) -> float | None:
    """None for "not set", otherwise the number, zero included."""
    return to_number(value, default=None)


def parse_width(value: Any) -> float | None:
    width = to_number(value, default=None)
    if width is None or width <= 0:
        return None
    return width


def normalize_tax_rate(value: Any, default: float | None = 0.0) -> float | None:
    # Tax master records carry the percentage under "value" or "rate"
    if isinstance(value, Mapping):
        raw = value.get("value")
        if raw is None:
            raw = value.get("rate")
        value = raw

    return to_number(value, default=default)


def normalize_id(value: Any) -> str | None:
    if isinstance(value, Mapping):
        value = value.get("_id") or value.get("id") or value.get("value")
    if is_blank(value):
        return None
    return str(value)
