"""Value coercion helpers shared by the prep configuration loader."""

from __future__ import annotations

from .models import PrepConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required_str(key: str, value: object | None, default: str) -> str:
    """Return a non-blank string, falling back to ``default`` when unset."""
    if value is None:
        return default
    text = _optional_str(value)
    if not text:
        msg = f"'{key}' must not be blank."
        raise PrepConfigError(msg)
    return text


def _positive_int(key: str, value: object | None, default: int) -> int:
    """Return ``value`` as a positive integer, or ``default`` when unset."""
    if value is None:
        return default
    if isinstance(value, bool):
        msg = f"'{key}' must be a positive integer, got {value!r}."
        raise PrepConfigError(msg)
    try:
        number = int(str(value).strip())
    except ValueError as exc:
        msg = f"'{key}' must be a positive integer, got {value!r}."
        raise PrepConfigError(msg) from exc
    if number < 1:
        msg = f"'{key}' must be a positive integer, got {number}."
        raise PrepConfigError(msg)
    return number


def _as_bool(key: str, value: object | None, default: bool) -> bool:
    """Return ``value`` as a bool, accepting YAML booleans and common words."""
    match value:
        case None:
            return default
        case bool():
            return value
        case str() as text if text.strip().lower() in {"true", "yes", "on", "1"}:
            return True
        case str() as text if text.strip().lower() in {"false", "no", "off", "0"}:
            return False
        case _:
            msg = f"'{key}' must be a boolean, got {value!r}."
            raise PrepConfigError(msg)


__all__ = ["_as_bool", "_optional_str", "_positive_int", "_required_str"]
