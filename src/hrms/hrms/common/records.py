"""Mapping between record dataclasses and their camelCase wire/storage shape.

Records are frozen dataclasses with snake_case attributes. The stored and
served shape uses camelCase keys (``employee_id`` -> ``employeeId``); a field
can pin its key explicitly with ``field(metadata={"wire": "type"})``.
"""

from __future__ import annotations

from dataclasses import Field, fields
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from ..core.exceptions import ValidationError

R = TypeVar("R")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def wire_name(f: Field) -> str:
    return f.metadata.get("wire") or _camel(f.name)


def wire_fields(cls: type) -> Dict[str, str]:
    """Wire key -> attribute name for a record type."""
    return {wire_name(f): f.name for f in fields(cls)}


_TYPE_NAMES = {str: "a string", int: "an integer", float: "a number"}


def _coerce(hint: Any, value: Any, key: str) -> Any:
    """Check ``value`` against a field's type hint; enums are converted."""
    if get_origin(hint) is Union:
        args = [a for a in get_args(hint) if a is not type(None)]
        if value is None:
            return None
        hint = args[0] if len(args) == 1 else Any

    if isinstance(hint, type) and issubclass(hint, Enum):
        try:
            return hint(value)
        except ValueError:
            allowed = ", ".join(m.value for m in hint)
            raise ValidationError(f"{key} must be one of: {allowed}")

    if hint is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif hint in (int, str):
        ok = isinstance(value, hint) and not isinstance(value, bool)
    else:
        return value
    if not ok:
        raise ValidationError(f"{key} must be {_TYPE_NAMES[hint]}")
    return value


def to_wire(record: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for f in fields(record):
        value = getattr(record, f.name)
        out[wire_name(f)] = value.value if isinstance(value, Enum) else value
    return out


def from_wire(cls: Type[R], data: Mapping[str, Any]) -> R:
    hints = get_type_hints(cls)
    kwargs: Dict[str, Any] = {}
    for f in fields(cls):
        key = wire_name(f)
        if key in data:
            kwargs[f.name] = _coerce(hints[f.name], data[key], key)
    try:
        return cls(**kwargs)
    except TypeError:
        missing = [wire_name(f) for f in fields(cls) if f.name not in kwargs]
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")


def require_known_fields(cls: type, payload: Mapping[str, Any], *, allow: Iterable[str] = ()) -> None:
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    names = wire_fields(cls)
    allow = set(allow)
    unknown = [k for k in payload if k not in names and k not in allow]
    if unknown:
        raise ValidationError(f"Unknown field(s): {', '.join(sorted(unknown))}")


def changes_from_wire(
    cls: type,
    payload: Mapping[str, Any],
    *,
    ignore: Iterable[str] = ("id",),
    forbid: Iterable[str] = (),
) -> Dict[str, Any]:
    """Translate a partial wire payload into attribute changes.

    Keys in ``ignore`` are dropped silently (clients echo back whole records);
    keys in ``forbid`` and keys the record does not declare are rejected.
    """
    ignore = set(ignore)
    forbid = set(forbid)
    require_known_fields(cls, payload, allow=ignore)

    names = wire_fields(cls)
    hints = get_type_hints(cls)
    blocked = [k for k in payload if k in forbid]
    if blocked:
        raise ValidationError(f"Field(s) cannot be updated here: {', '.join(sorted(blocked))}")

    changes: Dict[str, Any] = {}
    for key, value in payload.items():
        if key in ignore:
            continue
        attr = names[key]
        changes[attr] = _coerce(hints[attr], value, key)
    return changes
