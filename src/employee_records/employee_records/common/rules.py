"""Declarative validation rules.

A rule table is plain data: one ``FieldRule`` per (dotted) field name. The same
table validates request payloads on the server and is served as JSON to the
form layer, so both sides check the same bounds and patterns.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import now_utc, parse_iso_date

STRING = "string"
EMAIL = "email"
NUMBER = "number"
INTEGER = "integer"
DATE = "date"
ENUM = "enum"

EMAIL_PATTERN = r"^[\w.+-]+@[\w-]+(\.[\w-]+)*\.[A-Za-z]{2,}$"

_MISSING = object()


@dataclass(frozen=True)
class FieldRule:
    name: str
    kind: str = STRING
    required: bool = True
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    pattern: Optional[str] = None
    choices: tuple[str, ...] = ()
    default: Any = None
    not_future: bool = False
    lowercase: bool = False
    strip: bool = True
    message: str = ""

    def as_dict(self) -> dict:
        out: dict[str, Any] = {"field": self.name, "type": self.kind, "required": self.required}
        for key, value in (
            ("minLength", self.min_length),
            ("maxLength", self.max_length),
            ("min", self.minimum),
            ("max", self.maximum),
            ("pattern", self.pattern),
            ("default", self.default),
        ):
            if value is not None:
                out[key] = value
        if self.choices:
            out["choices"] = list(self.choices)
        if self.not_future:
            out["notFuture"] = True
        if self.message:
            out["message"] = self.message
        return out


@dataclass(frozen=True)
class RuleTable:
    rules: tuple[FieldRule, ...] = field(default_factory=tuple)

    def __iter__(self):
        return iter(self.rules)

    def as_json(self) -> list[dict]:
        return [r.as_dict() for r in self.rules]


def _lookup(payload: Mapping[str, Any], dotted: str) -> Any:
    current: Any = payload
    for part in dotted.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return _MISSING
        current = current[part]
    return current


def _assign(out: dict, dotted: str, value: Any) -> None:
    parts = dotted.split(".")
    current = out
    for part in parts[:-1]:
        current = current.setdefault(part, {})
    current[parts[-1]] = value


def _is_blank(value: Any) -> bool:
    return value is _MISSING or value is None or (isinstance(value, str) and not value.strip())


def _check(rule: FieldRule, value: Any) -> Any:
    """Return the cleaned value or raise ValueError with the rule's message."""
    message = rule.message or f"{rule.name} is invalid"

    if rule.kind in (NUMBER, INTEGER):
        if isinstance(value, bool):
            raise ValueError(message)
        try:
            number = int(value) if rule.kind == INTEGER else float(value)
        except (TypeError, ValueError, OverflowError):
            raise ValueError(message)
        if not math.isfinite(number):
            raise ValueError(message)
        if rule.kind == INTEGER and isinstance(value, float) and not value.is_integer():
            raise ValueError(message)
        if rule.minimum is not None and number < rule.minimum:
            raise ValueError(message)
        if rule.maximum is not None and number > rule.maximum:
            raise ValueError(message)
        return number

    if rule.kind == DATE:
        if isinstance(value, date):
            parsed = value
        else:
            try:
                parsed = parse_iso_date(str(value))
            except ValueError:
                raise ValueError(message)
        if rule.not_future and parsed > now_utc().date():
            raise ValueError(message)
        return parsed

    if not isinstance(value, str):
        raise ValueError(message)
    text = value.strip() if rule.strip else value
    if rule.lowercase:
        text = text.lower()

    if rule.kind == ENUM and text not in rule.choices:
        raise ValueError(message)
    if rule.min_length is not None and len(text) < rule.min_length:
        raise ValueError(message)
    if rule.max_length is not None and len(text) > rule.max_length:
        raise ValueError(message)
    pattern = EMAIL_PATTERN if rule.kind == EMAIL and not rule.pattern else rule.pattern
    if pattern and not re.search(pattern, text):
        raise ValueError(message)
    return text


def validate(rules: Iterable[FieldRule], payload: Optional[Mapping[str, Any]]) -> dict:
    """Validate ``payload`` against ``rules``.

    Returns a new (possibly nested) dict holding only the fields named by the
    rules, trimmed and coerced. Unknown keys are dropped. Raises
    ``ValidationError`` listing every failing field.
    """
    payload = payload or {}
    cleaned: dict = {}
    errors: list[dict] = []

    for rule in rules:
        raw = _lookup(payload, rule.name)
        if _is_blank(raw):
            if rule.default is not None:
                _assign(cleaned, rule.name, rule.default)
            elif rule.required:
                errors.append({"field": rule.name, "message": rule.message or f"{rule.name} is required"})
            continue
        try:
            _assign(cleaned, rule.name, _check(rule, raw))
        except ValueError as e:
            errors.append({"field": rule.name, "message": str(e)})

    if errors:
        raise ValidationError("Validation failed", errors=errors)
    return cleaned
