"""Schema validation — collect every field error in one pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError


@dataclass(frozen=True)
class ValidationIssue:
    """One failing field, as reported by the validator."""

    field_name: str
    raw_value: Any
    kind: str
    message: str


@dataclass
class ValidationOutcome:
    """Normalized value on success, original value plus issues on failure."""

    value: dict[str, Any]
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def summary(self) -> str:
        return "; ".join(f"{issue.field_name}: {issue.message}" for issue in self.issues)


def validate_record(record: Mapping[str, Any], schema: type[BaseModel]) -> ValidationOutcome:
    """
    Validate `record` against `schema` without short-circuiting.

    Numeric strings are coerced before bound checks.  Errors for declared
    fields come first in schema order, then unknown keys in input order.
    """
    raw = dict(record)
    try:
        model = schema.model_validate(raw)
    except PydanticValidationError as exc:
        return ValidationOutcome(value=raw, issues=[_to_issue(err) for err in exc.errors()])

    return ValidationOutcome(value=model.model_dump(by_alias=True, exclude_none=True))


def _to_issue(error: Mapping[str, Any]) -> ValidationIssue:
    loc = error.get("loc") or ()
    kind = error.get("type", "")
    return ValidationIssue(
        field_name=str(loc[0]) if loc else "",
        # A missing field's input is the whole record
        raw_value=None if kind == "missing" else error.get("input"),
        kind=kind,
        message=error.get("msg", ""),
    )


def same_values(left: Any, right: Any) -> bool:
    """
    Deep equality that also requires matching types.

    Plain `==` treats 1950.0 and 1950 (or True and 1) as equal, which would
    let a float-typed stored value pass for its normalized int.
    """
    if type(left) is not type(right):
        return False
    if isinstance(left, Mapping):
        return left.keys() == right.keys() and all(
            same_values(left[key], right[key]) for key in left
        )
    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(
            same_values(a, b) for a, b in zip(left, right)
        )
    return left == right
