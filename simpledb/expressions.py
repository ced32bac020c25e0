"""Expressions in query predicates: constants and field references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Union

from .schema import Schema

Constant = Union[int, str]


class Scan(Protocol):
    """The part of a scan that expressions need."""

    def get_val(self, field: str) -> Constant: ...

    def has_field(self, field: str) -> bool: ...


@dataclass(frozen=True)
class ConstantExpression:
    """An expression that always evaluates to a fixed value."""

    value: Constant

    def evaluate(self, scan: Any) -> Constant:
        return self.value

    def is_field_name(self) -> bool:
        return False

    def as_constant(self) -> Constant:
        return self.value

    def as_field_name(self) -> str:
        raise TypeError(f"constant expression {self.value!r} names no field")

    def mentioned_fields(self) -> tuple[str, ...]:
        """A constant mentions no fields."""
        return ()

    def can_apply(self, schema: Schema) -> bool:
        """True if every field this expression mentions is in ``schema``."""
        return all(schema.has_field(name) for name in self.mentioned_fields())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FieldExpression:
    """An expression that evaluates to a field of the current record."""

    field: str

    def evaluate(self, scan: Any) -> Constant:
        return scan.get_val(self.field)

    def is_field_name(self) -> bool:
        return True

    def as_constant(self) -> Constant:
        raise TypeError(f"field expression {self.field!r} has no constant value")

    def as_field_name(self) -> str:
        return self.field

    def mentioned_fields(self) -> tuple[str, ...]:
        return (self.field,)

    def can_apply(self, schema: Schema) -> bool:
        return all(schema.has_field(name) for name in self.mentioned_fields())

    def __str__(self) -> str:
        return self.field


Expression = Union[ConstantExpression, FieldExpression]