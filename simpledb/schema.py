"""Record schemas: the names, types and lengths of a table's fields."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class FieldType(enum.IntEnum):
    INTEGER = 1
    VARCHAR = 2


class FieldNotFoundError(LookupError):
    """Raised when a schema has no field of the requested name."""

    def __init__(self, field: str):
        super().__init__(f"record: schema: field not found: {field}")
        self.field = field


@dataclass(frozen=True)
class _FieldInfo:
    field_type: FieldType
    length: int


class Schema:
    """An ordered collection of fields with their types and lengths."""

    def __init__(self) -> None:
        self._fields: list[str] = []
        self._info: dict[str, _FieldInfo] = {}

    def add_field(self, field: str, field_type: FieldType, length: int) -> None:
        self._fields.append(field)
        self._info[field] = _FieldInfo(FieldType(field_type), length)

    def add_int_field(self, field: str) -> None:
        self.add_field(field, FieldType.INTEGER, 0)

    def add_string_field(self, field: str, length: int) -> None:
        self.add_field(field, FieldType.VARCHAR, length)

    def add(self, field: str, other: Schema) -> None:
        """Copy one field's definition from another schema."""
        self.add_field(field, other.type_of(field), other.length(field))

    def add_all(self, other: Schema) -> None:
        """Copy every field of another schema, in its order."""
        for field in other.fields():
            self.add(field, other)

    def fields(self) -> list[str]:
        return list(self._fields)

    def has_field(self, field: str) -> bool:
        return field in self._fields

    def type_of(self, field: str) -> FieldType:
        try:
            return self._info[field].field_type
        except KeyError:
            raise FieldNotFoundError(field) from None

    def length(self, field: str) -> int:
        try:
            return self._info[field].length
        except KeyError:
            raise FieldNotFoundError(field) from None