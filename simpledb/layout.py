"""Physical layout of a record: field offsets within a slot and slot size."""

from __future__ import annotations

from .schema import FieldType, Schema

INT32_BYTES = 4


def max_length(length: int) -> int:
    """Bytes needed to store a string of ``length`` characters with its prefix."""
    return INT32_BYTES + length * 4


class Layout:
    """Offsets of each field in a slot; the slot begins with a 4-byte flag."""

    def __init__(self, schema: Schema, offsets: dict[str, int], slot_size: int):
        self.schema = schema
        self._offsets = dict(offsets)
        self.slot_size = slot_size

    @classmethod
    def from_schema(cls, schema: Schema) -> Layout:
        offsets: dict[str, int] = {}
        pos = INT32_BYTES
        for field in schema.fields():
            offsets[field] = pos
            pos += _length_in_bytes(schema, field)
        return cls(schema, offsets, pos)

    def offset(self, field: str) -> int:
        """Offset of the field within a slot; 0 for an unknown field."""
        return self._offsets.get(field, 0)


def _length_in_bytes(schema: Schema, field: str) -> int:
    field_type = schema.type_of(field)
    if field_type == FieldType.INTEGER:
        return INT32_BYTES
    if field_type == FieldType.VARCHAR:
        return max_length(schema.length(field))
    raise ValueError(f"record: unknown schema type {field_type}")