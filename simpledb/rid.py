"""Record identifiers."""

from __future__ import annotations

from typing import NamedTuple


class RID(NamedTuple):
    """Identifies a record by its block number and slot within the block."""

    block_number: int
    slot: int

    def __str__(self) -> str:
        return f"[{self.block_number}, {self.slot}]"