"""Parameter and result models for the band calculation"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..config.defaults import IndicatorDefaults

_DEFAULTS = IndicatorDefaults()


@dataclass(frozen=True)
class IndicatorParams:
    """Snapshot of calculation parameters, never mutated by the engine"""
    length: int = _DEFAULTS.length
    std_multiplier: float = _DEFAULTS.std_multiplier
    offset: int = _DEFAULTS.offset

    @classmethod
    def from_list(cls, values: Optional[Sequence[Any]]) -> "IndicatorParams":
        """
        Build params from the host's positional array [length, std_multiplier, offset].

        Missing or None entries fall back to the defaults. Values are coerced
        with int()/float() so the host may pass numeric strings.
        """
        values = list(values or [])
        values += [None] * (3 - len(values))
        length, mult, offset = values[:3]
        return cls(
            length=int(length) if length is not None else _DEFAULTS.length,
            std_multiplier=float(mult) if mult is not None else _DEFAULTS.std_multiplier,
            offset=int(offset) if offset is not None else _DEFAULTS.offset,
        )

    def to_list(self) -> list[float]:
        """Host positional array."""
        return [self.length, self.std_multiplier, self.offset]


@dataclass(frozen=True)
class ComputedRow:
    """
    One output record, index-aligned with the input bar series.

    A row with all three values set and finite is populated. Anything else
    (insufficient window history, shift padding, NaN-contaminated window)
    is empty and is skipped by the renderer.
    """
    basis: Optional[float] = None
    upper: Optional[float] = None
    lower: Optional[float] = None

    @property
    def is_populated(self) -> bool:
        values = (self.basis, self.upper, self.lower)
        return all(v is not None and math.isfinite(v) for v in values)

    def to_record(self) -> dict[str, float]:
        """Host record: {} for empty rows, the three figures otherwise."""
        if not self.is_populated:
            return {}
        return {"basis": self.basis, "upper": self.upper, "lower": self.lower}

    @classmethod
    def from_record(cls, record: Any) -> "ComputedRow":
        """Inverse of to_record, tolerant of partial or None records."""
        if isinstance(record, ComputedRow):
            return record
        if not record:
            return EMPTY_ROW
        row = cls(
            basis=_as_float(record.get("basis")),
            upper=_as_float(record.get("upper")),
            lower=_as_float(record.get("lower")),
        )
        return row if row.is_populated else EMPTY_ROW


EMPTY_ROW = ComputedRow()


def _as_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
