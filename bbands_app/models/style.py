"""
Presentation models for the band overlay.

Visibility is an explicit flag on each line. The host payload still uses
the "transparent" colour to mean hidden, so conversion to and from that
payload lives here.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..config.defaults import BandFillDefaults, LineDefaults, StyleDefaults
from ..data.parsers import safe_float

TRANSPARENT = "transparent"

_STYLE_DEFAULTS = StyleDefaults()


def _payload_number(value: Any, default: float) -> float:
    """Numeric payload field; null, missing or garbage falls back to default."""
    number = safe_float(value, default=default)
    return number if math.isfinite(number) else default


class DashStyle(Enum):
    """Line dash style."""
    SOLID = "solid"
    DASHED = "dashed"


class GapPolicy(Enum):
    """How a polyline treats a run of empty rows between populated ones."""
    BRIDGE = "bridge"   # Join the surrounding points directly
    BREAK = "break"     # Start a new sub-path after the gap


@dataclass(frozen=True)
class LineStyle:
    """Stroke settings for one line."""
    visible: bool = True
    color: str = "#60a5fa"
    width: int = 2
    dash: DashStyle = DashStyle.SOLID

    @property
    def is_drawn(self) -> bool:
        """False when hidden or coloured with the transparent sentinel."""
        return self.visible and bool(self.color) and self.color != TRANSPARENT

    @classmethod
    def from_defaults(cls, defaults: LineDefaults) -> "LineStyle":
        return cls(
            visible=defaults.visible,
            color=defaults.color,
            width=defaults.width,
            dash=DashStyle(defaults.dash),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any], base: Optional["LineStyle"] = None) -> "LineStyle":
        """Build from a config section, unspecified keys taken from base."""
        base = base or cls()
        return cls(
            visible=data.get("visible", base.visible),
            color=data.get("color", base.color),
            width=int(data.get("width", base.width)),
            dash=DashStyle(data.get("dash", base.dash.value)),
        )

    def to_payload(self) -> dict[str, Any]:
        """Host payload, hidden lines become transparent."""
        return {
            "color": self.color if self.visible else TRANSPARENT,
            "size": self.width,
            "style": self.dash.value,
        }

    @classmethod
    def from_payload(cls, payload: Optional[dict[str, Any]]) -> "LineStyle":
        if not payload:
            return cls(visible=False, color=TRANSPARENT)
        color = payload.get("color") or TRANSPARENT
        return cls(
            visible=color != TRANSPARENT,
            color=color,
            width=int(_payload_number(payload.get("size"), 2)),
            dash=DashStyle.DASHED if payload.get("style") == "dashed" else DashStyle.SOLID,
        )


@dataclass(frozen=True)
class BandFillStyle:
    """Fill settings for the area between the bands."""
    visible: bool = True
    opacity: float = 0.12

    @classmethod
    def from_defaults(cls, defaults: BandFillDefaults) -> "BandFillStyle":
        return cls(visible=defaults.visible, opacity=defaults.opacity)

    def to_payload(self) -> dict[str, Any]:
        return {"show": self.visible, "opacity": self.opacity}

    @classmethod
    def from_payload(cls, payload: Optional[dict[str, Any]]) -> "BandFillStyle":
        if not payload:
            return cls(visible=False)
        return cls(
            visible=bool(payload.get("show", False)),
            opacity=_payload_number(payload.get("opacity"), 0.1),
        )


@dataclass(frozen=True)
class StyleConfig:
    """Complete style for the overlay. Has no effect on computed values."""
    basis: LineStyle = field(default_factory=lambda: LineStyle.from_defaults(_STYLE_DEFAULTS.basis))
    upper: LineStyle = field(default_factory=lambda: LineStyle.from_defaults(_STYLE_DEFAULTS.upper))
    lower: LineStyle = field(default_factory=lambda: LineStyle.from_defaults(_STYLE_DEFAULTS.lower))
    band_fill: BandFillStyle = field(
        default_factory=lambda: BandFillStyle.from_defaults(_STYLE_DEFAULTS.band_fill)
    )

    @property
    def can_fill(self) -> bool:
        """Fill requires the fill flag plus drawn upper and lower lines."""
        return self.band_fill.visible and self.upper.is_drawn and self.lower.is_drawn

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "StyleConfig":
        """Build from a merged config ``style`` section."""
        data = data or {}
        base = cls()
        fill = data.get("band_fill", {})
        return cls(
            basis=LineStyle.from_dict(data.get("basis", {}), base.basis),
            upper=LineStyle.from_dict(data.get("upper", {}), base.upper),
            lower=LineStyle.from_dict(data.get("lower", {}), base.lower),
            band_fill=BandFillStyle(
                visible=fill.get("visible", base.band_fill.visible),
                opacity=float(fill.get("opacity", base.band_fill.opacity)),
            ),
        )

    def to_payload(self) -> dict[str, Any]:
        """Host style payload with colour-sentinel visibility."""
        return {
            "basis": self.basis.to_payload(),
            "upper": self.upper.to_payload(),
            "lower": self.lower.to_payload(),
            "bandFill": self.band_fill.to_payload(),
        }

    @classmethod
    def from_payload(cls, payload: Optional[dict[str, Any]]) -> "StyleConfig":
        payload = payload or {}
        return cls(
            basis=LineStyle.from_payload(payload.get("basis")),
            upper=LineStyle.from_payload(payload.get("upper")),
            lower=LineStyle.from_payload(payload.get("lower")),
            band_fill=BandFillStyle.from_payload(payload.get("bandFill")),
        )
