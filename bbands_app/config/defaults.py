"""Default configuration parameters for the Bollinger Bands overlay."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IndicatorDefaults:
    """Band calculation parameters, host order is [length, std_multiplier, offset]."""
    length: int = 20                    # Rolling window size in bars
    std_multiplier: float = 2.0         # Band half-width in standard deviations
    offset: int = 0                     # Bars to shift the result (positive = forward)


@dataclass(frozen=True)
class LineDefaults:
    """Stroke parameters for a single band line."""
    visible: bool = True
    color: str = "#60a5fa"
    width: int = 2
    dash: str = "solid"                 # "solid" or "dashed"


@dataclass(frozen=True)
class BandFillDefaults:
    """Background fill between upper and lower band."""
    visible: bool = True
    opacity: float = 0.12


@dataclass(frozen=True)
class StyleDefaults:
    """Complete default style payload."""
    basis: LineDefaults = LineDefaults(color="#60a5fa")
    upper: LineDefaults = LineDefaults(color="#22c55e")
    lower: LineDefaults = LineDefaults(color="#ef4444")
    band_fill: BandFillDefaults = BandFillDefaults()


@dataclass(frozen=True)
class RenderDefaults:
    """Rendering behaviour not tied to a particular line."""
    gap_policy: str = "bridge"          # "bridge" joins across empty rows, "break" splits
    dash_pattern: tuple[int, int] = (6, 6)


@dataclass(frozen=True)
class PluginDefaults:
    """Host registration identity."""
    name: str = "BBANDS_V0"
    short_name: str = "BB"
    pane_id: str = "candle_pane"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    indicator: IndicatorDefaults
    style: StyleDefaults
    render: RenderDefaults
    plugin: PluginDefaults


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        indicator=IndicatorDefaults(),
        style=StyleDefaults(),
        render=RenderDefaults(),
        plugin=PluginDefaults(),
    )
