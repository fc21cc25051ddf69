"""
Indicator definition and one-time registration with a charting host.

The host owns instance bookkeeping, redraw scheduling and coordinates.
This module only describes the indicator and wires the compute and render
callbacks to BandsIndicator.
"""

from collections.abc import Callable, Sequence
from dataclasses import asdict, dataclass
from typing import Any, Optional, Protocol

from ..config.defaults import DefaultConfig, get_default_config
from ..engine import BandsIndicator, accept_params
from ..errors import RegistrationError
from ..logging import get_logger
from ..models.indicator import IndicatorParams
from ..models.style import StyleConfig
from ..render.context import DrawingContext2D
from ..render.paths import IndexToPixel, ValueToPixel

logger = get_logger(__name__)


class ChartHost(Protocol):
    """Subset of a charting host's indicator API used by the plugin."""

    def get_indicator_class(self, name: str) -> Any: ...

    def register_indicator(self, definition: "IndicatorDefinition") -> None: ...

    def create_indicator(self, name: str, calc_params: list[float],
                         styles: dict[str, Any], pane_id: str) -> str: ...

    def remove_indicator(self, pane_id: str, indicator_id: str) -> None: ...


@dataclass(frozen=True)
class Figure:
    """One value the host shows in its crosshair tooltip."""
    key: str
    title: str
    type: str = "line"


@dataclass(frozen=True)
class IndicatorDefinition:
    """Everything the host needs to know about the indicator."""
    name: str
    short_name: str
    calc_params: list[float]
    figures: list[Figure]
    styles: dict[str, Any]
    should_check_param: Callable[[Sequence[Any]], bool]
    calc: Callable[[Sequence[Any], Sequence[Any]], list[dict[str, float]]]
    draw: Callable[..., bool]


def build_definition(config: Optional[DefaultConfig] = None) -> IndicatorDefinition:
    """
    Build the host definition from configuration.

    Args:
        config: Defaults to use for params, style and render options

    Returns:
        IndicatorDefinition with calc and draw bound to a BandsIndicator
    """
    config = config or get_default_config()
    indicator = BandsIndicator(config)
    default_params = IndicatorParams(
        length=config.indicator.length,
        std_multiplier=config.indicator.std_multiplier,
        offset=config.indicator.offset,
    )
    default_style = StyleConfig.from_dict(asdict(config.style))

    def calc(bars: Sequence[Any], params: Sequence[Any]) -> list[dict[str, float]]:
        snapshot = IndicatorParams.from_list(params) if params is not None else default_params
        return indicator.compute_records(bars, snapshot)

    def draw(
        ctx: DrawingContext2D,
        rows: Sequence[Any],
        styles: Optional[dict[str, Any]],
        to_x: IndexToPixel,
        to_y: ValueToPixel,
    ) -> bool:
        style = StyleConfig.from_payload(styles) if styles is not None else default_style
        indicator.render(rows, to_x, to_y, style, ctx)
        return False  # host still draws its own candles

    return IndicatorDefinition(
        name=config.plugin.name,
        short_name=config.plugin.short_name,
        calc_params=default_params.to_list(),
        figures=[
            Figure(key="basis", title="Basis: "),
            Figure(key="upper", title="Upper: "),
            Figure(key="lower", title="Lower: "),
        ],
        styles=default_style.to_payload(),
        should_check_param=accept_params,
        calc=calc,
        draw=draw,
    )


def register_bbands(host: ChartHost, config: Optional[DefaultConfig] = None) -> bool:
    """
    Register the indicator with the host once.

    Returns:
        True if registered now, False if the host already knows the name

    Raises:
        RegistrationError: If the host lacks a registration API
    """
    config = config or get_default_config()
    name = config.plugin.name

    if not callable(getattr(host, "register_indicator", None)):
        raise RegistrationError(
            "Host does not expose register_indicator",
            indicator_name=name,
            operation="register",
        )

    lookup = getattr(host, "get_indicator_class", None)
    if callable(lookup) and lookup(name):
        logger.debug("Indicator already registered", indicator=name)
        return False

    host.register_indicator(build_definition(config))
    logger.info("Indicator registered", indicator=name, short_name=config.plugin.short_name)
    return True

