"""
Instance lifecycle against a charting host.

The plugin keeps no instance table: create returns a handle the caller
stores, and update/remove take it back. Updates remove the old instance
and create a fresh one with the new params and style.
"""

from dataclasses import dataclass
from typing import Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..engine import check_params
from ..errors import RegistrationError
from ..logging import get_logger
from ..models.indicator import IndicatorParams
from ..models.style import StyleConfig
from .registration import ChartHost

logger = get_logger(__name__)


@dataclass(frozen=True)
class IndicatorHandle:
    """Identifies one indicator instance on the host."""
    indicator_id: str
    pane_id: str


def create_instance(
    host: ChartHost,
    params: IndicatorParams,
    style: StyleConfig,
    pane_id: Optional[str] = None,
    config: Optional[DefaultConfig] = None,
) -> IndicatorHandle:
    """
    Create an indicator instance on the host.

    Args:
        host: Charting host with the indicator already registered
        params: Parameter snapshot, checked before the host is called
        style: Style to apply
        pane_id: Target pane, defaults to the configured candle pane

    Returns:
        Handle for later update/remove

    Raises:
        InvalidParameterError: If params are rejected
        RegistrationError: If the host does not return an indicator id
    """
    config = config or get_default_config()
    name = config.plugin.name
    pane_id = pane_id or config.plugin.pane_id

    check_params(params, name)

    indicator_id = host.create_indicator(name, params.to_list(), style.to_payload(), pane_id)
    if not isinstance(indicator_id, str) or not indicator_id:
        raise RegistrationError(
            f"Host returned no indicator id for {name}",
            indicator_name=name,
            operation="create",
            context={"returned": repr(indicator_id)},
        )

    logger.info("Indicator instance created", indicator=name, indicator_id=indicator_id, pane_id=pane_id)
    return IndicatorHandle(indicator_id=indicator_id, pane_id=pane_id)


def remove_instance(host: ChartHost, handle: IndicatorHandle) -> None:
    """Remove an instance previously returned by create_instance."""
    host.remove_indicator(handle.pane_id, handle.indicator_id)
    logger.info("Indicator instance removed", indicator_id=handle.indicator_id, pane_id=handle.pane_id)


def update_instance(
    host: ChartHost,
    handle: IndicatorHandle,
    params: IndicatorParams,
    style: StyleConfig,
    config: Optional[DefaultConfig] = None,
) -> IndicatorHandle:
    """
    Replace an instance with one using new params and style.

    Params are checked first so a rejected update leaves the old instance
    in place.

    Returns:
        Handle of the new instance
    """
    config = config or get_default_config()
    check_params(params, config.plugin.name)
    remove_instance(host, handle)
    return create_instance(host, params, style, pane_id=handle.pane_id, config=config)
