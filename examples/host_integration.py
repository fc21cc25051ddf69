#!/usr/bin/env python3
"""
Host integration walkthrough.

A minimal in-memory charting host shows how a real host drives the plugin:
register once, create an instance, call calc on data changes and draw on
redraws, update on settings edits, remove on reset.
"""

import itertools
import sys
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).parent.parent))

from bbands_app.data.synthetic import generate_ohlc
from bbands_app.errors import InvalidParameterError
from bbands_app.logging import configure_logging
from bbands_app.models.indicator import IndicatorParams
from bbands_app.models.style import DashStyle, LineStyle, StyleConfig
from bbands_app.plugin import (
    IndicatorDefinition,
    create_instance,
    register_bbands,
    remove_instance,
    update_instance,
)
from bbands_app.render.context import RecordingContext


class InMemoryHost:
    """Tiny stand-in for a charting host's indicator registry."""

    def __init__(self, bars: list[dict[str, Any]]):
        self.bars = bars
        self.definitions: dict[str, IndicatorDefinition] = {}
        self.instances: dict[str, dict[str, Any]] = {}
        self._ids = itertools.count(1)

    def get_indicator_class(self, name: str) -> Any:
        return self.definitions.get(name)

    def register_indicator(self, definition: IndicatorDefinition) -> None:
        self.definitions[definition.name] = definition

    def create_indicator(self, name, calc_params, styles, pane_id) -> str:
        definition = self.definitions[name]
        if not definition.should_check_param(calc_params):
            return ""
        indicator_id = f"{name}_{next(self._ids)}"
        self.instances[indicator_id] = {
            "name": name,
            "pane_id": pane_id,
            "calc_params": calc_params,
            "styles": styles,
            "result": definition.calc(self.bars, calc_params),
        }
        return indicator_id

    def remove_indicator(self, pane_id: str, indicator_id: str) -> None:
        self.instances.pop(indicator_id, None)

    def redraw(self, indicator_id: str) -> RecordingContext:
        instance = self.instances[indicator_id]
        definition = self.definitions[instance["name"]]
        ctx = RecordingContext()
        n = len(self.bars)
        definition.draw(ctx, instance["result"], instance["styles"],
                        lambda i: i * 4.0, lambda v: 800.0 - v * 2.0)
        print(f"  redraw {indicator_id}: {len(ctx.commands)} commands over {n} bars")
        return ctx


def main() -> None:
    configure_logging(level="INFO")

    bars = [bar.to_record() for bar in generate_ohlc(bars=200, seed=11)]
    host = InMemoryHost(bars)

    print("🔌 Registering plugin")
    register_bbands(host)
    register_bbands(host)  # second call is a no-op

    print("➕ Creating instance")
    handle = create_instance(host, IndicatorParams(), StyleConfig())
    host.redraw(handle.indicator_id)

    print("✏️  Updating instance (length 10, dashed bands, hidden basis)")
    style = StyleConfig(
        basis=LineStyle(visible=False, color="#60a5fa"),
        upper=LineStyle(color="#22c55e", dash=DashStyle.DASHED),
        lower=LineStyle(color="#ef4444", dash=DashStyle.DASHED),
    )
    handle = update_instance(host, handle, IndicatorParams(length=10, offset=2), style)
    host.redraw(handle.indicator_id)

    print("🚫 Rejected update keeps the old instance")
    try:
        update_instance(host, handle, IndicatorParams(length=0), style)
    except InvalidParameterError as exc:
        print(f"  rejected: {exc}")
    print(f"  live instances: {list(host.instances)}")

    print("🧹 Removing instance")
    remove_instance(host, handle)
    print(f"  live instances: {list(host.instances)}")


if __name__ == "__main__":
    main()
