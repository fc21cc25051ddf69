"""Pytest configuration and shared fixtures."""

import math
from typing import Any, Callable, Dict, List
from unittest.mock import Mock

import pytest

from bbands_app.data.models import Bar
from bbands_app.models.indicator import EMPTY_ROW, ComputedRow
from bbands_app.render.context import RecordingContext

BASE_TS = 1_672_531_200_000  # 2023-01-01T00:00:00Z in ms
DAY_MS = 86_400_000


def make_bars(closes: List[float]) -> List[Bar]:
    """Bars with the given closes and a flat body around them."""
    bars = []
    for i, close in enumerate(closes):
        price = close if math.isfinite(close) else 100.0
        bars.append(Bar(
            timestamp=BASE_TS + i * DAY_MS,
            open=price,
            high=price + 1.0,
            low=max(price - 1.0, 0.0),
            close=close,
            volume=1000.0,
        ))
    return bars


def populated(basis: float, half_width: float = 1.0) -> ComputedRow:
    return ComputedRow(basis=basis, upper=basis + half_width, lower=basis - half_width)


@pytest.fixture
def bar_factory() -> Callable[[List[float]], List[Bar]]:
    """Factory building bars from a list of closes."""
    return make_bars


@pytest.fixture
def row_factory() -> Callable[..., ComputedRow]:
    """Factory building populated rows around a basis value."""
    return populated


@pytest.fixture
def scenario_closes() -> List[float]:
    """Closes used by the worked examples: [10, 11, 12, 13, 14]."""
    return [10.0, 11.0, 12.0, 13.0, 14.0]


@pytest.fixture
def sample_bar_record() -> Dict[str, Any]:
    """Sample host bar record."""
    return {
        "timestamp": BASE_TS,
        "open": 100.0,
        "high": 105.0,
        "low": 99.0,
        "close": 103.0,
        "volume": 1000.0,
    }


@pytest.fixture
def gapped_rows() -> List[ComputedRow]:
    """[E, P(10), P(11), E, E, P(14), E]"""
    return [
        EMPTY_ROW,
        populated(10.0),
        populated(11.0),
        EMPTY_ROW,
        EMPTY_ROW,
        populated(14.0),
        EMPTY_ROW,
    ]


@pytest.fixture
def ctx() -> RecordingContext:
    """Fresh recording drawing context."""
    return RecordingContext()


@pytest.fixture
def to_x() -> Callable[[int], float]:
    """Bar index to pixel x: 10px per bar."""
    return lambda i: i * 10.0


@pytest.fixture
def to_y() -> Callable[[float], float]:
    """Value to pixel y: inverted, 2px per unit from a 200px baseline."""
    return lambda v: 200.0 - v * 2.0


@pytest.fixture
def mock_host() -> Mock:
    """Charting host double with nothing registered."""
    host = Mock()
    host.get_indicator_class.return_value = None
    host.create_indicator.return_value = "BBANDS_V0_1"
    return host

