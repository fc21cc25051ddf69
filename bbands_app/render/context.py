"""
2D drawing context contract and an in-memory recording implementation.

The contract mirrors the subset of an HTML canvas context the overlay
uses. Hosts adapt their own surface to it; RecordingContext captures every
call so a render pass can be inspected without a real canvas.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DrawingContext2D(Protocol):
    """Canvas-like drawing surface supplied by the host for one render pass."""

    stroke_style: str
    fill_style: str
    line_width: float
    global_alpha: float

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def set_line_dash(self, segments: list[float]) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def stroke(self) -> None: ...

    def fill(self, fill_rule: str = "nonzero") -> None: ...


@dataclass(frozen=True)
class DrawCommand:
    """One recorded context call with the state in effect when it was made."""
    op: str
    args: tuple[Any, ...] = ()
    state: dict[str, Any] = field(default_factory=dict)


class RecordingContext:
    """DrawingContext2D that records calls instead of drawing."""

    def __init__(self) -> None:
        self.stroke_style = "#000000"
        self.fill_style = "#000000"
        self.line_width = 1.0
        self.global_alpha = 1.0
        self.line_dash: list[float] = []
        self.commands: list[DrawCommand] = []
        self._stack: list[dict[str, Any]] = []

    def _state(self) -> dict[str, Any]:
        return {
            "stroke_style": self.stroke_style,
            "fill_style": self.fill_style,
            "line_width": self.line_width,
            "global_alpha": self.global_alpha,
            "line_dash": list(self.line_dash),
        }

    def _record(self, op: str, *args: Any) -> None:
        self.commands.append(DrawCommand(op=op, args=args, state=self._state()))

    def save(self) -> None:
        self._stack.append(self._state())
        self._record("save")

    def restore(self) -> None:
        if self._stack:
            state = self._stack.pop()
            self.stroke_style = state["stroke_style"]
            self.fill_style = state["fill_style"]
            self.line_width = state["line_width"]
            self.global_alpha = state["global_alpha"]
            self.line_dash = state["line_dash"]
        self._record("restore")

    def set_line_dash(self, segments: list[float]) -> None:
        self.line_dash = list(segments)
        self._record("set_line_dash", list(segments))

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def close_path(self) -> None:
        self._record("close_path")

    def stroke(self) -> None:
        self._record("stroke")

    def fill(self, fill_rule: str = "nonzero") -> None:
        self._record("fill", fill_rule)

    def ops(self, name: str) -> list[DrawCommand]:
        """All recorded commands with the given op name."""
        return [c for c in self.commands if c.op == name]

    @property
    def save_depth(self) -> int:
        return len(self._stack)
