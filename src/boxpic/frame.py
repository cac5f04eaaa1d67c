from dataclasses import dataclass
from typing import Protocol

from boxpic.canvas import Canvas


class Frame(Protocol):
    """An embellishment drawn around the box art."""

    def render_top(self, canvas: Canvas, width: int) -> None: ...

    def render_left(self, canvas: Canvas) -> None: ...

    def render_right(self, canvas: Canvas) -> None: ...

    def render_bottom(self, canvas: Canvas, width: int) -> None: ...


@dataclass(frozen=True)
class BoxFrame:
    """Border built from one string per part; ``None`` parts are left out.

    ``line_prefix`` and ``line_suffix`` wrap every emitted line, which is
    handy for embedding the output in another text format (a comment block,
    a markdown quote, ...). ``width`` passed to the top and bottom renderers
    counts content glyphs, not pixels.
    """

    top_left: str | None
    top: str | None
    top_right: str | None
    left: str | None
    right: str | None
    bottom_left: str | None
    bottom: str | None
    bottom_right: str | None
    line_prefix: str | None = None
    line_suffix: str | None = None

    def render_top(self, canvas: Canvas, width: int) -> None:
        self._render_edge(canvas, self.top_left, self.top, self.top_right, width)

    def render_left(self, canvas: Canvas) -> None:
        canvas.append(self.line_prefix)
        canvas.append(self.left)

    def render_right(self, canvas: Canvas) -> None:
        canvas.append(self.right)
        canvas.append(self.line_suffix)

    def render_bottom(self, canvas: Canvas, width: int) -> None:
        self._render_edge(canvas, self.bottom_left, self.bottom, self.bottom_right, width)

    def _render_edge(self, canvas: Canvas, start: str | None, middle: str | None, end: str | None, width: int):
        canvas.append(self.line_prefix)
        canvas.append(start)
        for _ in range(width):
            canvas.append(middle)
        canvas.append(end)
        canvas.append(self.line_suffix)
        canvas.append_line()


DEFAULT_FRAME = BoxFrame("╔", "═", "╗", "║", "║", "╚", "═", "╝")
ASCII_FRAME = BoxFrame("+", "-", "+", "|", "|", "+", "-", "+")

FRAMES = {
    "double": DEFAULT_FRAME,
    "ascii": ASCII_FRAME,
}
