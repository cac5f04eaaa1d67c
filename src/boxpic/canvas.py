from typing import Protocol, TextIO


class Canvas(Protocol):
    """Append-only sink the renderer writes glyphs, frames and colour codes to."""

    def append(self, text: str | None) -> None: ...

    def append_line(self) -> None: ...


class StringCanvas:
    """Collects the output in memory. Use ``result()`` to get the drawing."""

    def __init__(self):
        self._parts: list[str] = []

    def append(self, text: str | None) -> None:
        if text:
            self._parts.append(text)

    def append_line(self) -> None:
        self._parts.append("\n")

    def result(self) -> str:
        return "".join(self._parts)


class StreamCanvas:
    """Writes the output straight to a text stream such as ``sys.stdout``."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def append(self, text: str | None) -> None:
        if text:
            self.stream.write(text)

    def append_line(self) -> None:
        self.stream.write("\n")
