"""Overlay rendering: insert style changes at span boundaries of a line.

Spans come from capture groups, so they are either nested or disjoint. We sweep
the line once, keeping a stack of active styles. Every span pushes its style at
its start and pops at its end; text is always rendered with the style on top of
the stack, which makes inner groups win over the groups that contain them while
the outer style resumes once the inner group closes.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ._spans import Span
from ._styles import ColorMode, Style

# A `None` event pops the stack; a Style event pushes it. Every push is recorded
# before its matching pop, so a pop never finds the stack empty.
_Event = Optional[Style]


class OverlayRenderer:
    """Renders lines given their spans.

    The event table and the style stack are reused across lines and cleared at
    the start of every `render()` call. Not thread-safe."""

    def __init__(self, color: ColorMode = "always") -> None:
        self.color: ColorMode = color
        self._events: Dict[int, List[_Event]] = {}
        self._stack: List[Style] = []

    def _current_style(self) -> Style:
        return self._stack[-1] if len(self._stack) > 0 else _PLAIN

    def render(self, line: str, spans: Iterable[Span]) -> str:
        """Render `line` (without its terminator) with `spans` applied."""
        events = self._events
        stack = self._stack
        events.clear()
        stack.clear()

        # Events at a position keep the order the spans were discovered in.
        for span in spans:
            events.setdefault(span.start, []).append(span.style)
            events.setdefault(span.end, []).append(None)

        if len(events) == 0:
            return line

        out: List[str] = []
        buf: List[str] = []
        for position, char in enumerate(line):
            if position in events:
                out.append(self._current_style().apply("".join(buf), self.color))
                buf.clear()
                for event in events[position]:
                    if event is not None:
                        stack.append(event)
                    else:
                        stack.pop()
            buf.append(char)

        # Events at len(line) would only pop; the tail is flushed under the
        # style that is still active.
        out.append(self._current_style().apply("".join(buf), self.color))
        return "".join(out)


_PLAIN = Style()


def render_line(line: str, spans: Iterable[Span], color: ColorMode = "always") -> str:
    """Render a single line. See `OverlayRenderer` for reusing buffers across
    lines."""
    return OverlayRenderer(color).render(line, spans)
