"""Span extraction: turn the capture groups of every regex match on a line into
styled character intervals."""

from __future__ import annotations

import re
from typing import Dict, List, Mapping, NamedTuple, Optional, Sequence

from ._styles import DEFAULT_PALETTE, Style, style_for_group


class Span(NamedTuple):
    """A half-open `[start, end)` character interval of one line, tagged with the
    capture group it came from and that group's resolved style."""

    group: int
    name: Optional[str]
    start: int
    end: int
    style: Style


def group_names(pattern: re.Pattern) -> Dict[int, str]:
    """Map 1-based capture group indices to group names, for named groups only."""
    return {index: name for name, index in pattern.groupindex.items()}


def extract_spans(
    line: str,
    pattern: re.Pattern,
    styles: Mapping[str, Style],
    palette: Sequence[Style] = DEFAULT_PALETTE,
) -> List[Span]:
    """Collect a span for every participating capture group of every match.

    Spans are returned in discovery order: by match, then by ascending capture
    index. Group 0 is never included. Groups that did not participate in a match
    produce nothing.
    """
    return SpanExtractor(pattern, styles, palette).extract(line)


class SpanExtractor:
    """Span extraction bound to a fixed pattern, style table and palette.

    Group names and per-group styles only depend on the pattern, so they are
    resolved once here instead of once per line."""

    def __init__(
        self,
        pattern: re.Pattern,
        styles: Mapping[str, Style],
        palette: Sequence[Style] = DEFAULT_PALETTE,
    ) -> None:
        self.pattern = pattern
        self._names = group_names(pattern)
        self._group_styles = tuple(
            style_for_group(i, self._names.get(i), styles, palette)
            for i in range(pattern.groups + 1)
        )

    def extract(self, line: str) -> List[Span]:
        out: List[Span] = []
        for match in self.pattern.finditer(line):
            for i in range(1, self.pattern.groups + 1):
                start, end = match.span(i)
                if start == -1:
                    continue
                out.append(
                    Span(i, self._names.get(i), start, end, self._group_styles[i])
                )
        return out
