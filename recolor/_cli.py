"""Command-line entry point."""

from __future__ import annotations

import dataclasses
import logging
import pathlib
import sys
from typing import IO, Iterable, Optional, Sequence, Tuple

import tyro
from typing_extensions import Literal

from ._config import RecolorConfig, build_config, dump_style_file
from ._errors import ConfigurationError
from ._render import OverlayRenderer
from ._styles import ColorMode

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class RecolorArgs:
    """Recolor any command output.

    Every line read from stdin is matched against REGEX, and the text of each
    capture group is styled: by name when a style is assigned to the group,
    otherwise with a default color picked by the group's position in the pattern.

    Example: `tail -f app.log | recolor '(?P<level>ERROR|WARN)' level=bold,red`
    """

    regex: tyro.conf.Positional[str]
    """A regular expression to match each line against. Each capture group is
    styled with the style assigned to its name, or a default color based on the
    capture group index if the group has no name or no assigned style."""

    styles: tyro.conf.Positional[Tuple[str, ...]] = ()
    """`name=style` pairs, where `name` is a capture group name and `style` a
    comma-separated list of styles. Styles are applied in order, so `bold,red` is
    bold and red, while `red,green` is just green. Valid styles: the colors black,
    red, green, yellow, blue, magenta, cyan and white, their `bright_` variants,
    `#RRGGBB` literals, and bold, dim, italic, underline, blink, hidden and
    strikethrough."""

    style_file: Optional[pathlib.Path] = None
    """YAML file with a `styles` mapping (capture group name to styles) and an
    optional `palette` list. Styles given on the command line take precedence."""

    palette: Optional[Tuple[str, ...]] = None
    """Styles used for capture groups without an assigned style, picked by group
    index modulo the palette length."""

    color: Literal["auto", "always", "never"] = "always"
    """When to emit styles. `auto` respects NO_COLOR, FORCE_COLOR and whether
    stdout is a terminal."""

    dump_styles: bool = False
    """Print the resolved styles and palette as a YAML style file and exit."""

    verbose: bool = False
    """Log debug information."""


def run(
    lines: Iterable[str],
    output: IO[str],
    config: RecolorConfig,
    color: ColorMode = "always",
) -> int:
    """Style every line of `lines` and write it to `output`.

    Lines are processed one at a time as they are read. Each output line is
    terminated by a single newline, regardless of the input's line ending.

    Returns:
        Number of lines written.
    """
    extractor = config.make_extractor()
    renderer = OverlayRenderer(color)

    count = 0
    for line in lines:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        output.write(renderer.render(line, extractor.extract(line)))
        output.write("\n")
        count += 1
    return count


def main(args: Optional[Sequence[str]] = None) -> int:
    parsed = tyro.cli(RecolorArgs, args=args)
    logging.basicConfig(level=logging.DEBUG if parsed.verbose else logging.WARNING)
    log.debug(parsed)

    try:
        config = build_config(
            parsed.regex,
            parsed.styles,
            style_file=parsed.style_file,
            palette=parsed.palette,
        )
    except ConfigurationError as e:
        print(f"recolor: error: {e}", file=sys.stderr)
        return 2

    if parsed.dump_styles:
        sys.stdout.write(dump_style_file(config))
        return 0

    count = run(sys.stdin, sys.stdout, config, parsed.color)
    log.debug("processed %d lines", count)
    return 0
