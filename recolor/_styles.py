"""Style vocabulary: parsing comma-joined style tokens and rendering styled text.

Rendering is delegated to `termcolor`. Token names follow the usual terminal
conventions (`red`, `bright_red`, `bold`, ...) and are translated to termcolor's
names at render time.
"""

from __future__ import annotations

import dataclasses
import string
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

import termcolor
from typing_extensions import Literal

from ._errors import ConfigurationError

ColorName = Literal[
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
]
Attribute = Literal[
    "bold",
    "dim",
    "italic",
    "underline",
    "blink",
    "hidden",
    "strikethrough",
]
Rgb = Tuple[int, int, int]
ColorMode = Literal["auto", "always", "never"]

# termcolor uses `light_grey` for the standard white (37) and `white` for the
# bright variant (97).
_termcolor_from_color: Dict[ColorName, str] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "cyan": "cyan",
    "white": "light_grey",
    "bright_black": "dark_grey",
    "bright_red": "light_red",
    "bright_green": "light_green",
    "bright_yellow": "light_yellow",
    "bright_blue": "light_blue",
    "bright_magenta": "light_magenta",
    "bright_cyan": "light_cyan",
    "bright_white": "white",
}
_termcolor_from_attribute: Dict[Attribute, str] = {
    "bold": "bold",
    "dim": "dark",
    "italic": "italic",
    "underline": "underline",
    "blink": "blink",
    "hidden": "concealed",
    "strikethrough": "strike",
}
_attribute_from_token: Dict[str, Attribute] = {
    "bold": "bold",
    "bolded": "bold",
    "dim": "dim",
    "dimmed": "dim",
    "italic": "italic",
    "italics": "italic",
    "underline": "underline",
    "underlined": "underline",
    "blink": "blink",
    "blinking": "blink",
    "hidden": "hidden",
    "strikethrough": "strikethrough",
    "struckthrough": "strikethrough",
    "strike": "strikethrough",
}


@dataclasses.dataclass(frozen=True)
class Style:
    """A foreground color plus a set of attribute toggles.

    Styles are immutable. Use `with_color()` and `with_attribute()` to derive new
    ones; the later color always replaces the earlier one, while attributes
    accumulate."""

    color: Union[ColorName, Rgb, None] = None
    attributes: Tuple[Attribute, ...] = ()

    def with_color(self, color: Union[ColorName, Rgb]) -> Style:
        return dataclasses.replace(self, color=color)

    def with_attribute(self, attribute: Attribute) -> Style:
        if attribute in self.attributes:
            return self
        return dataclasses.replace(self, attributes=self.attributes + (attribute,))

    def tokens(self) -> List[str]:
        """Style tokens that `parse_style()` turns back into this style."""
        out: List[str] = []
        if isinstance(self.color, tuple):
            out.append("#" + "".join(f"{c:02x}" for c in self.color))
        elif self.color is not None:
            out.append(self.color)
        out.extend(self.attributes)
        return out

    def is_plain(self) -> bool:
        return self.color is None and len(self.attributes) == 0

    def apply(self, text: str, color: ColorMode = "always") -> str:
        """Wrap `text` in the escape sequences for this style.

        Empty text and plain styles are returned unchanged, so no stray reset
        sequences are emitted between adjacent runs."""
        if len(text) == 0 or self.is_plain() or color == "never":
            return text

        if self.color is None:
            termcolor_color = None
        elif isinstance(self.color, tuple):
            termcolor_color = self.color
        else:
            termcolor_color = _termcolor_from_color[self.color]

        return termcolor.colored(
            text,
            termcolor_color,  # type: ignore
            attrs=[_termcolor_from_attribute[a] for a in self.attributes] or None,
            force_color=True if color == "always" else None,
        )


def _parse_hex(token: str, spec: str) -> Rgb:
    if len(token) != 7 or not all(c in string.hexdigits for c in token[1:]):
        raise ConfigurationError(f'invalid hex color "{token}" in "{spec}"')
    r, g, b = (int(token[i : i + 2], 16) for i in (1, 3, 5))
    return (r, g, b)


def parse_style(spec: Union[str, Sequence[str]]) -> Style:
    """Parse a comma-separated list of style tokens into a single Style.

    Tokens are applied in order, so `bold,red` is bold and red, while `red,green`
    is just green.

    Args:
        spec: Either a comma-joined string (`"bold,#ff0000"`) or a sequence of
            individual tokens.

    Raises:
        ConfigurationError: On any unrecognized token or malformed hex literal.
    """
    if isinstance(spec, str):
        joined = spec
        tokens: Sequence[str] = spec.split(",")
    else:
        joined = ",".join(spec)
        tokens = spec

    style = Style()
    for token in tokens:
        token = token.strip()
        if token.startswith("#"):
            style = style.with_color(_parse_hex(token, joined))
        elif token in _termcolor_from_color:
            style = style.with_color(token)  # type: ignore
        elif token in _attribute_from_token:
            style = style.with_attribute(_attribute_from_token[token])
        else:
            raise ConfigurationError(f'invalid style "{token}" in "{joined}"')
    return style


def parse_assignment(assignment: str) -> Tuple[str, Style]:
    """Parse a single `name=tokens` assignment."""
    name, sep, value = assignment.partition("=")
    if sep == "" or len(name) == 0:
        raise ConfigurationError(
            f'invalid style assignment "{assignment}", format is name=style[,style...]'
        )
    return name, parse_style(value)


def parse_assignments(assignments: Sequence[str]) -> Dict[str, Style]:
    """Parse `name=tokens` assignments into a name to Style table. Later
    assignments to the same name win."""
    return dict(map(parse_assignment, assignments))


DEFAULT_PALETTE: Tuple[Style, ...] = tuple(
    Style(color=c)
    for c in ("red", "green", "yellow", "blue", "magenta", "cyan", "white")
)


def style_for_group(
    index: int,
    name: Optional[str],
    styles: Mapping[str, Style],
    palette: Sequence[Style],
) -> Style:
    """Resolve the style of a capture group: by name if one is assigned, otherwise
    from the palette by (1-based) group index."""
    if name is not None and name in styles:
        return styles[name]
    return palette[index % len(palette)]
