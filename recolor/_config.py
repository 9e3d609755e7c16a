"""Configuration: the compiled regex, the name to Style table and the default
palette. Built once, before any input is read, and never mutated afterwards."""

from __future__ import annotations

import dataclasses
import datetime
import logging
import pathlib
import re
import types
import warnings
from typing import IO, Any, Dict, Mapping, Optional, Sequence, Tuple, Union

import yaml

from ._errors import ConfigurationError, RecolorWarning
from ._spans import SpanExtractor, group_names
from ._styles import DEFAULT_PALETTE, Style, parse_assignments, parse_style

log = logging.getLogger(__name__)

_STYLE_FILE_KEYS = ("styles", "palette")


@dataclasses.dataclass(frozen=True)
class RecolorConfig:
    pattern: re.Pattern
    styles: Mapping[str, Style] = dataclasses.field(
        default_factory=lambda: types.MappingProxyType({})
    )
    palette: Tuple[Style, ...] = DEFAULT_PALETTE

    def make_extractor(self) -> SpanExtractor:
        return SpanExtractor(self.pattern, self.styles, self.palette)


def compile_pattern(regex: str) -> re.Pattern:
    try:
        return re.compile(regex)
    except re.error as e:
        raise ConfigurationError(f'invalid regex "{regex}": {e}') from None


def _parse_token_list(value: Any, where: str) -> Style:
    if isinstance(value, str):
        return parse_style(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return parse_style(value)
    raise ConfigurationError(
        f"{where}: expected a comma-separated string or a list of style tokens, got {value!r}"
    )


def load_style_file(
    stream: Union[str, IO[str]], source: str = "<style file>"
) -> Tuple[Dict[str, Style], Optional[Tuple[Style, ...]]]:
    """Parse a YAML style file.

    The document is a mapping with two optional keys: `styles`, mapping capture
    group names to style tokens, and `palette`, a list of style tokens that
    replaces the default palette. Style tokens are given either as a
    comma-separated string or as a list.

    Returns:
        A `(styles, palette)` tuple. `palette` is None when the file does not set
        one.
    """
    try:
        contents = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{source}: invalid YAML: {e}") from None

    if contents is None:
        return {}, None
    if not isinstance(contents, dict):
        raise ConfigurationError(f"{source}: expected a mapping at the top level")

    unknown = set(contents.keys()) - set(_STYLE_FILE_KEYS)
    if len(unknown) > 0:
        raise ConfigurationError(
            f"{source}: unknown keys {sorted(map(str, unknown))}, expected any of {list(_STYLE_FILE_KEYS)}"
        )

    raw_styles = contents.get("styles") or {}
    if not isinstance(raw_styles, dict):
        raise ConfigurationError(f"{source}: `styles` must be a mapping")
    styles = {
        str(name): _parse_token_list(value, f"{source}: styles.{name}")
        for name, value in raw_styles.items()
    }

    palette: Optional[Tuple[Style, ...]] = None
    if "palette" in contents:
        raw_palette = contents["palette"]
        if not isinstance(raw_palette, list) or len(raw_palette) == 0:
            raise ConfigurationError(
                f"{source}: `palette` must be a non-empty list of styles"
            )
        palette = tuple(
            _parse_token_list(value, f"{source}: palette[{i}]")
            for i, value in enumerate(raw_palette)
        )

    return styles, palette


def _read_style_file(
    path: pathlib.Path,
) -> Tuple[Dict[str, Style], Optional[Tuple[Style, ...]]]:
    try:
        with open(path, "r") as f:
            return load_style_file(f, source=str(path))
    except OSError as e:
        raise ConfigurationError(f"could not read style file {path}: {e}") from None


def build_config(
    regex: str,
    assignments: Sequence[str] = (),
    style_file: Optional[pathlib.Path] = None,
    palette: Optional[Sequence[str]] = None,
) -> RecolorConfig:
    """Validate and assemble the full configuration.

    Args:
        regex: Pattern matched against every line.
        assignments: `name=style[,style...]` entries. These take precedence over
            entries for the same name in `style_file`.
        style_file: Optional YAML file, see `load_style_file()`.
        palette: Optional list of style token strings replacing the default
            palette. Takes precedence over a palette in `style_file`.

    Raises:
        ConfigurationError: If anything is invalid. Nothing is read from stdin or
            written to stdout before this returns.
    """
    pattern = compile_pattern(regex)

    styles: Dict[str, Style] = {}
    resolved_palette: Tuple[Style, ...] = DEFAULT_PALETTE
    if style_file is not None:
        file_styles, file_palette = _read_style_file(style_file)
        styles.update(file_styles)
        if file_palette is not None:
            resolved_palette = file_palette
    styles.update(parse_assignments(assignments))

    if palette is not None:
        if len(palette) == 0:
            raise ConfigurationError("palette must contain at least one style")
        resolved_palette = tuple(map(parse_style, palette))

    if pattern.groups == 0:
        warnings.warn(
            f'regex "{regex}" has no capture groups, lines will be passed through unstyled',
            category=RecolorWarning,
        )
    known_names = set(group_names(pattern).values())
    for name in styles:
        if name not in known_names:
            warnings.warn(
                f'style "{name}" does not match any named capture group in "{regex}"',
                category=RecolorWarning,
            )

    config = RecolorConfig(
        pattern=pattern,
        styles=types.MappingProxyType(styles),
        palette=resolved_palette,
    )
    log.debug("config: %s", config)
    return config


def _timestamp() -> str:
    """Get a current timestamp as a string. Example format: `2021-11-05-15:46:32`."""
    return datetime.datetime.now().strftime("%Y-%m-%d-%H:%M:%S")


def dump_style_file(config: RecolorConfig) -> str:
    """Serialize the styles and palette of a config; the output can be read back
    with `load_style_file()`."""
    contents = {
        "styles": {name: s.tokens() for name, s in config.styles.items()},
        "palette": [s.tokens() for s in config.palette],
    }
    return f"# Generated by recolor, at {_timestamp()}.\n" + yaml.safe_dump(
        contents, sort_keys=False
    )
