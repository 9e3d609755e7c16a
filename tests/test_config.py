import io
import pathlib
import textwrap

import pytest

from recolor import (
    DEFAULT_PALETTE,
    ConfigurationError,
    RecolorWarning,
    Style,
    build_config,
    dump_style_file,
    load_style_file,
)


def test_build_config() -> None:
    config = build_config("(?P<foo>foo)(?P<bar>bar)", ["foo=green", "bar=red,bold"])
    assert config.pattern.groups == 2
    assert dict(config.styles) == {
        "foo": Style(color="green"),
        "bar": Style(color="red", attributes=("bold",)),
    }
    assert config.palette == DEFAULT_PALETTE


def test_config_is_read_only() -> None:
    config = build_config("(?P<foo>foo)", ["foo=green"])
    with pytest.raises(TypeError):
        config.styles["foo"] = Style()  # type: ignore


def test_invalid_regex() -> None:
    with pytest.raises(ConfigurationError, match=r'invalid regex "\(foo"'):
        build_config("(foo")


def test_invalid_style_token() -> None:
    with pytest.raises(ConfigurationError, match="purple"):
        build_config("(?P<foo>foo)", ["foo=purple"])


def test_missing_equals() -> None:
    with pytest.raises(ConfigurationError, match="name=style"):
        build_config("(?P<foo>foo)", ["foo"])


def test_warns_on_unused_style() -> None:
    with pytest.warns(RecolorWarning, match='"bar"'):
        build_config("(?P<foo>foo)", ["bar=red"])


def test_warns_without_capture_groups() -> None:
    with pytest.warns(RecolorWarning, match="no capture groups"):
        build_config("foo")


def test_palette_override() -> None:
    config = build_config("(a)", palette=["blue", "bold,#102030"])
    assert config.palette == (
        Style(color="blue"),
        Style(color=(16, 32, 48), attributes=("bold",)),
    )
    with pytest.raises(ConfigurationError, match="at least one"):
        build_config("(a)", palette=[])


def test_load_style_file() -> None:
    styles, palette = load_style_file(
        io.StringIO(
            textwrap.dedent(
                """
            styles:
              level: bold,red
              time: [dim, "#808080"]
            palette: [red, [green, underline]]
            """
            )
        )
    )
    assert styles == {
        "level": Style(color="red", attributes=("bold",)),
        "time": Style(color=(128, 128, 128), attributes=("dim",)),
    }
    assert palette == (
        Style(color="red"),
        Style(color="green", attributes=("underline",)),
    )


def test_load_empty_style_file() -> None:
    assert load_style_file("") == ({}, None)
    assert load_style_file("styles:\n") == ({}, None)


@pytest.mark.parametrize(
    "contents,match",
    [
        ("- red\n", "mapping at the top level"),
        ("colors: {a: red}\n", "unknown keys"),
        ("styles: [red]\n", "must be a mapping"),
        ("styles: {a: 3}\n", "styles.a"),
        ("styles: {a: purple}\n", "purple"),
        ("palette: []\n", "non-empty list"),
        ("palette: red\n", "non-empty list"),
        ("styles: {a: [red\n", "invalid YAML"),
    ],
)
def test_malformed_style_file(contents: str, match: str) -> None:
    with pytest.raises(ConfigurationError, match=match):
        load_style_file(contents)


def test_style_file_precedence(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "styles.yaml"
    path.write_text("styles:\n  a: red\n  b: blue\npalette: [cyan]\n")

    config = build_config("(?P<a>a)(?P<b>b)(c)", ["a=green"], style_file=path)
    assert dict(config.styles) == {"a": Style(color="green"), "b": Style(color="blue")}
    assert config.palette == (Style(color="cyan"),)

    config = build_config("(?P<a>a)", style_file=path, palette=["white"])
    assert config.palette == (Style(color="white"),)


def test_missing_style_file(tmp_path: pathlib.Path) -> None:
    with pytest.raises(ConfigurationError, match="could not read style file"):
        build_config("(a)", style_file=tmp_path / "missing.yaml")


def test_dump_round_trip() -> None:
    config = build_config(
        "(?P<a>a)(?P<b>b)", ["a=#ff8800,bold", "b=bright_blue"], palette=["red", "dim"]
    )
    dumped = dump_style_file(config)
    assert dumped.startswith("# Generated by recolor")
    styles, palette = load_style_file(dumped)
    assert styles == dict(config.styles)
    assert palette == config.palette
