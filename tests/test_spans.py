import re

from recolor import DEFAULT_PALETTE, Span, SpanExtractor, Style, extract_spans

D = DEFAULT_PALETTE


def test_single_group() -> None:
    assert extract_spans("hello foo", re.compile("(foo)"), {}) == [
        Span(1, None, 6, 9, D[1])
    ]


def test_group_zero_ignored() -> None:
    assert extract_spans("hello foo", re.compile("foo"), {}) == []
    assert extract_spans("hello foo", re.compile("(?:foo)"), {}) == []


def test_no_match() -> None:
    assert extract_spans("hello world", re.compile("(5)"), {}) == []


def test_multiple_matches_share_default_style() -> None:
    spans = extract_spans("12345 12345 12345", re.compile("(5)"), {})
    assert [(s.start, s.end) for s in spans] == [(4, 5), (10, 11), (16, 17)]
    assert {s.style for s in spans} == {D[1]}


def test_named_groups() -> None:
    styles = {"foo": Style(color="green"), "bar": Style(color="red")}
    spans = extract_spans(
        "hello foobar", re.compile("(?P<foo>foo)(?P<bar>bar)"), styles
    )
    assert spans == [
        Span(1, "foo", 6, 9, Style(color="green")),
        Span(2, "bar", 9, 12, Style(color="red")),
    ]


def test_named_group_without_style_uses_palette() -> None:
    spans = extract_spans("ab", re.compile("(a)(?P<b>b)"), {"other": Style()})
    assert [s.style for s in spans] == [D[1], D[2]]


def test_nested_groups_in_discovery_order() -> None:
    spans = extract_spans("12345 12345 1235", re.compile("12(3(5))"), {})
    assert spans == [Span(1, None, 14, 16, D[1]), Span(2, None, 15, 16, D[2])]


def test_non_participating_group_keeps_palette_index() -> None:
    pattern = re.compile("(a)|(b)")
    spans = extract_spans("ab", pattern, {})
    assert spans == [Span(1, None, 0, 1, D[1]), Span(2, None, 1, 2, D[2])]


def test_zero_width_group() -> None:
    assert extract_spans("ab", re.compile("a()b"), {}) == [Span(1, None, 1, 1, D[1])]


def test_character_offsets() -> None:
    # Offsets count characters, not encoded bytes.
    spans = extract_spans("héllo wörld", re.compile("(w.r)"), {})
    assert spans == [Span(1, None, 6, 9, D[1])]


def test_palette_wraps() -> None:
    palette = (Style(color="red"), Style(color="blue"))
    spans = extract_spans("abc", re.compile("(a)(b)(c)"), {}, palette)
    assert [s.style for s in spans] == [palette[1], palette[0], palette[1]]


def test_extractor_is_reusable() -> None:
    extractor = SpanExtractor(re.compile(r"(\d+)"), {})
    first = extractor.extract("a 1 b 22")
    assert extractor.extract("a 1 b 22") == first
    assert extractor.extract("none") == []
