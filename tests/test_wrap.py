import pytest

from commentwrap.convert.paragraphs import Paragraph, ParagraphBreak
from commentwrap.convert.wrap import wrap_one_line, wrap_paragraph, wrap_segments, wrap_text


def test_wrap_breaks_at_last_space_within_width():
    text = "one two three four five six seven eight nine ten"
    assert wrap_text(text, 20) == [
        "one two three four",
        "five six seven eight",
        "nine ten",
    ]


def test_wrapped_lines_respect_width_and_keep_words():
    text = (
        "This is a very long comment that should be wrapped into multiple lines "
        "without splitting any of the words it contains along the way."
    )
    lines = wrap_text(text, 30)
    assert len(lines) > 1
    assert all(len(line) <= 30 for line in lines)
    assert " ".join(lines).split() == text.split()


def test_text_that_fits_is_one_line():
    assert wrap_text("ab cd", 5) == ["ab cd"]
    assert wrap_one_line("short", 80) == ("short", None)


def test_space_right_after_width_is_a_break():
    assert wrap_text("aaaa bbbb", 4) == ["aaaa", "bbbb"]


def test_unbreakable_run_is_cut_at_width():
    assert wrap_text("abcdefghij", 4) == ["abcd", "efgh", "ij"]
    assert wrap_text("a verylongtoken b", 5) == ["a", "veryl", "ongto", "ken b"]


def test_width_counts_characters_not_bytes():
    assert wrap_text("ééé ééé", 3) == ["ééé", "ééé"]
    assert wrap_text("日本語 テキスト", 4) == ["日本語", "テキスト"]


def test_wrapping_wrapped_paragraph_is_stable():
    text = "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor"
    once = wrap_text(text, 24)
    assert wrap_paragraph(once, 24) == once


def test_paragraph_contents_are_joined_with_single_spaces():
    assert wrap_paragraph(["first part", "second part"], 80) == ["first part second part"]


def test_empty_text_yields_no_lines():
    assert wrap_text("", 10) == []
    assert wrap_paragraph([], 10) == []


def test_non_positive_width_is_rejected():
    with pytest.raises(ValueError):
        wrap_text("abc", 0)


def test_segments_keep_paragraph_breaks():
    segments = [Paragraph(["alpha beta", "gamma"]), ParagraphBreak(), Paragraph(["delta"])]
    assert wrap_segments(segments, 80) == ["alpha beta gamma", "", "delta"]
    # no word crosses a break
    assert wrap_segments(segments, 10) == ["alpha beta", "gamma", "", "delta"]


@pytest.mark.parametrize(
    "contents,width,expected",
    [
        (["aaaa ", "bbbb"], 4, ["aaaa", "bbbb"]),
        (["aaaa  bbbb"], 4, ["aaaa", "bbbb"]),
        (["aaaa  bbbb"], 5, ["aaaa", "bbbb"]),
        (["one  two  three"], 8, ["one  two", "three"]),
        (["alpha ", "beta  ", "gamma"], 80, ["alpha beta gamma"]),
    ],
)
def test_extra_spaces_never_split_words(contents, width, expected):
    lines = wrap_paragraph(contents, width)
    assert lines == expected
    assert all(len(line) <= width for line in lines)
    assert all(line == line.strip(" ") for line in lines)
    assert " ".join(lines).split() == " ".join(contents).split()
