from commentwrap.utils.io import line_ending, read_source, split_lines, write_source


def test_split_lines_only_on_line_terminators():
    assert split_lines("a\r\nb\rc\n\x0cd e") == ["a\r\n", "b\r", "c\n", "\x0cd e"]
    assert split_lines("a\n") == ["a\n"]
    assert split_lines("\n") == ["\n"]
    assert split_lines("") == []


def test_line_ending():
    assert line_ending("x\r\n") == "\r\n"
    assert line_ending("x\r") == "\r"
    assert line_ending("x\n") == "\n"
    assert line_ending("x") == ""


def test_source_round_trip_keeps_newlines(tmp_path):
    path = tmp_path / "nested" / "main.c"
    text = "// a\r\nint x;\r\n"
    written = write_source(path, text)
    assert written.line_count == 2
    assert written.bytes_written == len(text)
    assert read_source(path) == text
