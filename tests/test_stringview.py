import pytest

from nobuild.stringview import StringView


@pytest.mark.parametrize(
    "text, suffix",
    [
        ("./example.exe", "./example.exe"),
        ("./example.exe", ".exe"),
        ("./example.exe", "e"),
        ("./example.exe", ""),
        ("", ""),
    ],
)
def test_ends_with_true(text, suffix):
    assert StringView(text).ends_with(suffix) is True


@pytest.mark.parametrize(
    "text, suffix",
    [
        ("./example.exe", ".png"),
        ("./example.exe", "/path/to/example.exe"),
        ("", ".obj"),
    ],
)
def test_ends_with_false(text, suffix):
    assert StringView(text).ends_with(suffix) is False


def test_ends_with_accepts_view():
    assert StringView("main.c").ends_with(StringView(".c")) is True


def test_starts_with():
    sv = StringView("hello world")
    assert sv.starts_with("hello") is True
    assert sv.starts_with(StringView("")) is True
    assert sv.starts_with("world") is False
    assert StringView("he").starts_with("hello") is False


def test_chop_by_delim_consumes_delimiter():
    sv = StringView("a,b,,c")
    assert sv.chop_by_delim(",") == "a"
    assert sv == "b,,c"
    assert sv.chop_by_delim(",") == "b"
    assert sv.chop_by_delim(",") == ""
    assert sv == "c"


def test_chop_by_delim_missing_delimiter_empties_view():
    sv = StringView("abc")
    assert sv.chop_by_delim(",") == "abc"
    assert sv == ""
    assert len(sv) == 0


def test_chop_by_delim_lines():
    sv = StringView("line1\nline2\nline3")
    lines = []
    while sv:
        lines.append(str(sv.chop_by_delim("\n")))
    assert lines == ["line1", "line2", "line3"]


def test_chop_by_delim_rejects_multichar():
    with pytest.raises(ValueError):
        StringView("abc").chop_by_delim("ab")


def test_chop_left():
    sv = StringView("abcdef")
    assert sv.chop_left(2) == "ab"
    assert sv == "cdef"


def test_chop_left_clamps_to_length():
    sv = StringView("abc")
    assert sv.chop_left(10) == "abc"
    assert sv == ""


def test_chop_left_negative():
    with pytest.raises(ValueError):
        StringView("abc").chop_left(-1)


def test_trim_variants():
    sv = StringView(" \t\n hello \r\v\f")
    assert sv.trim_left() == "hello \r\v\f"
    assert sv.trim_right() == " \t\n hello"
    assert sv.trim() == "hello"
    assert sv == " \t\n hello \r\v\f"


def test_trim_all_whitespace():
    assert StringView("   \n").trim() == ""


def test_trim_keeps_non_c_whitespace():
    assert StringView("\u00a0x\u00a0").trim() == "\u00a0x\u00a0"


def test_str_and_equality():
    sv = StringView("Hello")
    assert str(sv) == "Hello"
    assert sv == StringView("Hello")
    assert (sv == StringView("World")) is False
    assert repr(sv) == "StringView('Hello')"