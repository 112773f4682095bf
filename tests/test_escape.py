import pytest

from stencil import escape

RESERVED = "\"'<>&"


def test_escape_reserved_characters():
    assert escape("a & b") == "a &#38; b"
    assert escape("<p class=\"x\">'") == "&#60;p class=&#34;x&#34;&#62;&#39;"


def test_escape_keeps_plain_ascii():
    text = "plain ascii 123 !#$%()*+,-./:;=?@[]^_`{|}~\t\n\x7f"
    assert escape(text) == text


def test_escape_non_ascii_by_code_point():
    assert escape("é") == "&#233;"
    assert escape("café") == "caf&#233;"
    # outside the basic multilingual plane: one reference, not two
    assert escape("\U0001F600") == "&#128512;"


def test_escape_empty_string():
    assert escape("") == ""


def test_escape_twice_escapes_the_references_again():
    once = escape("&")
    assert once == "&#38;"
    assert escape(once) == "&#38;#38;"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "<script>alert('x')</script>",
        "Tom & \"Jerry\"",
        "日本語のテキスト",
        "mixed é < \U0001F600 > '",
        "&#38;",
        "".join(chr(c) for c in range(0, 300)),
    ],
)
def test_escaped_text_has_no_reserved_or_non_ascii_characters(text):
    escaped = escape(text)
    assert not any(c in escaped for c in RESERVED.replace("&", ""))
    assert all(ord(c) <= 127 for c in escaped)
    # every remaining "&" starts a numeric character reference
    for part in escaped.split("&")[1:]:
        assert part.startswith("#")
        number, sep, _ = part[1:].partition(";")
        assert sep == ";"
        assert number.isdigit()
