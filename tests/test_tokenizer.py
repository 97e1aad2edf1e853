import pytest

from littlesearch.tokenizer import get_keyword, read_text_file, strip_punctuation, tokenize

NOISE = {"the", "and"}


@pytest.mark.parametrize(
    "word, expected",
    [
        ("end.", "end"),
        ("Hello", "hello"),
        ("((hello))", "hello"),
        ("[world]!", "world"),
        ("What?!", "what"),
        ("deep;:", "deep"),
        ("a.b", None),
        ("don't", None),
        ("well-known", None),
        ("(wow", "wow"),
        ("The", None),
        ("and,", None),
        ("...", None),
        ("()", None),
        ("", None),
    ],
)
def test_get_keyword(word, expected):
    assert get_keyword(word, NOISE) == expected


def test_get_keyword_is_idempotent():
    for word in ["end.", "((Hello))", "[World]!", "plain"]:
        keyword = get_keyword(word, NOISE)
        assert get_keyword(keyword, NOISE) == keyword


def test_strip_punctuation_leaves_interior():
    assert strip_punctuation("(a.b).") == "a.b"
    assert strip_punctuation("x") == "x"
    assert strip_punctuation("?!") == ""


def test_leading_punctuation_only_opening_brackets():
    # closing brackets and other marks are only stripped from the end
    assert get_keyword(")word") is None
    assert get_keyword(".word") is None


def test_tokenize_splits_on_whitespace():
    assert tokenize("one  two\tthree\nfour.") == ["one", "two", "three", "four."]
    assert tokenize("") == []


def test_read_text_file_encodings(tmp_path):
    utf8 = tmp_path / "utf8.txt"
    utf8.write_text("café", encoding="utf-8")
    assert read_text_file(utf8) == "café"

    cp1252 = tmp_path / "cp1252.txt"
    cp1252.write_bytes(b"\x93caf\xe9\x94")
    assert read_text_file(cp1252) == "“café”"

    # 0x81 is undefined in cp1252; latin-1 takes any byte
    latin1 = tmp_path / "latin1.txt"
    latin1.write_bytes(b"caf\xe9 \x81")
    assert read_text_file(latin1) == "café \x81"
