import pytest

from littlesearch.index_builder import LittleSearchEngine


@pytest.fixture
def engine():
    eng = LittleSearchEngine()
    eng.load_noise_words(["the", "and", "a", "of", "to"])
    return eng


@pytest.fixture
def corpus(tmp_path):
    """Write a small corpus plus docs and noise word files; return the docs file path."""
    (tmp_path / "noisewords.txt").write_text("the\nand\na\nof\n", encoding="utf-8")
    (tmp_path / "alice.txt").write_text(
        "Down the rabbit hole. The rabbit ran, and the deep well was deep, deep!\n",
        encoding="utf-8",
    )
    (tmp_path / "wow.txt").write_text(
        "A whole new world (world) of deep wonder.\n", encoding="utf-8"
    )
    (tmp_path / "page.html").write_text(
        "<html><head><title>World</title><script>var rabbit = 1;</script></head>"
        "<body><p>world world rabbit</p></body></html>",
        encoding="utf-8",
    )
    docs = tmp_path / "docs.txt"
    docs.write_text("alice.txt\nwow.txt\npage.html\n", encoding="utf-8")
    return docs
