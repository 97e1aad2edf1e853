import json

import pytest

import build_index


def test_build_index_prints_analytics_and_saves_json(corpus, tmp_path, capsys):
    output = tmp_path / "out" / "index.json"
    build_index.main([
        "--docs", str(corpus),
        "--noise", str(corpus.parent / "noisewords.txt"),
        "--output", str(output),
    ])
    out = capsys.readouterr().out
    assert "| Number of indexed documents | 3 |" in out
    assert "| Number of unique keywords   | 11 |" in out
    assert "| Total occurrences           | 14 |" in out
    assert "| Noise words                 | 4 |" in out
    assert f"Index saved to: {output}" in out

    saved = json.loads(output.read_text(encoding="utf-8"))
    assert saved["deep"] == [
        {"document": "alice.txt", "frequency": 3},
        {"document": "wow.txt", "frequency": 1},
    ]
    assert "the" not in saved


def test_build_index_empty_docs_file_exits(tmp_path, capsys):
    docs = tmp_path / "docs.txt"
    docs.write_text("\n", encoding="utf-8")
    noise = tmp_path / "noise.txt"
    noise.write_text("the\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        build_index.main(["--docs", str(docs), "--noise", str(noise)])
    assert excinfo.value.code == 1
    assert "No documents listed" in capsys.readouterr().out


def test_build_index_missing_docs_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_index.main(["--docs", str(tmp_path / "nope.txt"), "--noise", str(tmp_path / "n.txt")])
    assert excinfo.value.code == 1
    assert "could not build index" in capsys.readouterr().out
