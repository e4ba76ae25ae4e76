from pathlib import Path

import pytest
from evil_hangman.datasets import (
    DEFAULT_DICTIONARY, load_dictionary, pretty_summary, read_lines, validate_dictionary, write_lines,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_dictionary_happy_path(tmp_path: Path):
    d = tmp_path / "words.txt"
    _write(d, ["bat", "cat", "crane", "raise"])

    rep = validate_dictionary(str(d), length=3)
    assert rep["passed"] is True
    assert rep["unique_count"] == 4
    assert rep["lengths"] == {3: 2, 5: 2}
    assert rep["length_count"] == 2
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "length=3: 2" in s and s.endswith("OK")


def test_validate_dictionary_flags_invalid_and_duplicates(tmp_path: Path):
    d = tmp_path / "words.txt"
    d.write_text("bat\nBAT\n???\n\nco-op\ncat\n", encoding="utf-8")

    rep = validate_dictionary(str(d))
    assert rep["passed"] is True  # loaders skip the bad lines
    assert rep["invalid_lines"] == 3
    assert rep["valid_count"] == 3 and rep["unique_count"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_dictionary_missing_length(tmp_path: Path):
    d = tmp_path / "words.txt"
    _write(d, ["bat", "cat"])

    rep = validate_dictionary(str(d), length=9)
    assert rep["passed"] is False
    assert any("length 9" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_dictionary_missing_file(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "nope.txt"), length=3)
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_load_dictionary_normalizes(tmp_path: Path):
    d = tmp_path / "words.txt"
    write_lines(["Bat", "bat ", "", "co-op", "Cat"], d)
    assert read_lines(d) == ["Bat", "bat ", "", "co-op", "Cat"]
    assert load_dictionary(d) == ["bat", "cat"]


def test_read_lines_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")


def test_bundled_dictionary_is_clean():
    rep = validate_dictionary(str(DEFAULT_DICTIONARY), length=5)
    assert rep["passed"] is True
    assert rep["invalid_lines"] == 0
    assert rep["valid_count"] == rep["unique_count"]


def test_validator_and_loader_split_lines_the_same(tmp_path: Path):
    d = tmp_path / "words.txt"
    d.write_text("bat\x0bcat\u2028café\x1ccar\n", encoding="utf-8")

    rep = validate_dictionary(str(d), length=3)
    words = load_dictionary(d)
    assert words == ["bat", "cat", "car"]
    assert rep["lines"] == len(read_lines(d)) == 4
    assert rep["valid_count"] == len(words)
    assert rep["invalid_lines"] == 1
