from pathlib import Path

import pytest
from packages.datasets import validate_dictionary, pretty_summary, load_dictionary, read_lines, write_lines


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_dictionary_happy_path(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    _write(d, ["cat", "dog", "lion", "frog", "crane"])

    rep = validate_dictionary(str(d), 3)
    assert rep["passed"] is True
    assert rep["count_N"] == 2
    assert rep["lengths"] == {3: 2, 4: 2, 5: 1}
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=3" in s and "N-letter=2" in s and s.endswith("OK")


def test_validate_dictionary_flags_errors(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    d.write_text("cat\nDog\n???\n\ncat\n", encoding="utf-8")

    rep = validate_dictionary(str(d), 3)
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_dictionary_no_words_of_length(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    _write(d, ["lion", "frog"])

    rep = validate_dictionary(str(d), 3)
    assert rep["passed"] is False
    assert rep["count_N"] == 0


def test_validate_dictionary_missing_file(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "nope.txt"), 5)
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_load_dictionary_normalizes(tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    d.write_text(" Cat \n\ndog\r\nLION\n", encoding="utf-8")
    assert load_dictionary(d) == ["cat", "dog", "lion"]


def test_read_lines_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope.txt")


def test_write_lines_round_trips_through_loader(tmp_path: Path):
    p = write_lines(["crane", "slate"], tmp_path / "nested" / "words.txt")
    assert Path(p).read_text(encoding="utf-8") == "crane\nslate\n"
    assert load_dictionary(p) == ["crane", "slate"]
