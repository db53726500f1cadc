import csv
import json
import sys
from pathlib import Path

import pytest
from apps.cli import play as play_cli
from apps.cli import survey as survey_cli
from apps.cli.play import play
from packages.engine import AbsurdleManager
from script import fetch_wordlist
from script.fetch_wordlist import extract_words


def _feeder(lines):
    it = iter(lines)

    def inp(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return inp


def test_play_loop_reprompts_and_wins():
    out = []
    game = AbsurdleManager(["cat", "dog"], 3)
    n = play(game, inp=_feeder(["tiger", "CAT", "dog"]), out=out.append)
    assert n == 2
    assert any("expected 3" in line for line in out)
    assert "⬜⬜⬜  1 word(s) left" in out
    assert out[-1] == "Absurdle solved in 2 guess(es)."

def test_play_loop_stops_on_eof():
    out = []
    game = AbsurdleManager(["cat", "dog"], 3)
    assert play(game, inp=_feeder(["xyz"]), out=out.append) == 1
    assert game.words() == ("cat", "dog")

def test_extract_words_from_html():
    html = "<html><body><h1>Words</h1><ul><li>Crane</li><li>slate</li>" \
           "<li>crane</li><li>it's</li></ul></body></html>"
    assert extract_words(html) == ["words", "crane", "slate", "it", "s"]
    assert extract_words(html, N=5) == ["words", "crane", "slate"]


def _run_main(monkeypatch, module, args):
    monkeypatch.setattr(sys, "argv", [module.__name__] + args)
    module.main()


@pytest.mark.parametrize("module", [play_cli, survey_cli])
def test_main_exits_cleanly_on_missing_dictionary(monkeypatch, capsys, tmp_path: Path, module):
    missing = tmp_path / "nope.txt"
    with pytest.raises(SystemExit) as exc:
        _run_main(monkeypatch, module, ["--dictionary", str(missing), "--N", "5"])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "FAIL" in captured.out
    assert "not found" in captured.err


def test_survey_main_writes_csv_and_manifest(monkeypatch, tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    d.write_text("cat\ndog\ncot\nlion\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    _run_main(monkeypatch, survey_cli, ["--dictionary", str(d), "--N", "3",
                                        "--outdir", str(outdir), "--progress", "plain"])

    [csv_path] = outdir.glob("survey_*.csv")
    [manifest_path] = outdir.glob("survey_*_manifest.json")
    with csv_path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [(r["opener"], r["pattern"], r["kept"], r["groups"]) for r in rows] == [
        ("cat", "'---", "1", "3"), ("cot", "'-G-", "1", "3"), ("dog", "'---", "1", "3")]

    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    assert manifest["config"]["N"] == 3
    assert manifest["dictionary"]["count_N"] == 3
    assert manifest["summary"]["best_opener"] == "cat"


def test_survey_main_sample(monkeypatch, tmp_path: Path):
    d = tmp_path / "dictionary.txt"
    d.write_text("cat\ndog\ncot\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    _run_main(monkeypatch, survey_cli, ["--dictionary", str(d), "--N", "3", "--sample", "2",
                                        "--outdir", str(outdir), "--progress", "off"])

    [csv_path] = outdir.glob("survey_*.csv")
    with csv_path.open(newline="", encoding="utf-8") as f:
        assert len(list(csv.DictReader(f))) == 2


@pytest.mark.parametrize("sample", ["0", "-3"])
def test_survey_rejects_sample_below_one(monkeypatch, tmp_path: Path, sample):
    d = tmp_path / "dictionary.txt"
    d.write_text("cat\ndog\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        _run_main(monkeypatch, survey_cli, ["--dictionary", str(d), "--N", "3",
                                            "--sample", sample, "--outdir", str(tmp_path)])
    assert exc.value.code == 2  # argparse usage error


def test_fetch_main_writes_wordlist(monkeypatch, tmp_path: Path):
    out = tmp_path / "data" / "dictionary.txt"
    monkeypatch.setattr(fetch_wordlist, "fetch_words", lambda url, N=None: ["slate", "crane"])

    _run_main(monkeypatch, fetch_wordlist, ["--url", "http://example.invalid", "--out", str(out),
                                            "--sort"])
    assert out.read_text(encoding="utf-8") == "crane\nslate\n"
