import runpy
from pathlib import Path

import pytest

from wordle_freq import words


MAIN = Path(__file__).resolve().parent.parent / "main.py"


def test_missing_data_file_exits_with_message(monkeypatch, tmp_path):
    missing = tmp_path / "none.txt"
    load = words.load_frequencies

    def load_missing():
        return load(missing)

    monkeypatch.setattr(words, "load_frequencies", load_missing)
    with pytest.raises(SystemExit, match="not found"):
        runpy.run_path(str(MAIN), run_name="__main__")


def test_replays_history(monkeypatch, tmp_path, capsys):
    path = tmp_path / "freqs.txt"
    path.write_text("tares 0.001\ncolin 0.001\npsych 0.001\ndecay 0.001\ncrane 0.001\n", encoding="utf-8")
    load = words.load_frequencies

    monkeypatch.setattr(words, "load_frequencies", lambda: load(path))
    runpy.run_path(str(MAIN), run_name="__main__")

    assert capsys.readouterr().out.splitlines() == ["decay", "*** RANKED GUESSES ***"]
