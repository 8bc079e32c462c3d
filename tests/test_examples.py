"""Tests for the example script in examples/."""
import importlib.util
import sys
from pathlib import Path

import pytest

from chromtools import config

SCRIPT = Path(__file__).resolve().parent.parent / "examples" / "chromatic_from_g6.py"


def load_script():
    spec = importlib.util.spec_from_file_location("chromatic_from_g6", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", [SCRIPT.name, *argv])
    # main() may overwrite the ceiling; restore it afterwards.
    monkeypatch.setattr(config, "MAX_VERTICES", config.MAX_VERTICES)
    load_script().main()


def test_g6_with_header(monkeypatch, capsys):
    run(monkeypatch, "--g6", ">>graph6<<Bw", "--eval", "3")
    out = capsys.readouterr().out
    assert "|V|=3  |E|=3" in out
    assert "P(x) = x^3 - 3x^2 + 2x" in out
    assert "P(3) = 6" in out


def test_bad_g6_exits(monkeypatch):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, "--g6", "Bww")
    assert "bad graph6 string" in str(exc.value)


def test_live_reports_initial_failure(monkeypatch, capsys):
    run(monkeypatch, "--named", "K3", "--live", "--max-vertices", "2")
    captured = capsys.readouterr()
    assert "edges=0  failed" in captured.err
    assert "None" not in captured.out
