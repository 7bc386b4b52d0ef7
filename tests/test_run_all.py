import subprocess

import pytest

from aocpuzzles.run_all import main, run_day


class _FakeRun:
    def __init__(self, stdout):
        self.stdout = stdout
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        return subprocess.CompletedProcess(cmd, 0, stdout=self.stdout, stderr="")


def test_run_day_parses_timing(monkeypatch, capsys):
    fake = _FakeRun("🎄 Part 1 🎄\n0 (elapsed: 70µs)\n🎄 Part 2 🎄\n0 (elapsed: 1.45ms)\n")
    monkeypatch.setattr(subprocess, "run", fake)
    assert run_day(1) == pytest.approx(1.52, abs=1e-6)
    assert fake.calls[0][-1].endswith(".day_01")
    out = capsys.readouterr().out
    assert "| Day 01 |" in out


def test_run_day_not_solved(monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", _FakeRun(""))
    assert run_day(7) == 0.0
    assert "Not solved." in capsys.readouterr().out


def test_main_runs_all_days(monkeypatch, capsys):
    fake = _FakeRun("0 (elapsed: 100.50ms)\n")
    monkeypatch.setattr(subprocess, "run", fake)
    assert main([]) == 0
    assert len(fake.calls) == 25
    assert fake.calls[-1][-1].endswith(".day_25")
    out = capsys.readouterr().out
    assert "Total:" in out
    assert "2512.50ms" in out