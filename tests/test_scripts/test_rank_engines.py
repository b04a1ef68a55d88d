"""Tests for the end-to-end ranking script."""

import importlib.util
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "rank_engines.py"

CANDIDATES = "111111111111\nWWWVVVAAALLLD\n444444444444\n"
OPPONENTS = "111111111111\nWWWVVVAAALLLD\n"


def _load_script():
    spec = importlib.util.spec_from_file_location("rank_engines", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in (
        "ENGINE_RANKER_WORKERS",
        "ENGINE_RANKER_PROGRESS_INTERVAL",
        "ENGINE_RANKER_OUTPUT",
        "ENGINE_RANKER_USE_PROCESSES",
    ):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    (tmp_path / "candidates.txt").write_text(CANDIDATES)
    (tmp_path / "opponents.txt").write_text(OPPONENTS)
    return tmp_path


def _run(monkeypatch, *args):
    monkeypatch.setattr(
        sys,
        "argv",
        ["rank_engines.py", "--candidates", "candidates.txt", "--opponents", "opponents.txt", *args],
    )
    return _load_script().main()


class TestRankEngines:
    def test_writes_ranked_file(self, workspace, monkeypatch, capsys):
        output = workspace / "out" / "ranked.txt"
        assert _run(monkeypatch, "--output", str(output), "--threads", "--workers", "2") == 0

        assert output.read_text().splitlines() == [
            "444444444444 (score: 30, never loses: true, wins: 2)",
            "111111111111 (score: 17, never loses: true, wins: 1)",
            "WWWVVVAAALLLD (score: -17, never loses: false, wins: 0)",
        ]
        out = capsys.readouterr().out
        assert f"Sorted engines saved to '{output}' from 6 matches." in out

    def test_never_loses_filter(self, workspace, monkeypatch):
        output = workspace / "ranked.txt"
        assert _run(monkeypatch, "--output", str(output), "--threads", "--sort", "never-loses") == 0
        assert [line.split()[0] for line in output.read_text().splitlines()] == [
            "444444444444",
            "111111111111",
        ]

    def test_output_from_environment(self, workspace, monkeypatch):
        monkeypatch.setenv("ENGINE_RANKER_OUTPUT", "from_env.txt")
        assert _run(monkeypatch, "--threads") == 0
        assert (workspace / "from_env.txt").exists()

    def test_flag_overrides_environment(self, workspace, monkeypatch):
        monkeypatch.setenv("ENGINE_RANKER_OUTPUT", "from_env.txt")
        assert _run(monkeypatch, "--threads", "--output", "from_flag.txt") == 0
        assert (workspace / "from_flag.txt").exists()
        assert not (workspace / "from_env.txt").exists()

    def test_zero_workers_is_a_configuration_error(self, workspace, monkeypatch, capsys):
        output = workspace / "ranked.txt"
        assert _run(monkeypatch, "--output", str(output), "--workers", "0") == 1
        assert "Configuration error" in capsys.readouterr().out
        assert not output.exists()

    def test_rejected_codes_are_reported(self, workspace, monkeypatch, capsys):
        (workspace / "candidates.txt").write_text("WVAL\n111111111111\n")
        assert _run(monkeypatch, "--threads", "--output", "ranked.txt") == 0
        assert "Invalid engine code 'WVAL'" in capsys.readouterr().out
        assert len((workspace / "ranked.txt").read_text().splitlines()) == 1
