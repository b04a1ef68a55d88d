"""Tests for the match inspector CLI."""

import json
import sys

import pytest

from element_engine.cli import format_match, main, match_to_dict
from element_engine.game import MatchResult, play_match


class TestFormatMatch:
    def test_round_table(self):
        result = play_match("111111111111", "444444444444")
        text = format_match("111111111111", "444444444444", result)
        assert "A: 111111111111 (adaptive)" in text
        assert "B wins 0-6" in text
        assert len([line for line in text.splitlines() if line.strip().startswith("13 ")]) == 1

    def test_tie(self):
        result = play_match("WVWVWVWVWVWVD", "VWVWVWVWVWVWD")
        text = format_match("WVWVWVWVWVWVD", "VWVWVWVWVWVWD", result)
        assert "(fixed)" in text
        assert "Tie 6-6" in text

    def test_invalid_match(self):
        text = format_match("WVAL", "111111111111", MatchResult.invalid())
        assert "(invalid)" in text
        assert "Invalid match" in text

    def test_match_to_dict(self):
        result = play_match("111111111111", "WWWVVVAAALLLD")
        data = match_to_dict("111111111111", "WWWVVVAAALLLD", result)
        assert data["scores"] == [8, 1]
        assert data["moves_a"] == "WLLLWWAVVVAAD"
        assert len(data["outcomes"]) == 13


class TestMain:
    def test_moves(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["element-engine", "moves", "111111111111", "WWWVVVAAALLLD"])
        main()
        assert capsys.readouterr().out.strip() == "WLLLWWAVVVAAD"

    def test_play_json(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["element-engine", "play", "444444444444", "WWWVVVAAALLLD", "--json"])
        main()
        data = json.loads(capsys.readouterr().out)
        assert data["scores"] == [4, 0]
        assert data["valid"]

    def test_invalid_engine_exits(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["element-engine", "play", "WVAL", "111111111111"])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 2
        assert "Invalid engine code" in capsys.readouterr().out

    def test_moves_requires_adaptive_then_fixed(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["element-engine", "moves", "WWWVVVAAALLLD", "111111111111"])
        with pytest.raises(SystemExit):
            main()
