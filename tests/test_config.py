"""Tests for configuration schemas."""

from __future__ import annotations

from pathlib import Path

import pytest

from doubt_othello.config import AppConfig, CheatConfig, load_config

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"


def test_default_yaml_matches_dataclass_defaults():
    cfg = load_config(DEFAULT_CONFIG)
    defaults = AppConfig()

    assert cfg.difficulty == "intermediate"
    assert cfg.seed is None
    assert cfg.ai == defaults.ai
    assert cfg.cheat == defaults.cheat
    assert cfg.challenge.failed_challenge_ends_game is True
    assert cfg.stats_path is None


def test_app_config_parsing():
    data = {
        "difficulty": "extreme",
        "seed": "7",
        "ai": {"minimax_depth": 2},
        "cheat": {"min_turn": 4, "probability": {"extreme": 0.9}, "max_cheats": {"beginner": 0}},
        "challenge": {"failed_challenge_ends_game": False},
        "stats_path": "data/stats.yaml",
    }

    cfg = AppConfig.from_dict(data)
    assert cfg.difficulty == "extreme"
    assert cfg.seed == 7
    assert cfg.ai.minimax_depth == 2
    assert cfg.ai.greedy_probability == 0.7
    assert cfg.cheat.min_turn == 4
    assert cfg.cheat.probability["extreme"] == 0.9
    assert cfg.cheat.probability["beginner"] == 0.15
    assert cfg.cheat.max_cheats["beginner"] == 0
    assert cfg.cheat.max_cheats["extreme"] == 6
    assert cfg.challenge.failed_challenge_ends_game is False
    assert cfg.stats_path == "data/stats.yaml"


def test_empty_config_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == AppConfig()


def test_config_rejects_bad_input(tmp_path):
    with pytest.raises(ValueError):
        AppConfig.from_dict({"difficulty": "godlike"})
    with pytest.raises(ValueError):
        AppConfig.from_dict({"cheat": {"probability": {"godlike": 1.0}}})
    with pytest.raises(ValueError):
        CheatConfig(max_cheats={"beginner": 2})

    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)
