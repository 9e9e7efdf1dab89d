"""
String-level request parsing and environment config.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from comproller.config import DEFAULT_HISTORY_SIZE, load_config
from comproller.models import CompStyle, Mode, Role
from comproller.schemas import GenerateCompRequest


class TestGenerateCompRequest:
    def test_defaults(self):
        req = GenerateCompRequest().to_request()
        assert req.map == "Random"
        assert req.mode == Mode.RANKED
        assert req.style == CompStyle.STANDARD
        assert req.locked_roles == {}
        assert req.excluded == frozenset()

    def test_comma_separated_excluded(self):
        req = GenerateCompRequest(excluded=" Jett, Raze ,, Neon ,")
        assert req.excluded == ["Jett", "Raze", "Neon"]

    def test_list_excluded(self):
        req = GenerateCompRequest(excluded=["Omen", " ", "Sova "])
        assert req.to_request().excluded == frozenset({"Omen", "Sova"})

    def test_locks_trimmed_and_blank_dropped(self):
        req = GenerateCompRequest(lock_duelist="  Jett ", lock_controller="   ", lock_sentinel="Killjoy")
        assert req.locked_roles() == {Role.DUELIST: "Jett", Role.SENTINEL: "Killjoy"}

    def test_case_insensitive_enums(self):
        req = GenerateCompRequest(mode="pro", style="double duelist", map=" Bind ")
        assert req.mode == Mode.PRO
        assert req.style == CompStyle.DOUBLE_DUELIST
        assert req.map == "Bind"

    def test_blank_map_is_random(self):
        assert GenerateCompRequest(map="  ").map == "Random"

    def test_bad_style(self):
        with pytest.raises(ValidationError):
            GenerateCompRequest(style="QUAD_SENTINEL")

    def test_bad_mode(self):
        with pytest.raises(ValidationError):
            GenerateCompRequest(mode="CASUAL")


class TestLoadConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("COMPROLLER_SEED", raising=False)
        monkeypatch.delenv("COMPROLLER_HISTORY_SIZE", raising=False)
        cfg = load_config()
        assert cfg.seed is None
        assert cfg.history_size == DEFAULT_HISTORY_SIZE
        assert cfg.strat_limit == 8
        assert cfg.simple_strat_limit == 7

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("COMPROLLER_SEED", "42")
        monkeypatch.setenv("COMPROLLER_HISTORY_SIZE", "3")
        cfg = load_config()
        assert cfg.seed == 42
        assert cfg.history_size == 3

    def test_bad_env(self, monkeypatch):
        monkeypatch.setenv("COMPROLLER_SEED", "abc")
        with pytest.raises(ValueError, match="COMPROLLER_SEED"):
            load_config()

    def test_history_size_must_be_positive(self, monkeypatch):
        monkeypatch.delenv("COMPROLLER_SEED", raising=False)
        monkeypatch.setenv("COMPROLLER_HISTORY_SIZE", "0")
        with pytest.raises(ValueError):
            load_config()
