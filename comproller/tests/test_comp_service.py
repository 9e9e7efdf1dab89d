"""
End-to-end generation through the service facade.
Covers the request scenarios the UI relies on: fixed map, random map with a dive lock,
exclusion conflicts, bad locks, and history bookkeeping.
"""
from __future__ import annotations

import logging
import threading

import pytest

from comproller.catalog import default_catalog
from comproller.config import GeneratorConfig
from comproller.engine.errors import (
    DiveRequirementError,
    LockedAgentExcludedError,
    LockRoleMismatchError,
    PoolExhaustedError,
    UnknownMapError,
)
from comproller.engine.rng import SeededRNG
from comproller.engine.strats import MAP_CALLS
from comproller.models import CompStyle, GenerationRequest, Mode, Role
from comproller.services import CompHistory, CompService, generate_comp

DIVE = frozenset({"Jett", "Raze", "Neon", "Yoru", "Waylay"})


@pytest.fixture
def service():
    return CompService(rng=SeededRNG(2024))


class TestGenerate:
    def test_ascent_standard_ranked(self, service):
        comp = service.generate(GenerationRequest(map="Ascent", mode=Mode.RANKED, style=CompStyle.STANDARD))
        cat = default_catalog()
        assert comp.map == "Ascent"
        assert comp.mode == Mode.RANKED
        assert comp.style == CompStyle.STANDARD
        names = comp.agent_names()
        assert len(names) == 5
        assert len(set(names)) == 5
        dive = [p for p in comp.picks if p.must_dive]
        assert len(dive) == 1
        assert cat.get_agent(dive[0].agent).is_dive_duelist
        for line in MAP_CALLS["Ascent"]:
            assert line in comp.strats
        assert comp.notes[0] == "Style: Standard (Balanced)."

    def test_random_map_with_jett_lock(self, service):
        maps_seen = set()
        catalog_maps = set(default_catalog().map_names())
        for _ in range(50):
            comp = service.generate(GenerationRequest(map="Random", locked_roles={Role.DUELIST: "Jett"}))
            assert comp.agent_names().count("Jett") == 1
            jett = next(p for p in comp.picks if p.agent == "Jett")
            assert jett.must_dive
            assert comp.map in catalog_maps
            maps_seen.add(comp.map)
        assert len(maps_seen) > 1

    def test_all_dive_excluded(self, service):
        with pytest.raises(PoolExhaustedError) as exc:
            service.generate(GenerationRequest(map="Ascent", excluded=DIVE))
        assert exc.value.slot == "Dive Duelist"

    def test_reyna_controller_lock(self, service):
        with pytest.raises(LockRoleMismatchError):
            service.generate(GenerationRequest(locked_roles={Role.CONTROLLER: "Reyna"}))

    def test_locked_excluded(self, service):
        with pytest.raises(LockedAgentExcludedError):
            service.generate(GenerationRequest(locked_roles={Role.DUELIST: "Neon"}, excluded=frozenset({"Neon"})))

    def test_non_dive_lock(self, service):
        with pytest.raises(DiveRequirementError):
            service.generate(GenerationRequest(locked_roles={Role.DUELIST: "Phoenix"}))

    def test_unknown_map(self, service):
        with pytest.raises(UnknownMapError, match="Unknown map: Atlantis"):
            service.generate(GenerationRequest(map="Atlantis"))

    def test_failure_logged(self, service, caplog):
        with caplog.at_level(logging.WARNING, logger="comproller.services.comp_service"):
            with pytest.raises(LockRoleMismatchError):
                service.generate(GenerationRequest(locked_roles={Role.SENTINEL: "Omen"}))
        assert "lock_role_mismatch" in caplog.text

    def test_string_mode_and_style(self, service):
        comp = service.generate(GenerationRequest(map="Pearl", mode="PRO", style="DOUBLE_CONTROLLER"))
        assert comp.mode == Mode.PRO
        assert comp.style == CompStyle.DOUBLE_CONTROLLER
        assert [p.role for p in comp.picks].count(Role.CONTROLLER) == 2

    @pytest.mark.parametrize("style", list(CompStyle))
    def test_strat_caps(self, service, style):
        for _ in range(10):
            comp = service.generate(GenerationRequest(style=style))
            assert 1 <= len(comp.strats) <= 8
            simple = service.generate(GenerationRequest(style=style), simple=True)
            assert 1 <= len(simple.strats) <= 7

    def test_config_limits(self):
        svc = CompService(rng=SeededRNG(1), config=GeneratorConfig(strat_limit=4, simple_strat_limit=2))
        assert len(svc.generate(GenerationRequest(style=CompStyle.TRIPLE_INITIATOR)).strats) == 4
        assert len(svc.generate(GenerationRequest(), simple=True).strats) == 2

    def test_config_seed_used(self):
        req = GenerationRequest(style=CompStyle.CHAOS)
        a = CompService(config=GeneratorConfig(seed=11)).generate(req)
        b = CompService(config=GeneratorConfig(seed=11)).generate(req)
        assert a.to_dict() == b.to_dict()

    def test_to_dict(self, service):
        d = service.generate(GenerationRequest(map="Split")).to_dict()
        assert d["map"] == "Split"
        assert d["mode"] == "RANKED"
        assert len(d["picks"]) == 5
        assert set(d["picks"][0]) == {"slot", "role", "agent", "must_dive"}


class TestGenerateComp:
    def test_seeded_is_deterministic(self):
        req = GenerationRequest(map="Random", mode=Mode.PRO, style=CompStyle.STANDARD)
        assert generate_comp(req, seed=5).to_dict() == generate_comp(req, seed=5).to_dict()

    def test_concurrent_calls(self):
        errors: list[Exception] = []
        history = CompHistory(10)

        def worker(seed: int) -> None:
            try:
                comp = generate_comp(GenerationRequest(style=CompStyle.CHAOS), seed=seed)
                assert len(set(comp.agent_names())) == 5
                history.add(comp)
            except Exception as e:  # surfaced below
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert errors == []
        assert len(history) == 10
