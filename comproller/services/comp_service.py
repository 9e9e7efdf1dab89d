"""
Comp generation facade: one call from request to finished comp.
Pure: no persistence, no UI. Failures propagate unchanged; nothing partial is returned.

Pipeline: resolve map -> resolve needs -> plan slots ->
validate locks + resolve slots -> notes -> quick strats.
"""
from __future__ import annotations

import logging

from comproller.catalog import Catalog, default_catalog
from comproller.config import GeneratorConfig
from comproller.engine.errors import CompGenerationError, UnknownMapError
from comproller.engine.flex import FlexKnobs
from comproller.engine.needs import resolve_needs
from comproller.engine.notes import build_notes
from comproller.engine.resolver import ConstraintResolver
from comproller.engine.rng import RandomSource, SeededRNG
from comproller.engine.slots import plan_slots
from comproller.engine.strats import build_quick_strats
from comproller.models import RANDOM_MAP, CompStyle, GeneratedComp, GenerationRequest, MapProfile, Mode

logger = logging.getLogger(__name__)


class CompService:
    """
    Holds the catalog and random source; each generate() call keeps its own bookkeeping,
    so one service can serve repeated calls.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        rng: RandomSource | None = None,
        knobs: FlexKnobs | None = None,
        config: GeneratorConfig | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.catalog = catalog or default_catalog()
        self.rng = rng or SeededRNG(self.config.seed)
        self.resolver = ConstraintResolver(self.catalog, self.rng, knobs)

    def resolve_map(self, selector: str) -> MapProfile:
        """Random draws uniformly over the catalog maps."""
        if selector == RANDOM_MAP:
            return self.rng.choice(self.catalog.maps)
        profile = self.catalog.get_map(selector)
        if profile is None:
            raise UnknownMapError(
                f"Unknown map: {selector}. Pick one of {', '.join(self.catalog.map_names())} or {RANDOM_MAP}.",
            )
        return profile

    def generate(self, request: GenerationRequest, simple: bool = False) -> GeneratedComp:
        """
        Generate one comp. simple=True caps quick strats at the shorter limit.
        Raises CompGenerationError (or a subclass) on any conflict.
        """
        mode = Mode(request.mode)
        style = CompStyle(request.style)
        try:
            profile = self.resolve_map(request.map)
            needs = resolve_needs(profile)
            slots = plan_slots(style)
            logger.debug("generating %s / %s on %s", style.value, mode.value, profile.name)

            picks = self.resolver.resolve(profile.name, needs, request, slots)
        except CompGenerationError as e:
            logger.warning("comp generation failed (%s): %s", e.kind.value, e.message)
            raise

        final_agents = [self.catalog.get_agent(p.agent) for p in picks]
        limit = self.config.simple_strat_limit if simple else self.config.strat_limit
        return GeneratedComp(
            map=profile.name,
            mode=mode,
            style=style,
            picks=picks,
            notes=build_notes(final_agents, style),
            strats=build_quick_strats(profile.name, final_agents, style, limit=limit),
        )


def generate_comp(
    request: GenerationRequest,
    *,
    seed: int | None = None,
    catalog: Catalog | None = None,
    simple: bool = False,
) -> GeneratedComp:
    """One-shot helper: fresh service per call. Same seed + same request => same comp."""
    return CompService(catalog=catalog, rng=SeededRNG(seed)).generate(request, simple=simple)
