"""
Roll team comps from the terminal.
Builds a request from flags, prints picks / notes / quick strats (or the failure
message), and keeps a short history across --count rolls.

Run from project root: python -m comproller.roll_comp --map Ascent --mode PRO
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from comproller.catalog import default_catalog
from comproller.config import GeneratorConfig, load_config
from comproller.engine.errors import CompGenerationError
from comproller.models import RANDOM_MAP, CompStyle, GeneratedComp, Mode
from comproller.schemas import GenerateCompRequest, comp_response
from comproller.services import CompHistory, CompService


def _print_comp(comp: GeneratedComp) -> None:
    print(f"\n  {comp.map}  [{comp.mode.value} / {comp.style.value}]")
    print("  " + "-" * 56)
    for p in comp.picks:
        print(f"  {p.slot:<20} {p.role.value:<11} {p.agent}")
    print("\n  Notes:")
    for n in comp.notes:
        print(f"    - {n}")
    print("\n  Quick strats:")
    for i, s in enumerate(comp.strats, 1):
        print(f"    {i}. {s}")


def _print_history(history: CompHistory) -> None:
    print()
    print("=" * 60)
    print(f"  HISTORY (last {history.max_size})")
    print("=" * 60)
    for comp in history:
        print(f"  {comp.map} | {comp.mode.value} | {comp.style.value}: {', '.join(comp.agent_names())}")


def build_parser() -> argparse.ArgumentParser:
    catalog = default_catalog()
    parser = argparse.ArgumentParser(description="Roll a random team comp with a guaranteed dive duelist.")
    parser.add_argument("--map", default=RANDOM_MAP, choices=[RANDOM_MAP, *catalog.map_names()], help="Map (default: Random)")
    parser.add_argument("--mode", default=Mode.RANKED.value, choices=[m.value for m in Mode], help="RANKED or PRO")
    parser.add_argument("--style", default=CompStyle.STANDARD.value, choices=[s.value for s in CompStyle], help="Comp style preset")
    parser.add_argument("--lock-controller", default=None, help="Agent to lock as Controller")
    parser.add_argument("--lock-initiator", default=None, help="Agent to lock as Initiator")
    parser.add_argument("--lock-sentinel", default=None, help="Agent to lock as Sentinel")
    parser.add_argument("--lock-duelist", default=None, help="Dive duelist to lock")
    parser.add_argument("--exclude", default="", help="Comma-separated agents to exclude")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    parser.add_argument("--count", type=int, default=1, help="Number of comps to roll")
    parser.add_argument("--simple", action="store_true", help="Shorter quick-strat list")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--list-agents", action="store_true", help="List all agents and exit")
    parser.add_argument("--list-dive", action="store_true", help="List dive duelists and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def run(args: argparse.Namespace) -> int:
    env = load_config()
    config = GeneratorConfig(
        history_size=env.history_size,
        seed=args.seed if args.seed is not None else env.seed,
    )
    service = CompService(config=config)

    if args.list_agents or args.list_dive:
        names = service.catalog.dive_agent_names() if args.list_dive else service.catalog.agent_names()
        print("\n".join(names))
        return 0

    try:
        req = GenerateCompRequest(
            map=args.map,
            mode=args.mode,
            style=args.style,
            lock_controller=args.lock_controller,
            lock_initiator=args.lock_initiator,
            lock_sentinel=args.lock_sentinel,
            lock_duelist=args.lock_duelist,
            excluded=args.exclude,
        )
    except ValidationError as e:
        print(f"Invalid request: {e}", file=sys.stderr)
        return 2

    history = CompHistory(config.history_size)
    request = req.to_request()
    for _ in range(max(1, args.count)):
        try:
            comp = service.generate(request, simple=args.simple)
        except CompGenerationError as e:
            print(e.message, file=sys.stderr)
            return 1
        history.add(comp)
        if args.json:
            print(json.dumps(comp_response(comp), ensure_ascii=False))
        else:
            _print_comp(comp)

    if not args.json and len(history) > 1:
        _print_history(history)
    return 0


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
