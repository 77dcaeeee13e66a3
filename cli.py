#!/usr/bin/env python3
"""
Wijnadvies bij een steak vanaf de command line.
- Bouwt een SteakOrder + UserPreferences uit de argumenten
- Scoort de voorbeeldcatalogus en toont de top 3 + een eventuele swap-suggestie

Gebruik:
  python cli.py                                            # ribeye, medium-rare, standaardvoorkeuren
  python cli.py --cut "NY Strip" --doneness Medium --add-on "Au Poivre" --add-on "Blue Cheese"
  python cli.py --tannin 8 --budget-min 40 --budget-max 90 --json
"""

from __future__ import annotations
import argparse, json, sys
from typing import List, Optional

from pydantic import ValidationError

from config import get_settings
from logging_config import configure_logging
from models import AddOn, Doneness, SteakCut, SteakOrder, UserPreferences, WineRecommendation
from seed_data import load_catalog
from session import PairingSession

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Zoek wijn bij je steak")
    ap.add_argument("--cut", choices=[c.value for c in SteakCut], default=SteakCut.RIBEYE.value)
    ap.add_argument("--doneness", choices=[d.value for d in Doneness], default=Doneness.MEDIUM_RARE.value)
    ap.add_argument("--add-on", dest="add_ons", action="append", default=[],
                    choices=[a.value for a in AddOn], help="mag vaker; dubbele vallen samen")
    for name in ("tannin", "oak", "spice", "funk"):
        ap.add_argument(f"--{name}", type=int, default=5, help=f"{name}-tolerantie 1..10")
    ap.add_argument("--budget-min", type=float, default=0)
    ap.add_argument("--budget-max", type=float, default=200)
    ap.add_argument("--json", action="store_true", help="resultaat als JSON")
    return ap

def format_pick(label: str, rec: WineRecommendation) -> str:
    w = rec.wine
    head = f"{label} {w.name} ({w.grape}, {w.region}) ${w.price:.0f} - {rec.score_formatted}"
    return f"{head}\n    {rec.explanation}"

def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    configure_logging(get_settings().log_level, stream=sys.stderr)  # stdout blijft schoon voor --json

    session = PairingSession(load_catalog())
    try:
        session.order = SteakOrder(cut=args.cut, doneness=args.doneness, add_ons=args.add_ons)
        session.preferences = UserPreferences(
            tannin_tolerance=args.tannin, oak_tolerance=args.oak,
            spice_tolerance=args.spice, funk_tolerance=args.funk,
            budget_min=args.budget_min, budget_max=args.budget_max,
        )
    except ValidationError as e:
        ap.error(str(e))

    picks = session.calculate()

    if args.json:
        out = {
            "recommendations": [p.model_dump(mode="json") for p in picks],
            "swap_suggestion": session.swap_suggestion.model_dump(mode="json") if session.swap_suggestion else None,
        }
        print(json.dumps(out, indent=2, ensure_ascii=False))
        return 0

    if not picks:
        print(f"Geen wijnen tussen ${args.budget_min:.0f} en ${args.budget_max:.0f}.")
        return 0

    for i, rec in enumerate(picks, 1):
        print(format_pick(f"#{i}", rec))
    if session.swap_suggestion:
        print("\nWant to try something different?")
        print(format_pick("swap:", session.swap_suggestion))
    return 0

if __name__ == "__main__":
    sys.exit(main())
