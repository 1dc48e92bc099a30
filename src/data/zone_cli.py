"""CLI for zone suitability ranking.

Usage:
    python -m src.data.zone_cli rank --sector "Textiles" --limit 5
    python -m src.data.zone_cli compare epz-001 epz-002 BEPZA-CTG-02
    python -m src.data.zone_cli show hitech-001
"""

import argparse
import logging
import sys

from src.config import settings
from src.data.zone_catalog import get_zone, list_zones
from src.engine.utility_status import summarize_utility_status
from src.engine.zone_intelligence import ZoneDataUnavailableError, get_zone_intelligence
from src.engine.zone_scoring import (
    compare_zone_infrastructure,
    match_sector_profile,
    rank_zones_by_suitability,
)


def print_rankings(rankings, sector: str | None) -> None:
    profile = match_sector_profile(sector)
    print(f"\n{'=' * 72}")
    print(f"  Zone Ranking: {sector or 'all sectors'}  [{profile.name} weights]")
    print(f"{'=' * 72}")
    for i, r in enumerate(rankings, start=1):
        print(f"  {i:>2}. {r.zone.name:<50} {r.suitability_score:>6.1f}")
        if r.strengths:
            print(f"      + {', '.join(r.strengths)}")
        if r.weaknesses:
            print(f"      - {', '.join(r.weaknesses)}")
    print()


def print_comparison(comparisons) -> None:
    print(f"\n{'=' * 72}")
    print("  Infrastructure Comparison")
    print(f"{'=' * 72}")
    header = f"  {'Zone':<28}{'Power':>7}{'Gas':>7}{'Logist':>8}{'Util':>7}{'Env':>7}{'Cost':>7}{'Total':>8}"
    print(header)
    for c in comparisons:
        s = c.scores
        print(
            f"  {c.zone_name[:27]:<28}{s.power_access:>7.1f}{s.gas_access:>7.1f}"
            f"{s.logistics:>8.1f}{s.utility_reliability:>7.1f}{s.environmental:>7.1f}"
            f"{s.cost_competitiveness:>7.1f}{c.total_score:>8.1f}"
        )
    print()


def print_zone(intel, zone) -> None:
    infra = intel.infrastructure
    econ = intel.economics
    utilities = summarize_utility_status(intel)
    print(f"\n{'=' * 60}")
    print(f"  {zone.name if zone else intel.zone_id}")
    print(f"{'=' * 60}")
    print(f"  Power:     {infra.power_capacity_mw} MW, {infra.power_line_distance} km to grid, "
          f"{utilities.power_uptime}% uptime ({utilities.power_status.value})")
    print(f"  Gas:       {infra.gas_pressure_psi} PSI, {infra.gas_line_distance} km, "
          f"{infra.gas_availability.value} availability")
    print(f"  Port:      {infra.nearest_port} ({infra.port_distance} km)")
    print(f"  Airport:   {infra.nearest_airport} ({infra.airport_distance} km)")
    print(f"  Water:     {utilities.water_pressure} PSI ({utilities.water_status.value})")
    print(f"  Internet:  {utilities.internet_speed} Mbps ({utilities.internet_status.value})")
    print(f"  Waste:     {utilities.waste_label}")
    print(f"  Land:      BDT {econ.land_price_per_acre:,.0f}/acre")
    print(f"  Labor:     BDT {econ.labor_cost_per_month:,.0f}/month")
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Investment zone suitability CLI")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    rank = sub.add_parser("rank", help="Rank catalogue zones for a sector")
    rank.add_argument("--sector", default="", help="Industry sector, e.g. 'Textiles' or 'IT Services'")
    rank.add_argument("--type", dest="zone_type", help="Only zones of this type (SEZ, EPZ, Hi-Tech Park)")
    rank.add_argument("--limit", type=int, default=settings.default_rank_limit, help="Max results")

    compare = sub.add_parser("compare", help="Compare infrastructure sub-scores")
    compare.add_argument("zone_ids", nargs="+", help="Zone ids")

    show = sub.add_parser("show", help="Show a zone's intelligence record")
    show.add_argument("zone_id", help="Zone id")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        if args.command == "rank":
            rankings = rank_zones_by_suitability(list_zones(args.zone_type), args.sector)
            print_rankings(rankings[: args.limit], args.sector)
        elif args.command == "compare":
            print_comparison(compare_zone_infrastructure(args.zone_ids, list_zones()))
        elif args.command == "show":
            zone = get_zone(args.zone_id)
            print_zone(get_zone_intelligence(args.zone_id, zone), zone)
    except ZoneDataUnavailableError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
