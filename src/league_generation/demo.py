#!/usr/bin/env python3
"""
League Generation Demo

Generates a league for one country and prints a summary.

Usage:
    league-generation-demo --country GB --seed 42 --complete
    league-generation-demo --country DE --divisions 3
    league-generation-demo --config my_config.json --output league.json
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .core.exceptions import GenerationException
from .core.generation_config import GenerationConfig, load_generation_config
from .data.country_repository import CountryRepository
from .generators.league_generator import LeagueGenerator
from .logging_config import log_exception, setup_logging
from .models.generated_entities import GeneratedLeague

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> GenerationConfig:
    """Resolve the configuration from --config or --country, then apply overrides."""
    if args.config:
        config = load_generation_config(args.config)
    else:
        country = CountryRepository.get_country_by_code(args.country)
        if country is None:
            codes = ", ".join(c.code for c in CountryRepository.get_all_countries())
            raise GenerationException(f"Unknown country '{args.country}' (available: {codes})",
                                      error_code="UNKNOWN_COUNTRY")
        config = GenerationConfig.default_for_country(country)

    if args.seed is not None:
        config = replace(config, seed=args.seed)
    if args.divisions is not None:
        config = replace(config, league_config=replace(config.league_config, divisions=args.divisions))
    return config


def print_league(league: GeneratedLeague, show_squads: bool) -> None:
    print(f"\n{league.name} (level {league.level}, id {league.league_id})")
    print("-" * 80)
    for team in sorted(league.teams, key=lambda t: t.reputation, reverse=True):
        line = f"  {team.name:<32} {team.city:<18} rep {team.reputation:>3}  est. {team.founded_year}"
        if show_squads and team.stadium:
            line += f"  {team.squad_size:>2} players  {team.stadium.name} ({team.stadium.capacity:,})"
        print(line)


def run(args: argparse.Namespace) -> List[GeneratedLeague]:
    config = build_config(args)
    country = config.country
    generator = LeagueGenerator.from_config(config)

    print("=" * 80)
    print(f"LEAGUE GENERATION - {country.name} (seed: {config.seed})")
    print("=" * 80)

    if args.complete:
        leagues = [generator.generate_complete_league(country, config)]
    elif config.league_config.divisions > 1:
        leagues = generator.generate_divisions(country, config)
    else:
        leagues = [generator.generate_league(country, config)]

    for league in leagues:
        print_league(league, show_squads=args.complete)

    all_teams = [team for league in leagues for team in league.teams]
    cups = generator.generate_cup_competitions(country, config, all_teams)
    for cup in cups:
        print(f"\n{cup.name}: {len(cup.teams)} entrants")

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump([league.to_dict() for league in leagues + cups], f, indent=2, ensure_ascii=False)
        print(f"\nWrote {args.output}")

    return leagues + cups


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI usage."""
    parser = argparse.ArgumentParser(description="Generate a fictional football league")
    parser.add_argument("--country", default="GB", help="Two-letter country code")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    parser.add_argument("--config", default=None, help="Path to a generation config JSON file")
    parser.add_argument("--complete", action="store_true",
                        help="Generate squads and stadiums for every team")
    parser.add_argument("--divisions", type=int, default=None, help="Override the number of divisions")
    parser.add_argument("--output", default=None, help="Write generated leagues to a JSON file")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Console log level")

    args = parser.parse_args(argv)
    setup_logging(level=args.log_level, enable_file=False, format_style="simple")

    try:
        run(args)
        return 0
    except GenerationException as e:
        log_exception(logger, e, context={"country": args.country, "seed": args.seed})
        print(f"\n✗ Generation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
