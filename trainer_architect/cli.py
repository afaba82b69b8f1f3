"""
cli – Command-line front end for the team generator.

    trainer-architect --habitat Forest --levels 12 15 --archetype "Bug Catcher"
    trainer-architect --habitat Cave --habitat Mountain --levels 40 45 \\
        --archetype "Gym Leader" --difficulty Hard --seed 0x5EED --json
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from trainer_architect.archetypes import ARCHETYPES
from trainer_architect.config import DEFAULT_SCOPE, GENERATION_SCOPES
from trainer_architect.difficulty import AUTO, Difficulty
from trainer_architect.errors import ConfigurationError
from trainer_architect.rng import Gen3Random
from trainer_architect.selection import BATTLE_STYLES
from trainer_architect.team_generator import GeneratedTeam, GenerationRequest, TeamGenerator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trainer-architect",
        description="Gen 3 Trainer Architect – procedural trainer teams",
    )
    parser.add_argument(
        "--habitat",
        action="append",
        required=True,
        help="Habitat tag, e.g. Forest, Cave, Water (repeatable)",
    )
    parser.add_argument(
        "--levels",
        nargs=2,
        type=int,
        metavar=("MIN", "MAX"),
        required=True,
        help="Level range of the team",
    )
    parser.add_argument(
        "--archetype", "-a",
        default="Youngster",
        help=f"Trainer class (default: Youngster; one of {', '.join(sorted(ARCHETYPES))})",
    )
    parser.add_argument(
        "--difficulty", "-d",
        default=AUTO,
        choices=[AUTO] + [d.value for d in Difficulty],
        help="Difficulty tier (default: Auto, picked from the level range)",
    )
    parser.add_argument(
        "--scope",
        default=DEFAULT_SCOPE,
        choices=list(GENERATION_SCOPES),
        help=f"Generation (dex range) scope (default: {DEFAULT_SCOPE})",
    )
    parser.add_argument(
        "--team-size",
        type=int,
        default=None,
        help="Fixed team size 1-6 (default: derived from archetype and levels)",
    )
    parser.add_argument(
        "--style",
        default=None,
        choices=list(BATTLE_STYLES),
        help="Battle style: biases species types and move categories",
    )
    parser.add_argument(
        "--seed",
        type=lambda x: int(x, 0),
        default=None,
        help="Gen 3 LCRNG seed for a reproducible team (hex or decimal)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the team record as JSON",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def format_team(team: GeneratedTeam) -> str:
    lines = [
        "=" * 60,
        f"  {team.archetype.name} – {team.difficulty.value} – "
        f"{'/'.join(h.value for h in team.habitats)}",
        "=" * 60,
    ]
    for slot, member in enumerate(team.members, start=1):
        prov = member.provenance
        tags = []
        if prov.evolved:
            tags.append("evolved")
        if prov.demoted:
            tags.append("demoted")
        tags.extend(prov.fallback_flags)
        suffix = f"  [{', '.join(tags)}]" if tags else ""
        lines.append(
            f"  {slot}. {member.species.name:<12} Lv{member.level:<3} "
            f"{'/'.join(member.species.types):<16} {member.role}{suffix}")
        lines.append(f"     {member.ability or '-'} | {', '.join(member.moves)}")
    coverage = team.coverage
    if coverage is not None:
        lines.append("-" * 60)
        lines.append(f"  Coverage {coverage.offensive_coverage:.1f}%  grade {coverage.grade}")
        if coverage.critical_weaknesses:
            lines.append(f"  Critical weaknesses: {', '.join(coverage.critical_weaknesses)}")
        for hint in coverage.suggestions:
            lines.append(f"  • {hint}")
        for repl in coverage.replacements:
            lines.append(f"  → swap {repl.replace_name} for {repl.candidate_name} ({repl.gap_type})")
    for notice in team.notices:
        lines.append(f"  ! {notice.message}")
    lines.append("=" * 60)
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    rng = None
    if args.seed is not None:
        rng = Gen3Random(args.seed)
        logger.debug("Using Gen 3 LCRNG seed 0x%08X", args.seed & 0xFFFF_FFFF)
    request = GenerationRequest(
        habitats=tuple(args.habitat),
        level_min=args.levels[0],
        level_max=args.levels[1],
        archetype=args.archetype,
        difficulty=args.difficulty,
        team_size=args.team_size,
        scope=args.scope,
        battle_style=args.style,
    )
    generator = TeamGenerator.with_defaults(rng=rng)
    try:
        team = generator.generate(request)
    except ConfigurationError as exc:
        parser.error(str(exc))

    if args.json:
        data = team.to_dict()
        data["assessment"] = generator.assess(team).to_dict()
        print(json.dumps(data, indent=2))
    else:
        print(format_team(team))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
