"""
moveset – Level-appropriate move loadouts for resolved species.

Sources, best first:
  1. authentic level-up learnset
  2. legacy per-level moveset table
  3. type heuristic: one representative move per species type for the
     level band, padded with filler moves

A learnset loadout made only of trivial moves (Tackle, Growl ...) is
escalated to the heuristic, keeping at most one of the trivial moves.

A battle style, when given, replaces the archetype's recent/mixed policy:
the four slots are shared out between aggressive, defensive and status
moves by the style's quota, and the heuristic pads with moves of the
style's favoured categories.  Every result holds 1-4 unique moves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from trainer_architect.errors import ConfigurationError, MovesetFallbackNotice
from trainer_architect.learnsets import Learnset, LearnsetBook
from trainer_architect.species import SpeciesRecord

logger = logging.getLogger(__name__)

MAX_MOVES = 4
HEURISTIC = "heuristic"

# Level bands: below 10, 10+, 20+, 30+
TYPE_MOVES: Dict[str, Tuple[str, str, str, str]] = {
    "Normal": ("Quick Attack", "Headbutt", "Take Down", "Body Slam"),
    "Fire": ("Ember", "Flame Wheel", "Fire Punch", "Flamethrower"),
    "Water": ("Water Gun", "Bubble Beam", "Surf", "Hydro Pump"),
    "Electric": ("Thunder Shock", "Spark", "Thunder Punch", "Thunderbolt"),
    "Grass": ("Absorb", "Vine Whip", "Razor Leaf", "Giga Drain"),
    "Ice": ("Powder Snow", "Icy Wind", "Aurora Beam", "Ice Beam"),
    "Fighting": ("Karate Chop", "Low Kick", "Brick Break", "Cross Chop"),
    "Poison": ("Poison Sting", "Acid", "Sludge", "Sludge Bomb"),
    "Ground": ("Mud-Slap", "Magnitude", "Dig", "Earthquake"),
    "Flying": ("Gust", "Wing Attack", "Aerial Ace", "Drill Peck"),
    "Psychic": ("Confusion", "Psybeam", "Extrasensory", "Psychic"),
    "Bug": ("Leech Life", "Fury Cutter", "Pin Missile", "Signal Beam"),
    "Rock": ("Rock Throw", "Rock Tomb", "Rock Slide", "Ancient Power"),
    "Ghost": ("Lick", "Astonish", "Night Shade", "Shadow Ball"),
    "Dragon": ("Twister", "Dragon Rage", "Dragon Breath", "Dragon Claw"),
    "Dark": ("Bite", "Pursuit", "Faint Attack", "Crunch"),
    "Steel": ("Metal Claw", "Steel Wing", "Iron Tail", "Meteor Mash"),
}

FILLER_MOVES: Tuple[str, ...] = ("Tackle", "Growl", "Leer", "Tail Whip")

BASIC_MOVES = frozenset({
    "Tackle", "Scratch", "Pound", "Growl", "Leer", "Tail Whip",
    "String Shot", "Harden", "Defense Curl", "Splash",
})

# ── Move categories ──────────────────────────────────────────────────────────
AGGRESSIVE = "aggressive"
DEFENSIVE = "defensive"
STATUS = "status"
OTHER = "other"

MOVE_CATEGORIES: Dict[str, FrozenSet[str]] = {
    AGGRESSIVE: frozenset({
        "Tackle", "Scratch", "Pound", "Quick Attack", "Body Slam", "Headbutt", "Take Down",
        "Double-Edge", "Hyper Beam", "Slash", "Fire Blast", "Solar Beam", "Petal Dance",
        "Thunder", "Psywave", "Seismic Toss", "Submission", "Peck", "Stone Edge",
        "Rock Blast", "Mud Shot", "Iron Head", "Shadow Punch", "Sucker Punch", "Outrage",
        "Blizzard", "Ice Punch", "Poison Jab", "Bubble", "Water Pulse", "Mega Drain",
        "Bug Bite", "Horn Attack", "Fury Attack", "Wrap", "Vine Whip",
    }).union(move for moves in TYPE_MOVES.values() for move in moves),
    DEFENSIVE: frozenset({
        "Harden", "Withdraw", "Defense Curl", "Barrier", "Acid Armor", "Iron Defense",
        "Amnesia", "Calm Mind", "Cosmic Power", "Protect", "Detect", "Endure",
        "Substitute", "Recover", "Rest", "Sleep Talk", "Wish", "Heal Bell",
        "Aromatherapy", "Reflect", "Light Screen", "Safeguard", "Mist", "Stockpile",
        "Swallow", "Ingrain", "Milk Drink", "Soft-Boiled", "Synthesis", "Moonlight",
        "Morning Sun",
    }),
    STATUS: frozenset({
        "Growl", "Leer", "Tail Whip", "String Shot", "Sand Attack", "Smokescreen", "Flash",
        "Kinesis", "Double Team", "Minimize", "Confuse Ray", "Sweet Scent", "Scary Face",
        "Charm", "Attract", "Sleep Powder", "Stun Spore", "Poison Powder", "Toxic",
        "Thunder Wave", "Glare", "Lovely Kiss", "Sing", "Hypnosis", "Will-O-Wisp", "Curse",
        "Mean Look", "Spider Web", "Block", "Roar", "Whirlwind", "Taunt", "Torment",
        "Disable", "Encore", "Flatter", "Swagger", "Tickle", "Leech Seed", "Supersonic",
        "Screech", "Teeter Dance", "Yawn",
    }),
}

# Style → share of the four slots for aggressive, defensive and status moves.
STYLE_MOVE_SHARES: Dict[str, Tuple[float, float, float]] = {
    "Balanced": (0.4, 0.3, 0.3),
    "Aggressive": (0.7, 0.1, 0.2),
    "Defensive": (0.2, 0.5, 0.3),
    "Speedy": (0.5, 0.2, 0.3),
    "Tricky": (0.3, 0.2, 0.5),
}

STYLE_FILLERS: Dict[str, Tuple[str, ...]] = {
    DEFENSIVE: ("Defense Curl", "Protect", "Harden"),
    STATUS: ("Growl", "Leer", "Sand Attack"),
}


def is_basic(move: str) -> bool:
    return move in BASIC_MOVES


def move_category(move: str) -> str:
    for category in (AGGRESSIVE, DEFENSIVE, STATUS):
        if move in MOVE_CATEGORIES[category]:
            return category
    return OTHER


def style_slots(style: str) -> Dict[str, int]:
    """Slots per move category for *style*; ``other`` takes what is left."""
    for name, shares in STYLE_MOVE_SHARES.items():
        if name.lower() == str(style).strip().lower():
            slots = {category: int(MAX_MOVES * share)
                     for category, share in zip((AGGRESSIVE, DEFENSIVE, STATUS), shares)}
            slots[OTHER] = MAX_MOVES - sum(slots.values())
            return slots
    raise ConfigurationError(
        f"Unknown battle style {style!r}; expected one of {', '.join(STYLE_MOVE_SHARES)}")


def type_move(type_name: str, level: int) -> Optional[str]:
    moves = TYPE_MOVES.get(type_name)
    if moves is None:
        return None
    if level >= 30:
        return moves[3]
    if level >= 20:
        return moves[2]
    if level >= 10:
        return moves[1]
    return moves[0]


def _unique(moves: Sequence[str]) -> List[str]:
    return list(dict.fromkeys(m for m in moves if m))


def styled_loadout(known: Sequence[str], style: str, count: int = MAX_MOVES) -> List[str]:
    """
    Pick *count* of the *known* moves by the category quota of *style*.

    Each category's slots go to its most recently learned moves; open slots
    are then topped up from the categories with the larger quota.  The
    result keeps learn order.
    """
    known = _unique(known)
    if len(known) <= count:
        return known
    slots = style_slots(style)
    newest = known[::-1]
    by_category = {category: [m for m in newest if move_category(m) == category]
                   for category in slots}
    picked: List[str] = []
    for category, quota in slots.items():
        picked.extend(by_category[category][:quota])
    for category in sorted(slots, key=lambda c: -slots[c]):
        picked.extend(m for m in by_category[category] if m not in picked)
    chosen = set(picked[:count])
    return [m for m in known if m in chosen]


@dataclass(frozen=True)
class MovesetResult:
    moves: Tuple[str, ...]
    source: str
    escalated: bool = False
    notice: Optional[MovesetFallbackNotice] = None

    @property
    def fallback(self) -> bool:
        return self.source == HEURISTIC


class MovesetResolver:
    def __init__(self, learnsets: LearnsetBook) -> None:
        self.learnsets = learnsets

    @staticmethod
    def from_learnset(learnset: Learnset, level: int, policy: str = "recent",
                      style: Optional[str] = None) -> List[str]:
        if style is not None:
            return styled_loadout(learnset.moves_up_to(level), style)
        if policy == "mixed":
            return learnset.mixed(level, MAX_MOVES)
        return learnset.recent(level, MAX_MOVES)

    def heuristic(self, species: SpeciesRecord, level: int, keep: Sequence[str] = (),
                  style: Optional[str] = None) -> List[str]:
        """Type-based loadout; *keep* moves go first and replace the fillers."""
        typed = [type_move(t, level) for t in species.types]
        if style is None:
            moves = _unique(list(keep) + typed)
        else:
            slots = style_slots(style)
            moves = _unique(list(keep) + typed[:max(1, slots[AGGRESSIVE])]
                            + list(STYLE_FILLERS[DEFENSIVE][:slots[DEFENSIVE]])
                            + list(STYLE_FILLERS[STATUS][:slots[STATUS]]))
        for filler in FILLER_MOVES:
            if len(moves) >= 2 or keep:
                break
            if filler not in moves:
                moves.append(filler)
        return moves[:MAX_MOVES]

    def resolve(self, species: SpeciesRecord, level: int, policy: str = "recent",
                style: Optional[str] = None) -> MovesetResult:
        """
        Loadout for *species* at *level*.  *style* names a battle style and
        takes precedence over *policy* when set.
        """
        trivial: List[str] = []
        for learnset in self.learnsets.sources_for(species.id):
            moves = _unique(self.from_learnset(learnset, level, policy, style))[:MAX_MOVES]
            if not moves:
                continue
            if all(is_basic(m) for m in moves):
                trivial = trivial or moves
                continue
            return MovesetResult(tuple(moves), learnset.source)

        if trivial:
            reason = "learnset only offers basic moves"
            moves = self.heuristic(species, level, keep=trivial[-1:], style=style)
        else:
            reason = "no learnset entries at this level"
            moves = self.heuristic(species, level, style=style)
        notice = MovesetFallbackNotice(
            f"{species.name} Lv{level}: {reason}, used type moves",
            species_id=species.id, level=level, reason=reason)
        logger.debug("%s", notice.message)
        return MovesetResult(tuple(moves), HEURISTIC, escalated=bool(trivial), notice=notice)
