"""
type_chart – Gen 3 type effectiveness.

Seventeen canonical types (no Fairy).  Steel still resists Ghost and Dark.
Only non-neutral matchups are listed; everything else is 1×.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

TYPES: Tuple[str, ...] = (
    "Normal", "Fire", "Water", "Electric", "Grass", "Ice",
    "Fighting", "Poison", "Ground", "Flying", "Psychic", "Bug",
    "Rock", "Ghost", "Dragon", "Dark", "Steel",
)

# attacking type → {defending type: multiplier}
TYPE_CHART: Dict[str, Dict[str, float]] = {
    "Normal": {"Rock": 0.5, "Steel": 0.5, "Ghost": 0.0},
    "Fire": {"Fire": 0.5, "Water": 0.5, "Grass": 2.0, "Ice": 2.0, "Bug": 2.0,
             "Rock": 0.5, "Dragon": 0.5, "Steel": 2.0},
    "Water": {"Fire": 2.0, "Water": 0.5, "Grass": 0.5, "Ground": 2.0,
              "Rock": 2.0, "Dragon": 0.5},
    "Electric": {"Water": 2.0, "Electric": 0.5, "Grass": 0.5, "Ground": 0.0,
                 "Flying": 2.0, "Dragon": 0.5},
    "Grass": {"Fire": 0.5, "Water": 2.0, "Grass": 0.5, "Poison": 0.5,
              "Ground": 2.0, "Flying": 0.5, "Bug": 0.5, "Rock": 2.0,
              "Dragon": 0.5, "Steel": 0.5},
    "Ice": {"Fire": 0.5, "Water": 0.5, "Grass": 2.0, "Ice": 0.5, "Ground": 2.0,
            "Flying": 2.0, "Dragon": 2.0, "Steel": 0.5},
    "Fighting": {"Normal": 2.0, "Ice": 2.0, "Poison": 0.5, "Flying": 0.5,
                 "Psychic": 0.5, "Bug": 0.5, "Rock": 2.0, "Ghost": 0.0,
                 "Dark": 2.0, "Steel": 2.0},
    "Poison": {"Grass": 2.0, "Poison": 0.5, "Ground": 0.5, "Rock": 0.5,
               "Ghost": 0.5, "Steel": 0.0},
    "Ground": {"Fire": 2.0, "Electric": 2.0, "Grass": 0.5, "Poison": 2.0,
               "Flying": 0.0, "Bug": 0.5, "Rock": 2.0, "Steel": 2.0},
    "Flying": {"Electric": 0.5, "Grass": 2.0, "Fighting": 2.0, "Bug": 2.0,
               "Rock": 0.5, "Steel": 0.5},
    "Psychic": {"Fighting": 2.0, "Poison": 2.0, "Psychic": 0.5, "Dark": 0.0,
                "Steel": 0.5},
    "Bug": {"Fire": 0.5, "Grass": 2.0, "Fighting": 0.5, "Poison": 0.5,
            "Flying": 0.5, "Psychic": 2.0, "Ghost": 0.5, "Dark": 2.0,
            "Steel": 0.5},
    "Rock": {"Fire": 2.0, "Ice": 2.0, "Fighting": 0.5, "Ground": 0.5,
             "Flying": 2.0, "Bug": 2.0, "Steel": 0.5},
    "Ghost": {"Normal": 0.0, "Psychic": 2.0, "Ghost": 2.0, "Dark": 0.5,
              "Steel": 0.5},
    "Dragon": {"Dragon": 2.0, "Steel": 0.5},
    "Dark": {"Fighting": 0.5, "Psychic": 2.0, "Ghost": 2.0, "Dark": 0.5,
             "Steel": 0.5},
    "Steel": {"Fire": 0.5, "Water": 0.5, "Electric": 0.5, "Ice": 2.0,
              "Rock": 2.0, "Steel": 0.5},
}

_TYPE_LOOKUP = {t.lower(): t for t in TYPES}


def normalize_type(name: str) -> Optional[str]:
    """Canonical spelling of *name*, or None if it is not a Gen 3 type."""
    if not isinstance(name, str):
        return None
    return _TYPE_LOOKUP.get(name.strip().lower())


def effectiveness(attack_type: str, defending_types: Iterable[str]) -> float:
    """Damage multiplier of *attack_type* against a (dual) typing."""
    row = TYPE_CHART[attack_type]
    multiplier = 1.0
    for defending in defending_types:
        multiplier *= row.get(defending, 1.0)
    return multiplier


def super_effective_targets(attack_type: str) -> List[str]:
    """Defending types that *attack_type* hits for 2×."""
    return [t for t, m in TYPE_CHART[attack_type].items() if m > 1.0]


def weaknesses(defending_types: Iterable[str]) -> List[str]:
    defending = tuple(defending_types)
    return [t for t in TYPES if effectiveness(t, defending) > 1.0]


def resistances(defending_types: Iterable[str]) -> List[str]:
    """Attacking types that do less than neutral damage (immunities included)."""
    defending = tuple(defending_types)
    return [t for t in TYPES if effectiveness(t, defending) < 1.0]
