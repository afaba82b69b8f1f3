"""
Shared fixtures for the test suite.
"""
import sys
from pathlib import Path

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from trainer_architect.habitats import Habitat  # noqa: E402
from trainer_architect.species import (  # noqa: E402
    BaseStats, EvoMethod, EvolutionEdge, SpeciesRecord, SpeciesRepository, Tier,
)


def make_species(dex, name, types=("Normal",), stats=(50, 50, 50, 50, 50, 50),
                 habitats=(Habitat.GRASSLAND,), tier=Tier.COMMON, evolutions=(), **flags):
    """Build a SpeciesRecord with terse defaults."""
    return SpeciesRecord(
        id=dex,
        name=name,
        types=tuple(types),
        base_stats=BaseStats(*stats),
        abilities=(f"{name} Ability",),
        habitats=frozenset(habitats),
        tier=tier,
        evolutions=tuple(EvolutionEdge(*e) for e in evolutions),
        **flags,
    )


@pytest.fixture(scope="session")
def repository():
    """The bundled Gen 1-3 repository, built once per session."""
    from trainer_architect.adapters.pokedex_adapter import build_default_repository
    return build_default_repository()


@pytest.fixture(scope="session")
def index(repository):
    from trainer_architect.candidate_index import CandidateIndex
    return CandidateIndex(repository)


@pytest.fixture(scope="session")
def learnsets():
    from trainer_architect.adapters.learnset_adapter import build_default_learnsets
    return build_default_learnsets()


@pytest.fixture(scope="session")
def generator(repository, learnsets, index):
    from trainer_architect.team_generator import TeamGenerator
    return TeamGenerator(repository, learnsets, index=index)


@pytest.fixture
def seeded_rng():
    """Deterministic Gen 3 LCRNG source."""
    from trainer_architect.rng import Gen3Random
    return Gen3Random(0x5EED)


@pytest.fixture
def line_repository():
    """
    A tiny hand-built world: one three-stage LEVEL line, one TRADE line and
    the Gen 3 safe species, all living in Grassland.
    """
    return SpeciesRepository([
        make_species(252, "Sprout", ("Grass",), (40, 45, 35, 65, 55, 70),
                     evolutions=[(253, EvoMethod.LEVEL, 16)]),
        make_species(253, "Sapling", ("Grass",), (50, 65, 45, 85, 65, 95),
                     evolutions=[(254, EvoMethod.LEVEL, 36)]),
        make_species(254, "Timber", ("Grass",), (70, 85, 65, 105, 85, 120),
                     tier=Tier.RARE),
        make_species(255, "Pebble", ("Rock", "Ground"), (40, 80, 100, 30, 30, 20),
                     evolutions=[(256, EvoMethod.TRADE, None)]),
        make_species(256, "Boulder", ("Rock", "Ground"), (80, 120, 130, 55, 65, 45),
                     tier=Tier.RARE),
        make_species(261, "Poochyena", ("Dark",), (35, 55, 35, 30, 30, 35)),
        make_species(263, "Zigzagoon", ("Normal",), (38, 30, 41, 30, 41, 60)),
        make_species(265, "Wurmple", ("Bug",), (45, 45, 35, 20, 30, 20)),
        make_species(276, "Taillow", ("Normal", "Flying"), (40, 55, 30, 30, 30, 85)),
        make_species(10, "Caterpie", ("Bug",), (45, 30, 35, 20, 20, 45),
                     habitats=(Habitat.FOREST,)),
    ])
