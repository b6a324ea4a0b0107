"""Garden slots, the seed tray, and seasonal advancement.

The garden is a fixed row of planters. Each planter holds exactly one of:

- PlantedPlant: a living plant
- DeadPlant: a plant that pests destroyed (kept so it can still be shown)
- PlantedSeed: a seed that will grow next season
- Empty: nothing

Advancing a season runs two passes over every slot, strictly in order:

1. Growth pass: every planted seed grows into a plant.
2. Pest pass: every living plant with pest resistance below
   PEST_DESTRUCTION_THRESHOLD risks destruction. The chance is the deficit
   times PEST_DESTRUCTION_CHANCE, unclamped, so a large deficit means
   certain death. A plant dies when a uniform draw in [0, 1) is less than or
   equal to that chance.

Seeds that grew in the first pass face pests in the second, so a freshly
grown plant can die in its very first season.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from smartyplants.config.garden import (
    MAX_SEEDS,
    PEST_DESTRUCTION_CHANCE,
    PEST_DESTRUCTION_THRESHOLD,
)
from smartyplants.plant import Plant, Seed
from smartyplants.result import Err, Ok, Result
from smartyplants.util.rng import RandomSource, require_rng_param

logger = logging.getLogger(__name__)


# =============================================================================
# Planter Variants
# =============================================================================


@dataclass(frozen=True)
class PlantedPlant:
    plant: Plant


@dataclass(frozen=True)
class DeadPlant:
    plant: Plant


@dataclass(frozen=True)
class PlantedSeed:
    seed: Seed


@dataclass(frozen=True)
class Empty:
    pass


Planter = Union[PlantedPlant, DeadPlant, PlantedSeed, Empty]


def planter_kind(planter: Planter) -> str:
    """Short tag for a planter variant, used in logs and API payloads."""
    if isinstance(planter, PlantedPlant):
        return "plant"
    if isinstance(planter, DeadPlant):
        return "dead_plant"
    if isinstance(planter, PlantedSeed):
        return "seed"
    return "empty"


def pest_destruction_chance(pest_resistance: int) -> float:
    """Chance that pests destroy a plant this season.

    Zero at or above the threshold. Below it, grows by
    PEST_DESTRUCTION_CHANCE per point of deficit and may exceed 1.0.
    """
    if pest_resistance >= PEST_DESTRUCTION_THRESHOLD:
        return 0.0
    difference = PEST_DESTRUCTION_THRESHOLD - pest_resistance
    return difference * PEST_DESTRUCTION_CHANCE


@dataclass
class SeasonReport:
    """What happened to the garden during one season advance."""

    grown: List[int] = field(default_factory=list)
    destroyed: List[int] = field(default_factory=list)


# =============================================================================
# Planters
# =============================================================================


class Planters:
    """The garden: a fixed number of index-addressed planters.

    The slot count never changes after construction; contents are swapped
    with ``replace``.
    """

    def __init__(self, slots: Iterable[Planter]):
        self._slots: List[Planter] = list(slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Planter]:
        return iter(self._slots)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Planters):
            return NotImplemented
        return self._slots == other._slots

    def __repr__(self) -> str:
        return f"Planters({self._slots!r})"

    def with_id(self, slot_id: int) -> Optional[Planter]:
        """Return the planter in *slot_id*, or None when out of range."""
        if 0 <= slot_id < len(self._slots):
            return self._slots[slot_id]
        return None

    def replace(self, slot_id: int, planter: Planter) -> None:
        if not 0 <= slot_id < len(self._slots):
            raise IndexError(f"No planter slot {slot_id}")
        self._slots[slot_id] = planter

    def living_plants(self) -> Iterator[Tuple[int, Plant]]:
        """Yield ``(slot_id, plant)`` for every living plant in slot order."""
        for slot_id, planter in enumerate(self._slots):
            if isinstance(planter, PlantedPlant):
                yield slot_id, planter.plant

    def has_growth_potential(self) -> bool:
        """True while any slot holds a living plant or a planted seed."""
        return any(isinstance(p, (PlantedPlant, PlantedSeed)) for p in self._slots)

    def next_season(self, rng: Optional[RandomSource] = None) -> SeasonReport:
        """Advance every slot by one season, in place.

        Args:
            rng: Random source for seedling names and pest draws

        Returns:
            SeasonReport listing which slots grew and which were destroyed
        """
        rng = require_rng_param(rng, "Planters.next_season")
        report = SeasonReport()

        # Growth pass
        for slot_id, planter in enumerate(self._slots):
            if isinstance(planter, PlantedSeed):
                self._slots[slot_id] = PlantedPlant(planter.seed.grow(rng))
                report.grown.append(slot_id)

        # Pest pass
        for slot_id, planter in enumerate(self._slots):
            if not isinstance(planter, PlantedPlant):
                continue
            pest_resistance = planter.plant.get_phenotype().pest_resistance
            if pest_resistance >= PEST_DESTRUCTION_THRESHOLD:
                continue
            chance = pest_destruction_chance(pest_resistance)
            if rng.random() <= chance:
                self._slots[slot_id] = DeadPlant(planter.plant)
                report.destroyed.append(slot_id)
                logger.info(
                    "Pests destroyed %s in slot %d (resistance %d, chance %.2f)",
                    planter.plant.display_name,
                    slot_id,
                    pest_resistance,
                    chance,
                )

        return report


def advance_season(planters: Planters, rng: Optional[RandomSource] = None) -> SeasonReport:
    """Functional spelling of ``Planters.next_season``."""
    return planters.next_season(rng)


# =============================================================================
# Seed Tray
# =============================================================================


class Seeds:
    """Ordered seed inventory with a fixed capacity.

    Seeds are appended by splicing and taken out by index when planted;
    later seeds shift down to fill the gap.
    """

    def __init__(self, seeds: Iterable[Seed] = (), capacity: int = MAX_SEEDS):
        self._seeds: List[Seed] = list(seeds)
        self.capacity = capacity
        if len(self._seeds) > capacity:
            raise ValueError(f"{len(self._seeds)} seeds exceed capacity {capacity}")

    def __len__(self) -> int:
        return len(self._seeds)

    def __iter__(self) -> Iterator[Seed]:
        return iter(self._seeds)

    def __repr__(self) -> str:
        return f"Seeds({self._seeds!r}, capacity={self.capacity})"

    @property
    def is_full(self) -> bool:
        return len(self._seeds) >= self.capacity

    @property
    def is_empty(self) -> bool:
        return not self._seeds

    def add(self, seed: Seed) -> Result[int, str]:
        """Append a seed, returning its index, or Err when the tray is full."""
        if self.is_full:
            return Err(f"Seed tray is full ({self.capacity} seeds)")
        self._seeds.append(seed)
        return Ok(len(self._seeds) - 1)

    def with_id(self, seed_id: int) -> Optional[Seed]:
        if 0 <= seed_id < len(self._seeds):
            return self._seeds[seed_id]
        return None

    def take_with_id(self, seed_id: int) -> Optional[Seed]:
        """Remove and return the seed at *seed_id*, or None when out of range."""
        if 0 <= seed_id < len(self._seeds):
            return self._seeds.pop(seed_id)
        return None

    def clear(self) -> None:
        self._seeds.clear()
