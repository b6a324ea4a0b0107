"""Game session state and the win/lose rules.

GameState owns everything a running game needs: the garden, the seed tray,
the season counter, the outcome and the random source. The presentation
layer owns the GameState and calls into it when the player acts:

- Dropping one plant onto another -> ``splice``
- Dropping a seed onto a garden slot -> ``plant_seed``
- Clicking "Next Season" -> ``next_season``
- Clicking "Restart" -> ``restart``

Win: any living plant reaches GOAL_INTELLIGENCE.
Lose: no living plants, no planted seeds and an empty seed tray.
Lose is checked before win so a win takes precedence if both hold.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from smartyplants.breeding import splice_plants
from smartyplants.config.garden import GOAL_INTELLIGENCE, MAX_SEEDS, NUM_PLANTERS, STARTING_SEASON
from smartyplants.exceptions import GameOverError
from smartyplants.genetics import FruitColor, FruitStyle, Gene, StemColor, StemStyle
from smartyplants.naming import PlantName
from smartyplants.plant import Plant, Seed
from smartyplants.planters import (
    DeadPlant,
    Empty,
    PlantedPlant,
    PlantedSeed,
    Planter,
    Planters,
    SeasonReport,
    Seeds,
    planter_kind,
)
from smartyplants.result import Err, Ok, Result
from smartyplants.util.rng import RandomSource, make_rng

logger = logging.getLogger(__name__)


class GameOutcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


# =============================================================================
# Starting Garden
# =============================================================================


def starting_plants() -> List[Plant]:
    """The three plants every game starts with."""
    roberto = Plant(
        name=PlantName.of("ro", "ber", "to"),
        genes=(
            Gene(StemColor.GREEN),
            Gene(StemColor.BROWN),
            Gene(StemStyle.CURVY),
            Gene(StemStyle.LOOPY),
            Gene(FruitStyle.CIRCLE),
            Gene(FruitStyle.SQUARE),
            Gene(FruitColor.RED),
            Gene(FruitColor.PURPLE),
        ),
    )
    jessica = Plant(
        name=PlantName.of("jes", "si", "ca"),
        genes=(
            Gene(StemColor.BROWN),
            Gene(StemColor.BLUE),
            Gene(StemStyle.WIGGLY),
            Gene(StemStyle.LOOPY),
            Gene(FruitStyle.SQUARE),
            Gene(FruitStyle.TRIANGLE),
            Gene(FruitColor.RED),
            Gene(FruitColor.YELLOW),
        ),
    )
    francine = Plant(
        name=PlantName.of("fran", "ci", "ne"),
        genes=(
            Gene(StemColor.GREEN),
            Gene(StemColor.BLUE),
            Gene(StemStyle.WIGGLY),
            Gene(StemStyle.ANGULAR),
            Gene(FruitStyle.CIRCLE),
            Gene(FruitStyle.TRIANGLE),
            Gene(FruitColor.PURPLE),
            Gene(FruitColor.YELLOW),
        ),
    )
    return [roberto, jessica, francine]


def generate_starting_plants() -> Planters:
    """The starting garden: three plants, the remaining slots empty."""
    slots: List[Planter] = [PlantedPlant(plant) for plant in starting_plants()]
    slots.extend(Empty() for _ in range(NUM_PLANTERS - len(slots)))
    return Planters(slots)


# =============================================================================
# Win / Lose Predicates
# =============================================================================


def find_smart_plant(planters: Planters) -> Optional[Tuple[int, Plant]]:
    """First living plant, in slot order, that is smart enough to win."""
    for slot_id, plant in planters.living_plants():
        if plant.get_phenotype().intelligence >= GOAL_INTELLIGENCE:
            return slot_id, plant
    return None


def is_lost(planters: Planters, seeds: Seeds) -> bool:
    """True when no plant, planted seed or stored seed is left anywhere."""
    return not planters.has_growth_potential() and seeds.is_empty


# =============================================================================
# Game State
# =============================================================================


class GameState:
    """A single game of Mr. Smartyplants.

    Attributes:
        planters: The garden slots
        seeds: The seed tray
        season: Current season number, starting at 1
        outcome: Whether the game is still running, won or lost
        winner: The plant that won the game, once there is one
        rng: Random source for every roll in this game
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        planters: Optional[Planters] = None,
        seeds: Optional[Seeds] = None,
        season: int = STARTING_SEASON,
    ):
        self.rng: RandomSource = rng if rng is not None else make_rng()
        self.planters = planters if planters is not None else generate_starting_plants()
        self.seeds = seeds if seeds is not None else Seeds(capacity=MAX_SEEDS)
        self.season = season
        self.outcome = GameOutcome.IN_PROGRESS
        self.winner: Optional[Plant] = None

    @classmethod
    def new(cls, seed: Optional[int] = None) -> "GameState":
        """Start a fresh game, optionally with a seeded RNG."""
        return cls(rng=make_rng(seed))

    @property
    def is_over(self) -> bool:
        return self.outcome is not GameOutcome.IN_PROGRESS

    def restart(self) -> None:
        """Reset to the starting garden, keeping the same RNG."""
        self.planters = generate_starting_plants()
        self.seeds.clear()
        self.season = STARTING_SEASON
        self.outcome = GameOutcome.IN_PROGRESS
        self.winner = None
        logger.info("Game restarted")

    # ----- player moves -----

    def _require_in_progress(self) -> None:
        if self.is_over:
            raise GameOverError(f"Game already {self.outcome.value}; restart to play again")

    def splice(self, slot_1: int, slot_2: int) -> Result[Seed, str]:
        """Splice the plants in two slots into a new seed for the tray.

        Raises:
            GameOverError: If the game has already been won or lost
        """
        self._require_in_progress()
        if slot_1 == slot_2:
            return Err("A plant cannot be spliced with itself")

        parents = []
        for slot_id in (slot_1, slot_2):
            planter = self.planters.with_id(slot_id)
            if planter is None:
                return Err(f"No planter slot {slot_id}")
            if not isinstance(planter, PlantedPlant):
                return Err(f"Slot {slot_id} holds no living plant ({planter_kind(planter)})")
            parents.append(planter.plant)

        if self.seeds.is_full:
            return Err(f"Seed tray is full ({self.seeds.capacity} seeds)")

        seed = splice_plants(parents[0], parents[1], self.rng)
        self.seeds.add(seed)
        logger.info("Spliced %s into a new seed (%d/%d)", seed.display_name, len(self.seeds), self.seeds.capacity)
        return Ok(seed)

    def plant_seed(self, seed_id: int, slot_id: int) -> Result[Planter, str]:
        """Move a seed from the tray into an empty or dead planter slot.

        Raises:
            GameOverError: If the game has already been won or lost
        """
        self._require_in_progress()
        planter = self.planters.with_id(slot_id)
        if planter is None:
            return Err(f"No planter slot {slot_id}")
        if not isinstance(planter, (Empty, DeadPlant)):
            return Err(f"Slot {slot_id} is occupied ({planter_kind(planter)})")

        seed = self.seeds.take_with_id(seed_id)
        if seed is None:
            return Err(f"No seed {seed_id} in the tray")

        planted = PlantedSeed(seed)
        self.planters.replace(slot_id, planted)
        logger.info("Planted %s in slot %d", seed.display_name, slot_id)
        return Ok(planted)

    def next_season(self) -> SeasonReport:
        """Advance the garden one season, then check for a win or loss.

        Raises:
            GameOverError: If the game has already been won or lost
        """
        self._require_in_progress()

        report = self.planters.next_season(self.rng)
        self.season += 1
        logger.info(
            "Season %d: %d grown, %d destroyed by pests",
            self.season,
            len(report.grown),
            len(report.destroyed),
        )
        self.check_outcome()
        return report

    def check_outcome(self) -> GameOutcome:
        """Re-evaluate win/lose. A decided outcome stays until restart."""
        if self.is_over:
            return self.outcome

        if is_lost(self.planters, self.seeds):
            self.outcome = GameOutcome.LOST

        found = find_smart_plant(self.planters)
        if found is not None:
            slot_id, plant = found
            self.outcome = GameOutcome.WON
            self.winner = plant
            logger.info("%s in slot %d is smart enough to win", plant.display_name, slot_id)
        elif self.outcome is GameOutcome.LOST:
            logger.info("Every plant and seed is gone; game lost in season %d", self.season)

        return self.outcome

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data view of the game for logging and API payloads."""
        return {
            "season": self.season,
            "outcome": self.outcome.value,
            "winner": self.winner.display_name if self.winner else None,
            "planters": [planter_kind(p) for p in self.planters],
            "seeds": [seed.display_name for seed in self.seeds],
        }
