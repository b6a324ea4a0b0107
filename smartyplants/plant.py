"""Plants and the seeds they are bred into."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from smartyplants.genetics import Gene, Phenotype, resolve_phenotype
from smartyplants.naming import PlantName, combine_names
from smartyplants.util.rng import RandomSource, require_rng_param

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Plant:
    """A named plant and its genes.

    Genes form an unordered multiset: duplicates are allowed and there is no
    fixed length. Only the order *within* a category matters, as a
    tie-break during expression.
    """

    name: PlantName
    genes: Tuple[Gene, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "genes", tuple(self.genes))

    @property
    def display_name(self) -> str:
        return str(self.name)

    def get_phenotype(self) -> Phenotype:
        """Expressed traits and stats; recomputed on every call."""
        return resolve_phenotype(self.genes)


@dataclass(frozen=True)
class Seed:
    """The result of splicing two plants, waiting to be planted.

    Parent names are kept verbatim; the child's name is only rolled when
    the seed grows.
    """

    parent_name_1: PlantName
    parent_name_2: PlantName
    genes: Tuple[Gene, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "genes", tuple(self.genes))

    @property
    def display_name(self) -> str:
        return f"{self.parent_name_1} x {self.parent_name_2}"

    def grow(self, rng: Optional[RandomSource] = None) -> Plant:
        """Grow into a plant.

        The genes carry over unchanged; only the name is randomized.
        """
        rng = require_rng_param(rng, "Seed.grow")
        plant = Plant(name=combine_names(self.parent_name_1, self.parent_name_2, rng), genes=self.genes)
        logger.debug("Seed %s grew into %s", self.display_name, plant.display_name)
        return plant
