"""Gene definitions for Smartyplants.

This module provides:
- The four trait enums (StemStyle, StemColor, FruitStyle, FruitColor)
- GeneCategory: which of the four traits a gene controls
- GeneDominance: expression priority of a gene
- Gene: an immutable value wrapping one trait variant
- The static gene table mapping every variant to its dominance and effects

A Gene only stores its trait variant. Its category is derived from the
variant's enum type and its dominance and stat effects are read from the
gene table, so a gene can never disagree with itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Type, Union

from smartyplants.exceptions import GeneticsError

# =============================================================================
# Trait Variants
# =============================================================================


class StemStyle(Enum):
    CURVY = "curvy"
    LOOPY = "loopy"
    ANGULAR = "angular"
    WIGGLY = "wiggly"


class StemColor(Enum):
    BROWN = "brown"
    GREEN = "green"
    BLUE = "blue"


class FruitStyle(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"


class FruitColor(Enum):
    RED = "red"
    PURPLE = "purple"
    YELLOW = "yellow"


Trait = Union[StemStyle, StemColor, FruitStyle, FruitColor]


class GeneCategory(Enum):
    """The trait a gene controls.

    Values double as the attribute names on a Phenotype.
    """

    STEM_STYLE = "stem_style"
    STEM_COLOR = "stem_color"
    FRUIT_STYLE = "fruit_style"
    FRUIT_COLOR = "fruit_color"

    @property
    def trait_type(self) -> Type[Enum]:
        return _TRAIT_TYPE_BY_CATEGORY[self]

    @classmethod
    def of(cls, trait: Trait) -> "GeneCategory":
        """Return the category a trait variant belongs to."""
        try:
            return _CATEGORY_BY_TRAIT_TYPE[type(trait)]
        except KeyError:
            raise GeneticsError(f"Not a trait variant: {trait!r}") from None


_TRAIT_TYPE_BY_CATEGORY: Dict[GeneCategory, Type[Enum]] = {
    GeneCategory.STEM_STYLE: StemStyle,
    GeneCategory.STEM_COLOR: StemColor,
    GeneCategory.FRUIT_STYLE: FruitStyle,
    GeneCategory.FRUIT_COLOR: FruitColor,
}
_CATEGORY_BY_TRAIT_TYPE = {trait_type: category for category, trait_type in _TRAIT_TYPE_BY_CATEGORY.items()}


class GeneDominance(Enum):
    """Expression priority. Dominant genes win over recessive ones."""

    DOMINANT = "dominant"
    RECESSIVE = "recessive"


# =============================================================================
# Gene Table
# =============================================================================
# (dominance, intelligence_effect, pest_resistance_effect) for each variant.
# Smart genes tend to be recessive and leave the plant exposed to pests.

_D = GeneDominance.DOMINANT
_R = GeneDominance.RECESSIVE

GENE_TABLE: Dict[Trait, Tuple[GeneDominance, int, int]] = {
    StemStyle.CURVY: (_D, -1, 1),
    StemStyle.LOOPY: (_R, 4, -1),
    StemStyle.ANGULAR: (_R, 5, -1),
    StemStyle.WIGGLY: (_D, 1, 3),
    StemColor.BROWN: (_D, -1, 4),
    StemColor.GREEN: (_D, -1, 2),
    StemColor.BLUE: (_R, 5, -1),
    FruitStyle.CIRCLE: (_D, -1, 3),
    FruitStyle.SQUARE: (_D, 3, -1),
    FruitStyle.TRIANGLE: (_R, 4, 1),
    FruitColor.RED: (_D, -1, 3),
    FruitColor.PURPLE: (_D, 2, 1),
    FruitColor.YELLOW: (_R, 4, -3),
}

# Expressed when a plant carries no gene at all for a category
DEFAULT_TRAITS: Dict[GeneCategory, Trait] = {
    GeneCategory.STEM_STYLE: StemStyle.CURVY,
    GeneCategory.STEM_COLOR: StemColor.GREEN,
    GeneCategory.FRUIT_STYLE: FruitStyle.CIRCLE,
    GeneCategory.FRUIT_COLOR: FruitColor.RED,
}


@dataclass(frozen=True)
class Gene:
    """One heritable trait variant.

    Attributes:
        trait: The trait variant this gene expresses, e.g. ``StemColor.BLUE``
    """

    trait: Trait

    def __post_init__(self) -> None:
        if self.trait not in GENE_TABLE:
            raise GeneticsError(f"No gene table entry for {self.trait!r}")

    @classmethod
    def for_trait(cls, trait: Trait) -> "Gene":
        return cls(trait)

    @property
    def category(self) -> GeneCategory:
        return GeneCategory.of(self.trait)

    @property
    def dominance(self) -> GeneDominance:
        return GENE_TABLE[self.trait][0]

    @property
    def intelligence_effect(self) -> int:
        return GENE_TABLE[self.trait][1]

    @property
    def pest_resistance_effect(self) -> int:
        return GENE_TABLE[self.trait][2]

    @property
    def is_dominant(self) -> bool:
        return self.dominance is GeneDominance.DOMINANT

    def __repr__(self) -> str:
        return f"Gene({type(self.trait).__name__}.{self.trait.name})"


def default_gene(category: GeneCategory) -> Gene:
    """Return the gene a plant falls back on when it has none for *category*."""
    return Gene(DEFAULT_TRAITS[category])
