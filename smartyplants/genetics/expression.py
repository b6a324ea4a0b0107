"""Gene expression logic for translating a gene list into a phenotype.

This module contains the functional logic to decide which genes a plant
expresses and what stats it ends up with. Keeping it apart from Plant makes
the dominance rules easy to test in isolation.

Expression rule, applied to each category independently:
1. The first dominant gene of the category, in gene-list order
2. Otherwise the first recessive gene of the category
3. Otherwise the category's default gene

Stats are the plain sums of the four expressed genes' effects. They are not
clamped and can go negative.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from smartyplants.genetics.gene import (
    FruitColor,
    FruitStyle,
    Gene,
    GeneCategory,
    StemColor,
    StemStyle,
    Trait,
    default_gene,
)


@dataclass(frozen=True)
class Phenotype:
    """Expressed traits and aggregate stats of a plant."""

    stem_style: StemStyle
    stem_color: StemColor
    fruit_style: FruitStyle
    fruit_color: FruitColor
    intelligence: int
    pest_resistance: int

    def trait_for(self, category: GeneCategory) -> Trait:
        return getattr(self, category.value)


def expressed_gene(genes: Iterable[Gene], category: GeneCategory) -> Gene:
    """Pick the gene a plant expresses for one category.

    Dominance rank decides first, list position second. This is not "pick
    the strongest effect": a dominant gene with poor stats beats a recessive
    gene with great ones.
    """
    first_recessive: Optional[Gene] = None
    for gene in genes:
        if gene.category is not category:
            continue
        if gene.is_dominant:
            return gene
        if first_recessive is None:
            first_recessive = gene
    if first_recessive is not None:
        return first_recessive
    return default_gene(category)


def resolve_phenotype(genes: Iterable[Gene]) -> Phenotype:
    """Compute the phenotype for a gene list. Deterministic, no side effects."""
    genes = tuple(genes)
    traits: Dict[str, Trait] = {}
    intelligence = 0
    pest_resistance = 0

    for category in GeneCategory:
        gene = expressed_gene(genes, category)
        traits[category.value] = gene.trait
        intelligence += gene.intelligence_effect
        pest_resistance += gene.pest_resistance_effect

    return Phenotype(intelligence=intelligence, pest_resistance=pest_resistance, **traits)
