"""Splicing operations for combining two parent plants into a seed.

For every gene category, each parent contributes one gene picked uniformly
from the genes it carries for that category. A parent with no gene for a
category contributes the category's default gene instead. The seed therefore
always carries exactly two genes per category, eight in total, however many
genes the parents have.
"""

import logging
from typing import List, Optional

from smartyplants.genetics import Gene, GeneCategory, default_gene
from smartyplants.plant import Plant, Seed
from smartyplants.util.rng import RandomSource, require_rng_param

logger = logging.getLogger(__name__)

SPLICED_GENE_COUNT = 2 * len(GeneCategory)


def pick_parent_gene(plant: Plant, category: GeneCategory, rng: RandomSource) -> Gene:
    """Choose the gene *plant* passes on for *category*."""
    candidates = [gene for gene in plant.genes if gene.category is category]
    if not candidates:
        return default_gene(category)
    return rng.choice(candidates)


def splice_plants(plant_1: Plant, plant_2: Plant, rng: Optional[RandomSource] = None) -> Seed:
    """Splice together the genes of two plants.

    Args:
        plant_1: First parent
        plant_2: Second parent
        rng: Random source for the per-category gene picks

    Returns:
        A new Seed; the caller decides whether there is room to keep it
    """
    rng = require_rng_param(rng, "splice_plants")
    genes: List[Gene] = []
    for category in GeneCategory:
        genes.append(pick_parent_gene(plant_1, category, rng))
        genes.append(pick_parent_gene(plant_2, category, rng))

    seed = Seed(parent_name_1=plant_1.name, parent_name_2=plant_2.name, genes=tuple(genes))
    logger.debug("Spliced %s with %s: %s", plant_1.display_name, plant_2.display_name, seed.genes)
    return seed
