"""Genetics package for Smartyplants.

This package provides the gene model and its expression rules:

- Trait enums and the static gene table (``gene``)
- Dominance-based phenotype resolution (``expression``)

Splicing lives in ``smartyplants.breeding`` because it produces seeds.
"""

# Re-export main classes for package convenience
from smartyplants.genetics.expression import Phenotype, expressed_gene, resolve_phenotype
from smartyplants.genetics.gene import (
    DEFAULT_TRAITS,
    GENE_TABLE,
    FruitColor,
    FruitStyle,
    Gene,
    GeneCategory,
    GeneDominance,
    StemColor,
    StemStyle,
    Trait,
    default_gene,
)

__all__ = [
    # Gene model
    "Gene",
    "GeneCategory",
    "GeneDominance",
    "Trait",
    "default_gene",
    # Trait variants
    "StemStyle",
    "StemColor",
    "FruitStyle",
    "FruitColor",
    # Tables
    "GENE_TABLE",
    "DEFAULT_TRAITS",
    # Expression
    "Phenotype",
    "expressed_gene",
    "resolve_phenotype",
]
