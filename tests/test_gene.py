"""Tests for the gene model and the static gene table."""

import pytest

from smartyplants.exceptions import GeneticsError
from smartyplants.genetics import (
    DEFAULT_TRAITS,
    GENE_TABLE,
    FruitColor,
    FruitStyle,
    Gene,
    GeneCategory,
    GeneDominance,
    StemColor,
    StemStyle,
    default_gene,
)


class TestGeneTable:
    """Every trait variant has exactly one table entry."""

    def test_every_variant_is_listed(self):
        variants = [*StemStyle, *StemColor, *FruitStyle, *FruitColor]
        assert set(GENE_TABLE) == set(variants)
        assert len(GENE_TABLE) == 13

    @pytest.mark.parametrize(
        "trait,dominance,intelligence,pest_resistance",
        [
            (StemStyle.CURVY, GeneDominance.DOMINANT, -1, 1),
            (StemStyle.LOOPY, GeneDominance.RECESSIVE, 4, -1),
            (StemStyle.ANGULAR, GeneDominance.RECESSIVE, 5, -1),
            (StemStyle.WIGGLY, GeneDominance.DOMINANT, 1, 3),
            (StemColor.BROWN, GeneDominance.DOMINANT, -1, 4),
            (StemColor.GREEN, GeneDominance.DOMINANT, -1, 2),
            (StemColor.BLUE, GeneDominance.RECESSIVE, 5, -1),
            (FruitStyle.CIRCLE, GeneDominance.DOMINANT, -1, 3),
            (FruitStyle.SQUARE, GeneDominance.DOMINANT, 3, -1),
            (FruitStyle.TRIANGLE, GeneDominance.RECESSIVE, 4, 1),
            (FruitColor.RED, GeneDominance.DOMINANT, -1, 3),
            (FruitColor.PURPLE, GeneDominance.DOMINANT, 2, 1),
            (FruitColor.YELLOW, GeneDominance.RECESSIVE, 4, -3),
        ],
    )
    def test_gene_properties_come_from_table(self, trait, dominance, intelligence, pest_resistance):
        gene = Gene(trait)
        assert gene.dominance is dominance
        assert gene.intelligence_effect == intelligence
        assert gene.pest_resistance_effect == pest_resistance
        assert gene.is_dominant == (dominance is GeneDominance.DOMINANT)


class TestGeneCategory:
    def test_category_follows_trait_type(self):
        assert Gene(StemStyle.LOOPY).category is GeneCategory.STEM_STYLE
        assert Gene(StemColor.BLUE).category is GeneCategory.STEM_COLOR
        assert Gene(FruitStyle.SQUARE).category is GeneCategory.FRUIT_STYLE
        assert Gene(FruitColor.YELLOW).category is GeneCategory.FRUIT_COLOR

    def test_trait_type_round_trips(self):
        for category in GeneCategory:
            for trait in category.trait_type:
                assert GeneCategory.of(trait) is category

    def test_unknown_trait_is_rejected(self):
        with pytest.raises(GeneticsError):
            GeneCategory.of("blue")
        with pytest.raises(GeneticsError):
            Gene("blue")


class TestGeneValue:
    def test_genes_compare_by_trait(self):
        assert Gene(StemColor.BLUE) == Gene.for_trait(StemColor.BLUE)
        assert Gene(StemColor.BLUE) != Gene(StemColor.GREEN)
        assert len({Gene(StemColor.BLUE), Gene(StemColor.BLUE)}) == 1

    def test_genes_are_immutable(self):
        gene = Gene(StemColor.BLUE)
        with pytest.raises(AttributeError):
            gene.trait = StemColor.GREEN

    def test_repr_names_variant(self):
        assert repr(Gene(FruitColor.PURPLE)) == "Gene(FruitColor.PURPLE)"


class TestDefaultGenes:
    def test_defaults(self):
        assert DEFAULT_TRAITS == {
            GeneCategory.STEM_STYLE: StemStyle.CURVY,
            GeneCategory.STEM_COLOR: StemColor.GREEN,
            GeneCategory.FRUIT_STYLE: FruitStyle.CIRCLE,
            GeneCategory.FRUIT_COLOR: FruitColor.RED,
        }

    def test_default_gene_matches_category(self):
        for category in GeneCategory:
            gene = default_gene(category)
            assert gene.category is category
            assert gene.is_dominant
