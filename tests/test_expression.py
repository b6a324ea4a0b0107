"""Tests for dominance-based phenotype resolution."""

from smartyplants.game_state import starting_plants
from smartyplants.genetics import (
    FruitColor,
    FruitStyle,
    Gene,
    GeneCategory,
    StemColor,
    StemStyle,
    expressed_gene,
    resolve_phenotype,
)


def genes(*traits):
    return [Gene(t) for t in traits]


class TestExpressedGene:
    """Dominance rank decides first, list position second."""

    def test_first_dominant_wins(self):
        assert expressed_gene(genes(StemColor.BROWN, StemColor.GREEN), GeneCategory.STEM_COLOR).trait is StemColor.BROWN
        assert expressed_gene(genes(StemColor.GREEN, StemColor.BROWN), GeneCategory.STEM_COLOR).trait is StemColor.GREEN

    def test_dominant_beats_earlier_recessive(self):
        gene = expressed_gene(genes(StemColor.BLUE, StemColor.GREEN), GeneCategory.STEM_COLOR)
        assert gene.trait is StemColor.GREEN

    def test_dominant_with_worse_stats_still_wins(self):
        gene = expressed_gene(genes(StemStyle.ANGULAR, StemStyle.CURVY), GeneCategory.STEM_STYLE)
        assert gene.trait is StemStyle.CURVY

    def test_first_recessive_when_no_dominant(self):
        gene = expressed_gene(genes(StemStyle.LOOPY, StemStyle.ANGULAR), GeneCategory.STEM_STYLE)
        assert gene.trait is StemStyle.LOOPY

    def test_other_categories_are_ignored(self):
        gene = expressed_gene(genes(StemColor.BROWN, FruitColor.YELLOW), GeneCategory.FRUIT_COLOR)
        assert gene.trait is FruitColor.YELLOW

    def test_default_when_category_missing(self):
        gene = expressed_gene(genes(StemColor.BLUE), GeneCategory.FRUIT_STYLE)
        assert gene.trait is FruitStyle.CIRCLE


class TestResolvePhenotype:
    def test_empty_gene_list_expresses_defaults(self):
        phenotype = resolve_phenotype([])
        assert phenotype.stem_style is StemStyle.CURVY
        assert phenotype.stem_color is StemColor.GREEN
        assert phenotype.fruit_style is FruitStyle.CIRCLE
        assert phenotype.fruit_color is FruitColor.RED
        assert phenotype.intelligence == -4
        assert phenotype.pest_resistance == 9

    def test_stats_are_sums_of_expressed_genes(self):
        phenotype = resolve_phenotype(genes(StemStyle.LOOPY, StemColor.BLUE, FruitStyle.CIRCLE, FruitColor.PURPLE))
        assert phenotype.intelligence == 10
        assert phenotype.pest_resistance == 2

    def test_unexpressed_genes_do_not_count(self):
        with_extra = resolve_phenotype(genes(StemColor.GREEN, StemColor.BLUE))
        without = resolve_phenotype(genes(StemColor.GREEN))
        assert with_extra == without

    def test_stats_are_not_clamped(self):
        phenotype = resolve_phenotype(genes(StemStyle.ANGULAR, StemColor.BLUE, FruitStyle.SQUARE, FruitColor.YELLOW))
        assert phenotype.intelligence == 17
        assert phenotype.pest_resistance == -6

    def test_duplicates_are_allowed(self):
        phenotype = resolve_phenotype(genes(FruitColor.YELLOW, FruitColor.YELLOW))
        assert phenotype.fruit_color is FruitColor.YELLOW
        assert phenotype.intelligence == 1
        assert phenotype.pest_resistance == 3

    def test_resolution_is_deterministic(self):
        gene_list = genes(StemStyle.WIGGLY, StemStyle.LOOPY, FruitColor.PURPLE)
        assert resolve_phenotype(gene_list) == resolve_phenotype(gene_list)

    def test_trait_for_category(self):
        phenotype = resolve_phenotype(genes(StemColor.BLUE))
        assert phenotype.trait_for(GeneCategory.STEM_COLOR) is StemColor.BLUE
        assert phenotype.trait_for(GeneCategory.FRUIT_COLOR) is FruitColor.RED


class TestStartingPlantPhenotypes:
    """The three starting plants have known stats."""

    def test_golden_values(self):
        roberto, jessica, francine = starting_plants()

        p = roberto.get_phenotype()
        assert (p.stem_color, p.stem_style, p.fruit_style, p.fruit_color) == (
            StemColor.GREEN,
            StemStyle.CURVY,
            FruitStyle.CIRCLE,
            FruitColor.RED,
        )
        assert (p.intelligence, p.pest_resistance) == (-4, 9)

        p = jessica.get_phenotype()
        assert (p.stem_color, p.stem_style, p.fruit_style, p.fruit_color) == (
            StemColor.BROWN,
            StemStyle.WIGGLY,
            FruitStyle.SQUARE,
            FruitColor.RED,
        )
        assert (p.intelligence, p.pest_resistance) == (2, 9)

        p = francine.get_phenotype()
        assert (p.stem_color, p.stem_style, p.fruit_style, p.fruit_color) == (
            StemColor.GREEN,
            StemStyle.WIGGLY,
            FruitStyle.CIRCLE,
            FruitColor.PURPLE,
        )
        assert (p.intelligence, p.pest_resistance) == (1, 9)
