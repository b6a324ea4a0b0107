"""Tests for splicing two plants into a seed."""

import pytest

from tests.fakes.random_source import FixedRandom
from smartyplants.breeding import SPLICED_GENE_COUNT, pick_parent_gene, splice_plants
from smartyplants.game_state import starting_plants
from smartyplants.genetics import FruitColor, FruitStyle, Gene, GeneCategory, StemColor, StemStyle
from smartyplants.naming import PlantName
from smartyplants.plant import Plant
from smartyplants.util.rng import MissingRNGError


class TestSplicePlants:
    def test_seed_always_has_eight_genes(self, seeded_rng):
        roberto, jessica, _ = starting_plants()
        bare = Plant(name=PlantName.of("bare"))
        for parents in [(roberto, jessica), (roberto, bare), (bare, bare)]:
            seed = splice_plants(*parents, rng=seeded_rng)
            assert len(seed.genes) == SPLICED_GENE_COUNT == 8
            for category in GeneCategory:
                assert sum(1 for g in seed.genes if g.category is category) == 2

    def test_parent_one_gene_comes_first_in_each_pair(self):
        roberto, jessica, _ = starting_plants()
        seed = splice_plants(roberto, jessica, rng=FixedRandom(pick=0))
        assert [g.trait for g in seed.genes] == [
            StemStyle.CURVY,
            StemStyle.WIGGLY,
            StemColor.GREEN,
            StemColor.BROWN,
            FruitStyle.CIRCLE,
            FruitStyle.SQUARE,
            FruitColor.RED,
            FruitColor.RED,
        ]

    def test_genes_come_from_the_matching_parent(self, seeded_rng):
        roberto, _, francine = starting_plants()
        for _ in range(20):
            seed = splice_plants(roberto, francine, rng=seeded_rng)
            for i in range(0, SPLICED_GENE_COUNT, 2):
                assert seed.genes[i] in roberto.genes
                assert seed.genes[i + 1] in francine.genes

    def test_parent_without_category_contributes_default(self, seeded_rng):
        blue_only = Plant(name=PlantName.of("blu"), genes=(Gene(StemColor.BLUE),))
        seed = splice_plants(blue_only, blue_only, rng=seeded_rng)
        assert [g.trait for g in seed.genes] == [
            StemStyle.CURVY,
            StemStyle.CURVY,
            StemColor.BLUE,
            StemColor.BLUE,
            FruitStyle.CIRCLE,
            FruitStyle.CIRCLE,
            FruitColor.RED,
            FruitColor.RED,
        ]

    def test_parent_names_are_kept(self, seeded_rng):
        roberto, jessica, _ = starting_plants()
        seed = splice_plants(roberto, jessica, rng=seeded_rng)
        assert seed.parent_name_1 == roberto.name
        assert seed.parent_name_2 == jessica.name
        assert seed.display_name == "Roberto x Jessica"

    def test_same_seed_same_result(self):
        import random

        roberto, jessica, _ = starting_plants()
        first = splice_plants(roberto, jessica, rng=random.Random(7))
        second = splice_plants(roberto, jessica, rng=random.Random(7))
        assert first == second

    def test_requires_rng(self):
        roberto, jessica, _ = starting_plants()
        with pytest.raises(MissingRNGError):
            splice_plants(roberto, jessica)


class TestPickParentGene:
    def test_picks_among_category_genes(self):
        roberto = starting_plants()[0]
        gene = pick_parent_gene(roberto, GeneCategory.STEM_STYLE, FixedRandom(pick=1))
        assert gene.trait is StemStyle.LOOPY
