"""Builders that turn game objects into API payload models."""

from __future__ import annotations

from typing import List, Optional

from backend.models import (
    AppearanceData,
    GameStateData,
    GeneData,
    PhenotypeData,
    PlantData,
    PlanterData,
    SeasonReportData,
    SeedData,
)
from smartyplants.appearance import describe_appearance
from smartyplants.game_state import GameState
from smartyplants.genetics import Gene
from smartyplants.plant import Plant, Seed
from smartyplants.planters import DeadPlant, PlantedPlant, PlantedSeed, Planter, SeasonReport, planter_kind


def build_gene(gene: Gene) -> GeneData:
    return GeneData(
        category=gene.category.value,
        trait=gene.trait.value,
        dominance=gene.dominance.value,
        intelligence_effect=gene.intelligence_effect,
        pest_resistance_effect=gene.pest_resistance_effect,
    )


def build_plant(plant: Plant) -> PlantData:
    phenotype = plant.get_phenotype()
    return PlantData(
        name=plant.display_name,
        syllables=list(plant.name.syllables),
        genes=[build_gene(g) for g in plant.genes],
        phenotype=PhenotypeData(
            stem_style=phenotype.stem_style.value,
            stem_color=phenotype.stem_color.value,
            fruit_style=phenotype.fruit_style.value,
            fruit_color=phenotype.fruit_color.value,
            intelligence=phenotype.intelligence,
            pest_resistance=phenotype.pest_resistance,
            appearance=AppearanceData(**describe_appearance(phenotype)),
        ),
    )


def build_seed(index: Optional[int], seed: Seed) -> SeedData:
    """Seed payload; *index* is its tray position, None once planted."""
    return SeedData(
        index=index,
        parent_name_1=str(seed.parent_name_1),
        parent_name_2=str(seed.parent_name_2),
        genes=[build_gene(g) for g in seed.genes],
    )


def build_planter(slot: int, planter: Planter) -> PlanterData:
    data = PlanterData(slot=slot, kind=planter_kind(planter))
    if isinstance(planter, (PlantedPlant, DeadPlant)):
        data.plant = build_plant(planter.plant)
    elif isinstance(planter, PlantedSeed):
        data.seed = build_seed(None, planter.seed)
    return data


def build_game_state(
    game_id: str,
    state: GameState,
    last_season: Optional[SeasonReport] = None,
) -> GameStateData:
    """Full payload for one game, optionally with the season that just ran."""
    planters: List[PlanterData] = [build_planter(i, p) for i, p in enumerate(state.planters)]
    seeds: List[SeedData] = [build_seed(i, s) for i, s in enumerate(state.seeds)]
    report = None
    if last_season is not None:
        report = SeasonReportData(grown=last_season.grown, destroyed=last_season.destroyed)
    return GameStateData(
        game_id=game_id,
        season=state.season,
        outcome=state.outcome.value,
        winner=build_plant(state.winner) if state.winner else None,
        planters=planters,
        seeds=seeds,
        seed_capacity=state.seeds.capacity,
        last_season=report,
    )
