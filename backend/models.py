"""Data models for the game API."""

from typing import List, Optional, Tuple

from pydantic import BaseModel


class GeneData(BaseModel):
    """One gene as carried by a plant or seed."""

    category: str  # 'stem_style', 'stem_color', 'fruit_style', 'fruit_color'
    trait: str
    dominance: str  # 'dominant' or 'recessive'
    intelligence_effect: int
    pest_resistance_effect: int


class AppearanceData(BaseModel):
    """Sprite and color hints for drawing a plant."""

    stem_sprite: str
    stem_rgb: Tuple[int, int, int]
    fruit_sprite: str
    fruit_rgb: Tuple[int, int, int]
    intelligence_bar: int  # Clamped to [0, 10]
    pest_resistance_bar: int  # Clamped to [0, 10]


class PhenotypeData(BaseModel):
    """Expressed traits and unclamped stats."""

    stem_style: str
    stem_color: str
    fruit_style: str
    fruit_color: str
    intelligence: int
    pest_resistance: int
    appearance: AppearanceData


class PlantData(BaseModel):
    name: str
    syllables: List[str]
    genes: List[GeneData]
    phenotype: PhenotypeData


class SeedData(BaseModel):
    index: Optional[int] = None  # Position in the seed tray; None for a planted seed
    parent_name_1: str
    parent_name_2: str
    genes: List[GeneData]


class PlanterData(BaseModel):
    """Contents of one garden slot."""

    slot: int
    kind: str  # 'plant', 'dead_plant', 'seed', 'empty'
    plant: Optional[PlantData] = None
    seed: Optional[SeedData] = None


class SeasonReportData(BaseModel):
    grown: List[int]
    destroyed: List[int]


class GameStateData(BaseModel):
    """Full state of one game session."""

    game_id: str
    season: int
    outcome: str  # 'in_progress', 'won', 'lost'
    winner: Optional[PlantData] = None
    planters: List[PlanterData]
    seeds: List[SeedData]
    seed_capacity: int
    last_season: Optional[SeasonReportData] = None


class CreateGameRequest(BaseModel):
    seed: Optional[int] = None  # RNG seed for reproducible games


class SpliceRequest(BaseModel):
    slot_1: int
    slot_2: int


class PlantSeedRequest(BaseModel):
    seed_index: int
    slot: int
