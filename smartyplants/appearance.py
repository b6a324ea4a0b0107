"""Presentation hints derived from a phenotype.

Clients draw a plant as a stem sprite tinted by stem color with a fruit
sprite on top tinted by fruit color, plus two stat bars. This module only
names the sprites and colors; it never loads or draws anything.
"""

from typing import Dict, Tuple

from smartyplants.config.garden import STAT_BAR_MAX
from smartyplants.genetics import FruitColor, FruitStyle, Phenotype, StemColor, StemStyle

RGB = Tuple[int, int, int]

_STEM_COLORS: Dict[StemColor, RGB] = {
    StemColor.BROWN: (82, 69, 36),
    StemColor.GREEN: (0, 100, 0),
    StemColor.BLUE: (0, 0, 128),
}

_FRUIT_COLORS: Dict[FruitColor, RGB] = {
    FruitColor.RED: (255, 0, 0),
    FruitColor.PURPLE: (128, 0, 128),
    FruitColor.YELLOW: (255, 255, 0),
}


def stem_sprite(style: StemStyle) -> str:
    return f"stem_{style.value}.png"


def fruit_sprite(style: FruitStyle) -> str:
    return f"fruit_{style.value}.png"


def stem_rgb(color: StemColor) -> RGB:
    return _STEM_COLORS[color]


def fruit_rgb(color: FruitColor) -> RGB:
    return _FRUIT_COLORS[color]


def stat_bar_value(value: int) -> int:
    """Clamp a stat into the drawable bar range. Display only."""
    return max(0, min(STAT_BAR_MAX, value))


def describe_appearance(phenotype: Phenotype) -> Dict[str, object]:
    """Everything a client needs to draw one plant."""
    return {
        "stem_sprite": stem_sprite(phenotype.stem_style),
        "stem_rgb": stem_rgb(phenotype.stem_color),
        "fruit_sprite": fruit_sprite(phenotype.fruit_style),
        "fruit_rgb": fruit_rgb(phenotype.fruit_color),
        "intelligence_bar": stat_bar_value(phenotype.intelligence),
        "pest_resistance_bar": stat_bar_value(phenotype.pest_resistance),
    }
