"""Plant names built from syllables.

A seedling's name is stitched together from its parents' syllables, so
"Roberto" crossed with "Jessica" might give "Sibersi" or "Roca".
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from smartyplants.util.rng import RandomSource, require_rng_param


@dataclass(frozen=True)
class PlantName:
    """An ordered sequence of lowercase syllables.

    Syllable order is kept as given and syllables are never re-split.
    """

    syllables: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.syllables, str):
            raise TypeError(f"syllables must be a sequence of strings, not {self.syllables!r}")
        object.__setattr__(self, "syllables", tuple(s.lower() for s in self.syllables))

    @classmethod
    def of(cls, *syllables: str) -> "PlantName":
        """Build a name from syllables: ``PlantName.of("ro", "ber", "to")``."""
        return cls(tuple(syllables))

    def __len__(self) -> int:
        return len(self.syllables)

    def __str__(self) -> str:
        # str.capitalize() would lowercase the rest, which is already lowercase
        joined = "".join(self.syllables)
        return joined[:1].upper() + joined[1:]


def combine_names(
    name_1: PlantName,
    name_2: PlantName,
    rng: Optional[RandomSource] = None,
) -> PlantName:
    """Recombine two parent names into a child name.

    One syllable comes from each parent that has any, then the name is
    padded up to the longer parent's length with syllables drawn (with
    replacement) from both parents. The result is random and lossy: no
    particular parent syllable is guaranteed to survive.

    Args:
        name_1: First parent's name
        name_2: Second parent's name
        rng: Random source used for every syllable pick

    Returns:
        The child's name; empty when both parents have no syllables
    """
    rng = require_rng_param(rng, "combine_names")
    target_length = max(len(name_1), len(name_2))
    chosen: List[str] = []

    if name_1.syllables:
        chosen.append(rng.choice(name_1.syllables))
    if name_2.syllables:
        chosen.append(rng.choice(name_2.syllables))

    pool = name_1.syllables + name_2.syllables
    while len(chosen) < target_length and pool:
        chosen.append(rng.choice(pool))

    return PlantName(tuple(chosen))
