"""RNG utilities for the breeding and season rules.

Every random decision in the game (which parent gene a seed inherits, which
syllables a seedling's name gets, whether pests destroy a plant) goes
through an explicitly passed random source. Tests swap in a fixed source to
pin those decisions down.
"""

import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The slice of ``random.Random`` the game rules rely on."""

    def random(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Pick one element uniformly from a non-empty sequence."""
        ...


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but was not passed in.

    This indicates a bug in the caller: the game session owns the RNG and
    must hand it to every rule that rolls dice.
    """


def require_rng_param(rng: Optional[RandomSource], context: str) -> RandomSource:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Use this in rule functions that need randomness instead of silently
    falling back to the module-level ``random`` functions.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def splice_plants(plant_1, plant_2, rng=None):
            rng = require_rng_param(rng, "splice_plants")
    """
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass the game session's RNG explicitly.")
    return rng


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create the RNG a game session owns. ``seed=None`` means unseeded."""
    return random.Random(seed)
